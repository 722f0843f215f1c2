"""Parcel booking desk: pricing, a priority queue of orders, SQLite records and an interactive command."""

__version__ = "0.1.0"
__all__ = ["cli", "orders", "pricing", "store"]