"""The queue of pending parcel orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class OrderQueue:
    """Pending orders as ``(priority, tracking_id)`` pairs in arrival order."""

    def __init__(self, orders: Iterable[tuple[int, str]] = ()) -> None:
        self._orders: list[tuple[int, str]] = [
            (int(priority), str(tracking_id)) for priority, tracking_id in orders
        ]

    def add(self, priority: int, tracking_id: str) -> None:
        """Append an order."""
        self._orders.append((int(priority), str(tracking_id)))

    def remove(self, tracking_id: str) -> int:
        """Drop every order with ``tracking_id``; return how many were dropped."""
        kept = [order for order in self._orders if order[1] != tracking_id]
        removed = len(self._orders) - len(kept)
        self._orders = kept
        return removed

    def by_priority(self) -> list[tuple[int, str]]:
        """Orders from highest priority down, ties broken by tracking id descending."""
        return sorted(self._orders, reverse=True)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(list(self._orders))