"""SQLite storage for sender and receiver records."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

_CREATE_SENDER = (
    "CREATE TABLE IF NOT EXISTS admin_sender("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT, "
    "Name TEXT NOT NULL, "
    "Address TEXT NOT NULL, "
    "Phone_Number TEXT NOT NULL, "
    "Total_Price TEXT NOT NULL, "
    "Tracking_ID TEXT NOT NULL, "
    "Priority TEXT NOT NULL);"
)

_CREATE_RECEIVER = (
    "CREATE TABLE IF NOT EXISTS admin_reciever("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT, "
    "Name TEXT NOT NULL, "
    "Address TEXT NOT NULL, "
    "Phone_Number TEXT NOT NULL, "
    "Sender_Name TEXT NOT NULL, "
    "Tracking_ID TEXT NOT NULL);"
)


class StoreError(Exception):
    """The database could not be opened or a statement failed."""


class OrderStore:
    """Sender and receiver records kept in one SQLite file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise StoreError(f"cannot open database {self.path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()

    def load_orders(self) -> tuple[dict[str, str], list[tuple[int, str]]]:
        """Return sender name to tracking id, and ``(priority, tracking_id)`` pairs."""
        details: dict[str, str] = {}
        orders: list[tuple[int, str]] = []
        with self._connection() as conn:
            exists = conn.execute(
                "SELECT 1 FROM sqlite_master WHERE type='table' AND name='admin_sender'"
            ).fetchone()
            if exists is None:
                return details, orders
            rows = conn.execute(
                "SELECT Name, Tracking_ID, Priority FROM admin_sender ORDER BY ID"
            ).fetchall()
        for row in rows:
            name, tracking_id, priority = row["Name"], row["Tracking_ID"], row["Priority"]
            if name is not None and tracking_id is not None:
                details[name] = tracking_id
            if tracking_id is None or priority is None:
                continue
            try:
                orders.append((int(str(priority).strip()), tracking_id))
            except ValueError:
                log.warning("skipping order %s with priority %r", tracking_id, priority)
        return details, orders

    def add_sender(
        self,
        name: str,
        address: str,
        phone_number: str,
        total_price: str,
        tracking_id: str,
        priority: str,
    ) -> None:
        """Record a sent parcel."""
        with self._connection() as conn:
            conn.execute(_CREATE_SENDER)
            conn.execute(
                "INSERT INTO admin_sender "
                "(Name, Address, Phone_Number, Total_Price, Tracking_ID, Priority) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (name, address, phone_number, str(total_price), tracking_id, str(priority)),
            )

    def add_receiver(
        self,
        name: str,
        address: str,
        phone_number: str,
        sender_name: str,
        tracking_id: str,
    ) -> None:
        """Record a received parcel."""
        with self._connection() as conn:
            conn.execute(_CREATE_RECEIVER)
            conn.execute(
                "INSERT INTO admin_reciever "
                "(Name, Address, Phone_Number, Sender_Name, Tracking_ID) "
                "VALUES (?, ?, ?, ?, ?)",
                (name, address, phone_number, sender_name, tracking_id),
            )

    def _find(self, table: str, address: str) -> list[dict[str, Any]]:
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM {table} WHERE Address = ? ORDER BY ID", (address,)
            ).fetchall()
        return [dict(row) for row in rows]

    def find_senders_by_address(self, address: str) -> list[dict[str, Any]]:
        """All sender rows with the given address, as column-to-value dicts."""
        return self._find("admin_sender", address)

    def find_receivers_by_address(self, address: str) -> list[dict[str, Any]]:
        """All receiver rows with the given address, as column-to-value dicts."""
        return self._find("admin_reciever", address)