"""Interactive parcel desk for senders, receivers and the administrator."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .orders import OrderQueue
from .pricing import load_price_tables, write_bill
from .store import OrderStore, StoreError

ADMIN_PIN = 1234


def _read_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _report(message: str) -> None:
    print(message, file=sys.stderr)


class Session:
    """One run of the parcel desk, reading answers as whitespace-separated words."""

    def __init__(self, store: OrderStore, data_dir: str | Path, stdin: TextIO, stdout: TextIO) -> None:
        self.store = store
        self.data_dir = Path(data_dir)
        self._tokens = _read_tokens(stdin)
        self._out = stdout
        self.orders = OrderQueue()
        self.order_details: dict[str, str] = {}

    def _say(self, text: str, end: str = "\n") -> None:
        self._out.write(text + end)

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input exhausted") from None

    def _ask(self, prompt: str, end: str = "\n") -> str:
        self._say(prompt, end)
        return self._next()

    def sender(self) -> str | None:
        """Take a new parcel, bill it, queue it and record it; return its tracking id."""
        name = self._ask("What is your name?")
        address = self._ask("What is your address?")
        phone_number = self._ask("What is your phone number? ")
        tracking_id = str(random.randint(0, 2**31 - 1))

        tables = load_price_tables(self.data_dir)
        weight = self._ask("What is the weight of the package? ")
        location = self._ask("What is the location of the place? ")
        priority = self._ask("How urgent is this order? ")
        total = tables.total_price(weight, location, priority)
        write_bill(name, total, self.data_dir)

        self.orders.add(int(priority), tracking_id)
        try:
            self.store.add_sender(name, address, phone_number, str(total), tracking_id, priority)
        except StoreError as exc:
            _report(f"SQL error: {exc}")
            return None
        self.order_details[name] = tracking_id
        return tracking_id

    def receiver(self) -> None:
        """Hand over a parcel: drop it from the queue and record the receiver."""
        name = self._ask("Tell me your name? ")
        phone_number = self._ask("What is your phone number? ")
        address = self._ask("What is your address? ")
        sender_name = self._ask(
            "What is the name of the person whose order you are going to receive? "
        )
        tracking_id = self._ask("What is the tracking ID? ")

        for _ in range(self.orders.remove(tracking_id)):
            self._say("Thanks for recieving the parcel!: " + tracking_id)

        try:
            self.store.add_receiver(name, address, phone_number, sender_name, tracking_id)
        except StoreError as exc:
            _report(f"SQL error: {exc}")

    def admin(self) -> None:
        """Pin-protected view of the queue and the stored records."""
        if _as_int(self._ask("What is your pin? ")) != ADMIN_PIN:
            return
        self._say("What do you wanna check? ")
        self._say("1. Priority Of Order")
        self._say("2. Filter any details ")
        self._say("3. Remove any order from queue")
        option = _as_int(self._next())

        if option == 1:
            for priority, tracking_id in self.orders.by_priority():
                self._say(f"{tracking_id} {priority}")
        elif option == 2:
            self._filter_details()
        elif option == 3:
            tracking_id = self._ask("Which Tracking ID do you wanna remove? ")
            self.orders.remove(tracking_id)

    def _filter_details(self) -> None:
        choice = self._ask("Do you wanna check from the sender or receiver? (s/r): ", end="")[:1]
        if choice == "s":
            find = self.store.find_senders_by_address
        elif choice == "r":
            find = self.store.find_receivers_by_address
        else:
            self._say("Invalid option. Please enter 's' or 'r'.")
            return
        address = self._ask("Which ID, you want to check what? ", end="")
        try:
            rows = find(address)
        except StoreError as exc:
            self._say(f"SQL error: {exc}")
            return
        for row in rows:
            self._say(
                "".join(
                    f"{column}: {'NULL' if value is None else value}  "
                    for column, value in row.items()
                )
            )

    def _dispatch(self, role: str, allow_admin: bool) -> None:
        if role in ("s", "sender"):
            self.sender()
        elif role in ("r", "receiver"):
            self.receiver()
        elif allow_admin and role in ("a", "admin"):
            self.admin()

    def run(self) -> None:
        """Load stored orders and serve the main menu until exit or end of input."""
        try:
            details, orders = self.store.load_orders()
        except StoreError as exc:
            _report(f"Cannot open database: {exc}")
        else:
            self.order_details.update(details)
            for priority, tracking_id in orders:
                self.orders.add(priority, tracking_id)

        try:
            while True:
                self._say("1. Users")
                self._say("2. Package")
                self._say("3. Exit")
                option = _as_int(self._next())
                if option == 1:
                    role = self._ask("Are you the sender/receiver/admin?")
                    self._dispatch(role, allow_admin=True)
                elif option == 2:
                    role = self._ask("Are you the sender or reciever? ")
                    self._dispatch(role, allow_admin=False)
                elif option == 3:
                    return
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the parcel desk on standard input and output."""
    parser = argparse.ArgumentParser(prog="parcelpost", description="Parcel booking desk.")
    parser.add_argument("--db", default="admin.db", help="SQLite database file")
    parser.add_argument(
        "--data-dir", default=".", help="directory with price tables and bills"
    )
    args = parser.parse_args(argv)
    session = Session(OrderStore(args.db), args.data_dir, sys.stdin, sys.stdout)
    try:
        session.run()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())