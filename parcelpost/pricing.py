"""Price tables for parcels and the bills written for senders."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

WEIGHT_FILE = "weight.txt"
LOCATION_FILE = "location.txt"
PRIORITY_FILE = "priority_price.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def load_price_table(path: str | Path) -> dict[str, str]:
    """Read whitespace-separated ``key price`` pairs; a missing file gives an empty table."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return {}
    tokens = text.split()
    return dict(zip(tokens[0::2], tokens[1::2]))


def _parse_price(text: str, what: str, key: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"price {text!r} for {what} {key!r} is not a number")
    return int(match.group(1))


def _lookup(table: dict[str, str], key: str, what: str) -> int:
    if key not in table:
        raise ValueError(f"unknown {what} {key!r}")
    return _parse_price(table[key], what, key)


@dataclass
class PriceTables:
    """Prices keyed by package weight, destination and urgency."""

    weight: dict[str, str] = field(default_factory=dict)
    location: dict[str, str] = field(default_factory=dict)
    priority: dict[str, str] = field(default_factory=dict)

    def total_price(self, weight: str, location: str, priority: str) -> int:
        """Average of the three prices, truncated toward zero."""
        total = (
            _lookup(self.weight, weight, "weight")
            + _lookup(self.location, location, "location")
            + _lookup(self.priority, priority, "priority")
        )
        quotient = abs(total) // 3
        return quotient if total >= 0 else -quotient


def load_price_tables(directory: str | Path) -> PriceTables:
    """Load the weight, location and priority tables from ``directory``."""
    base = Path(directory)
    return PriceTables(
        weight=load_price_table(base / WEIGHT_FILE),
        location=load_price_table(base / LOCATION_FILE),
        priority=load_price_table(base / PRIORITY_FILE),
    )


def write_bill(sender_name: str, total_price: int, directory: str | Path) -> Path:
    """Write ``<sender>_bill.txt`` holding the total price and return its path."""
    path = Path(directory) / f"{sender_name}_bill.txt"
    path.write_text(f"Total Price Is {total_price}\n")
    return path