# parcelpost

An interactive parcel desk for the terminal. A sender books a parcel and is
given a tracking ID and a price. A receiver collects a parcel by its tracking
ID. An administrator can list the queue of pending orders by priority, look up
records by address, or drop an order from the queue. Records are kept in a
SQLite database.

## Installing

```
pip install .
```

## Running

```
parcelpost [--db PATH] [--data-dir DIR]
```

- `--db`: the SQLite database file (default `admin.db`).
- `--data-dir`: the directory that holds the price tables and where bills are
  written (default `.`).

Answers are read from standard input as whitespace-separated words, so each
answer is a single word. The main menu offers:

1. **Users**: answer `s`/`sender`, `r`/`receiver` or `a`/`admin`.
2. **Package**: answer `s`/`sender` or `r`/`receiver`.
3. **Exit**.

The desk also stops at the end of input. If a sender asks for a weight,
location or priority that has no price, the command reports the error and
exits with status 1.

### Senders

A sender gives a name, address and phone number, then the package's weight,
destination and priority (a whole number; higher means more urgent). The desk
picks a random tracking ID, works out the price, writes a bill to
`<name>_bill.txt` in the data directory, adds the order to the queue and
records it in the database.

### Price tables

Three whitespace-separated files in the data directory hold `key price` pairs:

- `weight.txt`: weight, then price
- `location.txt`: location, then price
- `priority_price.txt`: priority level, then price

A missing file counts as an empty table. The price of a parcel is the sum of
its three prices divided by three, truncated toward zero.

### Receivers

A receiver gives a name, phone number, address, the sender's name and the
tracking ID. Every queued order with that tracking ID is removed, and the
receiver is recorded in the database.

### Admin

The admin menu asks for the PIN (`ADMIN_PIN` in `parcelpost.cli`). It then
offers:

1. list pending orders by priority, highest first, as `tracking_id priority`;
2. look up sender (`s`) or receiver (`r`) records by address;
3. remove an order from the queue by tracking ID.

### Storage

Senders go in the `admin_sender` table and receivers in the `admin_reciever`
table; each table is created when its first record is written. At start-up
the queue of pending orders is loaded from `admin_sender`. Removing an order
from the queue, or collecting it, does not delete its stored record, so the
queue is rebuilt from every stored sender the next time the desk starts.

## Using it as a library

```python
from parcelpost.orders import OrderQueue
from parcelpost.pricing import load_price_tables, write_bill
from parcelpost.store import OrderStore

tables = load_price_tables(".")
price = tables.total_price("5", "delhi", "1")   # ValueError if a key is unknown
write_bill("alice", price, ".")

store = OrderStore("admin.db")
store.add_sender("alice", "delhi", "phone", str(price), "42", "1")
details, orders = store.load_orders()           # {name: tracking_id}, [(priority, tracking_id)]
queue = OrderQueue(orders)
for priority, tracking_id in queue.by_priority():
    print(tracking_id, priority)

print(store.find_senders_by_address("delhi"))   # list of column-to-value dicts
```

- `parcelpost.pricing`: `load_price_table`, `load_price_tables`, `PriceTables`
  and `write_bill`.
- `parcelpost.orders`: `OrderQueue`, with `add`, `remove` (returns how many
  orders were dropped), `by_priority`, `len()` and iteration.
- `parcelpost.store`: `OrderStore`, with `load_orders`, `add_sender`,
  `add_receiver`, `find_senders_by_address` and `find_receivers_by_address`;
  failures raise `StoreError`.
- `parcelpost.cli`: `Session` (one run of the desk over given input and output
  streams) and `main`.

## Tests

```
pip install .[test]
pytest
```