import sqlite3

import pytest

from parcelpost.store import OrderStore, StoreError


@pytest.fixture
def store(tmp_path):
    return OrderStore(tmp_path / "admin.db")


def test_load_from_empty_database(store):
    assert store.load_orders() == ({}, [])


def test_sender_round_trip(store):
    store.add_sender("alice", "home", "phone-a", "20", "111", "2")
    store.add_sender("bob", "work", "phone-b", "30", "222", "5")
    details, orders = store.load_orders()
    assert details == {"alice": "111", "bob": "222"}
    assert orders == [(2, "111"), (5, "222")]


def test_bad_priority_is_skipped(store):
    store.add_sender("alice", "home", "phone-a", "20", "111", "soon")
    details, orders = store.load_orders()
    assert details == {"alice": "111"}
    assert orders == []


def test_find_senders_by_address(store):
    store.add_sender("alice", "home", "phone-a", "20", "111", "2")
    store.add_sender("bob", "work", "phone-b", "30", "222", "5")
    rows = store.find_senders_by_address("home")
    assert len(rows) == 1
    row = rows[0]
    assert set(row) == {
        "ID", "Name", "Address", "Phone_Number", "Total_Price", "Tracking_ID", "Priority",
    }
    assert row["Name"] == "alice"
    assert row["Tracking_ID"] == "111"


def test_quotes_are_stored_verbatim(store):
    store.add_sender("o'neil", "it's here", "phone-a", "1", "9", "1")
    rows = store.find_senders_by_address("it's here")
    assert [r["Name"] for r in rows] == ["o'neil"]


def test_receiver_round_trip(store):
    store.add_receiver("carol", "flat", "phone-c", "alice", "111")
    rows = store.find_receivers_by_address("flat")
    assert len(rows) == 1
    assert rows[0]["Sender_Name"] == "alice"
    assert rows[0]["Tracking_ID"] == "111"
    assert store.find_receivers_by_address("elsewhere") == []


def test_find_without_table_raises(store):
    with pytest.raises(StoreError):
        store.find_receivers_by_address("flat")


def test_unopenable_database_raises(tmp_path):
    store = OrderStore(tmp_path / "missing" / "dir" / "admin.db")
    with pytest.raises(StoreError):
        store.load_orders()


def test_data_is_in_sqlite_file(store):
    store.add_sender("alice", "home", "phone-a", "20", "111", "2")
    with sqlite3.connect(store.path) as conn:
        count = conn.execute("SELECT COUNT(*) FROM admin_sender").fetchone()[0]
    assert count == 1