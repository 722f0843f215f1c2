import io

import pytest

from parcelpost.cli import Session, main
from parcelpost.store import OrderStore


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "weight.txt").write_text("1kg 10\n")
    (tmp_path / "location.txt").write_text("paris 20\n")
    (tmp_path / "priority_price.txt").write_text("2 30\n")
    return tmp_path


@pytest.fixture
def store(tmp_path):
    return OrderStore(tmp_path / "admin.db")


def make_session(store, data_dir, text):
    out = io.StringIO()
    return Session(store, data_dir, io.StringIO(text), out), out


SENDER_INPUT = "alice home phone-a 1kg paris 2\n"


def test_sender_bills_queues_and_stores(store, data_dir):
    session, _ = make_session(store, data_dir, SENDER_INPUT)
    tracking_id = session.sender()
    assert tracking_id.isdigit()
    assert list(session.orders) == [(2, tracking_id)]
    assert session.order_details == {"alice": tracking_id}
    assert (data_dir / "alice_bill.txt").read_text() == "Total Price Is 20\n"
    details, orders = store.load_orders()
    assert details == {"alice": tracking_id}
    assert orders == [(2, tracking_id)]


def test_sender_unknown_weight_raises(store, data_dir):
    session, _ = make_session(store, data_dir, "alice home phone-a 9kg paris 2\n")
    with pytest.raises(ValueError):
        session.sender()


def test_receiver_removes_order_and_records(store, data_dir):
    session, out = make_session(store, data_dir, "carol phone-c flat alice 777\n")
    session.orders.add(1, "777")
    session.receiver()
    assert len(session.orders) == 0
    assert "Thanks for recieving the parcel!: 777" in out.getvalue()
    rows = store.find_receivers_by_address("flat")
    assert [r["Tracking_ID"] for r in rows] == ["777"]


def test_admin_wrong_pin_shows_nothing(store, data_dir):
    session, out = make_session(store, data_dir, "1111 1\n")
    session.orders.add(1, "a")
    session.admin()
    assert "Priority Of Order" not in out.getvalue()


def test_admin_priority_listing(store, data_dir):
    session, out = make_session(store, data_dir, "1234 1\n")
    session.orders.add(1, "low")
    session.orders.add(9, "high")
    session.admin()
    lines = out.getvalue().splitlines()
    assert lines[-2:] == ["high 9", "low 1"]


def test_admin_filter_senders(store, data_dir):
    store.add_sender("alice", "home", "phone-a", "20", "111", "2")
    session, out = make_session(store, data_dir, "1234 2 s home\n")
    session.admin()
    text = out.getvalue()
    assert "Name: alice  " in text
    assert "Tracking_ID: 111  " in text


def test_admin_filter_invalid_choice(store, data_dir):
    session, out = make_session(store, data_dir, "1234 2 x\n")
    session.admin()
    assert "Invalid option. Please enter 's' or 'r'." in out.getvalue()


def test_admin_removes_order(store, data_dir):
    session, _ = make_session(store, data_dir, "1234 3 abc\n")
    session.orders.add(1, "abc")
    session.orders.add(2, "keep")
    session.admin()
    assert list(session.orders) == [(2, "keep")]


def test_run_loads_stored_orders_and_exits(store, data_dir):
    store.add_sender("bob", "work", "phone-b", "30", "222", "5")
    session, out = make_session(store, data_dir, "3\n")
    session.run()
    assert list(session.orders) == [(5, "222")]
    assert session.order_details == {"bob": "222"}
    assert out.getvalue().startswith("1. Users\n2. Package\n3. Exit\n")


def test_run_sender_through_package_menu(store, data_dir):
    session, _ = make_session(store, data_dir, "2 s " + SENDER_INPUT + "3\n")
    session.run()
    details, orders = store.load_orders()
    assert list(details) == ["alice"]
    assert [p for p, _ in orders] == [2]


def test_run_stops_at_end_of_input(store, data_dir):
    session, out = make_session(store, data_dir, "1 a")
    session.run()
    assert out.getvalue().count("1. Users") == 1


def test_main_exits_cleanly(tmp_path, data_dir, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    code = main(["--db", str(tmp_path / "admin.db"), "--data-dir", str(data_dir)])
    assert code == 0
    assert "3. Exit" in capsys.readouterr().out