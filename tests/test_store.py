import random
import sqlite3
from contextlib import closing
from datetime import datetime, timezone

import pytest

from parceltracker.store import (
    Parcel,
    ParcelNotFoundError,
    ParcelStatus,
    ParcelStore,
)

SCHEMA = (
    "CREATE TABLE parcel ("
    "number INTEGER PRIMARY KEY AUTOINCREMENT, "
    "client INTEGER NOT NULL, "
    "status TEXT NOT NULL, "
    "address TEXT NOT NULL, "
    "created_at TEXT NOT NULL)"
)


@pytest.fixture
def db(tmp_path):
    with closing(sqlite3.connect(tmp_path / "tracker.db")) as conn:
        conn.execute(SCHEMA)
        conn.commit()
        yield conn


@pytest.fixture
def store(db):
    return ParcelStore(db)


def get_test_parcel():
    return Parcel(
        client=1000,
        status=ParcelStatus.REGISTERED,
        address="test",
        created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )


def test_add_get_delete(store):
    parcel = get_test_parcel()
    number = store.add(parcel)
    assert number > 0

    retrieved = store.get(number)
    parcel.number = number
    assert retrieved == parcel

    store.delete(number)
    with pytest.raises(ParcelNotFoundError):
        store.get(number)


def test_set_address(store):
    number = store.add(get_test_parcel())
    new_address = "new test address"
    store.set_address(number, new_address)
    assert store.get(number).address == new_address


def test_set_status(store):
    number = store.add(get_test_parcel())
    store.set_status(number, ParcelStatus.SENT)
    assert store.get(number).status == ParcelStatus.SENT
    assert store.get(number).status == "sent"


def test_get_by_client(store):
    client = random.randrange(10_000_000)
    parcels = [get_test_parcel() for _ in range(3)]
    by_number = {}
    for parcel in parcels:
        parcel.client = client
        parcel.number = store.add(parcel)
        by_number[parcel.number] = parcel

    stored = store.get_by_client(client)
    assert len(stored) == len(parcels)
    for parcel in stored:
        assert parcel.number in by_number
        assert by_number[parcel.number] == parcel


def test_get_by_client_unknown_is_empty(store):
    store.add(get_test_parcel())
    assert store.get_by_client(424242) == []


def test_get_missing_raises(store):
    with pytest.raises(ParcelNotFoundError) as excinfo:
        store.get(99)
    assert excinfo.value.number == 99


def test_add_assigns_increasing_numbers(store):
    first = store.add(get_test_parcel())
    second = store.add(get_test_parcel())
    assert second > first


def test_delete_ignores_sent_parcel(store):
    number = store.add(get_test_parcel())
    store.set_status(number, ParcelStatus.SENT)
    store.delete(number)
    assert store.get(number).number == number


def test_set_address_ignored_after_sending(store):
    number = store.add(get_test_parcel())
    store.set_status(number, ParcelStatus.SENT)
    store.set_address(number, "new test address")
    assert store.get(number).address == "test"


def test_writes_are_committed(tmp_path, store):
    number = store.add(get_test_parcel())
    with closing(sqlite3.connect(tmp_path / "tracker.db")) as other:
        row = other.execute(
            "SELECT status FROM parcel WHERE number = ?", (number,)
        ).fetchone()
    assert row == ("registered",)