"""Parcel tracking operations and the demonstration command."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from datetime import datetime, timezone
from typing import TextIO

from parceltracker.store import Parcel, ParcelNotFoundError, ParcelStatus, ParcelStore

_NEXT_STATUS = {
    ParcelStatus.REGISTERED.value: ParcelStatus.SENT.value,
    ParcelStatus.SENT.value: ParcelStatus.DELIVERED.value,
}


def _now_rfc3339() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelService:
    """Registers parcels and moves them through their lifecycle."""

    def __init__(self, store: ParcelStore, out: TextIO | None = None) -> None:
        self._store = store
        self._out = out if out is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def register(self, client: int, address: str) -> Parcel:
        """Register a new parcel for a client and return it with its number."""
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED.value,
            address=address,
            created_at=_now_rfc3339(),
        )
        parcel.number = self._store.add(parcel)
        self._say(
            f"Новая посылка № {parcel.number} на адрес {parcel.address} "
            f"от клиента с идентификатором {parcel.client} "
            f"зарегистрирована {parcel.created_at}"
        )
        return parcel

    def print_client_parcels(self, client: int) -> None:
        """Print every parcel of a client, followed by a blank line."""
        parcels = self._store.get_by_client(client)
        self._say(f"Посылки клиента {client}:")
        for parcel in parcels:
            self._say(
                f"Посылка № {parcel.number} на адрес {parcel.address} "
                f"от клиента с идентификатором {parcel.client} "
                f"зарегистрирована {parcel.created_at}, статус {parcel.status}"
            )
        self._say()

    def next_status(self, number: int) -> None:
        """Advance a parcel to its next status; delivered parcels stay as they are."""
        parcel = self._store.get(number)
        status = parcel.status
        if isinstance(status, ParcelStatus):
            status = status.value
        if status == ParcelStatus.DELIVERED.value:
            return
        next_status = _NEXT_STATUS.get(status, "")
        self._say(f"У посылки № {number} новый статус: {next_status}")
        self._store.set_status(number, next_status)

    def change_address(self, number: int, address: str) -> None:
        """Change the delivery address of a registered parcel."""
        self._store.set_address(number, address)

    def delete(self, number: int) -> None:
        """Delete a registered parcel."""
        self._store.delete(number)


def _demo(service: ParcelService) -> None:
    client = 1
    address = "Псков, д. Пушкина, ул. Колотушкина, д. 5"
    parcel = service.register(client, address)

    service.change_address(parcel.number, "Саратов, д. Верхние Зори, ул. Козлова, д. 25")
    service.next_status(parcel.number)
    service.print_client_parcels(client)

    # A sent parcel must survive the deletion attempt.
    service.delete(parcel.number)
    service.print_client_parcels(client)

    parcel = service.register(client, address)
    service.delete(parcel.number)
    service.print_client_parcels(client)


def main(argv: list[str] | None = None) -> int:
    """Run the tracking demonstration against an SQLite database."""
    parser = argparse.ArgumentParser(description="Parcel tracker demonstration.")
    parser.add_argument("--db", default="tracker.db", help="path to the database")
    args = parser.parse_args(argv)

    try:
        with closing(sqlite3.connect(args.db, isolation_level=None)) as db:
            _demo(ParcelService(ParcelStore(db)))
    except (sqlite3.Error, ParcelNotFoundError) as exc:
        print(exc)
        return 1
    return 0