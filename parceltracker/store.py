"""Parcel records and their SQLite-backed storage."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from enum import Enum

_COLUMNS = "number, client, address, status, created_at"


class ParcelStatus(str, Enum):
    """Lifecycle states of a parcel."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


@dataclass
class Parcel:
    """A parcel as kept in the ``parcel`` table."""

    client: int
    status: str
    address: str
    created_at: str
    number: int = 0


class ParcelNotFoundError(LookupError):
    """Raised when no parcel has the requested number."""

    def __init__(self, number: int) -> None:
        super().__init__(f"parcel {number} not found")
        self.number = number


def _status_text(status: str) -> str:
    return status.value if isinstance(status, ParcelStatus) else status


def _row_to_parcel(row: tuple) -> Parcel:
    number, client, address, status, created_at = row
    return Parcel(
        number=number,
        client=client,
        address=address,
        status=status,
        created_at=created_at,
    )


class ParcelStore:
    """Reads and writes parcels in the ``parcel`` table of an SQLite database."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    def add(self, parcel: Parcel) -> int:
        """Insert a parcel and return the number assigned to it."""
        with self._db:
            cursor = self._db.execute(
                "INSERT INTO parcel (client, address, status, created_at) "
                "VALUES (?, ?, ?, ?)",
                (
                    parcel.client,
                    parcel.address,
                    _status_text(parcel.status),
                    parcel.created_at,
                ),
            )
        return int(cursor.lastrowid)

    def get(self, number: int) -> Parcel:
        """Return the parcel with the given number."""
        row = self._db.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE number = ?", (number,)
        ).fetchone()
        if row is None:
            raise ParcelNotFoundError(number)
        return _row_to_parcel(row)

    def get_by_client(self, client: int) -> list[Parcel]:
        """Return every parcel belonging to a client."""
        rows = self._db.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE client = ?", (client,)
        )
        return [_row_to_parcel(row) for row in rows]

    def set_status(self, number: int, status: str) -> None:
        """Change the status of a parcel."""
        with self._db:
            self._db.execute(
                "UPDATE parcel SET status = ? WHERE number = ?",
                (_status_text(status), number),
            )

    def set_address(self, number: int, address: str) -> None:
        """Change the address of a parcel, only while it is registered."""
        with self._db:
            self._db.execute(
                "UPDATE parcel SET address = ? WHERE number = ? AND status = ?",
                (address, number, ParcelStatus.REGISTERED.value),
            )

    def delete(self, number: int) -> None:
        """Remove a parcel, only while it is registered."""
        with self._db:
            self._db.execute(
                "DELETE FROM parcel WHERE number = ? AND status = ?",
                (number, ParcelStatus.REGISTERED.value),
            )