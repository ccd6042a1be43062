# parceltracker

A small parcel tracker. Parcels are registered for a client at an address,
move through the statuses `registered` → `sent` → `delivered`, and are kept
in an SQLite table named `parcel` with the columns `number`, `client`,
`address`, `status` and `created_at`.

Rules the store enforces:

- the address of a parcel can be changed only while it is `registered`;
- a parcel can be deleted only while it is `registered`;
- a `delivered` parcel stays `delivered`.

An address change or a deletion that these rules forbid is silently skipped;
no error is raised.

## Installation

```
pip install .
```

## What it does not do

The package does not create the database schema. The `parcel` table must
already exist in the database you point it at, for example:

```sql
CREATE TABLE parcel (
    number     INTEGER PRIMARY KEY AUTOINCREMENT,
    client     INTEGER NOT NULL,
    status     TEXT NOT NULL,
    address    TEXT NOT NULL,
    created_at TEXT NOT NULL
);
```

## Command line

```
parceltracker [--db PATH]
```

runs a short demonstration against the database at `PATH` (default
`tracker.db` in the current directory): it registers a parcel for client 1,
changes its address, advances its status, lists the client's parcels, tries
to delete the sent parcel (which is kept), then registers and deletes a
second parcel, printing the client's parcels after each step. If a database
error occurs, the message is printed and the command exits with status 1.

## Library use

```python
import sqlite3

from parceltracker.store import ParcelNotFoundError, ParcelStatus, ParcelStore
from parceltracker.service import ParcelService

db = sqlite3.connect("tracker.db")
store = ParcelStore(db)
service = ParcelService(store)            # reports to sys.stdout by default

parcel = service.register(1, "Pskov, 5 Kolotushkina St.")
service.change_address(parcel.number, "Saratov, 25 Kozlova St.")
service.next_status(parcel.number)        # registered -> sent
service.print_client_parcels(1)

service.delete(parcel.number)             # kept: the parcel is no longer registered

for p in store.get_by_client(1):
    print(p.number, p.status, p.address)

try:
    store.get(999_999)
except ParcelNotFoundError as exc:
    print("no such parcel:", exc.number)
```

`parceltracker.store` holds:

- `Parcel`, a dataclass with `client`, `status`, `address`, `created_at` and
  `number`;
- `ParcelStatus`, a string enum with `REGISTERED`, `SENT` and `DELIVERED`;
- `ParcelStore`, which works directly with an `sqlite3` connection and offers
  `add` (returns the new parcel number), `get`, `get_by_client`,
  `set_status`, `set_address` and `delete`;
- `ParcelNotFoundError`, a `LookupError` raised by `get` when no parcel has
  the given number.

`parceltracker.service.ParcelService` builds on the store. `register` stamps
the parcel with the current UTC time in RFC 3339 form and status
`registered`; `next_status` moves `registered` to `sent` and `sent` to
`delivered`; every step it takes is reported as a line of text to the `out`
stream given to the constructor (standard output when omitted).

## Tests

```
pip install ".[test]"
pytest
```