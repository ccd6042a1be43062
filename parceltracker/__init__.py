"""Parcel registration and status tracking backed by SQLite."""

__version__ = "0.1.0"
__all__ = ["service", "store"]