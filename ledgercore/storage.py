"""Key/value storage interfaces and a persistent store backed by SQLite."""

from __future__ import annotations

import logging
import sqlite3
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ledgercore.config import Configurable
from ledgercore.errors import LedgerError

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = "default"
_NOT_FOUND = "NotFound: "


class ReadOnlyStore(ABC):
    """A store that can only be read."""

    @abstractmethod
    def load(self, key: str) -> str:
        """Return the value stored under ``key``; raise LedgerError if absent."""


class Storage(ReadOnlyStore):
    """A readable and writable key/value store."""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store a new key; raise LedgerError on failure."""

    @abstractmethod
    def save_many(self, items: Iterable[Tuple[str, str]]) -> None:
        """Store several pairs atomically."""

    @abstractmethod
    def delete_key(self, key: str) -> None:
        """Remove ``key``."""

    @abstractmethod
    def update_key(self, key: str, value: str) -> None:
        """Replace the value of an existing key; raise LedgerError if absent."""


class SoftStorage(Storage):
    """A store whose entries can never be deleted."""

    def delete_key(self, key: str) -> None:
        raise NotImplementedError("not support")


class Transaction(Storage):
    """A storage that groups its writes into one transaction."""


class PersistenceStore(Storage, Configurable):
    """Durable key/value store kept in a directory, one table per family."""

    _FILE_NAME = "store.sqlite3"

    def __init__(self, path: Union[str, Path], family: str = DEFAULT_FAMILY) -> None:
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)
        self.family = family or DEFAULT_FAMILY
        self._table = '"cf_' + self.family.replace('"', '""') + '"'
        self._lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
            str(self.path / self._FILE_NAME), check_same_thread=False
        )
        with self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {self._table} "
                "(key TEXT PRIMARY KEY, value TEXT NOT NULL)"
            )

    def field(self) -> str:
        return "persistence"

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise LedgerError("store is closed")
        return self._conn

    def _fetch(self, conn: sqlite3.Connection, key: str) -> Optional[str]:
        row = conn.execute(
            f"SELECT value FROM {self._table} WHERE key = ?", (key,)
        ).fetchone()
        return None if row is None else row[0]

    def save(self, key: str, value: str) -> None:
        """Store a new key; raise LedgerError if it already exists."""
        logger.info("save key %s", key)
        with self._lock:
            conn = self._connection()
            if self._fetch(conn, key) is not None:
                raise LedgerError("Key already exists")
            with conn:
                conn.execute(
                    f"INSERT INTO {self._table} (key, value) VALUES (?, ?)", (key, value)
                )

    def save_many(self, items: Iterable[Tuple[str, str]]) -> None:
        """Write all pairs in one transaction, overwriting existing keys."""
        pairs = list(items)
        with self._lock:
            conn = self._connection()
            with conn:
                conn.executemany(
                    f"INSERT OR REPLACE INTO {self._table} (key, value) VALUES (?, ?)", pairs
                )

    def load(self, key: str) -> str:
        with self._lock:
            value = self._fetch(self._connection(), key)
        if value is None:
            raise LedgerError(_NOT_FOUND)
        return value

    def delete_key(self, key: str) -> None:
        """Remove ``key``; removing an absent key is not an error."""
        with self._lock:
            conn = self._connection()
            with conn:
                conn.execute(f"DELETE FROM {self._table} WHERE key = ?", (key,))

    def update_key(self, key: str, value: str) -> None:
        with self._lock:
            conn = self._connection()
            if self._fetch(conn, key) is None:
                raise LedgerError(_NOT_FOUND)
            with conn:
                conn.execute(
                    f"UPDATE {self._table} SET value = ? WHERE key = ?", (value, key)
                )

    def close(self) -> None:
        """Release the underlying database; later calls raise LedgerError."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def __enter__(self) -> "PersistenceStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()