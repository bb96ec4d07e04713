"""A dictionary whose values supply their own keys."""

from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, Optional, TypeVar

from ledgercore.errors import LedgerError
from ledgercore.unique import Unique

T = TypeVar("T", bound=Unique)


class SelfDictionary(Generic[T]):
    """Stores values keyed by their ``unique_key()``; iterates in key order."""

    def __init__(self) -> None:
        self._items: Dict[Any, T] = {}

    def add(self, value: T) -> None:
        """Add ``value``; raise LedgerError if its key is already present."""
        key = value.unique_key()
        if key in self._items:
            raise LedgerError("Duplicate key")
        self._items[key] = value

    def update(self, value: T) -> None:
        """Replace the value under ``value``'s key; raise if the key is absent."""
        key = value.unique_key()
        if key not in self._items:
            raise LedgerError("Key not found")
        self._items[key] = value

    def remove(self, item: Any) -> None:
        """Remove by value or by key; raise LedgerError if absent."""
        key = item.unique_key() if isinstance(item, Unique) else item
        if key not in self._items:
            raise LedgerError("Key not found")
        del self._items[key]

    def get(self, key: Any) -> Optional[T]:
        """Return the value stored under ``key``, or None."""
        return self._items.get(key)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Unique):
            key = key.unique_key()
        return key in self._items

    def __iter__(self) -> Iterator[T]:
        for key in sorted(self._items):
            yield self._items[key]