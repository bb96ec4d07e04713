"""Storing and loading uniquely keyed objects through a storage backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ledgercore.errors import LedgerError
from ledgercore.storage import Storage
from ledgercore.unique import Unique


class StoreCreator(ABC):
    """Saves serializable unique objects under ``prefix_key_suffix`` keys.

    Objects handed to :meth:`store` provide ``unique_key()`` and ``serialize()``.
    """

    def __init__(self, prefix: str = "", family: str = "default", suffix: str = "") -> None:
        self.prefix = prefix
        self.family = family
        self.suffix = suffix

    @abstractmethod
    def create(self) -> Optional[Storage]:
        """Return the storage to use, or None when it cannot be opened."""

    def key_for(self, unique: Unique) -> str:
        """Return the storage key for ``unique``."""
        return f"{self.prefix}_{unique.unique_key()}_{self.suffix}"

    def _decode(self, raw: str) -> Any:
        return raw

    def store(self, obj: Any) -> None:
        """Serialize ``obj`` and save it; raise LedgerError on failure."""
        storage = self.create()
        if storage is None:
            raise LedgerError("Failed to create storage")
        raw = obj.serialize()
        storage.save(self.key_for(obj), raw)

    def load(self, unique: Unique) -> Optional[Any]:
        """Return the stored object for ``unique``, or None when unavailable."""
        storage = self.create()
        if storage is None:
            return None
        try:
            raw = storage.load(self.key_for(unique))
        except LedgerError:
            return None
        return self._decode(raw)