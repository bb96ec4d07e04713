"""Objects identified and ordered by a unique key."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Unique(ABC):
    """Base for objects that carry a unique, orderable key."""

    @abstractmethod
    def unique_key(self) -> Any:
        """Return the key that identifies this object."""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return self.unique_key() < other.unique_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return other.unique_key() < self.unique_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return not other.unique_key() < self.unique_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return not self.unique_key() < other.unique_key()