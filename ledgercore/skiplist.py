"""An ordered map built on a probabilistic skip list."""

from __future__ import annotations

import random
from typing import Any, Generic, Iterator, List, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_PROMOTION_PROBABILITY = 0.25


class _Node:
    __slots__ = ("key", "value", "forward")

    def __init__(self, key: Any, value: Any, height: int) -> None:
        self.key = key
        self.value = value
        self.forward: List[Optional[_Node]] = [None] * height


class SkipList(Generic[K, V]):
    """Map from ordered keys to values with expected logarithmic operations."""

    def __init__(self, max_level: int = 32, rng: Optional[random.Random] = None) -> None:
        if max_level < 1:
            raise ValueError("max_level must be at least 1")
        self.max_level = max_level
        self._rng = rng if rng is not None else random.Random()
        self._head = _Node(None, None, max_level)
        self._level = 1
        self._size = 0

    def _random_level(self) -> int:
        level = 1
        while self._rng.random() < _PROMOTION_PROBABILITY:
            level += 1
        return min(level, self.max_level)

    def _predecessors(self, key: K) -> List[_Node]:
        update: List[_Node] = [self._head] * self.max_level
        node = self._head
        for i in reversed(range(self._level)):
            nxt = node.forward[i]
            while nxt is not None and nxt.key < key:
                node = nxt
                nxt = node.forward[i]
            update[i] = node
        return update

    def insert(self, key: K, value: V) -> None:
        """Insert ``key`` or overwrite its value if already present."""
        update = self._predecessors(key)
        candidate = update[0].forward[0]
        if candidate is not None and candidate.key == key:
            candidate.value = value
            return
        level = self._random_level()
        if level > self._level:
            self._level = level
        node = _Node(key, value, level)
        for i in range(level):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._size += 1

    def find(self, key: K) -> Optional[V]:
        """Return the value stored under ``key``, or None when absent."""
        candidate = self._predecessors(key)[0].forward[0]
        if candidate is not None and candidate.key == key:
            return candidate.value
        return None

    def remove(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        update = self._predecessors(key)
        target = update[0].forward[0]
        if target is None or target.key != key:
            return False
        for i in range(self._level):
            if update[i].forward[i] is not target:
                break
            update[i].forward[i] = target.forward[i]
        while self._level > 1 and self._head.forward[self._level - 1] is None:
            self._level -= 1
        self._size -= 1
        return True

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        node = self._head.forward[0]
        while node is not None:
            yield node.key
            node = node.forward[0]

    def __contains__(self, key: object) -> bool:
        candidate = self._predecessors(key)[0].forward[0]  # type: ignore[arg-type]
        return candidate is not None and candidate.key == key