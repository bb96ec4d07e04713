"""Access strategies: a named command and the roles allowed to run it."""

from __future__ import annotations

from typing import Any, Iterable, Tuple


class Strategy:
    """Grants a command to any of a fixed set of roles."""

    def __init__(self, name: str, roles: Iterable[Any]) -> None:
        self._name = name
        self._roles: Tuple[Any, ...] = tuple(roles)

    @property
    def name(self) -> str:
        """The command this strategy guards."""
        return self._name

    @property
    def roles(self) -> Tuple[Any, ...]:
        """The roles this strategy accepts."""
        return self._roles

    def _matches(self, expected: Any, role: Any) -> bool:
        return expected == role

    def passes(self, role: Any) -> bool:
        """Return whether ``role`` is one of the accepted roles of the same type."""
        if role is None:
            return False
        return any(
            type(expected) is type(role) and self._matches(expected, role)
            for expected in self._roles
        )