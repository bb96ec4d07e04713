"""Sectioned key/value configuration shared by configurable components."""

from __future__ import annotations

import re
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, ClassVar, Dict, Optional, Union

from ledgercore.errors import LedgerError

DEFAULT_CONFIG_PATH = "config.default.conf"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})


class Configurable(ABC):
    """A component that reads its settings from one configuration section."""

    @abstractmethod
    def field(self) -> str:
        """Return the name of the configuration section this component uses."""


def _to_int(raw: str) -> int:
    match = _INT_PREFIX.match(raw)
    return int(match.group(1)) if match else 0


def _to_float(raw: str) -> float:
    match = _FLOAT_PREFIX.match(raw)
    return float(match.group(1)) if match else 0.0


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUE_WORDS


_CONVERTERS: Dict[type, Callable[[str], Any]] = {
    bool: _to_bool,
    int: _to_int,
    float: _to_float,
    str: lambda raw: raw,
}


def _parse(text: str) -> Dict[str, Dict[str, str]]:
    sections: Dict[str, Dict[str, str]] = {"": {}}
    current = sections[""]
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("#", ";")):
            continue
        if stripped.startswith("[") and stripped.endswith("]"):
            current = sections.setdefault(stripped[1:-1].strip(), {})
            continue
        key, sep, value = stripped.partition("=")
        if not sep:
            continue
        current[key.strip()] = value.strip()
    return sections


class Config:
    """Configuration file of ``[section]`` headers and ``key = value`` lines.

    Keys before the first section belong to the unnamed section ``""``.
    Missing keys read as the empty value of the requested kind.
    """

    _instance: ClassVar[Optional["Config"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, path: Union[str, Path]) -> None:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise LedgerError("load config file failed") from exc
        self._sections = _parse(text)
        self._lock = threading.Lock()

    def get(self, configurable: Union[Configurable, str], key: str, kind: type = str) -> Any:
        """Read ``key`` from the section of ``configurable`` as ``kind``.

        ``kind`` is one of ``int``, ``float``, ``bool`` or ``str``.
        """
        converter = _CONVERTERS.get(kind)
        if converter is None:
            raise TypeError(f"unsupported configuration kind: {kind!r}")
        section = configurable if isinstance(configurable, str) else configurable.field()
        with self._lock:
            raw = self._sections.get(section, {}).get(key, "")
        return converter(raw)

    @classmethod
    def instance(cls) -> "Config":
        """Return the process-wide configuration loaded from the default file."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(DEFAULT_CONFIG_PATH)
            return cls._instance