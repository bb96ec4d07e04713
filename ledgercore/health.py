"""Per-service health status registry with polling watch."""

from __future__ import annotations

import threading
import time
from enum import IntEnum
from typing import Callable, Dict, Iterator, Optional


class ServingStatus(IntEnum):
    """Health states a service can report."""

    UNKNOWN = 0
    SERVING = 1
    NOT_SERVING = 2
    SERVICE_UNKNOWN = 3


class ServiceNotFoundError(LookupError):
    """Raised when a checked service has no recorded status."""


class HealthCheckService:
    """Thread-safe store of service statuses; shutdown forces NOT_SERVING."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._shutdown = False
        self._statuses: Dict[str, ServingStatus] = {}

    def check(self, service: str) -> ServingStatus:
        """Return the status of ``service``; raise ServiceNotFoundError if unknown."""
        with self._lock:
            try:
                return self._statuses[service]
            except KeyError:
                raise ServiceNotFoundError(service) from None

    def _current(self, service: str) -> ServingStatus:
        with self._lock:
            return self._statuses.get(service, ServingStatus.SERVICE_UNKNOWN)

    def watch(self, service: str, cancelled: Callable[[], bool],
              interval: float = 1.0) -> Iterator[ServingStatus]:
        """Yield the status of ``service`` each time it changes.

        Polls every ``interval`` seconds until ``cancelled()`` returns true.
        An unregistered service reports SERVICE_UNKNOWN.
        """
        last: Optional[ServingStatus] = ServingStatus.UNKNOWN
        while not cancelled():
            status = self._current(service)
            if status != last:
                last = status
                yield status
            if interval > 0:
                time.sleep(interval)

    def set_status(self, service: str, status: ServingStatus) -> None:
        """Record ``status`` for ``service``; after shutdown it is NOT_SERVING."""
        with self._lock:
            if self._shutdown:
                status = ServingStatus.NOT_SERVING
            self._statuses[service] = status

    def set_all(self, status: ServingStatus) -> None:
        """Set every known service to ``status``; ignored after shutdown."""
        with self._lock:
            if self._shutdown:
                return
            for service in self._statuses:
                self._statuses[service] = status

    def shutdown(self) -> None:
        """Mark every service NOT_SERVING and refuse further serving states."""
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
            for service in self._statuses:
                self._statuses[service] = ServingStatus.NOT_SERVING