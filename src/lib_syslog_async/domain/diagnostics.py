"""Counters exposing what the fire-and-forget delivery path did.

Purpose
-------
Callers never see delivery failures, so the worker records them here for
operators to inspect without changing the blocking or ordering contract.

Contents
--------
* :class:`DeliveryStats` - thread-safe counters plus the last write error.
* :class:`DeliverySnapshot` - immutable copy returned by
  :meth:`DeliveryStats.snapshot`.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class DeliverySnapshot:
    """Point-in-time view of :class:`DeliveryStats`."""

    delivered: int
    failed: int
    dropped: int
    last_error: str | None


class DeliveryStats:
    """Track delivered, failed, and dropped records for one session.

    Examples
    --------
    >>> stats = DeliveryStats()
    >>> stats.record_delivered()
    >>> stats.record_failure(OSError("socket gone"))
    >>> stats.snapshot()
    DeliverySnapshot(delivered=1, failed=1, dropped=0, last_error="OSError('socket gone')")
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._delivered = 0
        self._failed = 0
        self._dropped = 0
        self._last_error: str | None = None

    def record_delivered(self) -> None:
        with self._lock:
            self._delivered += 1

    def record_failure(self, exc: BaseException) -> None:
        """Count a rejected write and remember ``exc`` as the last error."""
        with self._lock:
            self._failed += 1
            self._last_error = repr(exc)

    def record_dropped(self) -> None:
        """Count a record that never reached the worker."""
        with self._lock:
            self._dropped += 1

    def snapshot(self) -> DeliverySnapshot:
        with self._lock:
            return DeliverySnapshot(
                delivered=self._delivered,
                failed=self._failed,
                dropped=self._dropped,
                last_error=self._last_error,
            )


__all__ = ["DeliverySnapshot", "DeliveryStats"]
