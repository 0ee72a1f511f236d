"""Port describing the platform system-logging facility."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Open/write/close/mask primitives of the system logger.

    Only the delivery worker calls :meth:`write` and :meth:`close`; the sink
    may therefore wrap a handle that is not thread-safe.
    """

    def open(self, ident: str, options: int, facility: int) -> None:
        """Prepare the connection used by subsequent writes."""

    def write(self, priority: int, message: str) -> None:
        """Submit ``message`` at ``priority`` (``facility | severity``)."""

    def close(self) -> None:
        """Release the connection."""

    def set_mask(self, mask: int) -> int:
        """Install ``mask`` and return the previous one."""


__all__ = ["SinkPort"]
