"""Port describing the hand-off channel between callers and the worker."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_syslog_async.domain.records import QueueItem


class ChannelClosedError(RuntimeError):
    """Raised by :class:`ChannelPort` operations once the channel is closed."""


@runtime_checkable
class ChannelPort(Protocol):
    """Ordered single-consumer channel carrying one item at a time."""

    def put(self, item: QueueItem) -> None:
        """Hand ``item`` to the consumer; raise :class:`ChannelClosedError` once closed."""

    def get(self) -> QueueItem:
        """Receive the next item, blocking until one is offered."""

    def close(self) -> None:
        """Refuse further items and release blocked senders."""


__all__ = ["ChannelClosedError", "ChannelPort"]
