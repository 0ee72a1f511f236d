"""Zero-capacity hand-off channel for records bound to the delivery worker.

Purpose
-------
Give callers natural backpressure: a send completes only once the single
consumer has taken the item, so nothing is buffered between the caller and
the worker and send order equals receive order.

Contents
--------
* :class:`RendezvousChannel` - :class:`ChannelPort` built on
  :class:`threading.Condition`.

System Role
-----------
Sits between :class:`lib_syslog_async.application.session.Session` (many
senders) and the delivery worker (the only receiver).
"""

from __future__ import annotations

import threading

from lib_syslog_async.application.ports.channel import ChannelClosedError, ChannelPort
from lib_syslog_async.domain.records import QueueItem

_EMPTY = object()


class RendezvousChannel(ChannelPort):
    """Hand items from any number of senders to exactly one receiver.

    :meth:`put` blocks until the receiver has taken the item. :meth:`close`
    wakes every blocked sender with :class:`ChannelClosedError`, including one
    whose offer was placed but not yet taken; that item is discarded.

    Examples
    --------
    >>> from lib_syslog_async.domain.records import LogRecord
    >>> channel = RendezvousChannel()
    >>> received = []
    >>> receiver = threading.Thread(target=lambda: received.append(channel.get()))
    >>> receiver.start()
    >>> channel.put(LogRecord(6, "hello"))
    >>> receiver.join()
    >>> received[0].message
    'hello'
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._slot: object = _EMPTY
        self._offered = 0
        self._taken = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def put(self, item: QueueItem) -> None:
        """Offer ``item`` and wait until the receiver takes it."""
        with self._cond:
            while self._slot is not _EMPTY and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError("channel is closed")
            self._slot = item
            self._offered += 1
            ticket = self._offered
            self._cond.notify_all()
            while self._taken < ticket and not self._closed:
                self._cond.wait()
            if self._taken < ticket:
                raise ChannelClosedError("channel closed before the item was received")

    def get(self) -> QueueItem:
        """Take the next offered item, blocking until a sender arrives."""
        with self._cond:
            while self._slot is _EMPTY and not self._closed:
                self._cond.wait()
            if self._slot is _EMPTY:
                raise ChannelClosedError("channel is closed")
            item = self._slot
            self._slot = _EMPTY
            self._taken += 1
            self._cond.notify_all()
            return item  # type: ignore[return-value]

    def close(self) -> None:
        """Close the channel, discarding any offer not yet taken."""
        with self._cond:
            self._closed = True
            self._slot = _EMPTY
            self._cond.notify_all()


__all__ = ["RendezvousChannel"]
