"""Items travelling through the delivery channel.

Purpose
-------
Model what the session hands to the delivery worker as a tagged variant: a
:class:`LogRecord` to forward, or a :class:`CloseSignal` telling the worker to
release the sink and stop.

Contents
--------
* :class:`LogRecord` - immutable priority/message pair.
* :class:`CloseSignal` - terminal marker; :data:`CLOSE` is the shared instance.
* :data:`QueueItem` - union accepted by the channel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class LogRecord:
    """One message plus its combined facility/severity code.

    Attributes
    ----------
    priority:
        Opaque integer (``facility | severity``) passed to the sink unchanged.
    message:
        Text written to the sink.

    Examples
    --------
    >>> LogRecord(6, "hello")
    LogRecord(priority=6, message='hello')
    """

    priority: int
    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", int(self.priority))
        object.__setattr__(self, "message", str(self.message))


@dataclass(slots=True, frozen=True)
class CloseSignal:
    """Marker instructing the delivery worker to terminate."""


CLOSE = CloseSignal()

QueueItem = Union[LogRecord, CloseSignal]


__all__ = ["CLOSE", "CloseSignal", "LogRecord", "QueueItem"]
