"""Domain values shared by the syslog delivery pipeline."""

from __future__ import annotations

from .diagnostics import DeliverySnapshot, DeliveryStats
from .formatting import render_message
from .priorities import Facility, Option, Severity, compose_priority, log_mask, log_upto, split_priority
from .records import CLOSE, CloseSignal, LogRecord, QueueItem

__all__ = [
    "CLOSE",
    "CloseSignal",
    "DeliverySnapshot",
    "DeliveryStats",
    "Facility",
    "LogRecord",
    "Option",
    "QueueItem",
    "Severity",
    "compose_priority",
    "log_mask",
    "log_upto",
    "render_message",
    "split_priority",
]
