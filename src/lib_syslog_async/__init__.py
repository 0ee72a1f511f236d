"""Public package surface for asynchronous syslog delivery.

``import lib_syslog_async`` exposes the :class:`Session` type with its
composition helper, the module-level default-session façade, and the
severity/facility/option vocabulary used to build priorities.
"""

from __future__ import annotations

from .adapters import RendezvousChannel, SessionLogHandler, SyslogSinkAdapter
from .application.ports import ChannelClosedError, ChannelPort, SinkPort
from .application.session import Session, SessionAlreadyOpenError
from .config import SessionSettings, enable_dotenv, load_settings
from .domain import (
    DeliverySnapshot,
    Facility,
    LogRecord,
    Option,
    Severity,
    compose_priority,
    log_mask,
    log_upto,
    split_priority,
)
from .runtime import (
    closelog,
    create_session,
    current_session,
    delivery_stats,
    is_open,
    open_from_settings,
    openlog,
    setlogmask,
    syslog,
    syslogf,
    wait_closed,
)

__all__ = [
    "ChannelClosedError",
    "ChannelPort",
    "DeliverySnapshot",
    "Facility",
    "LogRecord",
    "Option",
    "RendezvousChannel",
    "Session",
    "SessionAlreadyOpenError",
    "SessionLogHandler",
    "SessionSettings",
    "Severity",
    "SinkPort",
    "SyslogSinkAdapter",
    "closelog",
    "compose_priority",
    "create_session",
    "current_session",
    "delivery_stats",
    "enable_dotenv",
    "is_open",
    "load_settings",
    "log_mask",
    "log_upto",
    "open_from_settings",
    "openlog",
    "setlogmask",
    "split_priority",
    "syslog",
    "syslogf",
    "wait_closed",
]
