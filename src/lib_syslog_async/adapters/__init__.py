"""Adapters implementing the application ports."""

from __future__ import annotations

from .channel import RendezvousChannel
from .logging_bridge import SessionLogHandler
from .syslog_sink import SyslogSinkAdapter

__all__ = ["RendezvousChannel", "SessionLogHandler", "SyslogSinkAdapter"]
