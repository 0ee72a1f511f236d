"""Composition helpers wiring adapters into a :class:`Session`."""

from __future__ import annotations

from lib_syslog_async.adapters import RendezvousChannel, SyslogSinkAdapter
from lib_syslog_async.application.ports import SinkPort
from lib_syslog_async.application.session import Session
from lib_syslog_async.application.use_cases.delivery import DiagnosticHook


def create_session(*, sink: SinkPort | None = None, diagnostic: DiagnosticHook = None) -> Session:
    """Return an unopened session using ``sink`` (default: platform syslog).

    Examples
    --------
    >>> class Sink:
    ...     def open(self, ident, options, facility): pass
    ...     def write(self, priority, message): pass
    ...     def close(self): pass
    ...     def set_mask(self, mask): return 0xFF
    >>> create_session(sink=Sink()).active
    False
    """

    resolved_sink = sink if sink is not None else SyslogSinkAdapter()
    return Session(sink=resolved_sink, channel_factory=RendezvousChannel, diagnostic=diagnostic)


__all__ = ["create_session"]
