"""Module-level façade over a process-wide default syslog session.

Purpose
-------
Offer the familiar ``openlog``/``syslog``/``closelog``/``setlogmask`` call
shape for hosts that do not want to pass a :class:`Session` around. Every
function delegates to one default session held in
:mod:`lib_syslog_async.runtime._state`.

Contents
--------
* ``openlog`` / ``open_from_settings`` - start the default session.
* ``syslog`` / ``syslogf`` - hand records to the delivery worker.
* ``closelog`` / ``wait_closed`` - shutdown and optional wait for the worker.
* ``setlogmask`` - synchronous mask pass-through.
* ``current_session`` / ``is_open`` / ``delivery_stats`` - introspection.

System Role
-----------
Outer shell of the package: composes adapters through
:func:`~lib_syslog_async.runtime._composition.create_session` and keeps
lifecycle rules (reject double open, no-op close) in
:class:`~lib_syslog_async.application.session.Session`.
"""

from __future__ import annotations

from typing import Any

from lib_syslog_async.application.ports import SinkPort
from lib_syslog_async.application.session import Session, SessionAlreadyOpenError
from lib_syslog_async.application.use_cases.delivery import DiagnosticHook
from lib_syslog_async.config import SessionSettings
from lib_syslog_async.domain import DeliverySnapshot, Facility

from ._composition import create_session
from ._state import clear_session, current_session, is_open, peek_session, set_session, state_lock


def openlog(
    ident: str,
    options: int = 0,
    facility: int = Facility.USER,
    *,
    sink: SinkPort | None = None,
    diagnostic: DiagnosticHook = None,
) -> Session:
    """Open the default session and return it.

    A new session object is composed when none exists yet or when ``sink`` or
    ``diagnostic`` is supplied; a previously closed default session is waited
    on before it is replaced so its worker finishes closing the sink first.

    Raises
    ------
    SessionAlreadyOpenError
        When the default session is still active.
    """

    with state_lock():
        session = peek_session()
        if session is not None and session.active:
            raise SessionAlreadyOpenError("default syslog session is already open; call closelog() first")
        if session is None or sink is not None or diagnostic is not None:
            if session is not None:
                session.join()
            session = create_session(sink=sink, diagnostic=diagnostic)
            set_session(session)
        session.open(ident, options, facility)
        return session


def open_from_settings(
    settings: SessionSettings,
    *,
    sink: SinkPort | None = None,
    diagnostic: DiagnosticHook = None,
) -> Session:
    """Open the default session from resolved :class:`SessionSettings`.

    Applies ``settings.log_mask`` (when set) after the session is open.
    """

    session = openlog(settings.ident, settings.options, settings.facility, sink=sink, diagnostic=diagnostic)
    if settings.log_mask is not None:
        session.set_log_mask(settings.log_mask)
    return session


def syslog(priority: int, message: str) -> None:
    """Emit ``message`` through the default session; no-op when none is open."""

    session = peek_session()
    if session is None:
        return
    session.emit(priority, message)


def syslogf(priority: int, fmt: str, *args: Any) -> None:
    """Format ``args`` into ``fmt`` and emit it through the default session."""

    session = peek_session()
    if session is None:
        return
    session.emitf(priority, fmt, *args)


def closelog() -> bool:
    """Close the default session; ``False`` when nothing was open."""

    session = peek_session()
    if session is None:
        return False
    return session.close()


def wait_closed(timeout: float | None = None) -> bool:
    """Wait until the default session's worker has released the sink."""

    session = peek_session()
    if session is None:
        return True
    return session.join(timeout)


def setlogmask(mask: int) -> int:
    """Install ``mask`` on the sink and return the previous mask.

    Works without an open session: a default session (unopened) is composed
    so the platform mask can still be inspected or changed.
    """

    with state_lock():
        session = peek_session()
        if session is None:
            session = create_session()
            set_session(session)
    return session.set_log_mask(mask)


def delivery_stats() -> DeliverySnapshot:
    """Return delivery counters of the default session."""

    return current_session().stats


def reset() -> None:
    """Close the default session, wait for its worker, and forget it."""

    with state_lock():
        session = peek_session()
        if session is not None:
            session.close()
            session.join()
        clear_session()


__all__ = [
    "closelog",
    "create_session",
    "current_session",
    "delivery_stats",
    "is_open",
    "open_from_settings",
    "openlog",
    "reset",
    "setlogmask",
    "syslog",
    "syslogf",
    "wait_closed",
]
