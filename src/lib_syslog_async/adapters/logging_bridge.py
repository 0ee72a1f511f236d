"""Bridge from :mod:`logging` into a syslog session.

Purpose
-------
Allow applications that already log through the standard library to reach
the asynchronous syslog pipeline by installing one handler.

Contents
--------
* :class:`SessionLogHandler` - :class:`logging.Handler` forwarding to a
  :class:`~lib_syslog_async.application.session.Session`.
"""

from __future__ import annotations

import logging

from lib_syslog_async.application.session import Session
from lib_syslog_async.domain.priorities import Severity


class SessionLogHandler(logging.Handler):
    """Forward formatted :class:`logging.LogRecord` objects to ``session``.

    Parameters
    ----------
    session:
        Target session; records are ignored while it is inactive.
    facility:
        Optional facility OR-ed into every priority. ``0`` keeps the default
        facility chosen when the session was opened.
    level:
        Minimum stdlib level handled.

    Records produced on the session's own delivery thread (for example the
    worker reporting a sink failure) are skipped so they cannot loop back
    into the channel.
    """

    def __init__(self, session: Session, *, facility: int = 0, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._session = session
        self._facility = int(facility)

    @property
    def session(self) -> Session:
        return self._session

    def emit(self, record: logging.LogRecord) -> None:
        if self._session.in_delivery_thread():
            return
        try:
            message = self.format(record)
            priority = self._facility | Severity.from_python_level(record.levelno)
            self._session.emit(priority, message)
        except Exception:  # noqa: BLE001
            self.handleError(record)


__all__ = ["SessionLogHandler"]
