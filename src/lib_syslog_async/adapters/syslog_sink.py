"""Sink adapter backed by the platform ``syslog(3)`` API.

Purpose
-------
Translate :class:`SinkPort` calls into the standard library :mod:`syslog`
module (``openlog``/``syslog``/``closelog``/``setlogmask``).

Contents
--------
* :class:`SyslogSinkAdapter` - concrete :class:`SinkPort` implementation.

System Role
-----------
The only adapter touching the operating system. The backend module is
injectable so tests can substitute a recorder, mirroring how other adapters
accept a custom sender.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from lib_syslog_async.application.ports.sink import SinkPort


def _default_backend() -> ModuleType:  # pragma: no cover - depends on platform
    """Return the stdlib :mod:`syslog` module, raising if unavailable."""
    try:
        import syslog
    except ImportError as exc:  # pragma: no cover - executed only on Windows
        raise RuntimeError("the syslog module is not available on this platform") from exc
    return syslog


class SyslogSinkAdapter(SinkPort):
    """Forward sink operations to ``syslog(3)``.

    Parameters
    ----------
    backend:
        Object exposing ``openlog``, ``syslog``, ``closelog`` and
        ``setlogmask`` with the stdlib signatures; defaults to :mod:`syslog`.

    Notes
    -----
    ``setlogmask(0)`` leaves the mask unchanged and only reports it, which is
    the platform's behaviour and is passed through as-is.
    """

    def __init__(self, *, backend: Any | None = None) -> None:
        self._backend = backend if backend is not None else _default_backend()

    def open(self, ident: str, options: int, facility: int) -> None:
        """Call ``openlog`` with the session identity, options, and default facility."""
        self._backend.openlog(ident, int(options), int(facility))

    def write(self, priority: int, message: str) -> None:
        self._backend.syslog(int(priority), message)

    def close(self) -> None:
        self._backend.closelog()

    def set_mask(self, mask: int) -> int:
        return int(self._backend.setlogmask(int(mask)))


__all__ = ["SyslogSinkAdapter"]
