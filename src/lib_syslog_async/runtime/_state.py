"""Process-wide default session holder and access helpers."""

from __future__ import annotations

from threading import RLock

from lib_syslog_async.application.session import Session

_SESSION: Session | None = None
_STATE_LOCK = RLock()


def state_lock() -> RLock:
    """Return the lock serialising default-session replacement."""

    return _STATE_LOCK


def set_session(session: Session) -> None:
    """Install ``session`` as the process default."""

    with _STATE_LOCK:
        global _SESSION
        _SESSION = session


def clear_session() -> None:
    """Forget the default session if present."""

    with _STATE_LOCK:
        global _SESSION
        _SESSION = None


def peek_session() -> Session | None:
    """Return the default session or ``None`` without raising."""

    with _STATE_LOCK:
        return _SESSION


def current_session() -> Session:
    """Return the default session or raise when none was ever opened."""

    with _STATE_LOCK:
        if _SESSION is None:
            raise RuntimeError("lib_syslog_async.openlog() must be called before using the default session")
        return _SESSION


def is_open() -> bool:
    """Return ``True`` when a default session exists and is active."""

    with _STATE_LOCK:
        return _SESSION is not None and _SESSION.active


__all__ = [
    "clear_session",
    "current_session",
    "is_open",
    "peek_session",
    "set_session",
    "state_lock",
]
