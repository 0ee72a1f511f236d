"""Syslog severities, facilities, and openlog option flags.

Purpose
-------
Give the opaque integers handed to the sink a readable, typed vocabulary
without changing their numeric encoding.

Contents
--------
* :class:`Severity` - the eight conventional severities (0 most severe).
* :class:`Facility` - origin categories occupying the bits above the severity.
* :class:`Option` - bit flags accepted when opening the sink.
* Helpers composing/splitting priorities and building log masks.

System Role
-----------
Pure domain data shared by the session, the sink adapter, the logging bridge,
and configuration parsing. The session itself never validates priorities; it
forwards whatever integer the caller composed.
"""

from __future__ import annotations

import logging
from enum import IntEnum, IntFlag
from typing import Iterable

_SEVERITY_MASK = 0x07
_FACILITY_MASK = 0x03F8


def _normalise_name(name: str) -> str:
    normalized = name.strip().upper()
    if normalized.startswith("LOG_"):
        normalized = normalized[4:]
    return normalized


class Severity(IntEnum):
    """Urgency of a message, ordered from most to least severe."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Return the severity called ``name`` (``LOG_`` prefix optional).

        Examples
        --------
        >>> Severity.from_name("log_info")
        <Severity.INFO: 6>
        """
        try:
            return cls[_normalise_name(name)]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog severity: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Severity":
        """Translate a :mod:`logging` level into the closest severity."""
        if level >= logging.CRITICAL:
            return cls.CRIT
        if level >= logging.ERROR:
            return cls.ERR
        if level >= logging.WARNING:
            return cls.WARNING
        if level >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


class Facility(IntEnum):
    """Coarse origin of a message, pre-shifted into the priority's high bits."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    # 12..15 are unused on Linux, BSD and macOS.
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3

    @classmethod
    def from_name(cls, name: str) -> "Facility":
        """Return the facility called ``name`` (``LOG_`` prefix optional)."""
        try:
            return cls[_normalise_name(name)]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog facility: {name!r}") from exc


class Option(IntFlag):
    """Flags controlling how the sink connection behaves."""

    PID = 0x01
    CONS = 0x02
    NDELAY = 0x08
    NOWAIT = 0x10
    PERROR = 0x20

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Option":
        """Combine option ``names`` into a single flag value.

        Examples
        --------
        >>> int(Option.from_names(["pid", "LOG_PERROR"]))
        33
        """
        combined = cls(0)
        for name in names:
            if not name.strip():
                continue
            try:
                combined |= cls[_normalise_name(name)]
            except KeyError as exc:
                raise ValueError(f"Unknown syslog option: {name!r}") from exc
        return combined


def compose_priority(facility: int, severity: int) -> int:
    """Return ``facility | severity`` as a plain integer.

    Examples
    --------
    >>> compose_priority(Facility.LOCAL0, Severity.ERR)
    131
    """
    return int(facility) | int(severity)


def split_priority(priority: int) -> tuple[int, Severity]:
    """Split ``priority`` into its facility code and :class:`Severity`.

    The facility is returned as an ``int`` because callers may use codes that
    have no :class:`Facility` member (the unused slots).
    """
    return int(priority) & _FACILITY_MASK, Severity(int(priority) & _SEVERITY_MASK)


def log_mask(severity: int) -> int:
    """Return the mask bit enabling exactly ``severity``."""
    return 1 << int(severity)


def log_upto(severity: int) -> int:
    """Return the mask enabling every severity up to and including ``severity``.

    Examples
    --------
    >>> log_upto(Severity.ERR) == log_mask(0) | log_mask(1) | log_mask(2) | log_mask(3)
    True
    """
    return (1 << (int(severity) + 1)) - 1


__all__ = [
    "Facility",
    "Option",
    "Severity",
    "compose_priority",
    "log_mask",
    "log_upto",
    "split_priority",
]
