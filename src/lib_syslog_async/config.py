"""Environment-driven configuration for the default syslog session.

Purpose
-------
Resolve the ``openlog`` parameters from keyword arguments and environment
variables, optionally seeding the environment from a nearby ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle consulted by :func:`should_use_dotenv`.
* :func:`enable_dotenv` / :func:`should_use_dotenv` - ``.env`` loading.
* :class:`SessionSettings` / :func:`load_settings` - resolved parameters.

Environment variables take precedence over keyword arguments:

``SYSLOG_IDENT``
    Identity string.
``SYSLOG_OPTIONS``
    Comma separated option names, e.g. ``PID,PERROR``.
``SYSLOG_FACILITY``
    Facility name, e.g. ``LOCAL0``.
``SYSLOG_MASK_UPTO``
    Least severe severity still delivered, e.g. ``NOTICE``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_syslog_async.domain.priorities import Facility, Option, Severity, log_upto

DOTENV_ENV_VAR = "LIB_SYSLOG_ASYNC_USE_DOTENV"
ENV_IDENT = "SYSLOG_IDENT"
ENV_OPTIONS = "SYSLOG_OPTIONS"
ENV_FACILITY = "SYSLOG_FACILITY"
ENV_MASK_UPTO = "SYSLOG_MASK_UPTO"

_TRUTHY = {"1", "true", "yes", "on"}


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit flag wins; otherwise a truthy :data:`DOTENV_ENV_VAR` value
    enables loading.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load ``path`` (or the nearest ``.env`` above the cwd) into ``os.environ``.

    Existing environment variables are never overridden. Returns the resolved
    file that was loaded, or ``None`` when no file was found.
    """

    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        target = Path(found).resolve()
    else:
        target = Path(path).resolve()
        if not target.is_file():
            return None
    load_dotenv(target, override=False)
    return target


@dataclass(slots=True, frozen=True)
class SessionSettings:
    """Resolved ``openlog`` parameters for the default session."""

    ident: str
    options: Option = Option(0)
    facility: Facility = Facility.USER
    log_mask: int | None = None


def _default_ident() -> str:
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    return Path(argv0).name or "python"


def load_settings(
    *,
    ident: str | None = None,
    options: int | str = 0,
    facility: int | str = Facility.USER,
    mask_upto: int | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> SessionSettings:
    """Merge keyword arguments with environment overrides.

    Raises
    ------
    ValueError
        When a value (from the environment or arguments) names an unknown
        option, facility, or severity, or the identity is blank.
    """

    env = os.environ if environ is None else environ

    resolved_ident = env.get(ENV_IDENT, ident if ident is not None else _default_ident())
    if not resolved_ident.strip():
        raise ValueError(f"{ENV_IDENT} must not be empty")

    raw_options = env.get(ENV_OPTIONS, options)
    raw_facility = env.get(ENV_FACILITY, facility)
    raw_upto = env.get(ENV_MASK_UPTO, mask_upto)

    try:
        resolved_options = _coerce_options(raw_options)
        resolved_facility = _coerce_facility(raw_facility)
        resolved_mask = None if raw_upto is None else log_upto(_coerce_severity(raw_upto))
    except ValueError as exc:
        raise ValueError(f"Invalid syslog configuration: {exc}") from exc

    return SessionSettings(
        ident=resolved_ident,
        options=resolved_options,
        facility=resolved_facility,
        log_mask=resolved_mask,
    )


def _coerce_options(value: int | str) -> Option:
    if isinstance(value, str):
        return Option.from_names(value.split(","))
    return Option(int(value))


def _coerce_facility(value: int | str) -> Facility:
    if isinstance(value, str):
        return Facility.from_name(value)
    return Facility(int(value))


def _coerce_severity(value: int | str) -> Severity:
    if isinstance(value, str):
        return Severity.from_name(value)
    return Severity(int(value))


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_FACILITY",
    "ENV_IDENT",
    "ENV_MASK_UPTO",
    "ENV_OPTIONS",
    "SessionSettings",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
