"""printf-style message rendering that never raises."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def render_message(fmt: str, args: tuple[Any, ...]) -> str:
    """Interpolate ``args`` into ``fmt`` using ``%`` formatting.

    Interpolation only happens when ``args`` is non-empty, the same rule
    :meth:`logging.LogRecord.getMessage` follows, so a bare ``"100%"`` is
    passed through untouched. A single mapping argument is used for
    ``%(name)s`` placeholders. When interpolation fails the error is inlined
    into the message instead of propagating.

    Examples
    --------
    >>> render_message("count=%d", (5,))
    'count=5'
    >>> render_message("%(user)s logged in", ({"user": "ada"},))
    'ada logged in'
    >>> render_message("count=%d", ("five",))
    "count=%d %!(FORMAT ERROR: %d format: a real number is required, not str) args=('five',)"
    """

    if not args:
        return fmt
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError) as exc:
        return f"{fmt} %!(FORMAT ERROR: {exc}) args={args!r}"


__all__ = ["render_message"]
