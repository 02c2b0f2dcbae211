"""Plain text output of values, one value per call."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO


def _format(value: Any) -> str:
    if isinstance(value, float):
        # Six significant digits, as a default stream formats floating point.
        return format(value, "g")
    return str(value)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def print_value(value: Any, stream: Optional[TextIO] = None) -> None:
    """Write ``value`` to ``stream`` (standard output by default)."""
    _stream(stream).write(_format(value))


def println(value: Any = "", stream: Optional[TextIO] = None) -> None:
    """Write ``value`` followed by a newline; with no value, just the newline."""
    _stream(stream).write(_format(value) + "\n")