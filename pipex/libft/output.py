"""Writing characters, strings, numbers and string arrays to text streams.

Every function returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

_NULL = "(null)"


def _write(text: str, stream: Optional[TextIO]) -> int:
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def putchar(c: str, stream: Optional[TextIO] = None) -> int:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write(c, stream)


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``; a missing string is written as ``(null)``."""
    return _write(_NULL if s is None else s, stream)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline; a missing string is written as ``(null)``."""
    return putstr(s, stream) + putchar("\n", stream)


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal, with a leading minus sign when negative."""
    return _write(str(n), stream)


def putstrarr(items: Optional[Sequence[str]], stream: Optional[TextIO] = None) -> int:
    """Write a string array as ``{"a", "b", NULL}``; a missing array is written as ``NULL``."""
    if items is None:
        return _write("NULL", stream)
    written = _write("{", stream)
    for item in items:
        written += _write('"', stream)
        written += putstr(item, stream)
        written += _write('", ', stream)
    written += _write("NULL}", stream)
    return written