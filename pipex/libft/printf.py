"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


class FormatError(ValueError):
    """Raised for an unknown conversion, a missing argument or a missing format."""


def _hex(n: int, digits: str) -> str:
    if n < 16:
        return digits[n]
    return _hex(n // 16, digits) + digits[n % 16]


def _to_int32(n: int) -> int:
    return ((n + 2**31) % 2**32) - 2**31


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) % 256)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + _hex(address, _LOWER_DIGITS)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in ("d", "i"):
        return str(_to_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec == "x":
        return _hex(int(value) & _UINT_MASK, _LOWER_DIGITS)
    if spec == "X":
        return _hex(int(value) & _UINT_MASK, _UPPER_DIGITS)
    raise FormatError(f"unknown conversion %{spec}")


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    A ``%`` as the very last character is kept literally.
    """
    if fmt is None:
        raise FormatError("missing format string")
    pieces = []
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%" and i + 1 < len(fmt):
            spec = fmt[i + 1]
            if spec == "%":
                pieces.append("%")
            else:
                if spec not in "cspdiuxX":
                    raise FormatError(f"unknown conversion %{spec}")
                try:
                    value = next(remaining)
                except StopIteration:
                    raise FormatError(f"missing argument for %{spec}") from None
                pieces.append(_convert(spec, value))
            i += 2
        else:
            pieces.append(ch)
            i += 1
    return "".join(pieces)


def dprintf(stream: Optional[TextIO], fmt: Optional[str], *args: Any) -> int:
    """Write the rendered ``fmt`` to ``stream`` (stdout when None); return characters written."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the rendered ``fmt`` to standard output; return characters written."""
    return dprintf(None, fmt, *args)