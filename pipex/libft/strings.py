"""String helpers: parsing, searching, slicing, joining, splitting and comparison.

Positions are returned as indices into the string, and a missing result is None.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional, Sequence, Union

_SPACES = "\t\n\v\f\r "


def _char_code(s: str, i: int) -> int:
    """Code of ``s[i]``, or 0 past the end, as at a string terminator."""
    return ord(s[i]) if i < len(s) else 0


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign is read, then digits
    up to the first non-digit. A string without digits gives 0.
    """
    text = s.lstrip(_SPACES)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus sign when negative."""
    return str(n)


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strchr(s: Optional[str], c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` gives the length of ``s``.
    """
    _check_char(c)
    if s is None:
        return None
    if c == "\0":
        index = s.find(c)
        return len(s) if index == -1 else index
    index = s.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` gives the length of ``s``.
    """
    _check_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of unequal character codes, with
    the end of a string counting as code 0; 0 when they agree.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    for i in range(n):
        x, y = _char_code(a, i), _char_code(b, i)
        if x != y or not x or not y:
            return x - y
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare ``a`` with ``b`` over the length of ``a``.

    A string that is a prefix of ``b`` compares equal to it.
    """
    return strncmp(a, b, len(a))


def strnstr(big: Optional[str], little: str, n: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``little`` is found at 0; a missing ``big`` finds nothing.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    if big is None:
        return None
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index == -1 else index


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate ``a`` and ``b``; a missing ``a`` counts as empty, a missing ``b`` gives None."""
    if b is None:
        return None
    return (a or "") + b


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[list[str]]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    _check_char(sep)
    if s is None:
        return None
    return [word for word in s.split(sep) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """New string made of ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    s: Optional[Union[str, MutableSequence[Any]]],
    f: Optional[Callable[[int, Any], Any]],
) -> None:
    """Call ``f(index, item)`` for every item of ``s``.

    When ``s`` is a mutable sequence and ``f`` returns something other than
    None, that value replaces the item in place.
    """
    if s is None or f is None:
        return
    mutable = not isinstance(s, str)
    for i, item in enumerate(list(s)):
        result = f(i, item)
        if mutable and result is not None:
            s[i] = result  # type: ignore[index]


def strarrcmp(a: Optional[Sequence[str]], b: Optional[Sequence[str]]) -> bool:
    """True when both arrays are missing, or hold the same number of strings comparing equal."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(strcmp(x, y) == 0 for x, y in zip(a, b))