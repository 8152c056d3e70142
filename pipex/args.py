"""Splitting a command string into words, honouring single and double quotes.

Inside a quoted section a backslash before the closing quote character makes
that quote literal.
"""

from __future__ import annotations

from typing import Optional

_QUOTES = ("'", '"')


def quotes_balanced(arg: str) -> bool:
    """Quote check used before splitting.

    Counts the quotes that open a quoted section; the string is rejected only
    when both the single- and double-quote opening counts are odd.
    """
    singles = doubles = 0
    quote: Optional[str] = None
    for ch in arg:
        if quote is None and ch in _QUOTES:
            if ch == "'":
                singles += 1
            else:
                doubles += 1
            quote = ch
        elif quote is not None and ch == quote:
            quote = None
    return not (singles % 2 and doubles % 2)


def _next_char(s: str, i: int) -> str:
    return s[i + 1] if i + 1 < len(s) else ""


def count_args(s: str) -> int:
    """Upper bound on the number of words in ``s``.

    A string starting with a quote is counted one extra.
    """
    if not s:
        return 0
    count = 0
    quote: Optional[str] = None
    if s[0] != " ":
        count += 1
    if s[0] in _QUOTES:
        quote = s[0]
        count += 1
    for i, ch in enumerate(s):
        nxt = _next_char(s, i)
        if quote is None and ch == " " and nxt not in ("", " "):
            count += 1
        if quote is None and i and ch in _QUOTES:
            quote = ch
        elif quote is not None and i and ch == quote:
            quote = None
    return count


def _toggle(s: str, pos: int, quote: Optional[str]) -> tuple[bool, Optional[str]]:
    """Whether the character at ``pos`` is dropped, and the new quote state."""
    ch = s[pos]
    if quote is not None and ch == "\\" and _next_char(s, pos) == quote:
        return True, quote
    if quote is None and ch in _QUOTES:
        return True, ch
    if quote is not None and ch == quote:
        return True, None
    return False, quote


def _read_word(s: str, start: int) -> str:
    out = []
    quote: Optional[str] = None
    pos = start
    while pos < len(s):
        dropped, quote = _toggle(s, pos, quote)
        if dropped:
            pos += 1
            if pos >= len(s):
                break
        ch = s[pos]
        if quote is None and ch == " ":
            break
        out.append(ch)
        pos += 1
    return "".join(out)


def split_args(s: Optional[str]) -> list[str]:
    """Split a command string into its words.

    Raises ValueError for a missing string, unbalanced quotes, or a string
    holding no words.
    """
    if s is None:
        raise ValueError("missing command string")
    if not quotes_balanced(s):
        raise ValueError(f"unclosed quotes in {s!r}")
    if not count_args(s):
        raise ValueError(f"no command in {s!r}")
    words = []
    quote: Optional[str] = None
    for i, ch in enumerate(s):
        nxt = _next_char(s, i)
        if i == 0 and ch != " ":
            words.append(_read_word(s, 0))
        elif quote is None and ch == " " and nxt not in ("", " "):
            words.append(_read_word(s, i + 1))
        if quote is None and ch in _QUOTES:
            quote = ch
        elif quote is not None and ch == quote:
            quote = None
    return words