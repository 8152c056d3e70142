"""ANSI terminal colour and style escape sequences."""

from __future__ import annotations

CLR = "\x1b["
CLR_END = "m"
CLR_AND = ";"
CLR_RESET = "\x1b[0m"

BOLD = "1"
ITALIC = "3"
UNDERLINE = "4"

BLACK_FG = "30"
RED_FG = "31"
GREEN_FG = "32"
YELLOW_FG = "33"
BLUE_FG = "34"
PURPLE_FG = "35"
CYAN_FG = "36"
WHITE_FG = "37"

BLACK_BG = "40"
RED_BG = "41"
GREEN_BG = "42"
YELLOW_BG = "43"
BLUE_BG = "44"
PURPLE_BG = "45"
CYAN_BG = "46"
WHITE_BG = "47"


def sequence(*args: str) -> str:
    """Escape sequence selecting every style and colour code in ``args``."""
    return CLR + CLR_AND.join(args) + CLR_END


def colorize(text: str, *args: str) -> str:
    """``text`` wrapped in the sequence for ``args`` and a reset."""
    return sequence(*args) + text + CLR_RESET