from __future__ import annotations
from checkers.config import USE_COLOR

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG_BLACK = "\033[30m"
FG_CYAN = "\033[36m"

# Bright backgrounds (aixterm codes)
BG_BRIGHT_GREEN = "\033[102m"
BG_BRIGHT_MAGENTA = "\033[105m"
BG_BRIGHT_CYAN = "\033[106m"


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"
