from __future__ import annotations
from typing import Optional

from checkers.config import CLEAR_SCREEN, SHOW_STATUS
from checkers.core.board import CellView, Frame
from checkers.types import FocusState
from checkers.ui.colors import (
    c,
    BOLD,
    DIM,
    FG_BLACK,
    FG_CYAN,
    BG_BRIGHT_CYAN,
    BG_BRIGHT_GREEN,
    BG_BRIGHT_MAGENTA,
)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def background(view: CellView) -> Optional[str]:
    if view.focus is FocusState.FOCUSED:
        return BG_BRIGHT_GREEN
    if view.focus is FocusState.PENDING_MOVE:
        return BG_BRIGHT_MAGENTA
    if view.playable:
        return BG_BRIGHT_CYAN
    return None


def render_cell(view: CellView) -> str:
    code = BOLD + FG_BLACK
    bg = background(view)
    if bg is not None:
        code += bg
    return c(view.glyph, code)


def render(frame: Frame, status: str = "") -> None:
    clear_screen()

    for row in frame:
        print("".join(render_cell(view) for view in row))

    if SHOW_STATUS:
        print()
        if status:
            print(c(status, FG_CYAN))
        print(c("Arrows move. Enter picks up / drops. Esc quits.", DIM))
