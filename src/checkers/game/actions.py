from __future__ import annotations
from enum import Enum, auto
from typing import Dict

from checkers.types import CellPosition


class Action(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ENTER = auto()
    EXIT = auto()
    INVALID = auto()


# Raw key codes (arrow values are the DOS/Windows extended scan codes)
KEY_ENTER = 13
KEY_ESCAPE = 27
KEY_UP = 72
KEY_LEFT = 75
KEY_RIGHT = 77
KEY_DOWN = 80

KEY_ACTIONS: Dict[int, Action] = {
    KEY_ENTER: Action.ENTER,
    KEY_LEFT: Action.MOVE_LEFT,
    KEY_UP: Action.MOVE_UP,
    KEY_RIGHT: Action.MOVE_RIGHT,
    KEY_DOWN: Action.MOVE_DOWN,
    KEY_ESCAPE: Action.EXIT,
}


def action_from_key(code: int) -> Action:
    return KEY_ACTIONS.get(code, Action.INVALID)


def step_cursor(cursor: CellPosition, action: Action, rows: int, cols: int) -> CellPosition:
    """
    Where the cursor lands after `action`. Clamps at the edges (no wraparound);
    non-directional actions leave it where it is.
    """
    r, c = cursor.row, cursor.col

    if action is Action.MOVE_UP and r > 0:
        r -= 1
    elif action is Action.MOVE_DOWN and r < rows - 1:
        r += 1
    elif action is Action.MOVE_LEFT and c > 0:
        c -= 1
    elif action is Action.MOVE_RIGHT and c < cols - 1:
        c += 1

    return CellPosition(r, c)
