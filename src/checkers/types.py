# src/checkers/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class MarkerSymbol(Enum):
    O = "O"
    X = "X"


class FocusState(Enum):
    FOCUSED = "focused"
    UNFOCUSED = "unfocused"
    PENDING_MOVE = "pending_move"


@dataclass(frozen=True, slots=True)
class CellPosition:
    row: int
    col: int
