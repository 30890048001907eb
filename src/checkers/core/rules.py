from __future__ import annotations
from typing import Tuple

from checkers.types import CellPosition


def get_diffs(a: CellPosition, b: CellPosition) -> Tuple[int, int]:
    """Absolute (row, col) distance between two positions."""
    return abs(a.row - b.row), abs(a.col - b.col)


def is_strict_diagonal(a: CellPosition, b: CellPosition) -> bool:
    dr, dc = get_diffs(a, b)
    return dr == dc


def is_single_step(a: CellPosition, b: CellPosition) -> bool:
    dr, dc = get_diffs(a, b)
    return dr + dc <= 2
