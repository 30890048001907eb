
# src/checkers/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from checkers.config import ROWS, COLS, MARKER_ROWS
from checkers.types import CellPosition, FocusState, MarkerSymbol
from checkers.core.rules import is_single_step, is_strict_diagonal


@dataclass(slots=True)
class Marker:
    symbol: MarkerSymbol
    promoted: bool = False  # lifts the one-step limit; nothing promotes yet


@dataclass(slots=True)
class Cell:
    playable: bool
    marker: Optional[Marker] = None
    focus: FocusState = FocusState.UNFOCUSED

    def remove_marker(self) -> Optional[Marker]:
        marker = self.marker
        self.marker = None
        return marker


@dataclass(frozen=True, slots=True)
class CellView:
    """Read-only picture of one cell, handed to painters."""
    glyph: str
    focus: FocusState
    playable: bool


Frame = Tuple[Tuple[CellView, ...], ...]
Painter = Callable[[Frame, str], None]


def _glyph(marker: Optional[Marker]) -> str:
    if marker is None:
        return "   "
    return f" {marker.symbol.value} "


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [
                [self._initial_cell(r, c) for c in range(self.cols)]
                for r in range(self.rows)
            ]

    def _initial_cell(self, r: int, c: int) -> Cell:
        playable = (r + c) % 2 == 0
        marker = None
        if playable and r < MARKER_ROWS:
            marker = Marker(MarkerSymbol.O)
        elif playable and r >= self.rows - MARKER_ROWS:
            marker = Marker(MarkerSymbol.X)
        return Cell(playable=playable, marker=marker)

    def _cell(self, r: int, c: int) -> Cell:
        # Negative indices would silently wrap on a list.
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"Cell ({r}, {c}) is outside the {self.rows}x{self.cols} board.")
        return self.cells[r][c]

    def get_n_row(self) -> int:
        return self.rows

    def get_n_col(self) -> int:
        return self.cols

    def is_playable(self, r: int, c: int) -> bool:
        return self._cell(r, c).playable

    def has_marker(self, r: int, c: int) -> bool:
        return self._cell(r, c).marker is not None

    def marker_at(self, r: int, c: int) -> Optional[Marker]:
        return self._cell(r, c).marker

    def focus_at(self, r: int, c: int) -> FocusState:
        return self._cell(r, c).focus

    def can_move(self, src: CellPosition, dst: CellPosition) -> bool:
        """
        True iff the marker on `src` may step onto `dst`.
        Does not look at whose marker it is.
        """
        marker = self._cell(src.row, src.col).marker
        if not self.is_playable(dst.row, dst.col):
            return False
        if self.has_marker(dst.row, dst.col):
            return False
        if marker is None:
            return False
        if not is_strict_diagonal(src, dst):
            return False
        return marker.promoted or is_single_step(src, dst)

    def move_marker(self, src: CellPosition, dst: CellPosition) -> None:
        """
        Relocate whatever sits on `src` to `dst`, no questions asked.
        Callers check can_move (or their own policy) first.
        """
        old = self._cell(src.row, src.col)
        new = self._cell(dst.row, dst.col)
        old.focus = FocusState.UNFOCUSED
        new.marker = old.remove_marker()

    def focus(self, r: int, c: int) -> None:
        self._cell(r, c).focus = FocusState.FOCUSED

    def unfocus(self, r: int, c: int) -> None:
        self._cell(r, c).focus = FocusState.UNFOCUSED

    def prepare_to_move(self, r: int, c: int) -> None:
        self._cell(r, c).focus = FocusState.PENDING_MOVE

    def snapshot(self) -> Frame:
        return tuple(
            tuple(CellView(_glyph(cell.marker), cell.focus, cell.playable) for cell in row)
            for row in self.cells
        )

    def draw(self, painter: Optional[Painter] = None, status: str = "") -> None:
        if painter is None:
            from checkers.ui.render import render
            painter = render
        painter(self.snapshot(), status)
