from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union

from checkers.core.board import Board
from checkers.types import CellPosition


@dataclass(frozen=True, slots=True)
class WaitingForMarkerSelection:
    pass


@dataclass(frozen=True, slots=True)
class WaitingForMoveTarget:
    selected: CellPosition


Phase = Union[WaitingForMarkerSelection, WaitingForMoveTarget]


@dataclass(slots=True)
class GameState:
    board: Board
    cursor: CellPosition
    phase: Phase = field(default_factory=WaitingForMarkerSelection)

    @property
    def selected(self) -> Optional[CellPosition]:
        if isinstance(self.phase, WaitingForMoveTarget):
            return self.phase.selected
        return None
