from __future__ import annotations
import logging
from typing import Callable, Optional

from checkers import config
from checkers.core.board import Board, Painter
from checkers.game.actions import Action, action_from_key, step_cursor
from checkers.game.results import TurnResult
from checkers.game.state import GameState, WaitingForMarkerSelection, WaitingForMoveTarget
from checkers.types import CellPosition

logger = logging.getLogger(__name__)

KeyReader = Callable[[], int]


def _status(state: GameState) -> str:
    sel = state.selected
    if sel is None:
        return "Pick a marker."
    return f"Marker at ({sel.row}, {sel.col}) picked. Choose an empty dark square."


class GameLoop:
    """
    Turn-driven cursor/selection state machine over a Board.

    Each turn reads one key, updates cursor, selection and board, then
    repaints. The loop never exits the process itself; it reports
    TurnResult.EXIT and leaves that to the caller.
    """

    def __init__(
        self,
        read_key: KeyReader,
        painter: Optional[Painter] = None,
        board: Optional[Board] = None,
        enforce_diagonal: Optional[bool] = None,
    ) -> None:
        board = board if board is not None else Board()
        cursor = CellPosition(board.get_n_row() - 1, 0)

        self.state = GameState(board=board, cursor=cursor)
        if enforce_diagonal is None:
            enforce_diagonal = config.ENFORCE_DIAGONAL_MOVES
        self.enforce_diagonal = enforce_diagonal
        self._read_key = read_key
        self._painter = painter

        board.focus(cursor.row, cursor.col)
        self.redraw()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def cursor(self) -> CellPosition:
        return self.state.cursor

    def redraw(self) -> None:
        self.board.draw(self._painter, _status(self.state))

    def next_turn(self) -> TurnResult:
        code = self._read_key()
        return self.apply(action_from_key(code))

    def apply(self, action: Action) -> TurnResult:
        state = self.state
        board = state.board
        old = state.cursor
        new = step_cursor(old, action, board.get_n_row(), board.get_n_col())

        if action is Action.EXIT:
            return TurnResult.EXIT

        if action is Action.ENTER:
            self._handle_enter(old)

        board.unfocus(old.row, old.col)
        if state.selected is not None:
            board.prepare_to_move(state.selected.row, state.selected.col)
        board.focus(new.row, new.col)

        state.cursor = new
        self.redraw()

        if action is Action.INVALID:
            return TurnResult.IGNORED
        return TurnResult.CONTINUE

    def _handle_enter(self, at: CellPosition) -> None:
        state = self.state
        board = state.board
        phase = state.phase

        if isinstance(phase, WaitingForMarkerSelection):
            if board.has_marker(at.row, at.col):
                state.phase = WaitingForMoveTarget(selected=at)
                logger.debug("Selected marker at %s", at)
            return

        if isinstance(phase, WaitingForMoveTarget):
            target_ok = board.is_playable(at.row, at.col) and not board.has_marker(at.row, at.col)
            if target_ok and self.enforce_diagonal:
                target_ok = board.can_move(phase.selected, at)

            if not target_ok:
                logger.debug("Rejected move %s -> %s", phase.selected, at)
                return

            board.move_marker(phase.selected, at)
            state.phase = WaitingForMarkerSelection()
            logger.debug("Moved marker %s -> %s", phase.selected, at)


def run_game(read_key: KeyReader, painter: Optional[Painter] = None) -> int:
    game = GameLoop(read_key, painter)

    while True:
        if game.next_turn() is TurnResult.EXIT:
            logger.info("Exit requested.")
            return 0
