"""
Game loop for TicTacToe.
Alternates the two sides, applies their moves and tracks the result.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .board import Board, Mark
from .config import GameConfig
from .exceptions import GameFinished, InvalidIndex, MarkMismatch
from .player import Mover
from .win_checker import GameOutcome, WinChecker

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Where the game loop is."""
    AWAITING_X = "awaiting_x"
    AWAITING_O = "awaiting_o"
    FINISHED = "finished"


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Ply number, starting at 1


MoveCallback = Callable[[Board, Move], None]


class GameLoop:
    """
    Runs one game between two movers.

    X always moves first. After every move the outcome is recomputed; once
    a side wins or the board fills up the loop is finished and refuses to
    ask for more moves.
    """

    def __init__(
        self,
        mover_x: Mover,
        mover_o: Mover,
        on_move: Optional[MoveCallback] = None
    ):
        """
        Args:
            mover_x: The side playing X (moves first).
            mover_o: The side playing O.
            on_move: Called with (board, move) after every applied move.
        """
        if mover_x.mark != Mark.X or mover_o.mark != Mark.O:
            raise MarkMismatch(
                f"mover_x must play X and mover_o must play O, "
                f"got {mover_x.mark} and {mover_o.mark}"
            )

        self.board = Board()
        self.movers = {Mark.X: mover_x, Mark.O: mover_o}
        self.on_move = on_move
        self.win_checker = WinChecker()

        self.state = LoopState.AWAITING_X
        self.outcome = GameOutcome.IN_PROGRESS
        self.moves: List[Move] = []

        # Counted down on every move so a draw is known without a board scan
        self.empty_cells = GameConfig.BOARD_CELLS

    @property
    def is_finished(self) -> bool:
        return self.state == LoopState.FINISHED

    @property
    def current_mark(self) -> Optional[Mark]:
        """Mark of the side to move, or None once finished."""
        if self.state == LoopState.AWAITING_X:
            return Mark.X
        if self.state == LoopState.AWAITING_O:
            return Mark.O
        return None

    @property
    def current_mover(self) -> Optional[Mover]:
        mark = self.current_mark
        return self.movers[mark] if mark is not None else None

    def step(self) -> Move:
        """
        Play one move.

        Returns:
            The Move that was applied.

        Raises:
            GameFinished: if the game is already over.
            InvalidIndex: if the mover returned an illegal cell. Nothing is
                          applied and the same side is still to move.
        """
        if self.is_finished:
            raise GameFinished(f"Game is already over: {self.outcome.value}")

        mark = self.current_mark
        index = self.movers[mark].choose_move(self.board)

        try:
            self.board.place(index, mark)
        except InvalidIndex:
            logger.error("%s returned illegal move %r", mark, index)
            raise

        self.empty_cells -= 1
        move = Move(mark=mark, index=index, move_number=len(self.moves) + 1)
        self.moves.append(move)
        logger.info("Move %d: %s plays cell %d", move.move_number, mark, index)

        self._update_outcome(mark)

        if self.on_move is not None:
            self.on_move(self.board, move)

        return move

    def _update_outcome(self, mark: Mark) -> None:
        # Only the side that just moved can have completed a line
        if self.board.winner(mark):
            self.outcome = GameOutcome.win_for(mark)
        elif self.empty_cells == 0:
            self.outcome = GameOutcome.DRAW
        else:
            self.outcome = GameOutcome.IN_PROGRESS

        if self.outcome.is_terminal:
            self.state = LoopState.FINISHED
            logger.info("Game over after %d moves: %s", len(self.moves), self.outcome.value)
        elif mark == Mark.X:
            self.state = LoopState.AWAITING_O
        else:
            self.state = LoopState.AWAITING_X

    def play(self) -> GameOutcome:
        """
        Play until someone wins or the board is full.

        Returns:
            The final outcome.
        """
        while not self.is_finished:
            self.step()
        return self.outcome

    def get_winning_line(self):
        """The completed line of the winner, if any."""
        return self.win_checker.get_winning_line(self.board)
