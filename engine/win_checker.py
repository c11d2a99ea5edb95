"""
Win checker for TicTacToe.
Works out whether a board is won, drawn or still in play.
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Mark
from .config import GameConfig


class GameOutcome(Enum):
    """Result of a game, with the message shown to the players."""
    IN_PROGRESS = "Game not finished"
    DRAW = "Draw"
    X_WINS = "X wins"
    O_WINS = "O wins"

    @property
    def is_terminal(self) -> bool:
        return self is not GameOutcome.IN_PROGRESS

    @classmethod
    def win_for(cls, mark: Mark) -> "GameOutcome":
        """The outcome in which `mark` has won."""
        return cls.X_WINS if mark == Mark.X else cls.O_WINS


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        # X is checked first, matching the order results are reported in
        for mark in (Mark.X, Mark.O):
            if board.winner(mark):
                return mark
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        return board.is_full() and self.check_winner(board) is None

    def check_outcome(self, board: Board) -> GameOutcome:
        """
        Compute the outcome of a board.

        Args:
            board: The board to inspect.

        Returns:
            The GameOutcome. Pure function of the board contents.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return GameOutcome.win_for(winner)
        if board.is_full():
            return GameOutcome.DRAW
        return GameOutcome.IN_PROGRESS

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as an index triple, or None.
        """
        cells = board.cells
        for line in GameConfig.WINNING_LINES:
            a, b, c = line
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return line
        return None
