"""
Move validator for TicTacToe.
Validates that a requested cell can be played.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The move must be a number
    2. The number must be a cell index (0-8)
    3. The cell must be empty
    """

    NOT_A_NUMBER = "You should enter numbers!"
    OUT_OF_RANGE = f"Index should be from 0 to {GameConfig.BOARD_CELLS - 1} (inclusive)."
    OCCUPIED = "This cell is occupied! Choose another one!"

    def validate_index(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a mark on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not 0 <= index < GameConfig.BOARD_CELLS:
            return ValidationResult(is_valid=False, error_message=self.OUT_OF_RANGE)

        if not board.is_empty(index):
            return ValidationResult(is_valid=False, error_message=self.OCCUPIED)

        return ValidationResult(is_valid=True, index=index)

    def validate_text(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a move typed by a player.

        Args:
            board: Current board.
            text: Raw input, e.g. "4".

        Returns:
            ValidationResult; `index` is set when the move is valid.
        """
        try:
            index = int(text.strip())
        except ValueError:
            return ValidationResult(is_valid=False, error_message=self.NOT_A_NUMBER)

        return self.validate_index(board, index)
