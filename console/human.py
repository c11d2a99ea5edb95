"""
Human player for the console.
Reads moves from the keyboard and keeps asking until one is legal.
"""

from typing import Callable, Optional

from engine.ai_player import MinimaxAI
from engine.board import Board, Mark
from engine.move_validator import MoveValidator
from engine.player import Mover

HINT_COMMAND = "hint"


class HumanPlayer(Mover):
    """
    A person typing cell indexes (0-8).

    Typing "hint" asks a MinimaxAI for the best move instead.
    """

    def __init__(
        self,
        mark: Mark,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        advisor: Optional[MinimaxAI] = None
    ):
        """
        Args:
            mark: The human's mark.
            input_fn: Reads one line given a prompt (default: input).
            output_fn: Shows a message (default: print).
            advisor: AI used for hints; one is created when omitted.
        """
        super().__init__(mark)
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.validator = MoveValidator()
        self.advisor = advisor if advisor is not None else MinimaxAI(mark)

    def choose_move(self, board: Board) -> int:
        prompt = f"Make a move (You are {self.mark}): "

        while True:
            text = self.input_fn(prompt)

            if text.strip().lower() == HINT_COMMAND:
                self.output_fn(self.advisor.get_move_suggestion(board))
                continue

            result = self.validator.validate_text(board, text)
            if result.is_valid:
                return result.index

            self.output_fn(result.error_message)

    def __repr__(self) -> str:
        return f"HumanPlayer(mark={self.mark.value})"
