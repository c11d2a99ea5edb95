"""
AI players for TicTacToe.
Three difficulty levels: random moves, one-move win/block lookahead,
and the full Minimax search.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .board import Board, Mark
from .config import GameConfig
from .exceptions import NoMovesAvailable, UnknownDifficulty
from .player import Mover

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"      # Random moves
    MEDIUM = "medium"  # Win if possible, else block, else random
    HARD = "hard"      # Full minimax

    @classmethod
    def tokens(cls) -> Tuple[str, ...]:
        """All difficulty tokens, in increasing strength."""
        return tuple(level.value for level in cls)

    @classmethod
    def from_token(cls, token: str) -> "Difficulty":
        """
        Look up a difficulty by its command-line token.

        Raises:
            UnknownDifficulty: if the token is not a known level.
        """
        try:
            return cls(token.strip().lower())
        except (ValueError, AttributeError):
            raise UnknownDifficulty(
                f"Unknown difficulty {token!r}. "
                f"Choose one of: {', '.join(cls.tokens())}"
            ) from None


# For every cell, the winning lines that go through it
LINES_THROUGH_CELL: Dict[int, List[Tuple[int, int, int]]] = {
    index: [line for line in GameConfig.WINNING_LINES if index in line]
    for index in range(GameConfig.BOARD_CELLS)
}


class AIPlayer(Mover):
    """Base class for the computer players."""

    difficulty: Difficulty

    def __init__(self, mark: Mark, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays.
            rng: Random source, injectable so games can be replayed.
        """
        super().__init__(mark)
        self.rng = rng if rng is not None else random.Random()

    def _empty_or_raise(self, board: Board) -> List[int]:
        empty = board.empty_indexes()
        if not empty:
            raise NoMovesAvailable(f"{self.mark} was asked to move on a full board")
        return empty

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mark={self.mark.value})"


class RandomAI(AIPlayer):
    """
    Easy level: picks any empty cell, uniformly at random.
    """

    difficulty = Difficulty.EASY

    def choose_move(self, board: Board) -> int:
        move = self.rng.choice(self._empty_or_raise(board))
        logger.debug("%r picked random cell %d", self, move)
        return move


class HeuristicAI(RandomAI):
    """
    Medium level: looks one move ahead.

    1. If it can complete a line, it does (and wins).
    2. Otherwise, if the opponent could complete a line next turn, it blocks.
    3. Otherwise it plays a random move.

    Forks and anything deeper go unnoticed, so it can be beaten.
    """

    difficulty = Difficulty.MEDIUM

    def choose_move(self, board: Board) -> int:
        self._empty_or_raise(board)

        winning = self.find_completing_move(board, self.mark)
        if winning is not None:
            logger.debug("%r takes the win at %d", self, winning)
            return winning

        blocking = self.find_completing_move(board, self.opponent)
        if blocking is not None:
            logger.debug("%r blocks at %d", self, blocking)
            return blocking

        return super().choose_move(board)

    @staticmethod
    def find_completing_move(board: Board, mark: Mark) -> Optional[int]:
        """
        Find an empty cell that would complete a line for `mark`.

        Args:
            board: Current board.
            mark: Whose line to complete.

        Returns:
            The lowest such cell index, or None.
        """
        cells = board.cells
        for index in board.empty_indexes():
            for line in LINES_THROUGH_CELL[index]:
                if all(cells[other] is mark for other in line if other != index):
                    return index
        return None


class MinimaxAI(AIPlayer):
    """
    Hard level: plays TicTacToe using the Minimax algorithm.

    Every continuation is explored to the end of the game, assuming the
    opponent also plays perfectly. The AI never loses: it wins when the
    opponent makes a mistake and draws otherwise.

    Scores are absolute (+10 win, -10 loss, 0 draw) with no depth
    discount, so a quick win is not preferred over a slow one. Among
    equally good moves the lowest cell index is chosen.
    """

    difficulty = Difficulty.HARD

    def __init__(self, mark: Mark, rng: Optional[random.Random] = None):
        super().__init__(mark, rng)

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def choose_move(self, board: Board) -> int:
        return self.get_best_move(board)

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        The board is explored in place and restored before returning.

        Args:
            board: Current board, with `self.mark` to move.

        Returns:
            Index of the best move.
        """
        self.moves_evaluated = 0
        valid_moves = self._empty_or_raise(board)

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            # Try this move
            board.place(index, self.mark)
            try:
                score = self._minimax(board, self.opponent)
            finally:
                board.clear(index)

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "%r evaluated %d positions. Best move: %d (score: %s)",
            self, self.moves_evaluated, best_move, best_score
        )
        return best_move

    def _minimax(self, board: Board, to_move: Mark) -> int:
        """
        Score a position by playing out every continuation.

        Args:
            board: Position to evaluate. Mutated during the search and
                   restored before returning.
            to_move: The mark whose turn it is in this position.

        Returns:
            The score of the position for `self.mark`.
        """
        self.moves_evaluated += 1

        # Check terminal states
        if board.winner(self.mark):
            return GameConfig.WIN_SCORE
        if board.winner(self.opponent):
            return GameConfig.LOSS_SCORE

        valid_moves = board.empty_indexes()
        if not valid_moves:
            return GameConfig.DRAW_SCORE

        maximizing = to_move == self.mark
        best_score = float('-inf') if maximizing else float('inf')

        for index in valid_moves:
            board.place(index, to_move)
            try:
                score = self._minimax(board, to_move.opposite())
            finally:
                board.clear(index)

            if maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)

        return best_score

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        if board.is_full():
            return "No moves available!"

        return f"Place {self.mark} at cell {self.get_best_move(board)}"


AI_PLAYERS = {
    Difficulty.EASY: RandomAI,
    Difficulty.MEDIUM: HeuristicAI,
    Difficulty.HARD: MinimaxAI,
}


def create_ai_player(
    difficulty: Union[Difficulty, str],
    mark: Mark,
    rng: Optional[random.Random] = None
) -> AIPlayer:
    """
    Build the computer player for a difficulty level.

    Args:
        difficulty: A Difficulty or its token ("easy", "medium", "hard").
        mark: The mark the player will use.
        rng: Optional random source.

    Raises:
        UnknownDifficulty: for an unrecognized level.
    """
    if not isinstance(difficulty, Difficulty):
        difficulty = Difficulty.from_token(difficulty)
    return AI_PLAYERS[difficulty](mark, rng)
