"""
Common interface for everything that can take a turn.
"""

from abc import ABC, abstractmethod

from .board import Board, Mark


class Mover(ABC):
    """
    A side of the game: a human or a computer player.

    The game loop only ever calls `choose_move`, it never needs to know
    which kind of player it is talking to.
    """

    def __init__(self, mark: Mark):
        self.mark = mark

    @property
    def opponent(self) -> Mark:
        return self.mark.opposite()

    @abstractmethod
    def choose_move(self, board: Board) -> int:
        """
        Pick the cell to play next.

        Args:
            board: Current board. Implementations may explore it but must
                   leave it exactly as they found it.

        Returns:
            Index (0-8) of an empty cell.
        """
