"""
Exceptions raised by the TicTacToe engine.
"""


class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class InvalidIndex(GameException, ValueError):
    """Raised when a cell index is out of range or the cell is occupied."""
    pass


class InvalidBoard(InvalidIndex):
    """Raised when a board description cannot be parsed."""
    pass


class UnknownDifficulty(GameException, ValueError):
    """Raised when a computer player is requested with an unknown level."""
    pass


class GameFinished(GameException):
    """Raised when a move is requested after the game has ended."""
    pass


class NoMovesAvailable(GameException):
    """Raised when a player is asked to move on a full board."""
    pass


class MarkMismatch(GameException, ValueError):
    """Raised when a player is seated on the side of the other mark."""
    pass
