"""
TicTacToe engine.
Handles the board, the rules, the game loop and the computer players.
"""

__version__ = "1.0.0"

from .board import Board, Mark
from .win_checker import GameOutcome, WinChecker
from .move_validator import MoveValidator, ValidationResult
from .player import Mover
from .ai_player import (
    AIPlayer, Difficulty, HeuristicAI, MinimaxAI, RandomAI, create_ai_player
)
from .game_loop import GameLoop, LoopState, Move
from .exceptions import (
    GameException, GameFinished, InvalidBoard, InvalidIndex,
    MarkMismatch, NoMovesAvailable, UnknownDifficulty
)
