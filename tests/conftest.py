import random
from typing import Iterable, List

import pytest

from engine.board import Board, Mark
from engine.player import Mover


class ScriptedMover(Mover):
    """Plays a fixed list of cells, in order."""

    def __init__(self, mark: Mark, moves: Iterable[int]):
        super().__init__(mark)
        self.moves: List[int] = list(moves)
        self.boards_seen: List[str] = []

    def choose_move(self, board: Board) -> int:
        self.boards_seen.append(str(board))
        return self.moves.pop(0)


class ScriptedInput:
    """Stands in for input(): returns queued lines, then raises EOFError."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def output():
    """Collects everything a component prints."""
    lines: List[str] = []
    return lines
