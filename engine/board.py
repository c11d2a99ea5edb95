"""
Board model for TicTacToe.
Tracks the 9 cells and answers win / full questions about them.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .exceptions import InvalidBoard, InvalidIndex


class Mark(Enum):
    """The two marks a side can play with."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


Cell = Optional[Mark]


class Board:
    """
    The 3x3 TicTacToe board, stored as 9 cells indexed 0-8:

         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8

    None means empty, otherwise the Mark occupying the cell.
    """

    def __init__(self, cells: Optional[Iterable[Cell]] = None):
        """
        Create a board.

        Args:
            cells: Optional initial contents (9 values of None or Mark).
                   The board starts empty when omitted.
        """
        if cells is None:
            self._cells: List[Cell] = [None] * GameConfig.BOARD_CELLS
        else:
            self._cells = list(cells)
            if len(self._cells) != GameConfig.BOARD_CELLS:
                raise InvalidBoard(
                    f"A board has {GameConfig.BOARD_CELLS} cells, got {len(self._cells)}"
                )
            for cell in self._cells:
                if cell is not None and not isinstance(cell, Mark):
                    raise InvalidBoard(f"Invalid cell value: {cell!r}")

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from text such as "XX_OO____".

        Args:
            text: 9 characters, X / O for marks and _ . or space for empty cells.
                  Newlines and '|' separators are ignored.

        Returns:
            The new Board.
        """
        symbols = [ch for ch in text if ch not in "\n|"]
        if len(symbols) != GameConfig.BOARD_CELLS:
            raise InvalidBoard(f"Expected {GameConfig.BOARD_CELLS} cells in {text!r}")

        cells: List[Cell] = []
        for ch in symbols:
            if ch in GameConfig.EMPTY_SYMBOLS:
                cells.append(None)
            elif ch.upper() in ("X", "O"):
                cells.append(Mark(ch.upper()))
            else:
                raise InvalidBoard(f"Unknown cell symbol {ch!r} in {text!r}")
        return cls(cells)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Read-only snapshot of the cells."""
        return tuple(self._cells)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndex(f"Cell index must be an integer, got {index!r}")
        if not 0 <= index < GameConfig.BOARD_CELLS:
            raise InvalidIndex(
                f"Invalid cell {index}. Must be 0-{GameConfig.BOARD_CELLS - 1}."
            )

    def get(self, index: int) -> Cell:
        """Get the mark at a cell (None if empty)."""
        self._check_index(index)
        return self._cells[index]

    def is_empty(self, index: int) -> bool:
        """True if the cell holds no mark."""
        self._check_index(index)
        return self._cells[index] is None

    def place(self, index: int, mark: Mark) -> None:
        """
        Place a mark on an empty cell.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Raises:
            InvalidIndex: if the index is out of range or the cell is occupied.
                          The board is left untouched.
        """
        self._check_index(index)
        if self._cells[index] is not None:
            raise InvalidIndex(
                f"Cell {index} is already occupied by {self._cells[index]}"
            )
        self._cells[index] = mark

    def clear(self, index: int) -> None:
        """Remove the mark from a cell. Used to undo a hypothetical move."""
        self._check_index(index)
        if self._cells[index] is None:
            raise InvalidIndex(f"Cell {index} is already empty")
        self._cells[index] = None

    def empty_indexes(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indexes in ascending order.
        """
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def winner(self, mark: Mark) -> bool:
        """True if `mark` fully occupies one of the 8 winning lines."""
        cells = self._cells
        for a, b, c in GameConfig.WINNING_LINES:
            if cells[a] is mark and cells[b] is mark and cells[c] is mark:
                return True
        return False

    def is_full(self) -> bool:
        """True if no empty cells remain."""
        return None not in self._cells

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return "".join(
            GameConfig.EMPTY_SYMBOL if cell is None else cell.value
            for cell in self._cells
        )

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"
