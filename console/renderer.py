"""
Text rendering of the board for the console.
"""

from engine.board import Board
from engine.config import GameConfig

BORDER = "---------"


def render_board(board: Board) -> str:
    """
    Draw the board as text:

        ---------
        | X O _ |
        | _ X _ |
        | _ _ O |
        ---------
    """
    size = GameConfig.BOARD_SIZE
    cells = [
        GameConfig.EMPTY_SYMBOL if cell is None else cell.value
        for cell in board.cells
    ]

    lines = [BORDER]
    for row in range(size):
        lines.append("| " + " ".join(cells[row * size:(row + 1) * size]) + " |")
    lines.append(BORDER)
    return "\n".join(lines)
