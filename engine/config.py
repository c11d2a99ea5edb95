"""
Engine configuration for TicTacToe.
All the constants for the board, the scoring and the players.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board size is fixed: these values are not meant to be changed
    at runtime, the console program only overrides the think delay.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # Every line that wins the game, as index triples
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    # Characters used when a board is written as text
    EMPTY_SYMBOLS = ("_", ".", " ")
    EMPTY_SYMBOL = "_"

    # ==================== MINIMAX SCORES ====================
    # Absolute scores from the AI's point of view, no depth discount
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== PLAYER SETTINGS ====================
    HUMAN_TOKEN = "user"

    # Pause before a computer move so a human can follow the game
    THINK_DELAY_SECONDS = 1.5

    # ==================== LOGGING ====================
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
