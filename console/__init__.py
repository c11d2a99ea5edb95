"""
Console module for TicTacToe.
Keyboard input, board drawing and command parsing.
"""

from .human import HumanPlayer
from .renderer import render_board
from .commands import BadCommand, Command, CommandType, parse_command
