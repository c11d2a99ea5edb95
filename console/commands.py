"""
Parsing of the console commands:

    start <player X> <player O>   where a player is "user", "easy", "medium" or "hard"
    exit
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from engine.ai_player import Difficulty
from engine.config import GameConfig

BAD_PARAMETERS = "Bad parameters!"


class BadCommand(ValueError):
    """Raised when a console command can't be understood."""
    pass


class CommandType(Enum):
    START = "start"
    EXIT = "exit"


@dataclass
class Command:
    """A parsed console command."""
    type: CommandType
    player_x: Optional[str] = None
    player_o: Optional[str] = None


def is_valid_player_type(token: str) -> bool:
    return token == GameConfig.HUMAN_TOKEN or token in Difficulty.tokens()


def parse_command(line: str) -> Command:
    """
    Parse one line typed at the "Input command" prompt.

    Raises:
        BadCommand: if the line is not a valid command.
    """
    words = line.split()

    if words and words[0] == CommandType.EXIT.value:
        return Command(CommandType.EXIT)

    if (len(words) != 3 or words[0] != CommandType.START.value or
            not is_valid_player_type(words[1]) or
            not is_valid_player_type(words[2])):
        raise BadCommand(BAD_PARAMETERS)

    return Command(CommandType.START, player_x=words[1], player_o=words[2])
