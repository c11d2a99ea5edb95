"""
Console program for TicTacToe.

This script ties together:
- Commands (start / exit)
- Players (humans at the keyboard, AI at three difficulty levels)
- The game loop and the board renderer

Run this script to play TicTacToe in the terminal:

    Input command: start user hard
"""

import logging
import random
import time
from typing import Callable, List, Optional

from console.commands import BadCommand, Command, CommandType, parse_command
from console.human import HumanPlayer
from console.renderer import render_board
from engine.ai_player import AIPlayer, create_ai_player
from engine.board import Board, Mark
from engine.config import GameConfig
from engine.exceptions import UnknownDifficulty
from engine.game_loop import GameLoop, Move
from engine.player import Mover
from engine.win_checker import GameOutcome

logger = logging.getLogger(__name__)


class TicTacToeConsole:
    """
    Main controller for a console session.

    Session flow:
    1. Read a command ("start <X> <O>" or "exit")
    2. Build the two players
    3. Play the game, drawing the board after every move
    4. Print the result and go back to step 1
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        think_delay: float = GameConfig.THINK_DELAY_SECONDS,
        rng: Optional[random.Random] = None,
        sleep_fn: Callable[[float], None] = time.sleep
    ):
        """
        Args:
            input_fn: Reads one line given a prompt (default: input).
            output_fn: Shows a line of text (default: print).
            think_delay: Seconds to wait before each computer move.
            rng: Random source shared by the computer players.
            sleep_fn: Used for the think delay (tests pass a no-op).
        """
        self.input_fn = input_fn if input_fn is not None else input
        self.output_fn = output_fn if output_fn is not None else print
        self.think_delay = think_delay
        self.rng = rng if rng is not None else random.Random()
        self.sleep_fn = sleep_fn

    def run(self) -> None:
        """Read and run commands until "exit" or end of input."""
        try:
            while self.run_command(self.input_fn("Input command: ")):
                pass
        except EOFError:
            logger.info("Input closed, ending session")

    def run_command(self, line: str) -> bool:
        """
        Run one command.

        Returns:
            False when the session should end (exit, or input closed
            during a game).
        """
        try:
            command = parse_command(line)
        except BadCommand as e:
            self.output_fn(str(e))
            return True

        if command.type == CommandType.EXIT:
            return False

        try:
            self.play_game(command)
        except UnknownDifficulty as e:
            self.output_fn(str(e))
        except EOFError:
            logger.info("Input closed during a game, ending session")
            return False
        return True

    def create_mover(self, token: str, mark: Mark) -> Mover:
        """
        Build the player for a command token.

        Raises:
            UnknownDifficulty: if the token is neither "user" nor a level.
        """
        if token == GameConfig.HUMAN_TOKEN:
            return HumanPlayer(mark, input_fn=self.input_fn, output_fn=self.output_fn)
        return create_ai_player(token, mark, self.rng)

    def play_game(self, command: Command) -> GameOutcome:
        """
        Play one game from a start command.

        Returns:
            The final outcome.
        """
        mover_x = self.create_mover(command.player_x, Mark.X)
        mover_o = self.create_mover(command.player_o, Mark.O)
        logger.info("Starting game: X=%r O=%r", mover_x, mover_o)

        game = GameLoop(mover_x, mover_o, on_move=self._on_move)

        # Start by printing an empty field
        self.output_fn(render_board(game.board))

        while not game.is_finished:
            mover = game.current_mover
            if isinstance(mover, AIPlayer):
                self.output_fn(
                    f"Making move level {mover.difficulty.value} (as {mover.mark})."
                )
                if self.think_delay > 0:
                    self.sleep_fn(self.think_delay)
            game.step()

        self.output_fn(game.outcome.value)
        return game.outcome

    def _on_move(self, board: Board, move: Move) -> None:
        self.output_fn(render_board(board))


def main(argv: Optional[List[str]] = None):
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv).
    """
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe in the terminal")
    parser.add_argument(
        "--think-delay",
        type=float,
        default=GameConfig.THINK_DELAY_SECONDS,
        help="Seconds the computer waits before moving (default: %(default)s)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer players' random moves"
    )
    parser.add_argument(
        "--command",
        default=None,
        help='Run a single command (e.g. "start easy hard") and exit'
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine details (AI search statistics, moves)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=GameConfig.LOG_FORMAT
    )

    session = TicTacToeConsole(
        think_delay=args.think_delay,
        rng=random.Random(args.seed)
    )

    try:
        if args.command is not None:
            session.run_command(args.command)
        else:
            session.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
