"""
cli.py - Command-line interface for playing MultiCon

This module provides the interactive read-evaluate-print loop that drives a
MultiConGame: it shows the board, reads column choices and announces the end
of the game.
"""

from typing import Callable, Optional

from multicon.debug import debug
from multicon.game.rules import MultiConGame
from multicon.utils import QUIT_COMMAND

ERROR_MESSAGE_COLUMN_FULL = "ERROR: Selected column is full."
ERROR_MESSAGE_INVALID_INDEX = "ERROR: Invalid index."
OUTPUT_MOVE = "Move {move}, player {player}:"
OUTPUT_WINNER = "Winner: player {player}"
OUTPUT_DRAW = "Draw!"


def parse_column(command: str) -> Optional[int]:
    """Parse a column number. The line must be the bare number, without padding."""
    if command != command.strip():
        return None
    try:
        return int(command)
    except ValueError:
        return None


class MultiConCLI:
    """Text interface for a MultiCon game."""

    def __init__(self, game: MultiConGame,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """
        Initialize the CLI.

        Args:
            game: The game to be played
            input_func: Reads one line of user input (default: input)
            output_func: Writes one line of output (default: print)
        """
        self.game = game
        self._input = input_func or input
        self._output = output_func or print
        self.is_running = False

    def start(self) -> None:
        """Run the loop until the game ends or the user quits."""
        self.is_running = True
        self._output(self.game.get_board().render())

        while self.is_running:
            self.handle_move()

    def read_command(self) -> Optional[str]:
        """Prompt for the next move. Returns None at end of input."""
        self._output(OUTPUT_MOVE.format(move=self.game.get_next_move_number(),
                                        player=self.game.get_current_player_index() + 1))
        try:
            return self._input("")
        except EOFError:
            return None

    def handle_move(self) -> None:
        """Read one command and apply it to the game."""
        command = self.read_command()

        if command is None or command == QUIT_COMMAND:
            debug.info("Game quit by user", "cli")
            self.is_running = False
            return

        column = parse_column(command)
        if column is None:
            debug.debug(f"Rejected non-numeric input {command!r}", "cli")
            self._output(ERROR_MESSAGE_INVALID_INDEX)
            return

        # The interface is 1-indexed, the board 0-indexed
        index = column - 1

        board = self.game.get_board()
        if not board.is_valid_column_index(index):
            debug.debug(f"Rejected out-of-range column {index + 1}", "cli")
            self._output(ERROR_MESSAGE_INVALID_INDEX)
            return
        if board.is_column_full(index):
            debug.debug(f"Rejected full column {index + 1}", "cli")
            self._output(ERROR_MESSAGE_COLUMN_FULL)
            return

        self.game.place(index)
        self._output(board.render())

        if self.game.has_winner():
            self._output(OUTPUT_WINNER.format(player=self.game.get_winner() + 1))
            self.is_running = False
        elif self.game.is_draw():
            self._output(OUTPUT_DRAW)
            self.is_running = False
