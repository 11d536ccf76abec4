"""
board.py - Board representation and core placement mechanics for MultiCon

This module implements the Board class which holds the grid of tiles, answers
column queries, drops tiles into columns and detects winning lines around the
tile that was just placed.
"""

from typing import List, Optional, Tuple

import numpy as np

from multicon.debug import debug
from multicon.game.player import Player
from multicon.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, DIRECTION_VECTORS, EMPTY,
                            check_win_at_position, get_line_through, render_board_ascii)


class Board:
    """
    Represents a MultiCon game board.

    The grid is indexed [row, col] with row 0 at the top. A cell holds EMPTY
    or the 1-based code of the player occupying it; codes are handed out per
    distinct token, so occupants compare by token.
    """

    def __init__(self, win_length: int, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        """
        Initialize an empty board.

        Args:
            win_length: Amount of tiles needed in one line to win the game
            width: Number of columns
            height: Number of rows
        """
        debug.debug(f"Initializing {width}x{height} board, win length {win_length}", "board")
        self._win_length = win_length
        self.grid = np.zeros((height, width), dtype=int)
        self.last_move: Optional[Tuple[int, int]] = None
        self._occupants: List[Player] = []

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def win_length(self) -> int:
        return self._win_length

    def _code_for(self, player: Player) -> int:
        """Return the grid code for a player, registering its token on first use."""
        if player not in self._occupants:
            self._occupants.append(player)
        return self._occupants.index(player) + 1

    def is_valid_column_index(self, index: int) -> bool:
        """
        Check if the given column index is valid.

        Args:
            index: The column index to check

        Returns:
            True if the index is valid, False otherwise
        """
        return 0 <= index < self.width

    def is_column_full(self, index: int) -> bool:
        """
        Check if the given column is full. The index must be valid.

        Args:
            index: The column index

        Returns:
            True if the topmost cell of the column is occupied
        """
        if not self.is_valid_column_index(index):
            raise IndexError(f"Column {index} out of range 0..{self.width - 1}")
        return self.grid[0, index] != EMPTY

    def is_board_full(self) -> bool:
        """Check if every column is full."""
        return all(self.is_column_full(col) for col in range(self.width))

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns where a tile can still be placed.

        Returns:
            List of valid column indices
        """
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """Return the player occupying a cell, or None if it is empty."""
        value = self.grid[row, col]
        return None if value == EMPTY else self._occupants[value - 1]

    def place_tile(self, player: Player, column: int) -> bool:
        """
        Drop a tile into the given column. It lands on the lowest empty row.

        Args:
            player: The player who places the tile
            column: The column in which the tile should be placed

        Returns:
            True if the player won by placing the tile, False otherwise.
            A full column leaves the board unchanged and returns False.
        """
        if self.is_column_full(column):
            debug.warning(f"Ignoring placement by {player} in full column {column}", "board")
            return False

        # Lowest empty row: one above the top-most occupied cell
        occupied = np.flatnonzero(self.grid[:, column] != EMPTY)
        row = (occupied[0] if occupied.size else self.height) - 1

        debug.trace(f"Placing {player} at ({row}, {column})", "board")
        self.grid[row, column] = self._code_for(player)
        self.last_move = (int(row), column)

        debug.start_timer("win_check")
        won = check_win_at_position(self.grid, row, column, self._win_length)
        debug.end_timer("win_check", "board")

        if won:
            debug.debug(f"Winning line for {player} through {self.last_move}", "board")
        return won

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the positions of the winning line through the last placed tile.

        Returns:
            List of (row, col) positions forming the line, or an empty list if
            the last placement did not complete one
        """
        if self.last_move is None:
            return []

        row, col = self.last_move
        for direction in DIRECTION_VECTORS:
            positions = get_line_through(self.grid, row, col, direction)
            if len(positions) >= self._win_length:
                return sorted((int(r), int(c)) for r, c in positions)

        return []

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array of player codes.

        Returns:
            2D numpy array representing the board
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            One pipe-delimited line per row, top row first
        """
        return render_board_ascii(self.grid, [player.token for player in self._occupants])

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
