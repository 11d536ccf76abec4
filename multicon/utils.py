"""
utils.py - Constants and helper functions for the MultiCon implementation

This module provides common constants, enumerations, and helper functions
used throughout the MultiCon game: board defaults, the win-length rule,
the four-direction line scan and ASCII rendering of a grid.
"""

import math
from enum import Enum, auto
from typing import Dict, List, Sequence, Tuple

import numpy as np

# Board constants
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
EMPTY = 0  # Grid value of an unoccupied cell

# Win-length rule: min(MAX_WIN_LENGTH, ceil(WIN_CONDITION_DIVISOR / players))
MAX_WIN_LENGTH = 4
WIN_CONDITION_DIVISOR = 9.0

# Player constants
MIN_PLAYERS = 2
MAX_PLAYERS = 6
DEFAULT_TOKENS = ('x', 'o')

# Rendering
EMPTY_FIELD = " "
COLUMN_DELIMITER = "|"

QUIT_COMMAND = "quit"


class Direction(Enum):
    """Line directions scanned for a win."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_DOWN = auto()  # "\" from top-left to bottom-right
    DIAGONAL_UP = auto()  # "/" from bottom-left to top-right


# Direction vectors (row, col); each is also walked negated
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.VERTICAL: (1, 0),
    Direction.HORIZONTAL: (0, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def get_winning_line_length(player_count: int) -> int:
    """
    Calculate the winning line length for the given number of players.

    The line shrinks as more players share the board and is capped at
    MAX_WIN_LENGTH.

    Args:
        player_count: Number of players in the game

    Returns:
        Number of contiguous tiles needed to win
    """
    return int(min(MAX_WIN_LENGTH, math.ceil(WIN_CONDITION_DIVISOR / player_count)))


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if a position is within the grid boundaries.

    Args:
        grid: The board grid
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    height, width = grid.shape
    return 0 <= row < height and 0 <= col < width


def get_line_through(grid: np.ndarray, row: int, col: int,
                     direction: Direction) -> List[Tuple[int, int]]:
    """
    Collect the contiguous run of same-valued cells through a position.

    Walks from (row, col) in both opposite senses of the direction and stops
    at the first cell that differs or at the board edge.

    Args:
        grid: The board grid
        row: Row index of the starting cell
        col: Column index of the starting cell
        direction: Line direction to walk

    Returns:
        List of (row, col) positions of the run, starting cell first
    """
    value = grid[row, col]
    dr, dc = DIRECTION_VECTORS[direction]
    positions = [(row, col)]

    # Positive direction
    r, c = row + dr, col + dc
    while is_valid_position(grid, r, c) and grid[r, c] == value:
        positions.append((r, c))
        r += dr
        c += dc

    # Negative direction
    r, c = row - dr, col - dc
    while is_valid_position(grid, r, c) and grid[r, c] == value:
        positions.append((r, c))
        r -= dr
        c -= dc

    return positions


def count_line(grid: np.ndarray, row: int, col: int, direction: Direction) -> int:
    """Count the contiguous run through (row, col), the cell itself included."""
    return len(get_line_through(grid, row, col, direction))


def check_win_at_position(grid: np.ndarray, row: int, col: int, win_length: int) -> bool:
    """
    Check if the tile at the given position completes a winning line.

    Args:
        grid: The board grid
        row: Row index where the tile was placed
        col: Column index where the tile was placed
        win_length: Number of contiguous tiles needed to win

    Returns:
        True if any of the four directions reaches win_length, False otherwise
    """
    if grid[row, col] == EMPTY:
        return False

    return any(count_line(grid, row, col, direction) >= win_length
               for direction in DIRECTION_VECTORS)


def render_board_ascii(grid: np.ndarray, tokens: Sequence[str]) -> str:
    """
    Render the grid as pipe-delimited rows, top row first.

    Args:
        grid: The board grid
        tokens: Display tokens, where tokens[code - 1] renders cell value code

    Returns:
        ASCII representation of the board
    """
    lines = []
    for row in grid:
        cells = [EMPTY_FIELD if value == EMPTY else tokens[value - 1] for value in row]
        lines.append(COLUMN_DELIMITER + COLUMN_DELIMITER.join(cells) + COLUMN_DELIMITER)
    return "\n".join(lines)
