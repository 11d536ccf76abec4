"""
rules.py - Game state management and Gymnasium environment for MultiCon

This module provides:
1. Game state management for an N-player MultiCon game (turns, winner, draw)
2. A gymnasium-compatible environment wrapping that game
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from multicon.debug import debug
from multicon.game.board import Board
from multicon.game.player import DEFAULT_PLAYERS, Player
from multicon.utils import MIN_PLAYERS, get_winning_line_length


class GamePhase(Enum):
    """Logical phase of a game."""
    IN_PROGRESS = auto()
    ENDED = auto()


class NoWinnerError(RuntimeError):
    """Raised when the winner is requested although nobody has won."""


class MultiConGame:
    """
    Turn management for a MultiCon game.

    Owns the board and the ordered players, rotates turns and records the
    first winner. All spatial logic is delegated to the Board.
    """

    def __init__(self, players: Sequence[Player]):
        """
        Initialize a new game.

        Args:
            players: Ordered players, at least two, with unique tokens
        """
        if len(players) < MIN_PLAYERS:
            raise ValueError(f"A game needs at least {MIN_PLAYERS} players, got {len(players)}")
        if len(set(players)) != len(players):
            raise ValueError("Players must have unique tokens")

        self._players: Tuple[Player, ...] = tuple(players)
        self._board = Board(get_winning_line_length(len(self._players)))
        self._current_player_index = 0
        self._winner: Optional[int] = None
        self._move_count = 0
        debug.debug(f"Initializing game for {len(self._players)} players, "
                    f"win length {self._board.win_length}", "game")

    @property
    def win_length(self) -> int:
        return self._board.win_length

    def get_players(self) -> Tuple[Player, ...]:
        return self._players

    def get_board(self) -> Board:
        return self._board

    def get_current_player_index(self) -> int:
        return self._current_player_index

    def get_current_player(self) -> Player:
        return self._players[self._current_player_index]

    def get_next_move_number(self) -> int:
        """Return the 1-based number of the move about to be made."""
        return self._move_count + 1

    def place(self, column_index: int) -> None:
        """
        Place the current player's tile and advance to the next player.

        The column must be valid and not full; callers check this first.

        Args:
            column_index: The column in which the tile should be placed
        """
        player = self.get_current_player()
        debug.debug(f"Move {self.get_next_move_number()}: {player} plays column {column_index}", "game")

        has_won = self._board.place_tile(player, column_index)
        if has_won and self._winner is None:
            self._winner = self._current_player_index
            debug.info(f"Player {self._winner + 1} ({player}) wins on move "
                       f"{self.get_next_move_number()}", "game")

        self._current_player_index = (self._current_player_index + 1) % len(self._players)
        self._move_count += 1

        if self.is_draw():
            debug.info(f"Game ends in a draw after {self._move_count} moves", "game")

    def has_winner(self) -> bool:
        return self._winner is not None

    def get_winner(self) -> int:
        """
        Get the index of the winning player.

        Raises:
            NoWinnerError: If no player has won
        """
        if self._winner is None:
            raise NoWinnerError("Winner was requested although there is no winner.")
        return self._winner

    def is_draw(self) -> bool:
        """The board is full and nobody has won."""
        return self._board.is_board_full() and not self.has_winner()

    def is_game_over(self) -> bool:
        return self.has_winner() or self.is_draw()

    @property
    def phase(self) -> GamePhase:
        return GamePhase.ENDED if self.is_game_over() else GamePhase.IN_PROGRESS


class MultiConEnv(gym.Env):
    """
    MultiCon environment following the Gymnasium interface.

    Every step plays one move for whoever's turn it is; rewards are from the
    point of view of the player who moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, players: Optional[Sequence[Player]] = None,
                 render_mode: Optional[str] = None):
        """
        Initialize the MultiCon environment.

        Args:
            players: Ordered players, defaults to the two default players
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing MultiConEnv", "env")
        self.players = tuple(players) if players else DEFAULT_PLAYERS
        self.render_mode = render_mode
        self.game = MultiConGame(self.players)

        board = self.game.get_board()
        self.action_space = spaces.Discrete(board.width)
        # Observation: player codes 0 (empty) .. player count
        self.observation_space = spaces.Box(
            low=0, high=len(self.players), shape=(board.height, board.width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to a fresh game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game = MultiConGame(self.players)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the current player's tile in the given column.

        Args:
            action: Column to place a tile (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        action = int(action)
        board = self.game.get_board()

        if self.game.is_game_over() or not board.is_valid_column_index(action) \
                or board.is_column_full(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.game.place(action)

        reward = self.reward_step
        terminated = False
        if self.game.has_winner():
            reward = self.reward_win
            terminated = True
        elif self.game.is_draw():
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """Render the current board depending on render_mode."""
        if self.render_mode == "ascii":
            return self.game.get_board().render()

        if self.render_mode == "human":
            print(self.game.get_board().render())

        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.get_board().get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Union[int, bool, None, List]]:
        """Get additional information about the current state."""
        board = self.game.get_board()
        return {
            'valid_moves': board.get_valid_moves(),
            'current_player': self.game.get_current_player_index(),
            'next_move_number': self.game.get_next_move_number(),
            'winner': self.game.get_winner() if self.game.has_winner() else None,
            'winning_line': board.get_winning_line(),
            'last_move': board.last_move,
        }
