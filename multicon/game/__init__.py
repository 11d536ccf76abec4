"""
multicon.game - Core game mechanics for MultiCon

This package contains the player model, the board representation and the
turn-based game state management.
"""

from multicon.game.board import Board
from multicon.game.player import Player, parse_players
from multicon.game.rules import MultiConEnv, MultiConGame

__all__ = ['Board', 'Player', 'parse_players', 'MultiConGame', 'MultiConEnv']
