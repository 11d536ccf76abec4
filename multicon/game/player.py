"""
player.py - Player representation and player-list configuration for MultiCon

A player is identified only by its display token. This module also turns
raw token arguments into a validated list of players.
"""

from dataclasses import dataclass
from typing import List, Sequence

from multicon.debug import debug
from multicon.utils import DEFAULT_TOKENS, MAX_PLAYERS, MIN_PLAYERS


class PlayerConfigError(ValueError):
    """Base class for invalid player configurations, raised before a game exists."""

    message = "ERROR: Invalid player configuration."

    def __init__(self, detail: str = ""):
        super().__init__(self.message if not detail else f"{self.message} ({detail})")
        self.detail = detail


class TooManyPlayersError(PlayerConfigError):
    message = "ERROR: Too many players."


class TooFewPlayersError(PlayerConfigError):
    message = "ERROR: Too few players."


class InvalidPlayerTokenError(PlayerConfigError):
    message = "ERROR: Invalid player name."


class DuplicatePlayerError(PlayerConfigError):
    message = "ERROR: Duplicate player name."


@dataclass(frozen=True)
class Player:
    """A MultiCon player. Two players are equal iff their tokens are equal."""
    token: str

    def __str__(self) -> str:
        return self.token


DEFAULT_PLAYERS = tuple(Player(token) for token in DEFAULT_TOKENS)


def parse_players(tokens: Sequence[str]) -> List[Player]:
    """
    Build the ordered player list from raw tokens.

    Args:
        tokens: Player tokens as given on the command line (may be empty)

    Returns:
        One player per token, or the default players if no tokens were given

    Raises:
        TooManyPlayersError: More than MAX_PLAYERS tokens
        TooFewPlayersError: Fewer than MIN_PLAYERS tokens, but at least one
        InvalidPlayerTokenError: A token is not exactly one character
        DuplicatePlayerError: A token appears more than once
    """
    if not tokens:
        debug.debug(f"No tokens given, using defaults {DEFAULT_TOKENS}", "players")
        return list(DEFAULT_PLAYERS)

    if len(tokens) > MAX_PLAYERS:
        raise TooManyPlayersError(f"{len(tokens)} given, at most {MAX_PLAYERS} allowed")
    if len(tokens) < MIN_PLAYERS:
        raise TooFewPlayersError(f"{len(tokens)} given, at least {MIN_PLAYERS} needed")

    players: List[Player] = []
    for token in tokens:
        if len(token) != 1:
            raise InvalidPlayerTokenError(repr(token))

        player = Player(token)
        if player in players:
            raise DuplicatePlayerError(repr(token))
        players.append(player)

    debug.debug(f"Parsed {len(players)} players: {[str(p) for p in players]}", "players")
    return players
