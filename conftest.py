"""Shared pytest fixtures for the MultiCon test suite."""

import pytest

from multicon.game.board import Board
from multicon.game.player import Player
from multicon.game.rules import MultiConGame


@pytest.fixture
def x():
    return Player('x')


@pytest.fixture
def o():
    return Player('o')


@pytest.fixture
def board():
    """Empty default-size board where four in a row wins."""
    return Board(4)


@pytest.fixture
def game(x, o):
    """Fresh two-player game."""
    return MultiConGame([x, o])


@pytest.fixture
def draw_sequence():
    """
    42 alternating 0-based columns that fill the 7x6 board without a line.

    Columns end up as types A A B B A A B, where A alternates x/o from the
    bottom and B alternates o/x.
    """
    return [0] * 6 + [1] * 6 + [4] + [2] * 6 + [3] * 6 + [6] * 6 + [4] * 5 + [5] * 6
