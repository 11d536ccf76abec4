"""Tests for the Gymnasium environment over a MultiCon game."""

import numpy as np
import pytest

from multicon.game.player import Player
from multicon.game.rules import MultiConEnv


@pytest.fixture
def env():
    env = MultiConEnv()
    env.reset(seed=0)
    return env


def test_spaces_and_initial_observation(env):
    obs, info = env.reset()
    assert obs.shape == (6, 7)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert env.action_space.n == 7
    assert info['valid_moves'] == list(range(7))
    assert info['current_player'] == 0
    assert info['winner'] is None


def test_step_places_for_current_player(env):
    obs, reward, terminated, truncated, info = env.step(3)
    assert obs[5, 3] == 1
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == 1
    assert info['last_move'] == (5, 3)

    obs, *_ = env.step(3)
    assert obs[4, 3] == 2


def test_winning_step(env):
    for action in [0, 6, 0, 6, 0, 6]:
        env.step(action)
    obs, reward, terminated, truncated, info = env.step(0)
    assert reward == env.reward_win
    assert terminated and not truncated
    assert info['winner'] == 0
    assert info['winning_line'] == [(2, 0), (3, 0), (4, 0), (5, 0)]


@pytest.mark.parametrize("action", [-1, 7])
def test_out_of_range_action_truncates(env, action):
    obs, reward, terminated, truncated, info = env.step(action)
    assert reward == env.reward_invalid_move
    assert truncated and not terminated
    assert info['invalid_move']
    assert not obs.any()


def test_full_column_action_truncates(env):
    for _ in range(6):
        env.step(2)
    before = env.game.get_next_move_number()
    _, reward, _, truncated, _ = env.step(2)
    assert truncated
    assert reward == env.reward_invalid_move
    assert env.game.get_next_move_number() == before


def test_draw_step(env, draw_sequence):
    for action in draw_sequence[:-1]:
        env.step(action)
    _, reward, terminated, _, info = env.step(draw_sequence[-1])
    assert reward == env.reward_draw
    assert terminated
    assert info['valid_moves'] == []


def test_reset_starts_a_new_game(env):
    env.step(0)
    obs, info = env.reset()
    assert not obs.any()
    assert info['next_move_number'] == 1


def test_more_players():
    env = MultiConEnv(players=[Player(t) for t in "abcd"], render_mode="ascii")
    env.reset()
    assert env.game.win_length == 3
    assert env.observation_space.high.max() == 4
    for action in [0, 1, 2, 3]:
        env.step(action)
    assert env.render() == env.game.get_board().render()
    assert env.render().splitlines()[-1] == "|a|b|c|d| | | |"
