"""Tests for players and player-token parsing."""

import pytest

from multicon.game.player import (DEFAULT_PLAYERS, DuplicatePlayerError, InvalidPlayerTokenError,
                                  Player, PlayerConfigError, TooFewPlayersError,
                                  TooManyPlayersError, parse_players)


class TestPlayer:

    def test_equality_by_token(self):
        assert Player('x') == Player('x')
        assert Player('x') != Player('o')
        assert hash(Player('x')) == hash(Player('x'))

    def test_str_is_token(self):
        assert str(Player('#')) == '#'

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Player('x').token = 'o'


class TestParsePlayers:

    def test_no_tokens_gives_defaults(self):
        assert parse_players([]) == list(DEFAULT_PLAYERS)
        assert [str(p) for p in DEFAULT_PLAYERS] == ['x', 'o']

    def test_one_player_per_token(self):
        players = parse_players(['a', 'b', 'c', 'd'])
        assert players == [Player('a'), Player('b'), Player('c'), Player('d')]

    def test_six_players_allowed(self):
        assert len(parse_players(list("abcdef"))) == 6

    def test_seven_players_rejected(self):
        with pytest.raises(TooManyPlayersError) as excinfo:
            parse_players(list("abcdefg"))
        assert excinfo.value.message == "ERROR: Too many players."

    def test_single_player_rejected(self):
        with pytest.raises(TooFewPlayersError) as excinfo:
            parse_players(["x"])
        assert excinfo.value.message == "ERROR: Too few players."

    @pytest.mark.parametrize("tokens", [['xy', 'o'], ['x', ''], ['x', 'oo']])
    def test_multi_character_token_rejected(self, tokens):
        with pytest.raises(InvalidPlayerTokenError):
            parse_players(tokens)

    def test_duplicate_token_rejected(self):
        with pytest.raises(DuplicatePlayerError) as excinfo:
            parse_players(['x', 'o', 'x'])
        assert excinfo.value.message == "ERROR: Duplicate player name."

    def test_errors_share_a_base(self):
        for error in (TooManyPlayersError, TooFewPlayersError, InvalidPlayerTokenError,
                      DuplicatePlayerError):
            assert issubclass(error, PlayerConfigError)
            assert issubclass(error, ValueError)
