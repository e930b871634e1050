"""
GameState Tests

Run with: pytest tests/test_game_state.py -v
"""

import pytest

from pong_platform import GameState


class TestFromFlags:
    """Test collapsing engine flags into a GameState."""

    @pytest.mark.parametrize("running,paused,started,expected", [
        (True, False, False, GameState.WAITING),
        (True, False, True, GameState.PLAYING),
        (True, True, True, GameState.PAUSED),
        (True, True, False, GameState.WAITING),
        (False, False, True, GameState.GAME_OVER),
        (False, True, False, GameState.GAME_OVER),
    ])
    def test_from_flags(self, running, paused, started, expected):
        assert GameState.from_flags(running, paused, started) == expected

    def test_values(self):
        assert {s.value for s in GameState} == {'waiting', 'playing', 'paused', 'game_over'}
