"""
Model Tests

Tests for the primitive types and the engine's input/output contracts,
including validation, computed fields and immutability.

Run with: pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from models import Color, Point2D, Rectangle
from models.pong import (
    BallView,
    EffectKind,
    EngineSnapshot,
    InputAction,
    InputFrame,
    PaddleView,
    ParticleView,
    Personality,
    PowerUpType,
    PowerUpView,
    ScoreData,
    TrailView,
)
from pong_platform import GameState


def make_snapshot(**overrides):
    fields = dict(
        state=GameState.PLAYING,
        running=True,
        paused=False,
        started=True,
        player_paddle=PaddleView(x=30, y=250, width=12, height=100),
        ai_paddle=PaddleView(x=858, y=250, width=12, height=100),
        ball=BallView(x=443, y=293, vx=-5, vy=0, size=14, color=Color(r=255, g=255, b=255),
                      primary=True),
    )
    fields.update(overrides)
    return EngineSnapshot(**fields)


class TestColor:
    """Test Color validation and helpers."""

    def test_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            Color(r=256, g=0, b=0)
        assert 'range [0, 255]' in str(exc_info.value)

    def test_negative(self):
        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)

    def test_from_rgb(self):
        color = Color.from_rgb((255, 200, 0))
        assert color.as_rgb_tuple == (255, 200, 0)
        assert color.as_tuple == (255, 200, 0, 255)

    def test_frozen(self):
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 5


class TestRectangle:
    """Test Rectangle validation and edges."""

    def test_zero_width_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Rectangle(x=0, y=0, width=0, height=10)
        assert 'positive' in str(exc_info.value)

    def test_edges_and_center(self):
        rect = Rectangle(x=30, y=250, width=12, height=100)
        assert (rect.left, rect.right, rect.top, rect.bottom) == (30, 42, 250, 350)
        assert rect.center == Point2D(x=36, y=300)

    def test_touches_includes_edges(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        assert a.touches(Rectangle(x=10, y=0, width=10, height=10))
        assert a.touches(Rectangle(x=5, y=5, width=10, height=10))
        assert not a.touches(Rectangle(x=11, y=0, width=10, height=10))


class TestInputFrame:
    """Test the per-tick input contract."""

    def test_defaults(self):
        frame = InputFrame()
        assert not frame.move_up
        assert not frame.move_down
        assert frame.actions == ()

    def test_has(self):
        frame = InputFrame(actions=(InputAction.RESTART,))
        assert frame.has(InputAction.RESTART)
        assert not frame.has(InputAction.TOGGLE_PAUSE)

    def test_actions_from_strings(self):
        frame = InputFrame(actions=("toggle_pause",))
        assert frame.actions == (InputAction.TOGGLE_PAUSE,)

    def test_unknown_action_rejected(self):
        with pytest.raises(ValidationError):
            InputFrame(actions=("teleport",))


class TestViews:
    """Test snapshot view validation."""

    def test_paddle_height_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaddleView(x=30, y=0, width=12, height=0)

    def test_ball_speed(self):
        ball = BallView(x=0, y=0, vx=3, vy=4, size=14, color=Color(r=1, g=1, b=1))
        assert ball.speed == pytest.approx(5.0)

    @pytest.mark.parametrize("pulse", [-0.01, 1.01])
    def test_pulse_range(self, pulse):
        with pytest.raises(ValidationError):
            PowerUpView(x=0, y=0, size=20, power_type=PowerUpType.MAGNET, pulse=pulse)

    def test_power_up_symbol(self):
        view = PowerUpView(x=0, y=0, size=20, power_type=PowerUpType.BALL_SLOW, pulse=0.5)
        assert view.symbol == "S"

    @pytest.mark.parametrize("life", [0.0, -0.1, 1.5])
    def test_particle_life_range(self, life):
        with pytest.raises(ValidationError):
            ParticleView(position=Point2D(x=0, y=0), color=Color(r=1, g=1, b=1),
                         life=life, size=3)

    def test_trail_life_range(self):
        TrailView(position=Point2D(x=0, y=0), life=1.0)
        with pytest.raises(ValidationError):
            TrailView(position=Point2D(x=0, y=0), life=0.0)


class TestScoreData:
    """Test ScoreData validation and computed fields."""

    def test_negative_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ScoreData(player=-1)
        assert 'non-negative' in str(exc_info.value).lower()

    def test_differential(self):
        assert ScoreData(player=1, ai=4).differential == -3


class TestEnums:
    """Test enum labels."""

    def test_symbols(self):
        assert [t.symbol for t in PowerUpType] == ["P", "S", "M", "B", "G", "C"]

    def test_effect_labels(self):
        assert EffectKind.CONFUSE_AI.label == "AI Confused"
        assert EffectKind.PADDLE_BOOST.label == "Paddle Boost"

    def test_personality_values(self):
        assert Personality("AGGRESSIVE") == Personality.AGGRESSIVE


class TestEngineSnapshot:
    """Test the output contract."""

    def test_defaults(self):
        snap = make_snapshot()
        assert snap.extra_balls == []
        assert snap.power_up is None
        assert snap.score == ScoreData()
        assert snap.ai_personality == Personality.NORMAL
        assert snap.effect_seconds == {}

    def test_ability_fields(self):
        snap = make_snapshot(ability_charge=100)
        assert snap.ability_fraction == 1.0
        assert snap.ability_ready
        assert not make_snapshot(ability_charge=100, ability_active=True).ability_ready

    def test_charge_bounds(self):
        with pytest.raises(ValidationError):
            make_snapshot(ability_charge=101)

    def test_negative_shake_rejected(self):
        with pytest.raises(ValidationError):
            make_snapshot(screen_shake=-1.0)
