"""Pytest fixtures for EnhancedPong tests."""
import pytest

from games.EnhancedPong.engine import PongEngine
from models.pong import InputAction, InputFrame
from pong_platform.clock import ManualClock
from pong_platform.logging import NullSink, set_default_sink


@pytest.fixture(autouse=True)
def quiet_records():
    """Route structured match records nowhere."""
    set_default_sink(NullSink())
    yield
    set_default_sink(None)


@pytest.fixture
def clock():
    """Simulated clock starting at t=0."""
    return ManualClock()


@pytest.fixture
def engine(clock):
    """Seeded engine that has already left the title screen."""
    engine = PongEngine(clock=clock, seed=7)
    engine.handle_input(InputFrame(actions=(InputAction.ANY_KEY_TO_START,)))
    return engine


@pytest.fixture
def state(engine):
    """Mutable state of the started engine."""
    return engine.state


@pytest.fixture
def park_ball(state):
    """Place the primary ball somewhere and give it a velocity."""
    def _park(x=443, y=293, vx=0.0, vy=0.0):
        state.ball.x = float(x)
        state.ball.y = float(y)
        state.ball.vx = vx
        state.ball.vy = vy
        return state.ball
    return _park
