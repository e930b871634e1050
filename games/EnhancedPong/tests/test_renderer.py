"""
Headless smoke tests for the pygame renderer.
"""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame
import pytest

from games.EnhancedPong.engine import PongEngine
from games.EnhancedPong.game.entities import Ball, BallConfig, PowerUp
from games.EnhancedPong.renderer import PongRenderer
from models.pong import EffectKind, InputAction, InputFrame, PowerUpType


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((900, 600))
    yield surface
    pygame.quit()


class TestPongRenderer:
    """Render every kind of snapshot without errors."""

    def test_title_screen(self, screen, clock):
        engine = PongEngine(clock=clock, seed=3)
        PongRenderer(seed=3).render(engine.snapshot(), screen)

    def test_busy_frame(self, screen, engine, state, clock):
        state.ability_charge = 100
        state.screen_shake = 5.0
        state.power_up = PowerUp(400, 200, PowerUpType.CONFUSE_AI)
        state.pool.add_ball(Ball(BallConfig(size=14), 600, 300, vx=4, color=(90, 200, 120)))
        state.pool.spawn_particles(300, 300, (0, 255, 255))
        state.timers.arm(EffectKind.PADDLE_BOOST, 0, 7000)
        state.timers.arm(EffectKind.MAGNET, 0, 8000)
        state.sound.trigger(0)
        for _ in range(5):
            engine.update()
            clock.advance(16)

        renderer = PongRenderer(seed=3)
        renderer.render(engine.snapshot(), screen)
        # Something other than black was drawn
        assert screen.get_at((450, 5))[:3] != (0, 0, 0)

    def test_paused_and_game_over(self, screen, engine):
        renderer = PongRenderer(seed=3)
        engine.handle_input(InputFrame(actions=(InputAction.TOGGLE_PAUSE,)))
        renderer.render(engine.snapshot(), screen)
        engine.stop()
        renderer.render(engine.snapshot(), screen)
