"""Mutable match state owned by the simulation engine.

Every subsystem (power-ups, effects, AI, collision resolution) receives
the EngineState explicitly and mutates it only while the engine is
executing a tick. Nothing here is module-global.
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import (
    FIELD_WIDTH, FIELD_HEIGHT,
    PADDLE_WIDTH, PADDLE_HEIGHT, PLAYER_PADDLE_X, AI_PADDLE_X, PLAYER_PADDLE_SPEED,
    BALL_SIZE, BALL_SERVE_SPEED, BALL_SERVE_MAX_ANGLE_DEG,
    TRAIL_LENGTH, PARTICLE_DECAY, TRAIL_DECAY, PARTICLE_MAX_VELOCITY,
    SOUND_BAR_COUNT, SOUND_BAR_HOLD_MS, SOUND_BAR_DECAY,
    COLORS,
)
from .ai import AIState
from .effects import EffectTimers
from .entities import Ball, BallConfig, EntityPool, Paddle, PaddleConfig, PowerUp, SoundBars


@dataclass
class EngineState:
    """Everything that changes during a match."""

    rng: random.Random
    player_paddle: Paddle
    ai_paddle: Paddle
    ball: Ball
    pool: EntityPool
    sound: SoundBars
    timers: EffectTimers = field(default_factory=EffectTimers)
    ai_state: AIState = field(default_factory=AIState)
    power_up: Optional[PowerUp] = None
    last_power_spawn_ms: float = 0.0
    player_score: int = 0
    ai_score: int = 0
    ability_charge: int = 0
    ability_active: bool = False
    screen_shake: float = 0.0
    move_up: bool = False
    move_down: bool = False
    running: bool = True
    paused: bool = False
    started: bool = False

    @property
    def balls(self) -> List[Ball]:
        """Primary ball followed by every extra ball."""
        return [self.ball] + self.pool.balls


def serve_ball(state: EngineState, toward_left: bool) -> None:
    """Reset the primary ball to the center and launch a new serve.

    The serve angle is uniform within +/-30 degrees of horizontal.
    """
    spread = math.radians(BALL_SERVE_MAX_ANGLE_DEG)
    angle = state.rng.random() * 2 * spread - spread
    state.ball.serve(
        FIELD_WIDTH // 2 - BALL_SIZE // 2,
        FIELD_HEIGHT // 2 - BALL_SIZE // 2,
        angle,
        toward_left,
    )
    state.pool.trail.clear()


def create_engine_state(rng: random.Random, now_ms: float) -> EngineState:
    """Build a fresh match: centered paddles, a new serve, empty pools.

    Args:
        rng: Random source shared by every subsystem
        now_ms: Current clock reading (starts the power-up spawn timer)

    Returns:
        New EngineState
    """
    player_paddle = Paddle(
        PaddleConfig(x=PLAYER_PADDLE_X, width=PADDLE_WIDTH, height=PADDLE_HEIGHT,
                     speed=PLAYER_PADDLE_SPEED),
        FIELD_HEIGHT,
    )
    ai_paddle = Paddle(
        PaddleConfig(x=AI_PADDLE_X, width=PADDLE_WIDTH, height=PADDLE_HEIGHT),
        FIELD_HEIGHT,
    )
    ball = Ball(
        BallConfig(size=BALL_SIZE, serve_speed=BALL_SERVE_SPEED),
        FIELD_WIDTH // 2 - BALL_SIZE // 2,
        FIELD_HEIGHT // 2 - BALL_SIZE // 2,
        color=COLORS['white'],
        primary=True,
    )
    pool = EntityPool(
        rng,
        trail_length=TRAIL_LENGTH,
        particle_decay=PARTICLE_DECAY,
        trail_decay=TRAIL_DECAY,
        max_velocity=PARTICLE_MAX_VELOCITY,
    )
    sound = SoundBars(rng, count=SOUND_BAR_COUNT, hold_ms=SOUND_BAR_HOLD_MS,
                      decay=SOUND_BAR_DECAY)

    state = EngineState(
        rng=rng,
        player_paddle=player_paddle,
        ai_paddle=ai_paddle,
        ball=ball,
        pool=pool,
        sound=sound,
        last_power_spawn_ms=now_ms,
    )
    serve_ball(state, toward_left=True)
    return state
