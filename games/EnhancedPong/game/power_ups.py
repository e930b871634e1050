"""Power-up lifecycle: spawn, pulse, collection, effect application, expiry.

The single power-up slot is either empty or holds one PowerUp. Effects are
looked up in per-side tables mapping PowerUpType to an apply function, so
adding a power-up means adding a table entry rather than a branch.
"""

import math
from typing import Callable, Dict, List, Optional

from models.pong import EffectKind, PowerUpType, Side
from pong_platform.logging import emit_record, get_logger

from ..config import (
    FIELD_WIDTH, FIELD_HEIGHT,
    PADDLE_HEIGHT, PADDLE_BOOSTED_HEIGHT,
    BALL_SIZE, BALL_SLOW_FACTOR, BALL_SPEED_CAP, BOOSTED_SPEED_CAP, MIN_BALL_SPEED,
    NORMAL_TARGET_SPEED, BOOSTED_TARGET_SPEED,
    MIN_NORMALIZED_SPEED, MAX_NORMALIZED_SPEED,
    EXTRA_BALL_COUNT, EXTRA_BALL_SPEED, EXTRA_BALL_CONE_DEG,
    POWER_UP_SIZE, POWER_UP_SPAWN_INTERVAL_MS, POWER_UP_PULSE_STEP, POWER_UP_MARGIN_Y,
    PADDLE_BOOST_MS, BALL_SLOW_MS, SPEED_BOOST_MS, MAGNET_MS, CONFUSE_AI_MS,
    PARTICLE_BURST, COLORS,
)
from .entities import Ball, BallConfig, PowerUp
from .physics import rects_overlap
from .state import EngineState

log = get_logger('power_ups')

EffectFn = Callable[[EngineState, float], None]


# -----------------------------------------------------------------------------
# Spawning and animation
# -----------------------------------------------------------------------------

def maybe_spawn(state: EngineState, now_ms: float) -> Optional[PowerUp]:
    """Fill the empty slot once the spawn interval has elapsed.

    The power-up lands in the central band of the field (x in
    [W/4, 3W/4), y at least 30px from either wall) with a uniformly
    chosen type.

    Returns:
        The new PowerUp, or None if nothing spawned this tick
    """
    if state.power_up is not None:
        return None
    if now_ms - state.last_power_spawn_ms < POWER_UP_SPAWN_INTERVAL_MS:
        return None

    x = state.rng.randrange(FIELD_WIDTH // 2) + FIELD_WIDTH // 4
    y = state.rng.randrange(FIELD_HEIGHT - 2 * POWER_UP_MARGIN_Y) + POWER_UP_MARGIN_Y
    power_type = state.rng.choice(list(PowerUpType))

    state.power_up = PowerUp(x, y, power_type, size=POWER_UP_SIZE,
                             pulse_step=POWER_UP_PULSE_STEP)
    state.last_power_spawn_ms = now_ms
    log.debug(f"Spawned {state.power_up!r}")
    return state.power_up


def pulse(state: EngineState) -> None:
    """Advance the active power-up's pulse animation."""
    if state.power_up is not None:
        state.power_up.update()


# -----------------------------------------------------------------------------
# Ball speed helpers
# -----------------------------------------------------------------------------

def slow_balls(state: EngineState) -> None:
    """Scale every ball's velocity by the slow factor."""
    for ball in state.balls:
        ball.scale_velocity(BALL_SLOW_FACTOR)


def normalize_ball_speeds(state: EngineState, target: float) -> None:
    """Rescale every ball to target speed, clamped to the normal range."""
    target = max(MIN_NORMALIZED_SPEED, min(MAX_NORMALIZED_SPEED, target))
    for ball in state.balls:
        ball.set_speed(target)


def clamp_ball_speeds(state: EngineState, now_ms: float) -> None:
    """Hold every moving ball inside the legal speed range, keeping direction.

    The ceiling is 12, or 15 while speed boost runs. The 4.5 floor is
    lifted while balls are slowed (slow power-up or ability).
    """
    boosted = state.timers.is_active(EffectKind.SPEED_BOOST, now_ms)
    cap = BOOSTED_SPEED_CAP if boosted else BALL_SPEED_CAP
    slowed = (state.timers.is_active(EffectKind.BALL_SLOW, now_ms) or
              state.timers.is_active(EffectKind.ABILITY, now_ms))
    for ball in state.balls:
        speed = ball.speed
        if speed == 0:
            continue
        if speed > cap:
            ball.set_speed(cap)
        elif speed < MIN_BALL_SPEED and not slowed:
            ball.set_speed(MIN_BALL_SPEED)


def spawn_extra_balls(state: EngineState, count: int = EXTRA_BALL_COUNT) -> List[Ball]:
    """Split extra balls off the primary ball.

    Each one starts at the primary ball's position and heads away from
    the field center within a 90 degree cone, in a random color.
    """
    origin = state.ball
    base = 0.0 if origin.center_x >= FIELD_WIDTH / 2 else math.pi
    half_cone = math.radians(EXTRA_BALL_CONE_DEG) / 2

    spawned = []
    for _ in range(count):
        angle = base + state.rng.uniform(-half_cone, half_cone)
        color = tuple(state.rng.randrange(200) + 55 for _ in range(3))
        ball = Ball(
            BallConfig(size=BALL_SIZE),
            origin.x,
            origin.y,
            vx=EXTRA_BALL_SPEED * math.cos(angle),
            vy=EXTRA_BALL_SPEED * math.sin(angle),
            color=color,
        )
        state.pool.add_ball(ball)
        spawned.append(ball)
    return spawned


# -----------------------------------------------------------------------------
# Effect tables
# -----------------------------------------------------------------------------

def _enlarge_player(state: EngineState, now_ms: float) -> None:
    state.player_paddle.set_height(PADDLE_BOOSTED_HEIGHT)
    state.timers.arm(EffectKind.PADDLE_BOOST, now_ms, PADDLE_BOOST_MS)


def _enlarge_ai(state: EngineState, now_ms: float) -> None:
    state.ai_paddle.set_height(PADDLE_BOOSTED_HEIGHT)
    state.timers.arm(EffectKind.PADDLE_BOOST, now_ms, PADDLE_BOOST_MS)


def _slow(state: EngineState, now_ms: float) -> None:
    slow_balls(state)
    state.timers.arm(EffectKind.BALL_SLOW, now_ms, BALL_SLOW_MS)


def _multi_ball(state: EngineState, now_ms: float) -> None:
    spawn_extra_balls(state)


def _speed_boost(state: EngineState, now_ms: float) -> None:
    state.timers.arm(EffectKind.SPEED_BOOST, now_ms, SPEED_BOOST_MS)


def _magnet(state: EngineState, now_ms: float) -> None:
    state.timers.arm(EffectKind.MAGNET, now_ms, MAGNET_MS)


def _confuse_ai(state: EngineState, now_ms: float) -> None:
    state.timers.arm(EffectKind.CONFUSE_AI, now_ms, CONFUSE_AI_MS)


def _no_effect(state: EngineState, now_ms: float) -> None:
    pass


PLAYER_EFFECTS: Dict[PowerUpType, EffectFn] = {
    PowerUpType.PADDLE_ENLARGE: _enlarge_player,
    PowerUpType.BALL_SLOW: _slow,
    PowerUpType.MULTI_BALL: _multi_ball,
    PowerUpType.SPEED_BOOST: _speed_boost,
    PowerUpType.MAGNET: _magnet,
    PowerUpType.CONFUSE_AI: _confuse_ai,
}

# The magnet only ever pulls toward the player paddle, and the AI cannot
# confuse itself, so it gets a bigger paddle instead.
AI_EFFECTS: Dict[PowerUpType, EffectFn] = {
    PowerUpType.PADDLE_ENLARGE: _enlarge_ai,
    PowerUpType.BALL_SLOW: _slow,
    PowerUpType.MULTI_BALL: _multi_ball,
    PowerUpType.SPEED_BOOST: _speed_boost,
    PowerUpType.MAGNET: _no_effect,
    PowerUpType.CONFUSE_AI: _enlarge_ai,
}


def apply_power_up(
    state: EngineState,
    power_type: PowerUpType,
    side: Side,
    now_ms: float,
) -> None:
    """Apply a collected power-up's effect for the collecting side."""
    table = PLAYER_EFFECTS if side == Side.PLAYER else AI_EFFECTS
    table[power_type](state, now_ms)


# -----------------------------------------------------------------------------
# Collection
# -----------------------------------------------------------------------------

def check_collection(state: EngineState, now_ms: float) -> Optional[Side]:
    """Collect the active power-up if anything overlaps it.

    The player paddle or the primary ball claim it for the player;
    otherwise the AI paddle claims it for the AI. Collection empties the
    slot and restarts the spawn timer.

    Returns:
        Side that collected the power-up, or None
    """
    power_up = state.power_up
    if power_up is None:
        return None

    rect = power_up.rect
    if (rects_overlap(rect, state.player_paddle.rect) or
            rects_overlap(rect, state.ball.rect)):
        side = Side.PLAYER
        color = COLORS['yellow']
    elif rects_overlap(rect, state.ai_paddle.rect):
        side = Side.AI
        color = COLORS['orange']
    else:
        return None

    apply_power_up(state, power_up.power_type, side, now_ms)
    state.pool.spawn_particles(power_up.x, power_up.y, color, PARTICLE_BURST)
    power_up.active = False
    state.power_up = None
    state.last_power_spawn_ms = now_ms

    log.debug(f"{side.value} collected {power_up.power_type.value}")
    emit_record('match', {
        'type': 'power_up',
        'kind': power_up.power_type.value,
        'side': side.value,
    })
    return side


# -----------------------------------------------------------------------------
# Expiry
# -----------------------------------------------------------------------------

def expire_effects(state: EngineState, now_ms: float) -> List[EffectKind]:
    """Revert every effect whose timer has run out.

    Each armed timer reverts exactly once; calling this again (or when
    nothing has expired) changes nothing.

    Returns:
        Effects reverted this call
    """
    expired = state.timers.pop_expired(now_ms)
    for kind in expired:
        if kind == EffectKind.PADDLE_BOOST:
            state.player_paddle.set_height(PADDLE_HEIGHT)
            state.ai_paddle.set_height(PADDLE_HEIGHT)
        elif kind == EffectKind.BALL_SLOW:
            boosted = state.timers.is_active(EffectKind.SPEED_BOOST, now_ms)
            normalize_ball_speeds(
                state, BOOSTED_TARGET_SPEED if boosted else NORMAL_TARGET_SPEED)
        elif kind == EffectKind.SPEED_BOOST:
            if not state.timers.is_active(EffectKind.BALL_SLOW, now_ms):
                normalize_ball_speeds(state, NORMAL_TARGET_SPEED)
            else:
                # Still slowed: keep the speed but drop back under the normal cap
                clamp_ball_speeds(state, now_ms)
        elif kind == EffectKind.ABILITY:
            state.ability_active = False
        log.debug(f"{kind.label} expired")
    return expired
