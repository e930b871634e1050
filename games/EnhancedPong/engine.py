"""EnhancedPong simulation engine.

PongEngine owns the EngineState and advances it one fixed tick at a time.
Adapters feed it an InputFrame per frame and read back an EngineSnapshot
between ticks; they never touch the mutable state directly.

Tick order:
     1. Decay screen shake
     2. Pulse the active power-up
     3. Move the player paddle from input flags
     4. Spawn a power-up when due
     5. Record a trail sample, fade the trail
     6. Move every ball
     7. Wall bounces
     8. Paddle hits (ability charge on primary-ball player hits)
     9. Exits: scoring, serve, AI adaptation; extra balls despawn
    10. AI adaptation and AI paddle move
    11. Magnet pull, then clamp every ball to its speed range
    12. Power-up collection
    13. Advance particles
    14. Revert expired effects
"""

import random
from typing import Optional

from models import Color, Point2D
from models.pong import (
    BallView, EffectKind, EngineSnapshot, InputAction, InputFrame,
    PaddleView, ParticleView, PowerUpView, ScoreData, Side, TrailView,
)
from pong_platform.clock import Clock, SystemClock
from pong_platform.game_state import GameState
from pong_platform.logging import emit_record, get_logger

from .config import (
    FIELD_WIDTH, FIELD_HEIGHT,
    MAGNET_RANGE, MAGNET_STRENGTH,
    MAX_ABILITY_CHARGE, ABILITY_CHARGE_PER_HIT, ABILITY_PARTICLE_COUNT, ABILITY_MS,
    SCREEN_SHAKE_ON_SCORE, SCREEN_SHAKE_DECAY, SCREEN_SHAKE_CUTOFF,
    PARTICLE_BURST, COLORS,
)
from .game.ai import next_ai_position
from .game.entities import Ball, Paddle
from .game.physics import check_exit, check_paddle_collision, check_wall_collision, reflect
from .game.power_ups import (
    check_collection, clamp_ball_speeds, expire_effects, maybe_spawn, pulse, slow_balls,
)
from .game.state import EngineState, create_engine_state, serve_ball

log = get_logger('engine')


class PongEngine:
    """Fixed-tick human-vs-AI pong simulation.

    Args:
        clock: Millisecond clock used for every expiry (defaults to wall time)
        seed: Seed for the engine's random source (None for nondeterministic)
    """

    def __init__(self, clock: Optional[Clock] = None, seed: Optional[int] = None):
        self._clock = clock or SystemClock()
        self._rng = random.Random(seed)
        self._state = create_engine_state(self._rng, self._clock.now_ms())

    @property
    def state(self) -> EngineState:
        """Mutable engine state (tests and debugging only)."""
        return self._state

    @property
    def clock(self) -> Clock:
        """Clock driving effect and spawn timers."""
        return self._clock

    def get_game_state(self) -> GameState:
        """Collapse the running/paused/started flags into a GameState."""
        s = self._state
        return GameState.from_flags(s.running, s.paused, s.started)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def handle_input(self, frame: InputFrame) -> None:
        """Apply one frame of normalized input.

        Before the match starts any discrete event only starts it; the
        event itself is otherwise ignored.

        Args:
            frame: Movement flags plus discrete actions since the last frame
        """
        s = self._state
        if not s.started:
            if frame.actions:
                s.started = True
                log.info("Match started")
            return

        s.move_up = frame.move_up
        s.move_down = frame.move_down

        for action in frame.actions:
            if action == InputAction.TOGGLE_PAUSE:
                self.toggle_pause()
            elif action == InputAction.RESTART:
                self.restart()
            elif action == InputAction.ACTIVATE_ABILITY:
                self.activate_ability()

    def toggle_pause(self) -> None:
        """Pause or resume ticking."""
        s = self._state
        s.paused = not s.paused
        log.info("Paused" if s.paused else "Resumed")

    def restart(self) -> None:
        """Reset the whole match back to the title screen."""
        self._state = create_engine_state(self._rng, self._clock.now_ms())
        serve_ball(self._state, toward_left=self._rng.random() < 0.5)
        log.info("Match restarted")

    def stop(self) -> None:
        """End the match. Further ticks are no-ops."""
        self._state.running = False
        log.info(f"Match stopped at {self._state.player_score}-{self._state.ai_score}")

    def activate_ability(self) -> bool:
        """Fire the special ability if fully charged and not already running.

        Slows every ball and holds the slow window for the ability's
        duration.

        Returns:
            True if the ability fired
        """
        s = self._state
        if s.ability_charge < MAX_ABILITY_CHARGE or s.ability_active:
            return False

        now = self._clock.now_ms()
        s.ability_active = True
        s.ability_charge = 0
        s.timers.arm(EffectKind.ABILITY, now, ABILITY_MS)
        s.timers.arm(EffectKind.BALL_SLOW, now, ABILITY_MS)
        slow_balls(s)

        paddle = s.player_paddle
        s.pool.spawn_particles(paddle.x + paddle.width / 2, paddle.center_y,
                               COLORS['cyan'], ABILITY_PARTICLE_COUNT)
        log.debug("Ability activated")
        return True

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def update(self) -> bool:
        """Advance one fixed tick.

        Does nothing while stopped, paused or waiting for the first key.

        Returns:
            True if a tick was executed
        """
        s = self._state
        if not s.running or s.paused or not s.started:
            return False

        now = self._clock.now_ms()

        if s.screen_shake > 0:
            s.screen_shake *= SCREEN_SHAKE_DECAY
            if s.screen_shake < SCREEN_SHAKE_CUTOFF:
                s.screen_shake = 0.0

        pulse(s)
        s.player_paddle.steer(s.move_up, s.move_down)
        maybe_spawn(s, now)

        s.pool.record_trail(s.ball.center_x, s.ball.center_y)
        s.pool.advance_trail()

        for ball in s.balls:
            ball.step()

        self._resolve_walls(now)
        self._resolve_paddles(now)
        self._resolve_exits()

        s.ai_state.adapt(s.player_score, s.ai_score)
        self._move_ai(now)
        self._apply_magnet(now)
        clamp_ball_speeds(s, now)

        check_collection(s, now)
        s.pool.advance_particles()
        expire_effects(s, now)

        s.sound.update(now)
        self._clock.on_tick()
        return True

    def _resolve_walls(self, now: float) -> None:
        s = self._state
        for ball in s.balls:
            wall = check_wall_collision(ball, FIELD_HEIGHT)
            if wall is None:
                continue
            if ball.primary:
                s.pool.spawn_particles(ball.x, ball.y, COLORS['cyan'], PARTICLE_BURST)
                s.sound.trigger(now)
            else:
                s.pool.spawn_particles(ball.x, ball.y, ball.color, PARTICLE_BURST)

    def _resolve_paddles(self, now: float) -> None:
        s = self._state
        boosted = s.timers.is_active(EffectKind.SPEED_BOOST, now)

        for ball in s.balls:
            if check_paddle_collision(ball, s.player_paddle):
                ball.x = s.player_paddle.right
                self._bounce(ball, s.player_paddle, moving_right=True, boosted=boosted)
                if ball.primary:
                    s.pool.spawn_particles(ball.x, ball.y, COLORS['green'], PARTICLE_BURST)
                    s.sound.trigger(now)
                    s.ability_charge = min(MAX_ABILITY_CHARGE,
                                           s.ability_charge + ABILITY_CHARGE_PER_HIT)
                else:
                    s.pool.spawn_particles(ball.x, ball.y, ball.color, PARTICLE_BURST)

            if check_paddle_collision(ball, s.ai_paddle):
                ball.x = s.ai_paddle.x - ball.size
                self._bounce(ball, s.ai_paddle, moving_right=False, boosted=boosted)
                if ball.primary:
                    s.pool.spawn_particles(ball.x, ball.y, COLORS['red'], PARTICLE_BURST)
                    s.sound.trigger(now)
                else:
                    s.pool.spawn_particles(ball.x, ball.y, ball.color, PARTICLE_BURST)

    @staticmethod
    def _bounce(ball: Ball, paddle: Paddle, moving_right: bool, boosted: bool) -> None:
        ball.vx, ball.vy = reflect(
            ball.center_y, paddle.y, paddle.height, ball.speed, moving_right, boosted)

    def _resolve_exits(self) -> None:
        s = self._state

        side = check_exit(s.ball, FIELD_WIDTH)
        if side is not None:
            scorer = Side.PLAYER if side == "right" else Side.AI
            if scorer == Side.PLAYER:
                s.player_score += 1
                color = COLORS['green']
            else:
                s.ai_score += 1
                color = COLORS['red']
            s.pool.spawn_particles(s.ball.x, s.ball.y, color, PARTICLE_BURST)
            s.screen_shake = SCREEN_SHAKE_ON_SCORE
            # Serve toward the side that just conceded
            serve_ball(s, toward_left=scorer == Side.PLAYER)
            s.ai_state.adapt(s.player_score, s.ai_score)

            log.info(f"{scorer.value} scores: {s.player_score}-{s.ai_score} "
                     f"(AI {s.ai_state.personality.value})")
            emit_record('match', {
                'type': 'score',
                'player': s.player_score,
                'ai': s.ai_score,
                'scorer': scorer.value,
            })

        for ball in s.pool.balls:
            if check_exit(ball, FIELD_WIDTH) is not None:
                s.pool.spawn_particles(ball.x, ball.y, ball.color, PARTICLE_BURST)
                ball.deactivate()
        s.pool.prune_balls()

    def _move_ai(self, now: float) -> None:
        s = self._state
        paddle = s.ai_paddle
        new_y = next_ai_position(
            s.ball.center_y,
            s.ball.vy,
            paddle.y,
            paddle.height,
            s.ai_state.personality,
            s.ai_state.max_speed,
            s.ai_state.reaction,
            s.timers.is_active(EffectKind.CONFUSE_AI, now),
            s.rng,
        )
        paddle.move_to(new_y)

    def _apply_magnet(self, now: float) -> None:
        s = self._state
        if not s.timers.is_active(EffectKind.MAGNET, now):
            return
        dist = s.player_paddle.center_y - s.ball.center_y
        if abs(dist) < MAGNET_RANGE:
            s.ball.vy += dist * MAGNET_STRENGTH

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def snapshot(self) -> EngineSnapshot:
        """Read-only copy of everything an adapter needs to draw a frame."""
        s = self._state
        now = self._clock.now_ms()

        power_up = None
        if s.power_up is not None:
            power_up = PowerUpView(
                x=s.power_up.x,
                y=s.power_up.y,
                size=s.power_up.size,
                power_type=s.power_up.power_type,
                pulse=s.power_up.pulse,
            )

        return EngineSnapshot(
            state=self.get_game_state(),
            running=s.running,
            paused=s.paused,
            started=s.started,
            player_paddle=_paddle_view(s.player_paddle),
            ai_paddle=_paddle_view(s.ai_paddle),
            ball=_ball_view(s.ball),
            extra_balls=[_ball_view(b) for b in s.pool.balls],
            power_up=power_up,
            particles=[
                ParticleView(
                    position=Point2D(x=p.x, y=p.y),
                    color=Color.from_rgb(p.color),
                    life=p.life,
                    size=p.size,
                )
                for p in s.pool.particles
            ],
            trail=[
                TrailView(position=Point2D(x=t.x, y=t.y), life=t.life)
                for t in s.pool.trail
            ],
            score=ScoreData(player=s.player_score, ai=s.ai_score),
            ai_personality=s.ai_state.personality,
            effect_seconds=s.timers.remaining_seconds(now),
            ability_charge=s.ability_charge,
            ability_active=s.ability_active,
            screen_shake=s.screen_shake,
            sound_bars=list(s.sound.bars),
        )


def _paddle_view(paddle: Paddle) -> PaddleView:
    return PaddleView(x=paddle.x, y=paddle.y, width=paddle.width, height=paddle.height)


def _ball_view(ball: Ball) -> BallView:
    return BallView(
        x=ball.x,
        y=ball.y,
        vx=ball.vx,
        vy=ball.vy,
        size=ball.size,
        color=Color.from_rgb(ball.color),
        primary=ball.primary,
    )
