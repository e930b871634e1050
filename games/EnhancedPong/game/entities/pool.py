"""Bounded pools of short-lived entities.

Holds the extra balls, cosmetic particles and the primary ball's trail.
Expired entries are dropped by rebuilding the list rather than deleting
while iterating, so an advance pass always sees every entry exactly once.
"""

import random
from dataclasses import dataclass
from typing import List, Tuple

from .ball import Ball


@dataclass
class Particle:
    """Cosmetic spark that drifts and fades out."""

    x: float
    y: float
    vx: float
    vy: float
    color: Tuple[int, int, int]
    size: float
    life: float = 1.0

    def update(self, decay: float) -> bool:
        """Move and fade one tick. Returns False once the particle is dead."""
        self.x += self.vx
        self.y += self.vy
        self.life -= decay
        return self.life > 0


@dataclass
class TrailSample:
    """Fading marker left at the primary ball's center."""

    x: float
    y: float
    life: float = 1.0

    def update(self, decay: float) -> bool:
        """Fade one tick. Returns False once the sample is gone."""
        self.life -= decay
        return self.life > 0


class EntityPool:
    """Ordered collections of extra balls, particles and trail samples.

    Args:
        rng: Random source for particle velocity and size
        trail_length: Maximum trail samples kept (newest first)
        particle_decay: Life lost per tick by each particle
        trail_decay: Life lost per tick by each trail sample
        max_velocity: Particle velocity range per axis is [-max, max)
    """

    def __init__(
        self,
        rng: random.Random,
        trail_length: int = 10,
        particle_decay: float = 0.02,
        trail_decay: float = 0.05,
        max_velocity: float = 4.0,
    ):
        self._rng = rng
        self._trail_length = trail_length
        self._particle_decay = particle_decay
        self._trail_decay = trail_decay
        self._max_velocity = max_velocity
        self.balls: List[Ball] = []
        self.particles: List[Particle] = []
        self.trail: List[TrailSample] = []

    def spawn_particles(
        self,
        x: float,
        y: float,
        color: Tuple[int, int, int],
        count: int = 8,
    ) -> None:
        """Append count particles at (x, y) with randomized velocity and size."""
        spread = self._max_velocity * 2
        for _ in range(count):
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=(self._rng.random() - 0.5) * spread,
                vy=(self._rng.random() - 0.5) * spread,
                color=color,
                size=self._rng.random() * 4 + 2,
            ))

    def record_trail(self, x: float, y: float) -> None:
        """Insert a fresh trail sample at the front, dropping the oldest."""
        self.trail.insert(0, TrailSample(x=x, y=y))
        del self.trail[self._trail_length:]

    def advance_trail(self) -> None:
        """Fade trail samples and drop the expired ones."""
        self.trail = [s for s in self.trail if s.update(self._trail_decay)]

    def advance_particles(self) -> None:
        """Move and fade particles and drop the expired ones."""
        self.particles = [p for p in self.particles if p.update(self._particle_decay)]

    def add_ball(self, ball: Ball) -> None:
        """Track a new extra ball."""
        self.balls.append(ball)

    def prune_balls(self) -> int:
        """Drop inactive extra balls. Returns how many were removed."""
        before = len(self.balls)
        self.balls = [b for b in self.balls if b.active]
        return before - len(self.balls)


class SoundBars:
    """Cosmetic sound visualization meter.

    Every "sound" (wall bounce, paddle hit) kicks all bars up to a random
    height; after a short hold the bars decay geometrically and snap to
    zero below 1.
    """

    def __init__(
        self,
        rng: random.Random,
        count: int = 20,
        hold_ms: float = 100.0,
        decay: float = 0.9,
    ):
        self._rng = rng
        self._hold_ms = hold_ms
        self._decay = decay
        self._last_sound_ms = 0.0
        self.bars: List[float] = [0.0] * count

    def trigger(self, now_ms: float) -> None:
        """Register a sound at now_ms."""
        self._last_sound_ms = now_ms
        self.bars = [10.0 + self._rng.random() * 5.0 for _ in self.bars]

    def update(self, now_ms: float) -> None:
        """Decay the bars once the hold window has passed."""
        decay = self._decay if now_ms - self._last_sound_ms > self._hold_ms else 1.0
        self.bars = [v * decay if v * decay >= 1.0 else 0.0 for v in self.bars]
