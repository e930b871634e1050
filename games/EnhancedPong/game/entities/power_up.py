"""Collectible power-up with a ping-pong pulse animation."""

from models import Rectangle
from models.pong import PowerUpType


class PowerUp:
    """A single power-up waiting to be collected.

    The pulse phase oscillates 0 -> 1 -> 0 by a fixed step per tick and is
    purely cosmetic; it is clamped to [0, 1] so float drift never leaks
    out to the renderer.
    """

    def __init__(
        self,
        x: float,
        y: float,
        power_type: PowerUpType,
        size: float = 20.0,
        pulse_step: float = 0.05,
    ):
        self.x = x
        self.y = y
        self.power_type = power_type
        self.size = size
        self.pulse = 0.0
        self.growing = True
        self.active = True
        self._pulse_step = pulse_step

    @property
    def rect(self) -> Rectangle:
        """Get power-up bounding rectangle."""
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def update(self) -> None:
        """Advance the pulse animation one tick."""
        if self.growing:
            self.pulse = min(1.0, self.pulse + self._pulse_step)
            if self.pulse >= 1.0:
                self.growing = False
        else:
            self.pulse = max(0.0, self.pulse - self._pulse_step)
            if self.pulse <= 0.0:
                self.growing = True

    def __repr__(self) -> str:
        return f"PowerUp({self.power_type.value} at {self.x:.0f},{self.y:.0f})"
