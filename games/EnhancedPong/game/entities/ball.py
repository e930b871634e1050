"""Ball entity with per-tick velocity integration.

Positions are the ball's top-left corner and move in whole-pixel steps:
each tick adds the velocity rounded half-up, matching the integer
positions the game has always used.
"""

from dataclasses import dataclass
import math
from typing import Tuple

from models import Rectangle


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded toward +inf."""
    return int(math.floor(value + 0.5))


@dataclass
class BallConfig:
    """Ball configuration."""

    size: float = 14.0
    serve_speed: float = 5.0


class Ball:
    """Ball with velocity-based movement and bouncing physics."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        color: Tuple[int, int, int] = (255, 255, 255),
        primary: bool = False,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Top-left X position
            y: Top-left Y position
            vx: X velocity (pixels/tick)
            vy: Y velocity (pixels/tick)
            color: RGB color (extra balls get random colors)
            primary: Whether this is the match ball that scores
        """
        self._config = config
        self.x = float(x)
        self.y = float(y)
        self.vx = vx
        self.vy = vy
        self.color = color
        self.primary = primary
        self.active = True

    @property
    def size(self) -> float:
        """Get ball size (diameter)."""
        return self._config.size

    @property
    def speed(self) -> float:
        """Get current ball speed."""
        return math.hypot(self.vx, self.vy)

    @property
    def center_x(self) -> float:
        """Get ball center X."""
        return self.x + self._config.size / 2.0

    @property
    def center_y(self) -> float:
        """Get ball center Y."""
        return self.y + self._config.size / 2.0

    @property
    def rect(self) -> Rectangle:
        """Get ball bounding rectangle."""
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def step(self) -> None:
        """Advance one tick, moving by the velocity rounded to whole pixels."""
        self.x += round_half_up(self.vx)
        self.y += round_half_up(self.vy)

    def serve(self, x: float, y: float, angle_rad: float, toward_left: bool) -> None:
        """Place the ball and launch it at the serve speed.

        Args:
            x: Top-left X
            y: Top-left Y
            angle_rad: Angle from horizontal
            toward_left: Serve toward the left (player) side
        """
        speed = self._config.serve_speed
        direction = -1.0 if toward_left else 1.0
        self.x = float(x)
        self.y = float(y)
        self.vx = speed * direction * math.cos(angle_rad)
        self.vy = speed * math.sin(angle_rad)

    def bounce_vertical(self) -> None:
        """Bounce off a horizontal wall (reverse Y velocity)."""
        self.vy = -self.vy

    def scale_velocity(self, factor: float) -> None:
        """Multiply both velocity components by factor."""
        self.vx *= factor
        self.vy *= factor

    def set_speed(self, target: float) -> None:
        """Rescale velocity to the target speed, keeping direction.

        A stationary ball is treated as having speed 1 so the result
        stays finite.
        """
        speed = self.speed
        if speed == 0:
            speed = 1.0
        self.scale_velocity(target / speed)

    def deactivate(self) -> None:
        """Mark ball as out of play."""
        self.active = False

    def __repr__(self) -> str:
        return (f"Ball(x={self.x:.0f}, y={self.y:.0f}, vx={self.vx:.2f}, "
                f"vy={self.vy:.2f}, primary={self.primary})")
