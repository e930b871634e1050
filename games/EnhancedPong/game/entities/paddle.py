"""Paddle entity with vertical movement clamped to the playfield.

Both sides use the same class. The player paddle is driven by input
flags, the AI paddle by the AI controller; either way the position is
clamped so that 0 <= y <= field_height - height holds after every change.
"""

from dataclasses import dataclass

from models import Rectangle


@dataclass
class PaddleConfig:
    """Paddle configuration."""

    x: float
    width: float = 12.0
    height: int = 100
    speed: float = 6.0


class Paddle:
    """Vertical paddle at a fixed horizontal position."""

    def __init__(self, config: PaddleConfig, field_height: float):
        """Initialize paddle centered vertically.

        Args:
            config: Paddle configuration
            field_height: Playfield height in pixels
        """
        self._config = config
        self._field_height = field_height
        self._height = config.height
        self._y = 0.0
        self.center()

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._config.x

    @property
    def y(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def width(self) -> float:
        """Get paddle width."""
        return self._config.width

    @property
    def height(self) -> int:
        """Get current paddle height (power-ups change it)."""
        return self._height

    @property
    def speed(self) -> float:
        """Get per-tick movement speed for input-driven motion."""
        return self._config.speed

    @property
    def right(self) -> float:
        """Get paddle right edge X."""
        return self._config.x + self._config.width

    @property
    def bottom(self) -> float:
        """Get paddle bottom Y."""
        return self._y + self._height

    @property
    def center_y(self) -> float:
        """Get paddle vertical center."""
        return self._y + self._height / 2.0

    @property
    def max_y(self) -> float:
        """Largest legal top Y for the current height."""
        return max(0.0, self._field_height - self._height)

    @property
    def rect(self) -> Rectangle:
        """Get paddle bounding rectangle."""
        return Rectangle(x=self.x, y=self._y, width=self.width, height=self._height)

    def move_to(self, y: float) -> None:
        """Place the paddle top at y, clamped to the field."""
        self._y = max(0.0, min(self.max_y, y))

    def move_by(self, dy: float) -> None:
        """Shift the paddle by dy, clamped to the field."""
        self.move_to(self._y + dy)

    def steer(self, up: bool, down: bool) -> None:
        """Apply one tick of input-driven movement.

        Args:
            up: Move up this tick
            down: Move down this tick (both cancel out)
        """
        dy = 0.0
        if up:
            dy -= self._config.speed
        if down:
            dy += self._config.speed
        self.move_by(dy)

    def set_height(self, height: int) -> None:
        """Change paddle height, re-clamping the position."""
        self._height = height
        self.move_to(self._y)

    def center(self) -> None:
        """Restore the default height and center the paddle vertically."""
        self._height = self._config.height
        self._y = float(self._field_height // 2 - self._height // 2)
