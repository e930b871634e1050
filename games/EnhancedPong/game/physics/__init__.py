"""EnhancedPong physics and collision detection."""

from .collision import (
    rects_overlap,
    reflect,
    check_wall_collision,
    check_paddle_collision,
    check_exit,
)

__all__ = [
    'rects_overlap',
    'reflect',
    'check_wall_collision',
    'check_paddle_collision',
    'check_exit',
]
