"""Collision detection and physics for EnhancedPong.

Handles ball-wall, ball-paddle and power-up overlap tests, and the
paddle reflection that gives steeper angles near the paddle edges.
"""

import math
from typing import Literal, Optional, Tuple, TYPE_CHECKING

from models import Rectangle

from ...config import (
    MAX_BOUNCE_ANGLE_DEG,
    BALL_SPEED_INCREMENT, BALL_SPEED_CAP,
    BOOSTED_SPEED_INCREMENT, BOOSTED_SPEED_CAP,
)

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle

MAX_BOUNCE_ANGLE = math.radians(MAX_BOUNCE_ANGLE_DEG)


def rects_overlap(a: Rectangle, b: Rectangle) -> bool:
    """Axis-aligned rectangle intersection.

    Rectangles that only share an edge do not overlap.

    Args:
        a: First rectangle
        b: Second rectangle

    Returns:
        True if the interiors intersect
    """
    return (a.left < b.right and b.left < a.right and
            a.top < b.bottom and b.top < a.bottom)


def reflect(
    ball_center_y: float,
    paddle_y: float,
    paddle_height: float,
    incoming_speed: float,
    moving_right: bool,
    boosted: bool = False,
) -> Tuple[float, float]:
    """Compute the ball velocity after a paddle hit.

    The vertical offset between ball center and paddle center is
    normalized to [-1, 1] and scaled to at most 60 degrees. Each hit also
    speeds the ball up: +0.2 capped at 12 normally, +1.0 capped at 15
    while the speed-boost effect is active.

    Args:
        ball_center_y: Ball center Y at impact
        paddle_y: Paddle top Y
        paddle_height: Paddle height
        incoming_speed: Ball speed before the hit
        moving_right: True when the ball leaves toward the right (player hit)
        boosted: Whether the speed-boost effect is active

    Returns:
        New (vx, vy)
    """
    half = paddle_height / 2.0
    offset = (ball_center_y - (paddle_y + half)) / half
    offset = max(-1.0, min(1.0, offset))
    angle = offset * MAX_BOUNCE_ANGLE

    if boosted:
        speed = min(BOOSTED_SPEED_CAP, incoming_speed + BOOSTED_SPEED_INCREMENT)
    else:
        speed = min(BALL_SPEED_CAP, incoming_speed + BALL_SPEED_INCREMENT)

    direction = 1.0 if moving_right else -1.0
    return direction * speed * math.cos(angle), speed * math.sin(angle)


def check_wall_collision(
    ball: 'Ball',
    field_height: float,
) -> Optional[Literal["top", "bottom"]]:
    """Check and handle ball-wall collisions.

    The ball is clamped back inside the field and its vertical velocity
    is inverted.

    Args:
        ball: Ball to check (mutated on hit)
        field_height: Playfield height in pixels

    Returns:
        Wall that was hit, or None
    """
    if ball.y <= 0:
        ball.y = 0.0
        ball.bounce_vertical()
        return "top"
    if ball.y + ball.size >= field_height:
        ball.y = field_height - ball.size
        ball.bounce_vertical()
        return "bottom"
    return None


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball touches paddle.

    Edges count as contact so a ball grazing the paddle face is still
    returned.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    return ball.rect.touches(paddle.rect)


def check_exit(
    ball: 'Ball',
    field_width: float,
) -> Optional[Literal["left", "right"]]:
    """Check whether the ball has fully left the field horizontally.

    Args:
        ball: Ball to check
        field_width: Playfield width in pixels

    Returns:
        Side the ball left through, or None while still in play
    """
    if ball.x + ball.size < 0:
        return "left"
    if ball.x > field_width:
        return "right"
    return None
