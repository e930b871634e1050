"""
Tests for EnhancedPong collision detection and paddle reflection.
"""

import math

import pytest

from games.EnhancedPong.game.entities import Ball, BallConfig, Paddle, PaddleConfig
from games.EnhancedPong.game.physics import (
    check_exit,
    check_paddle_collision,
    check_wall_collision,
    rects_overlap,
    reflect,
)
from models import Rectangle


def make_ball(x, y, vx=0.0, vy=0.0):
    return Ball(BallConfig(size=14), x, y, vx, vy)


def make_paddle(x=30):
    # Centered on a 600px field: y = 250, bottom = 350
    return Paddle(PaddleConfig(x=x), 600)


class TestRectsOverlap:
    """Test axis-aligned rectangle intersection."""

    def test_overlapping(self):
        a = Rectangle(x=0, y=0, width=20, height=20)
        b = Rectangle(x=10, y=10, width=20, height=20)
        assert rects_overlap(a, b)
        assert rects_overlap(b, a)

    def test_contained(self):
        outer = Rectangle(x=0, y=0, width=100, height=100)
        inner = Rectangle(x=40, y=40, width=10, height=10)
        assert rects_overlap(outer, inner)

    def test_shared_edge_is_not_overlap(self):
        a = Rectangle(x=0, y=0, width=20, height=20)
        b = Rectangle(x=20, y=0, width=20, height=20)
        assert not rects_overlap(a, b)

    def test_separate(self):
        a = Rectangle(x=0, y=0, width=20, height=20)
        b = Rectangle(x=0, y=50, width=20, height=20)
        assert not rects_overlap(a, b)


class TestReflect:
    """Test paddle reflection angle and speed escalation."""

    def test_center_hit_is_horizontal(self):
        vx, vy = reflect(300, 250, 100, 5.0, moving_right=True)
        assert vy == pytest.approx(0.0)
        assert vx == pytest.approx(5.2)

    def test_top_edge_deflects_sixty_degrees_up(self):
        vx, vy = reflect(250, 250, 100, 5.0, moving_right=True)
        assert math.degrees(math.atan2(vy, vx)) == pytest.approx(-60.0)

    def test_bottom_edge_deflects_sixty_degrees_down(self):
        vx, vy = reflect(350, 250, 100, 5.0, moving_right=True)
        assert math.degrees(math.atan2(vy, vx)) == pytest.approx(60.0)

    def test_symmetric_offsets(self):
        _, vy_up = reflect(275, 250, 100, 5.0, moving_right=True)
        _, vy_down = reflect(325, 250, 100, 5.0, moving_right=True)
        assert vy_up == pytest.approx(-vy_down)

    def test_offset_beyond_paddle_is_clamped(self):
        edge = reflect(350, 250, 100, 5.0, moving_right=True)
        beyond = reflect(380, 250, 100, 5.0, moving_right=True)
        assert beyond == pytest.approx(edge)

    def test_direction_follows_side(self):
        vx_right, _ = reflect(300, 250, 100, 5.0, moving_right=True)
        vx_left, _ = reflect(300, 250, 100, 5.0, moving_right=False)
        assert vx_right > 0
        assert vx_left < 0

    def test_speed_increment_is_capped(self):
        vx, vy = reflect(320, 250, 100, 11.9, moving_right=True)
        assert math.hypot(vx, vy) == pytest.approx(12.0)
        vx, vy = reflect(320, 250, 100, 12.0, moving_right=True)
        assert math.hypot(vx, vy) == pytest.approx(12.0)

    def test_boosted_increment_and_cap(self):
        vx, vy = reflect(300, 250, 100, 5.0, moving_right=True, boosted=True)
        assert math.hypot(vx, vy) == pytest.approx(6.0)
        vx, vy = reflect(300, 250, 100, 14.5, moving_right=True, boosted=True)
        assert math.hypot(vx, vy) == pytest.approx(15.0)

    def test_boosted_paddle_height_changes_angle(self):
        # Same offset from center, taller paddle -> shallower angle
        _, vy_normal = reflect(340, 250, 100, 5.0, moving_right=True)
        _, vy_tall = reflect(340, 220, 160, 5.0, moving_right=True)
        assert abs(vy_tall) < abs(vy_normal)


class TestWallCollision:
    """Test top and bottom wall bounces."""

    def test_top_wall(self):
        ball = make_ball(100, -3, vx=4, vy=-2)
        assert check_wall_collision(ball, 600) == "top"
        assert ball.y == 0
        assert ball.vy == 2

    def test_bottom_wall(self):
        ball = make_ball(100, 590, vx=4, vy=3)
        assert check_wall_collision(ball, 600) == "bottom"
        assert ball.y == 586
        assert ball.vy == -3

    def test_no_collision(self):
        ball = make_ball(100, 300, vx=4, vy=3)
        assert check_wall_collision(ball, 600) is None
        assert ball.y == 300
        assert ball.vy == 3


class TestPaddleCollision:
    """Test inclusive ball/paddle contact."""

    def test_ball_touching_face(self):
        # Paddle spans x 30..42
        ball = make_ball(42, 290)
        assert check_paddle_collision(ball, make_paddle())

    def test_ball_just_past_face(self):
        ball = make_ball(43, 290)
        assert not check_paddle_collision(ball, make_paddle())

    def test_ball_grazing_top_corner(self):
        # Ball bottom edge exactly on paddle top (250)
        ball = make_ball(35, 236)
        assert check_paddle_collision(ball, make_paddle())

    def test_ball_above_paddle(self):
        ball = make_ball(35, 200)
        assert not check_paddle_collision(ball, make_paddle())


class TestExit:
    """Test off-field detection."""

    @pytest.mark.parametrize("x,expected", [
        (-15, "left"),
        (-14, None),
        (450, None),
        (900, None),
        (901, "right"),
    ])
    def test_exit_sides(self, x, expected):
        assert check_exit(make_ball(x, 300), 900) == expected
