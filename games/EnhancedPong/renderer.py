"""Pygame renderer - draws an EngineSnapshot.

The renderer never reads engine state directly; everything it needs is in
the snapshot, so it can be swapped out or run headless in tests.
"""

import random
from typing import Optional, Tuple

import pygame

from models.pong import EffectKind, EngineSnapshot
from pong_platform.game_state import GameState
from pong_platform.logging import get_logger

from .config import (
    FIELD_WIDTH, FIELD_HEIGHT, STAR_COUNT,
    COLORS, POWER_UP_COLORS,
)

log = get_logger('renderer')

PLAYER_PADDLE_COLORS = ((100, 255, 100), (0, 200, 0))
AI_PADDLE_COLORS = ((255, 100, 100), (200, 0, 0))
GLOW_ALPHA = 100
ABILITY_BAR_WIDTH = 100
SOUND_BAR_WIDTH = 4
CONTROLS_TEXT = "W/S: Move  |  P: Pause  |  R: Restart  |  SPACE: Ability"


class PongRenderer:
    """Draws the playfield, entities and HUD for one snapshot.

    Args:
        width: Surface width
        height: Surface height
        seed: Seed for the cosmetic randomness (stars, shake jitter)
    """

    def __init__(
        self,
        width: int = FIELD_WIDTH,
        height: int = FIELD_HEIGHT,
        seed: Optional[int] = None,
    ):
        self._width = width
        self._height = height
        self._rng = random.Random(seed)
        self._background = self._build_background()
        self._fonts = {}
        log.debug(f"Renderer ready at {width}x{height}")

    def _build_background(self) -> pygame.Surface:
        """Vertical gradient from background_top to background_bottom."""
        surface = pygame.Surface((self._width, self._height))
        top = COLORS['background_top']
        bottom = COLORS['background_bottom']
        for y in range(self._height):
            t = y / max(1, self._height - 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
            pygame.draw.line(surface, color, (0, y), (self._width, y))
        return surface

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self._fonts[key] = font
        return self._fonts[key]

    def _text(
        self,
        surface: pygame.Surface,
        text: str,
        pos: Tuple[int, int],
        color: Tuple[int, ...],
        size: int = 18,
        bold: bool = False,
    ) -> None:
        rendered = self._font(size, bold).render(text, True, color[:3])
        if len(color) == 4:
            rendered.set_alpha(color[3])
        surface.blit(rendered, pos)

    def render(self, snapshot: EngineSnapshot, screen: pygame.Surface) -> None:
        """Draw one frame.

        Args:
            snapshot: Engine state to draw
            screen: Target surface
        """
        frame = pygame.Surface((self._width, self._height))
        frame.blit(self._background, (0, 0))

        layer = pygame.Surface((self._width, self._height), pygame.SRCALPHA)
        self._render_stars(layer)
        self._render_center_line(layer)
        self._render_particles(snapshot, layer)
        self._render_trail(snapshot, layer)
        self._render_extra_balls(snapshot, layer)
        self._render_paddles(snapshot, layer)
        self._render_ball(snapshot, layer)
        self._render_power_up(snapshot, layer)
        self._render_sound_bars(snapshot, layer)
        self._render_hud(snapshot, layer)
        self._render_overlay(snapshot, layer)
        frame.blit(layer, (0, 0))

        offset = (0, 0)
        if snapshot.screen_shake > 0:
            offset = (
                int((self._rng.random() - 0.5) * snapshot.screen_shake),
                int((self._rng.random() - 0.5) * snapshot.screen_shake),
            )
        screen.fill((0, 0, 0))
        screen.blit(frame, offset)

    def _render_stars(self, layer: pygame.Surface) -> None:
        for _ in range(STAR_COUNT):
            x = self._rng.randrange(self._width)
            y = self._rng.randrange(self._height)
            size = self._rng.randint(1, 2)
            pygame.draw.ellipse(layer, COLORS['white'], (x, y, size, size))

    def _render_center_line(self, layer: pygame.Surface) -> None:
        color = (*COLORS['white'], GLOW_ALPHA)
        for y in range(0, self._height, 30):
            pygame.draw.rect(layer, color, (self._width // 2 - 1, y, 2, 15))

    def _render_particles(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        for p in snapshot.particles:
            color = (*p.color.as_rgb_tuple, int(p.life * 255))
            size = max(1, int(p.size))
            pygame.draw.ellipse(layer, color, (int(p.position.x), int(p.position.y), size, size))

    def _render_trail(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        count = len(snapshot.trail)
        ball_size = int(snapshot.ball.size)
        for i, sample in enumerate(snapshot.trail):
            alpha = int(sample.life * 255 * (1 - i / count))
            size = max(2, ball_size - i)
            rect = (int(sample.position.x) - size // 2, int(sample.position.y) - size // 2,
                    size, size)
            pygame.draw.ellipse(layer, (*COLORS['white'], alpha), rect)

    def _render_extra_balls(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        for ball in snapshot.extra_balls:
            rgb = ball.color.as_rgb_tuple
            x, y, size = int(ball.x), int(ball.y), int(ball.size)
            for i in (2, 1):
                pygame.draw.ellipse(layer, (*rgb, GLOW_ALPHA),
                                    (x - i, y - i, size + i * 2, size + i * 2))
            pygame.draw.ellipse(layer, rgb, (x, y, size, size))

    def _render_paddles(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        for paddle, (top, bottom) in (
            (snapshot.player_paddle, PLAYER_PADDLE_COLORS),
            (snapshot.ai_paddle, AI_PADDLE_COLORS),
        ):
            width, height = int(paddle.width), int(paddle.height)
            surface = pygame.Surface((width, height), pygame.SRCALPHA)
            for y in range(height):
                t = y / max(1, height - 1)
                color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
                pygame.draw.line(surface, color, (0, y), (width, y))
            mask = pygame.Surface((width, height), pygame.SRCALPHA)
            pygame.draw.rect(mask, (255, 255, 255, 255), (0, 0, width, height),
                             border_radius=5)
            surface.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
            layer.blit(surface, (int(paddle.x), int(paddle.y)))

    def _render_ball(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        ball = snapshot.ball
        x, y, size = int(ball.x), int(ball.y), int(ball.size)
        pygame.draw.ellipse(layer, (*COLORS['white'], GLOW_ALPHA),
                            (x - 2, y - 2, size + 4, size + 4))
        pygame.draw.ellipse(layer, COLORS['white'], (x, y, size, size))

    def _render_power_up(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        power_up = snapshot.power_up
        if power_up is None:
            return
        size = int(power_up.size)
        pulse_size = int(size * (1 + power_up.pulse * 0.3))
        offset = (pulse_size - size) // 2
        x, y = int(power_up.x) - offset, int(power_up.y) - offset
        color = (*POWER_UP_COLORS[power_up.power_type.value], 200)
        pygame.draw.rect(layer, color, (x, y, pulse_size, pulse_size))
        self._text(layer, power_up.symbol, (x + 6, y + 4), (0, 0, 0), size=18, bold=True)

    def _render_sound_bars(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        color = (*COLORS['white'], GLOW_ALPHA)
        for i, value in enumerate(snapshot.sound_bars):
            height = int(value)
            if height <= 0:
                continue
            x = 10 + i * (SOUND_BAR_WIDTH + 2)
            pygame.draw.rect(layer, color,
                             (x, self._height - 20 - height, SOUND_BAR_WIDTH, height))

    def _render_hud(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        # Scores with a soft drop glow
        player, ai = str(snapshot.score.player), str(snapshot.score.ai)
        px, ax = self._width // 4 - 50, self._width * 3 // 4 - 20
        self._text(layer, player, (px, 30), (100, 255, 100, 150), size=64, bold=True)
        self._text(layer, player, (px, 25), COLORS['green'], size=64, bold=True)
        self._text(layer, ai, (ax, 30), (255, 100, 100, 150), size=64, bold=True)
        self._text(layer, ai, (ax, 25), COLORS['red'], size=64, bold=True)

        # Ability charge above the player paddle
        paddle = snapshot.player_paddle
        if snapshot.ability_charge > 0:
            bar_y = int(paddle.y) - 15
            charged = int(ABILITY_BAR_WIDTH * snapshot.ability_fraction)
            pygame.draw.rect(layer, COLORS['dark_gray'],
                             (int(paddle.x), bar_y, ABILITY_BAR_WIDTH, 8))
            pygame.draw.rect(layer, COLORS['cyan'], (int(paddle.x), bar_y, charged, 8))
            if snapshot.ability_ready:
                self._text(layer, "READY!", (int(paddle.x), bar_y - 16), COLORS['yellow'])

        ai_paddle = snapshot.ai_paddle
        self._text(layer, f"AI: {snapshot.ai_personality.value}",
                   (int(ai_paddle.x) - 50, int(ai_paddle.y) - 20), COLORS['white'], size=16)

        # Effect countdowns stack upward from the bottom-right corner
        y = self._height - 20
        for kind in EffectKind:
            if kind == EffectKind.ABILITY or kind not in snapshot.effect_seconds:
                continue
            self._text(layer, f"{kind.label}: {snapshot.effect_seconds[kind]}s",
                       (self._width - 170, y), COLORS['white'], size=16)
            y -= 15

        self._text(layer, CONTROLS_TEXT, (10, self._height - 14), COLORS['white'], size=16)

    def _render_overlay(self, snapshot: EngineSnapshot, layer: pygame.Surface) -> None:
        messages = {
            GameState.WAITING: ("Press ANY KEY to Start", 48),
            GameState.PAUSED: ("Paused", 48),
            GameState.GAME_OVER: ("Game Over", 64),
        }
        if snapshot.state not in messages:
            return
        text, size = messages[snapshot.state]
        rendered = self._font(size, bold=True).render(text, True, COLORS['yellow'])
        rect = rendered.get_rect(center=(self._width // 2, self._height // 2))
        layer.blit(rendered, rect)
