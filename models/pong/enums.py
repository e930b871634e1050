"""
EnhancedPong-specific enumerations.

These enums define the closed sets of power-ups, AI personalities,
effect timers and input actions used by the simulation engine.
"""

from enum import Enum


class PowerUpType(str, Enum):
    """Kinds of collectible power-up.

    Attributes:
        PADDLE_ENLARGE: Collector's paddle grows to the boosted height
        BALL_SLOW: Every ball slows down for a while
        MULTI_BALL: Two extra balls spawn at the primary ball
        SPEED_BOOST: Paddle hits accelerate the ball harder
        MAGNET: Primary ball is pulled toward the player paddle
        CONFUSE_AI: AI paddle wanders randomly instead of tracking
    """
    PADDLE_ENLARGE = "paddle_enlarge"
    BALL_SLOW = "ball_slow"
    MULTI_BALL = "multi_ball"
    SPEED_BOOST = "speed_boost"
    MAGNET = "magnet"
    CONFUSE_AI = "confuse_ai"

    @property
    def symbol(self) -> str:
        """Single-letter HUD label drawn on the power-up."""
        return _POWER_UP_SYMBOLS[self]


_POWER_UP_SYMBOLS = {
    PowerUpType.PADDLE_ENLARGE: "P",
    PowerUpType.BALL_SLOW: "S",
    PowerUpType.MULTI_BALL: "M",
    PowerUpType.SPEED_BOOST: "B",
    PowerUpType.MAGNET: "G",
    PowerUpType.CONFUSE_AI: "C",
}


class Personality(str, Enum):
    """AI behavior bias derived from the score differential.

    Attributes:
        NORMAL: Tracks the ball center
        AGGRESSIVE: Leads the ball along its vertical travel
        DEFENSIVE: Hangs back against the ball's vertical travel
    """
    NORMAL = "NORMAL"
    AGGRESSIVE = "AGGRESSIVE"
    DEFENSIVE = "DEFENSIVE"


class EffectKind(str, Enum):
    """Timed rule changes, each with its own absolute expiry."""
    PADDLE_BOOST = "paddle_boost"
    BALL_SLOW = "ball_slow"
    SPEED_BOOST = "speed_boost"
    MAGNET = "magnet"
    CONFUSE_AI = "confuse_ai"
    ABILITY = "ability"

    @property
    def label(self) -> str:
        """Human-readable name for the effect countdown HUD."""
        return _EFFECT_LABELS[self]


_EFFECT_LABELS = {
    EffectKind.PADDLE_BOOST: "Paddle Boost",
    EffectKind.BALL_SLOW: "Ball Slow",
    EffectKind.SPEED_BOOST: "Speed Boost",
    EffectKind.MAGNET: "Magnet",
    EffectKind.CONFUSE_AI: "AI Confused",
    EffectKind.ABILITY: "Ability",
}


class Side(str, Enum):
    """Which side of the table owns a paddle, score or power-up."""
    PLAYER = "player"
    AI = "ai"


class InputAction(str, Enum):
    """Discrete input events delivered alongside the movement flags.

    Attributes:
        TOGGLE_PAUSE: Pause or resume the match
        RESTART: Reset the whole match
        ACTIVATE_ABILITY: Fire the charged special ability
        ANY_KEY_TO_START: Leave the title screen
    """
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    ACTIVATE_ABILITY = "activate_ability"
    ANY_KEY_TO_START = "any_key_to_start"
