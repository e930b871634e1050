"""
EnhancedPong data models.

These models define the two contracts between the simulation engine and
its collaborators: the per-tick InputFrame fed in by the input adapter,
and the read-only EngineSnapshot handed to the presentation adapter.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict

from pong_platform.game_state import GameState
from ..primitives import Color, Point2D
from .enums import EffectKind, InputAction, Personality, PowerUpType


class InputFrame(BaseModel):
    """Normalized input state for a single tick.

    Attributes:
        move_up: Player paddle up key is held
        move_down: Player paddle down key is held
        actions: Discrete events that happened since the last frame

    Examples:
        >>> frame = InputFrame(move_up=True, actions=(InputAction.TOGGLE_PAUSE,))
        >>> frame.has(InputAction.TOGGLE_PAUSE)
        True
    """
    move_up: bool = False
    move_down: bool = False
    actions: Tuple[InputAction, ...] = ()

    model_config = ConfigDict(frozen=True)

    def has(self, action: InputAction) -> bool:
        """Check whether the frame carries the given action."""
        return action in self.actions


class PaddleView(BaseModel):
    """Read-only paddle state."""
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    model_config = ConfigDict(frozen=True)


class BallView(BaseModel):
    """Read-only ball state (top-left position, like the paddles)."""
    x: float
    y: float
    vx: float
    vy: float
    size: float = Field(gt=0)
    color: Color
    primary: bool = False

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def speed(self) -> float:
        """Magnitude of the velocity vector."""
        return (self.vx ** 2 + self.vy ** 2) ** 0.5


class PowerUpView(BaseModel):
    """Read-only active power-up state."""
    x: float
    y: float
    size: float = Field(gt=0)
    power_type: PowerUpType
    pulse: float

    @field_validator('pulse')
    @classmethod
    def validate_pulse(cls, v: float) -> float:
        """Validate pulse phase is within [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f'Pulse must be in range [0, 1], got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def symbol(self) -> str:
        """HUD label for the power-up type."""
        return self.power_type.symbol


class ParticleView(BaseModel):
    """Read-only cosmetic particle."""
    position: Point2D
    color: Color
    life: float
    size: float = Field(gt=0)

    @field_validator('life')
    @classmethod
    def validate_life(cls, v: float) -> float:
        """Validate remaining life is within (0, 1]."""
        if not 0.0 < v <= 1.0:
            raise ValueError(f'Life must be in range (0, 1], got {v}')
        return v

    model_config = ConfigDict(frozen=True)


class TrailView(BaseModel):
    """Read-only ball-trail sample, newest first in the snapshot."""
    position: Point2D
    life: float

    @field_validator('life')
    @classmethod
    def validate_life(cls, v: float) -> float:
        """Validate remaining life is within (0, 1]."""
        if not 0.0 < v <= 1.0:
            raise ValueError(f'Life must be in range (0, 1], got {v}')
        return v

    model_config = ConfigDict(frozen=True)


class ScoreData(BaseModel):
    """Immutable match score.

    Attributes:
        player: Points scored by the human player (non-negative)
        ai: Points scored by the AI (non-negative)

    Examples:
        >>> score = ScoreData(player=3, ai=1)
        >>> score.differential
        2
    """
    player: int = 0
    ai: int = 0

    @field_validator('player', 'ai')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative."""
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def differential(self) -> int:
        """Player lead (negative when the AI leads)."""
        return self.player - self.ai

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"ScoreData(player={self.player}, ai={self.ai})"


class EngineSnapshot(BaseModel):
    """Everything the presentation adapter may read between ticks.

    Attributes:
        state: Platform-level game state (waiting, playing, paused, game over)
        player_paddle: Player paddle bounds
        ai_paddle: AI paddle bounds
        ball: Primary ball
        extra_balls: Power-up spawned balls
        power_up: Active power-up, or None when the slot is empty
        particles: Cosmetic particles
        trail: Primary ball trail samples, newest first
        score: Current match score
        ai_personality: AI behavior label
        effect_seconds: Whole seconds remaining for each active effect
        ability_charge: Special ability charge (0-100)
        ability_active: Whether the special ability is running
        screen_shake: Current screen-shake magnitude
        sound_bars: Sound visualization bar heights
    """
    state: GameState
    running: bool
    paused: bool
    started: bool
    player_paddle: PaddleView
    ai_paddle: PaddleView
    ball: BallView
    extra_balls: List[BallView] = Field(default_factory=list)
    power_up: Optional[PowerUpView] = None
    particles: List[ParticleView] = Field(default_factory=list)
    trail: List[TrailView] = Field(default_factory=list)
    score: ScoreData = Field(default_factory=ScoreData)
    ai_personality: Personality = Personality.NORMAL
    effect_seconds: Dict[EffectKind, int] = Field(default_factory=dict)
    ability_charge: int = Field(default=0, ge=0, le=100)
    ability_active: bool = False
    screen_shake: float = Field(default=0.0, ge=0.0)
    sound_bars: List[float] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def ability_fraction(self) -> float:
        """Ability charge as a fraction of full charge."""
        return self.ability_charge / 100.0

    @computed_field
    @property
    def ability_ready(self) -> bool:
        """Whether the ability can be activated right now."""
        return self.ability_charge >= 100 and not self.ability_active
