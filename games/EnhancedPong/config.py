"""Configuration for EnhancedPong.

Gameplay constants are fixed module values. Host settings (tick period,
seed, clock mode, cosmetics) load from a .env file next to this module,
with the process environment taking precedence.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, None when unset or empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else None


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


# Host settings
TICK_MS: int = _get_int('TICK_MS', 16)  # ~60 FPS
RANDOM_SEED: Optional[int] = _get_optional_int('RANDOM_SEED')
CLOCK_MODE: str = _get_str('CLOCK_MODE', 'wall')  # 'wall' or 'tick'
STAR_COUNT: int = _get_int('STAR_COUNT', 50)
WINDOW_TITLE: str = _get_str('WINDOW_TITLE', 'Enhanced Pong - AI + Power-ups + Visual Effects')

# Playfield
FIELD_WIDTH: int = 900
FIELD_HEIGHT: int = 600

# Paddles
PADDLE_WIDTH: int = 12
PADDLE_HEIGHT: int = 100
PADDLE_BOOSTED_HEIGHT: int = 160
PLAYER_PADDLE_X: int = 30
AI_PADDLE_X: int = FIELD_WIDTH - 30 - PADDLE_WIDTH
PLAYER_PADDLE_SPEED: float = 6.0

# Ball physics
BALL_SIZE: int = 14
BALL_SERVE_SPEED: float = 5.0
BALL_SERVE_MAX_ANGLE_DEG: float = 30.0  # +/- from horizontal
MAX_BOUNCE_ANGLE_DEG: float = 60.0
BALL_SPEED_INCREMENT: float = 0.2
BALL_SPEED_CAP: float = 12.0
BOOSTED_SPEED_INCREMENT: float = 1.0
BOOSTED_SPEED_CAP: float = 15.0
MIN_BALL_SPEED: float = 4.5  # floor outside slow windows
BALL_SLOW_FACTOR: float = 0.55
NORMAL_TARGET_SPEED: float = 5.5
BOOSTED_TARGET_SPEED: float = 8.0
MIN_NORMALIZED_SPEED: float = 4.5
MAX_NORMALIZED_SPEED: float = 12.0

# Extra balls
EXTRA_BALL_COUNT: int = 2
EXTRA_BALL_SPEED: float = 6.0
EXTRA_BALL_CONE_DEG: float = 90.0

# Power-ups
POWER_UP_SIZE: int = 20
POWER_UP_SPAWN_INTERVAL_MS: int = 10_000
POWER_UP_PULSE_STEP: float = 0.05
POWER_UP_MARGIN_Y: int = 30

# Effect durations (milliseconds)
PADDLE_BOOST_MS: int = 7_000
BALL_SLOW_MS: int = 6_000
SPEED_BOOST_MS: int = 5_000
MAGNET_MS: int = 8_000
CONFUSE_AI_MS: int = 5_000
ABILITY_MS: int = 3_000

# Magnet
MAGNET_RANGE: float = 100.0
MAGNET_STRENGTH: float = 0.03

# Special ability
MAX_ABILITY_CHARGE: int = 100
ABILITY_CHARGE_PER_HIT: int = 10
ABILITY_PARTICLE_COUNT: int = 50

# AI
AI_INITIAL_MAX_SPEED: float = 4.0
AI_INITIAL_REACTION: float = 0.12
AI_BASE_MAX_SPEED: float = 4.5
AI_BASE_REACTION: float = 0.12
AI_MAX_SPEED_CAP: float = 7.5
AI_MAX_SPEED_FLOOR: float = 3.0
AI_REACTION_CAP: float = 0.37
AI_REACTION_FLOOR: float = 0.08
AI_AGGRESSIVE_LEAD: int = 3     # player lead that makes the AI aggressive
AI_DEFENSIVE_DEFICIT: int = 2   # AI lead that makes it defensive
AI_AGGRESSIVE_BIAS: float = 20.0
AI_DEFENSIVE_BIAS: float = 10.0
AI_CONFUSED_JITTER: int = 3

# Cosmetics
PARTICLE_BURST: int = 8
PARTICLE_MAX_VELOCITY: float = 4.0
PARTICLE_DECAY: float = 0.02
TRAIL_DECAY: float = 0.05
TRAIL_LENGTH: int = 10
SCREEN_SHAKE_ON_SCORE: float = 5.0
SCREEN_SHAKE_DECAY: float = 0.9
SCREEN_SHAKE_CUTOFF: float = 0.1
SOUND_BAR_COUNT: int = 20
SOUND_BAR_HOLD_MS: int = 100
SOUND_BAR_DECAY: float = 0.9

# Colors
COLORS: Dict[str, Tuple[int, int, int]] = {
    'white': (255, 255, 255),
    'cyan': (0, 255, 255),
    'green': (0, 255, 0),
    'red': (255, 0, 0),
    'yellow': (255, 255, 0),
    'orange': (255, 200, 0),
    'dark_gray': (64, 64, 64),
    'background_top': (10, 10, 40),
    'background_bottom': (5, 5, 20),
}

# Power-up tint per type value
POWER_UP_COLORS: Dict[str, Tuple[int, int, int]] = {
    'paddle_enlarge': (0, 255, 255),
    'ball_slow': (255, 200, 0),
    'multi_ball': (255, 0, 255),
    'speed_boost': (255, 100, 100),
    'magnet': (100, 255, 100),
    'confuse_ai': (255, 100, 255),
}
