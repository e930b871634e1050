"""
EnhancedPong models package.

This package contains the enums and data models that make up the
engine's input and output contracts.
"""

from .enums import (
    PowerUpType,
    Personality,
    EffectKind,
    Side,
    InputAction,
)

from .models import (
    InputFrame,
    PaddleView,
    BallView,
    PowerUpView,
    ParticleView,
    TrailView,
    ScoreData,
    EngineSnapshot,
)

__all__ = [
    'PowerUpType',
    'Personality',
    'EffectKind',
    'Side',
    'InputAction',
    'InputFrame',
    'PaddleView',
    'BallView',
    'PowerUpView',
    'ParticleView',
    'TrailView',
    'ScoreData',
    'EngineSnapshot',
]
