"""
Unified models library for the EnhancedPong project.

This package provides all Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Color, Rectangle)
- Pong: Engine input/output contracts (InputFrame, EngineSnapshot, ...)

Usage:
    >>> from models import Rectangle, EngineSnapshot
    >>> from models.pong import PowerUpType, Personality
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Color,
    Rectangle,
)

# ============================================================================
# Pong models
# ============================================================================
from .pong import (
    PowerUpType,
    Personality,
    EffectKind,
    Side,
    InputAction,
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
    # Primitives
    'Point2D',
    'Color',
    'Rectangle',
    # Pong
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
