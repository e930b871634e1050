"""EnhancedPong game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig, round_half_up
from .power_up import PowerUp
from .pool import EntityPool, Particle, TrailSample, SoundBars

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig', 'round_half_up',
    'PowerUp',
    'EntityPool', 'Particle', 'TrailSample', 'SoundBars',
]
