"""
Pong Platform.

Shared infrastructure for the EnhancedPong game:
- logging: module loggers and structured match-record sinks
- game_state: Standard GameState enum reported to adapters
- clock: Injectable millisecond clocks for the simulation engine
"""

from pong_platform.game_state import GameState
from pong_platform.clock import Clock, SystemClock, ManualClock, TickClock, create_clock

__all__ = [
    'GameState',
    'Clock',
    'SystemClock',
    'ManualClock',
    'TickClock',
    'create_clock',
]
