"""Common GameState enum for the EnhancedPong engine and its adapters.

The engine tracks a handful of independent flags (started, running,
paused). Adapters only need one of these standard states to decide
which overlay to draw.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states reported by the simulation engine.

    States:
        WAITING: Match not started yet ("press any key")
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused (manual pause)
        GAME_OVER: Match stopped; ticks no longer advance

    Usage in an adapter:
        from pong_platform.game_state import GameState

        if snapshot.state == GameState.PAUSED:
            draw_overlay("Paused")
    """
    WAITING = "waiting"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"

    @classmethod
    def from_flags(cls, running: bool, paused: bool, started: bool) -> 'GameState':
        """Map the engine's flags onto a single state.

        A stopped match wins over everything else, then the title screen,
        then pause.
        """
        if not running:
            return cls.GAME_OVER
        if not started:
            return cls.WAITING
        if paused:
            return cls.PAUSED
        return cls.PLAYING
