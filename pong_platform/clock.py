"""
Injectable millisecond clocks.

The simulation engine never reads the host clock directly. Every expiry
(effect timers, power-up spawn interval, sound-bar decay) is expressed in
absolute milliseconds from one of these clocks, so the same engine code
runs against wall time in the game and against simulated time in tests.

Clocks:
    SystemClock: Monotonic wall time. Timers keep running while paused.
    TickClock: Advances a fixed step each executed tick. Timers pause
        with the game.
    ManualClock: Only moves when told to. Used by tests.

Usage:
    clock = ManualClock()
    engine = PongEngine(clock=clock, seed=7)
    clock.advance(7000)
    engine.update()
"""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Abstract millisecond clock read by the simulation engine."""

    @abstractmethod
    def now_ms(self) -> float:
        """Current time in milliseconds."""
        pass

    def on_tick(self) -> None:
        """Hook called by the engine once per executed tick."""
        pass


class SystemClock(Clock):
    """Wall clock backed by time.monotonic()."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class TickClock(Clock):
    """Simulated clock that advances tick_ms on every executed tick.

    Because the engine only calls on_tick() for ticks that actually run,
    paused or idle time never reaches effect timers.

    Args:
        tick_ms: Milliseconds added per tick (default 16)
        start_ms: Initial reading
    """

    def __init__(self, tick_ms: float = 16.0, start_ms: float = 0.0):
        self._tick_ms = tick_ms
        self._now = start_ms

    @property
    def tick_ms(self) -> float:
        """Milliseconds added per executed tick."""
        return self._tick_ms

    def now_ms(self) -> float:
        return self._now

    def on_tick(self) -> None:
        self._now += self._tick_ms


class ManualClock(Clock):
    """Clock that only moves when advanced explicitly.

    Examples:
        >>> clock = ManualClock()
        >>> clock.advance(250)
        >>> clock.now_ms()
        250.0
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        """Move the clock forward by ms milliseconds (negative values ignored)."""
        self._now += max(0.0, ms)

    def set(self, ms: float) -> None:
        """Jump to an absolute reading."""
        self._now = float(ms)


def create_clock(mode: str, tick_ms: float = 16.0) -> Clock:
    """Build the clock named by a CLOCK_MODE setting.

    Args:
        mode: 'wall' for SystemClock, 'tick' for TickClock
        tick_ms: Step used by TickClock

    Returns:
        Clock instance, SystemClock for unknown modes
    """
    if mode.lower() == 'tick':
        return TickClock(tick_ms=tick_ms)
    return SystemClock()
