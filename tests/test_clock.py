"""
Clock Tests

Run with: pytest tests/test_clock.py -v
"""

from pong_platform.clock import ManualClock, SystemClock, TickClock, create_clock


class TestManualClock:
    """Test the explicitly driven clock."""

    def test_starts_at_zero(self):
        assert ManualClock().now_ms() == 0.0

    def test_advance_and_set(self):
        clock = ManualClock(start_ms=100)
        clock.advance(250)
        assert clock.now_ms() == 350.0
        clock.set(7000)
        assert clock.now_ms() == 7000.0

    def test_negative_advance_ignored(self):
        clock = ManualClock(start_ms=100)
        clock.advance(-50)
        assert clock.now_ms() == 100.0

    def test_on_tick_does_nothing(self):
        clock = ManualClock()
        clock.on_tick()
        assert clock.now_ms() == 0.0


class TestTickClock:
    """Test the per-tick clock."""

    def test_advances_per_tick(self):
        clock = TickClock(tick_ms=16)
        for _ in range(10):
            clock.on_tick()
        assert clock.now_ms() == 160
        assert clock.tick_ms == 16


class TestSystemClock:
    """Test the wall clock."""

    def test_monotonic(self):
        clock = SystemClock()
        first = clock.now_ms()
        assert clock.now_ms() >= first


class TestCreateClock:
    """Test CLOCK_MODE selection."""

    def test_tick(self):
        clock = create_clock('tick', 20)
        assert isinstance(clock, TickClock)
        assert clock.tick_ms == 20

    def test_wall(self):
        assert isinstance(create_clock('wall'), SystemClock)

    def test_unknown_falls_back_to_wall(self):
        assert isinstance(create_clock('sundial'), SystemClock)
