"""Absolute-time expiry timers for temporary rule changes.

An effect is active while now < expiry. Once now reaches the expiry the
timer disarms itself the first time pop_expired() sees it, so each arming
produces exactly one revert no matter how often expiry is checked.
"""

from typing import Dict, List, Optional

from models.pong import EffectKind


class EffectTimers:
    """One optional expiry timestamp (ms) per EffectKind."""

    def __init__(self):
        self._expiry: Dict[EffectKind, Optional[float]] = {kind: None for kind in EffectKind}

    def arm(self, kind: EffectKind, now_ms: float, duration_ms: float) -> None:
        """Start (or restart) an effect that lasts duration_ms from now."""
        self._expiry[kind] = now_ms + duration_ms

    def expiry(self, kind: EffectKind) -> Optional[float]:
        """Absolute expiry of an armed effect, None when disarmed."""
        return self._expiry[kind]

    def is_active(self, kind: EffectKind, now_ms: float) -> bool:
        """Check whether an effect is running at now_ms."""
        expiry = self._expiry[kind]
        return expiry is not None and now_ms < expiry

    def remaining_ms(self, kind: EffectKind, now_ms: float) -> float:
        """Milliseconds left on an effect, 0 when inactive."""
        if not self.is_active(kind, now_ms):
            return 0.0
        return self._expiry[kind] - now_ms

    def remaining_seconds(self, now_ms: float) -> Dict[EffectKind, int]:
        """Whole seconds left for every active effect."""
        return {
            kind: int(self.remaining_ms(kind, now_ms) // 1000)
            for kind in EffectKind
            if self.is_active(kind, now_ms)
        }

    def pop_expired(self, now_ms: float) -> List[EffectKind]:
        """Disarm and return every effect whose expiry has been reached."""
        expired = [
            kind for kind, expiry in self._expiry.items()
            if expiry is not None and now_ms >= expiry
        ]
        for kind in expired:
            self._expiry[kind] = None
        return expired
