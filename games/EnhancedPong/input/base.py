"""
Base Input Source - Abstract interface for input backends.

An input source turns device events into one InputFrame per tick.
"""
from abc import ABC, abstractmethod

from models.pong import InputFrame


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends (keyboard, scripted replays in tests) must
    implement this interface.
    """

    @abstractmethod
    def poll_frame(self) -> InputFrame:
        """Poll the input accumulated since the last call.

        Returns:
            Movement flags as currently held plus every discrete action
            seen since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    @property
    def quit_requested(self) -> bool:
        """Whether the user asked to close the game."""
        return False
