"""
Keyboard Input Source - pygame keyboard input for the desktop game.

Controls:
    W / Up:     Move paddle up
    S / Down:   Move paddle down
    P:          Pause / resume
    R:          Restart
    Space:      Special ability
    Esc:        Quit
    Any key:    Start from the title screen
"""
from typing import List, Set

import pygame

from models.pong import InputAction, InputFrame
from .base import InputSource


UP_KEYS = (pygame.K_w, pygame.K_UP)
DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)

ACTION_KEYS = {
    pygame.K_p: InputAction.TOGGLE_PAUSE,
    pygame.K_r: InputAction.RESTART,
    pygame.K_SPACE: InputAction.ACTIVATE_ABILITY,
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Tracks held movement keys from KEYDOWN/KEYUP events and queues one
    action per mapped key press. Every key press also queues
    ANY_KEY_TO_START so the engine can leave the title screen.
    """

    def __init__(self):
        """Initialize the keyboard input source."""
        self._held: Set[int] = set()
        self._actions: List[InputAction] = []
        self._quit = False

    @property
    def quit_requested(self) -> bool:
        """Whether Esc or the window close button was used."""
        return self._quit

    def poll_frame(self) -> InputFrame:
        """Get held movement flags and the actions queued since last poll."""
        frame = InputFrame(
            move_up=any(k in self._held for k in UP_KEYS),
            move_down=any(k in self._held for k in DOWN_KEYS),
            actions=tuple(self._actions),
        )
        self._actions.clear()
        return frame

    def update(self, dt: float) -> None:
        """Process pending pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Fold a single pygame event into the input state."""
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._quit = True
                return
            self._held.add(event.key)
            self._actions.append(InputAction.ANY_KEY_TO_START)
            action = ACTION_KEYS.get(event.key)
            if action is not None:
                self._actions.append(action)
        elif event.type == pygame.KEYUP:
            self._held.discard(event.key)
