"""
Input sources for the host loop.

The Session polls an InputSource once per frame without knowing where the
keys come from:
- A real keyboard (pygame event queue)
- A scripted sequence (tests, demos)
"""
from abc import ABC, abstractmethod
from typing import Iterable

import pygame

from games.events import InputEvents

# Key bindings: W/A/S/D steer, P pauses, ENTER replays after a game over
KEY_BINDINGS = {
    pygame.K_d: 'right',
    pygame.K_a: 'left',
    pygame.K_w: 'up',
    pygame.K_s: 'down',
    pygame.K_p: 'pause',
    pygame.K_RETURN: 'confirm',
    pygame.K_KP_ENTER: 'confirm',
}


class InputSource(ABC):
    """
    Abstract base class for per-frame input.

    poll() is called exactly once per frame and reports which keys went
    down since the previous call.
    """

    @abstractmethod
    def poll(self) -> InputEvents:
        """
        Collect this frame's key presses.

        Returns:
            InputEvents: one flag per logical key
        """
        pass

    @property
    def quit_requested(self) -> bool:
        """Whether the host environment asked to close. Override for windowed sources."""
        return False


def events_from_pygame(events: Iterable) -> InputEvents:
    """
    Translate raw pygame events into a single InputEvents.

    Repeated KEYDOWNs for one key collapse into one flag; unbound keys and
    non-keyboard events are ignored.
    """
    pressed = set()
    for event in events:
        if event.type == pygame.KEYDOWN and event.key in KEY_BINDINGS:
            pressed.add(KEY_BINDINGS[event.key])
    return InputEvents(**{name: True for name in pressed})


class KeyboardInput(InputSource):
    """
    Keyboard input read from the pygame event queue.

    The queue is drained on every poll, so a QUIT event is noticed on the
    same frame it arrives.
    """

    def __init__(self):
        self._quit_requested = False

    def poll(self) -> InputEvents:
        events = pygame.event.get()
        if any(event.type == pygame.QUIT for event in events):
            self._quit_requested = True
        return events_from_pygame(events)

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested
