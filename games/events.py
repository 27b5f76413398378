"""Per-frame input events understood by the simulation."""
from dataclasses import dataclass


@dataclass(frozen=True)
class InputEvents:
    """
    Keys pressed during a single frame.

    Each flag is edge-triggered: it is True when the key went down this
    frame, no matter how many times.
    """

    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False
    pause: bool = False
    confirm: bool = False


NO_INPUT = InputEvents()
