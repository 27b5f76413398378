"""
Base class for frame-driven games.

Subclasses must implement every @abstractmethod below; an incomplete
subclass raises TypeError as soon as it is instantiated.

Example:
    class SnakeGame(GameEnv):
        def reset(self):
            ...  # Must implement this
        def update(self, events, rng):
            ...  # Must implement this
        # etc.
"""
from abc import ABC, abstractmethod


class GameEnv(ABC):
    """
    Abstract base class for games advanced once per rendered frame.

    The Session only talks to this interface, so the host loop never
    needs to know which game it is driving.
    """

    @abstractmethod
    def reset(self):
        """
        Return the game to its initial configuration.

        Returns:
            Snapshot: Read-only view of the fresh state
        """
        pass

    @abstractmethod
    def update(self, events, rng):
        """
        Advance the game by exactly one frame.

        Args:
            events: InputEvents observed during this frame
            rng: RandomSource used for any randomized placement

        Returns:
            Snapshot: Read-only view of the state after the frame
        """
        pass

    @abstractmethod
    def snapshot(self):
        """
        Get an immutable view of the current state for rendering.

        Renderers receive only this object, so they can never mutate
        game-owned data.
        """
        pass
