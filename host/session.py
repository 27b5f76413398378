"""
Game session management.

A Session ties together a Game, an InputSource, a Renderer and a
RandomSource, handling:
- Per-frame ordering (input -> update -> draw)
- High score tracking
- Round counting
- Metrics collection
"""
import logging
from typing import Optional

from games.base import GameEnv
from games.rng import RandomSource
from games.snapshot import Snapshot
from .inputs import InputSource
from .metrics import MetricsCollector
from .render import Renderer

logger = logging.getLogger(__name__)


class Session:
    """
    Runs a game one frame at a time.

    The Session is game-agnostic - it works with any GameEnv implementation.
    The renderer is optional so the same loop can run headless.
    """

    def __init__(self, game: GameEnv, input_source: InputSource,
                 rng: RandomSource, renderer: Optional[Renderer] = None):
        """
        Args:
            game: A GameEnv implementation (SnakeGame, etc.)
            input_source: Where this frame's key presses come from
            rng: Random source handed to the game every frame
            renderer: Draws each resulting snapshot (None for headless)
        """
        self.game = game
        self.input_source = input_source
        self.rng = rng
        self.renderer = renderer
        self.highscore = 0
        self.metrics = MetricsCollector()
        self._was_over = game.snapshot().game_over

    def tick(self) -> Snapshot:
        """
        Execute one frame.

        1. Poll input
        2. Update the game
        3. Record round statistics
        4. Draw the snapshot

        Returns:
            Snapshot: state after this frame
        """
        events = self.input_source.poll()
        snapshot = self.game.update(events, self.rng)

        if snapshot.score > self.highscore:
            self.highscore = snapshot.score

        # Record a round only on the frame it ends
        if snapshot.game_over and not self._was_over:
            self.metrics.on_round_end(len(snapshot.segments), snapshot.frame,
                                      snapshot.game_over_reason)
            logger.info(
                f"Round {self.metrics.rounds} ended ({snapshot.game_over_reason}) "
                f"with score {snapshot.score}, highscore {self.highscore}"
            )
        self._was_over = snapshot.game_over

        if self.renderer is not None:
            self.renderer.draw(snapshot)

        return snapshot

    def reset(self) -> Snapshot:
        """
        Reset the game for a new round.

        Returns:
            Snapshot: initial state
        """
        snapshot = self.game.reset()
        self._was_over = snapshot.game_over
        return snapshot

    def get_state(self) -> Snapshot:
        """Get current game state without stepping."""
        return self.game.snapshot()

    @property
    def should_close(self) -> bool:
        return self.input_source.quit_requested

    @property
    def rounds(self) -> int:
        return self.metrics.rounds
