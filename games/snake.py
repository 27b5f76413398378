"""
Snake game simulation.

The snake lives on an implicit grid of square cells inside the window.
All positions are pixel coordinates of a cell's top-left corner; when the
window is not an exact multiple of the cell size, the leftover pixels are
split evenly on both sides so the grid sits centered.

Per frame (see SnakeGame.update):
    replay / pause handling -> steering -> history snapshot -> movement
    -> wall and self collision -> fruit spawn -> fruit consumption
"""
import logging

import numpy as np

from .base import GameEnv
from .colors import BODY_COLOR, FRUIT_COLOR, HEAD_COLOR
from .config import GameConfig
from .events import InputEvents
from .rng import RandomSource
from .snapshot import FruitView, SegmentView, Snapshot

logger = logging.getLogger(__name__)


class SnakeGame(GameEnv):
    """
    Snake simulation implementing the GameEnv interface.

    The snake is stored in a fixed-capacity numpy buffer with a live length
    counter; index 0 is the head. A parallel history buffer keeps every live
    segment's position from before the current frame's shift, which is what
    the body follows when the snake moves.
    """

    def __init__(self, width: int, height: int, config: GameConfig = None):
        """
        Args:
            width: Window width in pixels
            height: Window height in pixels
            config: Static game constants (cell size, capacity, speed)
        """
        self.config = config or GameConfig()

        capacity = self.config.max_length
        self.positions = np.zeros((capacity, 2), dtype=np.float64)
        self.history = np.zeros((capacity, 2), dtype=np.float64)
        self.velocity = np.zeros(2, dtype=np.float64)  # head only
        self.offset = np.zeros(2, dtype=np.float64)
        self.fruit_position = np.zeros(2, dtype=np.float64)

        self.width = width
        self.height = height
        self.frames_counter = 0
        self.game_over = False
        self.game_over_reason = None
        self.paused = False
        self.allow_move = False
        self.live_length = 1
        self.fruit_active = False

        self.init(width, height)

    # ------------ lifecycle ------------

    def init(self, width: int, height: int) -> Snapshot:
        """
        Reset every field in place to the canonical starting configuration.

        The snake is a single head in the top-left cell moving right, and
        there is no fruit until the first update.

        Raises:
            ValueError: if the window cannot hold a single cell
        """
        cell = self.config.cell_size
        if width < cell or height < cell:
            raise ValueError(
                f"Window {width}x{height} is smaller than one {cell}px cell"
            )

        self.width = width
        self.height = height
        self.frames_counter = 0
        self.game_over = False
        self.game_over_reason = None
        self.paused = False
        self.allow_move = False
        self.live_length = 1

        self.offset[:] = (width % cell, height % cell)
        self.positions[:] = self.offset / 2
        self.history.fill(0.0)
        self.velocity[:] = (cell, 0.0)

        self.fruit_active = False
        self.fruit_position.fill(0.0)

        return self.snapshot()

    def reset(self) -> Snapshot:
        """Restart with the current window dimensions."""
        return self.init(self.width, self.height)

    # ------------ frame update ------------

    def update(self, events: InputEvents, rng: RandomSource) -> Snapshot:
        """
        Advance the simulation by one frame.

        Args:
            events: Keys pressed during this frame
            rng: Source of fruit placement draws

        Returns:
            Snapshot of the state after the frame
        """
        if self.game_over:
            # Only a replay request is honoured once the round is over
            if events.confirm:
                logger.info("Replay requested, starting a new round")
                self.init(self.width, self.height)
            return self.snapshot()

        if events.pause:
            self.paused = not self.paused
            logger.debug(f"Pause toggled: paused={self.paused}")

        if self.paused:
            return self.snapshot()

        self._steer(events)

        n = self.live_length
        self.history[:n] = self.positions[:n]

        if self.frames_counter % self.config.move_interval == 0:
            self._advance()

        if self._hit_wall():
            self._end_round("wall")

        if self._hit_self():
            self._end_round("self")

        if not self.fruit_active:
            self._spawn_fruit(rng)

        if self.fruit_active and self._head_overlaps_fruit():
            self._eat_fruit()

        self.frames_counter += 1
        return self.snapshot()

    def _steer(self, events: InputEvents) -> None:
        """
        Apply at most one direction change.

        A turn needs the matching velocity axis to be zero (no reversing
        into the neck) and the latch to be open; accepting one closes the
        latch until the next movement tick.
        """
        if not self.allow_move:
            return

        cell = self.config.cell_size
        vx, vy = self.velocity

        if events.right and vx == 0:
            new_velocity = (cell, 0.0)
        elif events.left and vx == 0:
            new_velocity = (-cell, 0.0)
        elif events.up and vy == 0:
            new_velocity = (0.0, -cell)
        elif events.down and vy == 0:
            new_velocity = (0.0, cell)
        else:
            return

        self.velocity[:] = new_velocity
        self.allow_move = False

    def _advance(self) -> None:
        """Shift every body segment into its predecessor's old cell, then move the head."""
        n = self.live_length
        if n > 1:
            # history is a separate buffer, so slice assignment cannot overwrite a source
            self.positions[1:n] = self.history[:n - 1]
        self.positions[0] += self.velocity
        self.allow_move = True

    def _end_round(self, reason: str) -> None:
        if self.game_over:
            return
        self.game_over = True
        self.game_over_reason = reason
        logger.info(
            f"Round over ({reason}): length={self.live_length}, frames={self.frames_counter}"
        )

    # ------------ collisions ------------

    def _hit_wall(self) -> bool:
        cell = self.config.cell_size
        left, top = self.origin
        x, y = self.positions[0]
        return (
            x < left
            or y < top
            or x + cell > left + self.columns * cell
            or y + cell > top + self.rows * cell
        )

    def _hit_self(self) -> bool:
        n = self.live_length
        if n < 2:
            return False
        return bool(np.any(np.all(self.positions[1:n] == self.positions[0], axis=1)))

    def _head_overlaps_fruit(self) -> bool:
        cell = self.config.cell_size
        hx, hy = self.positions[0]
        fx, fy = self.fruit_position
        return (
            hx < fx + cell
            and hx + cell > fx
            and hy < fy + cell
            and hy + cell > fy
        )

    def _occupied(self, position) -> bool:
        n = self.live_length
        return bool(np.any(np.all(self.positions[:n] == position, axis=1)))

    # ------------ fruit ------------

    def _random_cell(self, rng: RandomSource) -> np.ndarray:
        cell = self.config.cell_size
        left, top = self.origin
        return np.array([
            rng.uniform_int(0, self.columns) * cell + left,
            rng.uniform_int(0, self.rows) * cell + top,
        ], dtype=np.float64)

    def free_cells(self) -> np.ndarray:
        """
        Get every grid cell not covered by a live segment.

        Returns:
            (k, 2) array of cell positions in row-major order
        """
        cell = self.config.cell_size
        left, top = self.origin
        xs = np.arange(self.columns) * cell + left
        ys = np.arange(self.rows) * cell + top
        grid_x, grid_y = np.meshgrid(xs, ys)
        cells = np.column_stack([grid_x.ravel(), grid_y.ravel()])

        body = self.positions[:self.live_length]
        taken = np.all(cells[:, None, :] == body[None, :, :], axis=2).any(axis=1)
        return cells[~taken]

    def _spawn_fruit(self, rng: RandomSource) -> None:
        """
        Place the fruit on a random cell away from the snake.

        Rejection sampling is capped at config.max_spawn_attempts; after
        that a free cell is picked uniformly from an exhaustive scan, so a
        nearly full board cannot stall the frame.
        """
        for _ in range(self.config.max_spawn_attempts):
            candidate = self._random_cell(rng)
            if not self._occupied(candidate):
                self._place_fruit(candidate)
                return

        free = self.free_cells()
        if len(free) == 0:
            logger.warning("No free cell left for fruit, leaving it inactive")
            return

        logger.debug(
            f"Fruit sampling gave up after {self.config.max_spawn_attempts} attempts, "
            f"choosing among {len(free)} free cells"
        )
        self._place_fruit(free[rng.uniform_int(0, len(free))])

    def _place_fruit(self, position) -> None:
        self.fruit_position[:] = position
        self.fruit_active = True

    def _eat_fruit(self) -> None:
        """Grow one segment behind the old tail, or end the round at capacity."""
        self.fruit_active = False
        n = self.live_length

        if n >= self.config.max_length:
            logger.info(f"Snake reached its capacity of {self.config.max_length} segments")
            self._end_round("full")
            return

        self.positions[n] = self.history[n - 1]
        self.live_length = n + 1

    # ------------ views ------------

    @property
    def origin(self) -> np.ndarray:
        """Pixel position of the top-left grid cell."""
        return self.offset / 2

    @property
    def columns(self) -> int:
        return self.width // self.config.cell_size

    @property
    def rows(self) -> int:
        return self.height // self.config.cell_size

    @property
    def score(self) -> int:
        return self.live_length - 1

    @property
    def phase(self) -> str:
        """Current state machine state: 'playing', 'paused' or 'game_over'."""
        if self.game_over:
            return "game_over"
        if self.paused:
            return "paused"
        return "playing"

    def snapshot(self) -> Snapshot:
        n = self.live_length
        segments = tuple(
            SegmentView(x, y, HEAD_COLOR if i == 0 else BODY_COLOR)
            for i, (x, y) in enumerate(self.positions[:n].tolist())
        )
        fx, fy = self.fruit_position.tolist()
        return Snapshot(
            width=self.width,
            height=self.height,
            cell_size=self.config.cell_size,
            offset=tuple(self.offset.tolist()),
            segments=segments,
            fruit=FruitView(fx, fy, self.fruit_active, FRUIT_COLOR),
            paused=self.paused,
            game_over=self.game_over,
            game_over_reason=self.game_over_reason,
            frame=self.frames_counter,
        )
