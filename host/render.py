"""
Rendering of game snapshots.

Renderers only ever see an immutable Snapshot, so drawing can never leak
state back into the simulation.
"""
from abc import ABC, abstractmethod
from typing import Dict

import pygame

from games.colors import GRAY, LIGHTGRAY, RAYWHITE
from games.snapshot import Snapshot

PAUSED_TEXT = "GAME PAUSED"
REPLAY_TEXT = "PRESS [ENTER] TO PLAY AGAIN"


class Renderer(ABC):
    """Abstract base class for anything that can draw a Snapshot."""

    @abstractmethod
    def draw(self, snapshot: Snapshot):
        """
        Draw one frame.

        Args:
            snapshot: State to draw; must not be modified
        """
        pass


class PygameRenderer(Renderer):
    """
    Draws the grid, snake, fruit and status text onto a pygame Surface.

    The surface can be the display or any off-screen Surface; flipping
    the display is left to the host loop.
    """

    def __init__(self, surface: pygame.Surface):
        pygame.font.init()
        self.surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, snapshot: Snapshot):
        self.surface.fill(RAYWHITE)

        if snapshot.game_over:
            self._draw_centered_text(REPLAY_TEXT, 20, snapshot.height // 2 - 50)
            return

        self._draw_grid(snapshot)

        cell = snapshot.cell_size
        for segment in snapshot.segments:
            pygame.draw.rect(self.surface, segment.color,
                             pygame.Rect(segment.x, segment.y, cell, cell))

        fruit = snapshot.fruit
        if fruit.active:
            pygame.draw.rect(self.surface, fruit.color,
                             pygame.Rect(fruit.x, fruit.y, cell, cell))

        if snapshot.paused:
            self._draw_centered_text(PAUSED_TEXT, 40, snapshot.height // 2 - 40)

    def _draw_grid(self, snapshot: Snapshot):
        cell = snapshot.cell_size
        half_x = snapshot.offset[0] / 2
        half_y = snapshot.offset[1] / 2

        for i in range(snapshot.width // cell + 1):
            x = cell * i + half_x
            pygame.draw.line(self.surface, LIGHTGRAY,
                             (x, half_y), (x, snapshot.height - half_y))

        for i in range(snapshot.height // cell + 1):
            y = cell * i + half_y
            pygame.draw.line(self.surface, LIGHTGRAY,
                             (half_x, y), (snapshot.width - half_x, y))

    def _draw_centered_text(self, text: str, size: int, y: int):
        font = self._font(size)
        text_width, _ = font.size(text)
        rendered = font.render(text, True, GRAY)
        self.surface.blit(rendered, (self.surface.get_width() // 2 - text_width // 2, y))
