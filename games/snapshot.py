"""Immutable views of the game state handed to renderers."""
from dataclasses import dataclass
from typing import Optional, Tuple


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class SegmentView:
    x: float
    y: float
    color: Color


@dataclass(frozen=True)
class FruitView:
    x: float
    y: float
    active: bool
    color: Color


@dataclass(frozen=True)
class Snapshot:
    """
    Everything a renderer needs to draw one frame.

    Attributes:
        width, height: window dimensions in pixels
        cell_size: side of one grid cell in pixels
        offset: leftover pixels (width mod cell, height mod cell); half pads each side
        segments: live snake segments, head first
        fruit: current fruit
        paused, game_over: state flags
        game_over_reason: 'wall', 'self' or 'full' once the round has ended
        frame: frames simulated since the last reset
    """

    width: int
    height: int
    cell_size: int
    offset: Tuple[float, float]
    segments: Tuple[SegmentView, ...]
    fruit: FruitView
    paused: bool
    game_over: bool
    game_over_reason: Optional[str]
    frame: int

    @property
    def head(self) -> SegmentView:
        return self.segments[0]

    @property
    def score(self) -> int:
        return len(self.segments) - 1
