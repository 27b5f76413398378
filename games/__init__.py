# Games package - frame-driven simulations and their value types
from .base import GameEnv
from .config import GameConfig
from .events import InputEvents, NO_INPUT
from .rng import RandomSource, NumpyRandom
from .snake import SnakeGame
from .snapshot import Snapshot, SegmentView, FruitView
