"""Static configuration for the snake simulation."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class GameConfig:
    cell_size: int = 31
    max_length: int = 256
    move_interval: int = 5
    max_spawn_attempts: int = 64

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {self.max_length}")
        if self.move_interval < 1:
            raise ValueError(f"move_interval must be at least 1, got {self.move_interval}")
        if self.max_spawn_attempts < 1:
            raise ValueError(f"max_spawn_attempts must be at least 1, got {self.max_spawn_attempts}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        defaults = cls()
        return cls(
            cell_size=int(data.get("cell_size", defaults.cell_size)),
            max_length=int(data.get("max_length", defaults.max_length)),
            move_interval=int(data.get("move_interval", defaults.move_interval)),
            max_spawn_attempts=int(data.get("max_spawn_attempts", defaults.max_spawn_attempts)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
