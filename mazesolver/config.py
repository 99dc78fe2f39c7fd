"""Settings accepted from the embedding layer before they reach the core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .search import Strategy

MIN_SIZE = 5
MAX_SIZE = 50
DEFAULT_SIZE = 15
CANVAS_SIZE = 500


def clamp_size(size: int) -> int:
    return max(MIN_SIZE, min(int(size), MAX_SIZE))


def cell_size_for(size: int, canvas_size: int = CANVAS_SIZE) -> int:
    """Pixel width of one cell so that ``size`` cells fill the canvas."""

    return max(1, canvas_size // max(1, size))


@dataclass
class MazeSettings:
    size: int
    strategy: Strategy
    seed: Optional[int] = None
    cell_size: int = CANVAS_SIZE // DEFAULT_SIZE

    @classmethod
    def create(
        cls,
        size: int = DEFAULT_SIZE,
        strategy: Union[Strategy, str] = Strategy.BFS,
        seed: Optional[int] = None,
        cell_size: Optional[int] = None,
    ) -> "MazeSettings":
        clamped = clamp_size(size)
        return cls(
            size=clamped,
            strategy=Strategy.parse(strategy),
            seed=seed,
            cell_size=cell_size if cell_size is not None else cell_size_for(clamped),
        )

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "strategy": self.strategy.value,
            "seed": self.seed,
            "cell_size": self.cell_size,
        }


__all__ = [
    "CANVAS_SIZE",
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "MIN_SIZE",
    "MazeSettings",
    "cell_size_for",
    "clamp_size",
]
