"""Perfect maze generation and path search toolkit."""

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "Walls",
    "MazeError",
    "InvalidDimension",
    "OutOfBounds",
    "NotAdjacent",
    "MazeGenerator",
    "GeneratorState",
    "Phase",
    "generate_maze",
    "PathSearcher",
    "Strategy",
    "SearchResult",
    "SearchState",
    "PathFound",
    "NoPathFound",
    "MazeReport",
    "PathEvaluation",
    "check_path",
    "distance_table",
    "inspect_maze",
    "MazeRenderer",
    "MazeSettings",
]

from .errors import MazeError, InvalidDimension, OutOfBounds, NotAdjacent
from .grid import Cell, Direction, Grid, Walls
from .generator import MazeGenerator, GeneratorState, Phase, generate_maze
from .search import (
    PathSearcher,
    Strategy,
    SearchResult,
    SearchState,
    PathFound,
    NoPathFound,
)
from .analysis import MazeReport, PathEvaluation, check_path, distance_table, inspect_maze
from .render import MazeRenderer
from .config import MazeSettings
