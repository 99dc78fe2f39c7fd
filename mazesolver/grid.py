"""Rectangular cell grid with per-cell wall flags."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from .errors import InvalidDimension, NotAdjacent, OutOfBounds

Coord = Tuple[int, int]


class Direction(Enum):
    # Declaration order is the neighbor order used everywhere.
    TOP = (-1, 0)
    RIGHT = (0, 1)
    BOTTOM = (1, 0)
    LEFT = (0, -1)

    @property
    def offset(self) -> Coord:
        return self.value

    @property
    def wall(self) -> str:
        return self.name.lower()

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}


@dataclass
class Walls:
    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def has(self, direction: Direction) -> bool:
        return getattr(self, direction.wall)

    def to_dict(self) -> Dict[str, bool]:
        return {
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "left": self.left,
        }


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    walls: Walls = field(default_factory=Walls)
    visited: bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


class Grid:
    """Fixed-size grid that owns its cells and answers adjacency queries.

    Connectivity between cells is derived from the wall flags and is exposed
    through :meth:`open_neighbors` only.
    """

    def __init__(self, rows: int, cols: int) -> None:
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")
        rows, cols = int(rows), int(cols)
        self._rows = rows
        self._cols = cols
        self._cells: List[List[Cell]] = [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def dimensions(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(
                f"Coordinate ({row}, {col}) outside {self._rows}x{self._cols} grid"
            )
        return self._cells[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""

        for row in self._cells:
            yield from row

    def _adjacent(self, cell: Cell) -> Iterator[Tuple[Direction, Cell]]:
        for direction in Direction:
            dr, dc = direction.offset
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                yield direction, self._cells[r][c]

    def grid_neighbors(self, cell: Cell) -> List[Cell]:
        """Cells at grid-adjacent positions, ignoring walls."""

        return [neighbor for _, neighbor in self._adjacent(cell)]

    def open_neighbors(self, cell: Cell) -> List[Cell]:
        """Grid-adjacent cells with no wall between them and ``cell``."""

        return [
            neighbor
            for direction, neighbor in self._adjacent(cell)
            if not cell.walls.has(direction)
        ]

    def remove_wall_between(self, a: Cell, b: Cell) -> None:
        offset = (b.row - a.row, b.col - a.col)
        for direction in Direction:
            if direction.offset == offset:
                setattr(a.walls, direction.wall, False)
                setattr(b.walls, direction.opposite.wall, False)
                return
        raise NotAdjacent(f"{a!r} and {b!r} are not grid-adjacent")

    def passages(self) -> List[Tuple[Coord, Coord]]:
        """Every removed-wall pair, listed once from its top/left cell."""

        pairs: List[Tuple[Coord, Coord]] = []
        for cell in self.cells():
            if cell.col + 1 < self._cols and not cell.walls.right:
                pairs.append((cell.coord, (cell.row, cell.col + 1)))
            if cell.row + 1 < self._rows and not cell.walls.bottom:
                pairs.append((cell.coord, (cell.row + 1, cell.col)))
        return pairs

    def reset_visited(self) -> None:
        for cell in self.cells():
            cell.visited = False

    def to_dict(self) -> dict:
        return {
            "rows": self._rows,
            "cols": self._cols,
            "walls": [
                [cell.walls.to_dict() for cell in row] for row in self._cells
            ],
        }


__all__ = ["Cell", "Coord", "Direction", "Grid", "Walls"]
