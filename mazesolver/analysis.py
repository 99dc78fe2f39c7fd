"""Maze and path evaluation against a brute-force distance table."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .grid import Cell, Coord, Grid

UNREACHABLE = -1


@dataclass
class MazeReport:
    rows: int
    cols: int
    passages: int
    reachable: int
    connected: bool
    acyclic: bool

    @property
    def perfect(self) -> bool:
        return self.connected and self.acyclic

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "passages": self.passages,
            "reachable": self.reachable,
            "connected": self.connected,
            "acyclic": self.acyclic,
            "perfect": self.perfect,
        }


@dataclass
class PathEvaluation:
    starts_at_start: bool
    touches_goal: bool
    connected: bool
    shortest: bool
    length: Optional[int]
    distance: Optional[int]
    message: str

    @property
    def valid(self) -> bool:
        return self.starts_at_start and self.touches_goal and self.connected

    def to_dict(self) -> dict:
        return {
            "starts_at_start": self.starts_at_start,
            "touches_goal": self.touches_goal,
            "connected": self.connected,
            "shortest": self.shortest,
            "valid": self.valid,
            "length": self.length,
            "distance": self.distance,
            "message": self.message,
        }


def distance_table(grid: Grid, origin: Coord = (0, 0)) -> np.ndarray:
    """Edge distance from ``origin`` to every cell, ``-1`` where unreachable."""

    rows, cols = grid.dimensions()
    table = np.full((rows, cols), UNREACHABLE, dtype=np.int64)
    source = grid.cell_at(*origin)
    table[source.row, source.col] = 0
    queue = deque([source])
    while queue:
        cell = queue.popleft()
        for neighbor in grid.open_neighbors(cell):
            if table[neighbor.row, neighbor.col] == UNREACHABLE:
                table[neighbor.row, neighbor.col] = table[cell.row, cell.col] + 1
                queue.append(neighbor)
    return table


def inspect_maze(grid: Grid) -> MazeReport:
    """Report whether the passages of ``grid`` form a spanning tree."""

    rows, cols = grid.dimensions()
    passages = len(grid.passages())
    reachable = int(np.count_nonzero(distance_table(grid) != UNREACHABLE))
    connected = reachable == rows * cols
    # A connected graph on V vertices is acyclic iff it has V - 1 edges.
    if connected:
        acyclic = passages == rows * cols - 1
    else:
        acyclic = _is_forest(grid)
    return MazeReport(
        rows=rows,
        cols=cols,
        passages=passages,
        reachable=reachable,
        connected=connected,
        acyclic=acyclic,
    )


def check_path(
    grid: Grid,
    path: Sequence[Cell],
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
) -> PathEvaluation:
    """Check that ``path`` walks through open passages from ``start`` to ``goal``."""

    rows, cols = grid.dimensions()
    start = start if start is not None else (0, 0)
    goal = goal if goal is not None else (rows - 1, cols - 1)
    coords: List[Coord] = [cell.coord for cell in path]

    target = grid.cell_at(*goal)
    distance_value = int(distance_table(grid, start)[target.row, target.col])
    distance = None if distance_value == UNREACHABLE else distance_value

    if not coords:
        return PathEvaluation(
            starts_at_start=False,
            touches_goal=False,
            connected=False,
            shortest=False,
            length=None,
            distance=distance,
            message="Path is empty.",
        )

    starts_at_start = coords[0] == start
    touches_goal = coords[-1] == goal
    connected = all(_is_open_step(grid, a, b) for a, b in zip(coords, coords[1:]))
    length = len(coords) - 1
    shortest = connected and distance is not None and length == distance

    if not starts_at_start:
        message = "Path does not begin at the start cell."
    elif not touches_goal:
        message = "Path does not reach the goal."
    elif not connected:
        message = "Path crosses a wall or jumps between non-adjacent cells."
    elif not shortest:
        message = "Path is valid but longer than the shortest route."
    else:
        message = "Path is a shortest route from start to goal."

    return PathEvaluation(
        starts_at_start=starts_at_start,
        touches_goal=touches_goal,
        connected=connected,
        shortest=shortest,
        length=length,
        distance=distance,
        message=message,
    )


def _is_open_step(grid: Grid, a: Coord, b: Coord) -> bool:
    if not (grid.in_bounds(*a) and grid.in_bounds(*b)):
        return False
    return grid.cell_at(*b) in grid.open_neighbors(grid.cell_at(*a))


def _is_forest(grid: Grid) -> bool:
    parent = {cell.coord: cell.coord for cell in grid.cells()}

    def find(coord: Coord) -> Coord:
        while parent[coord] != coord:
            parent[coord] = parent[parent[coord]]
            coord = parent[coord]
        return coord

    for a, b in grid.passages():
        root_a, root_b = find(a), find(b)
        if root_a == root_b:
            return False
        parent[root_a] = root_b
    return True


__all__ = [
    "MazeReport",
    "PathEvaluation",
    "UNREACHABLE",
    "check_path",
    "distance_table",
    "inspect_maze",
]
