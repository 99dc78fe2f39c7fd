"""Path search over a generated maze: BFS, DFS and A*."""

from __future__ import annotations

import heapq
import logging
import math
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Set, Union

from .grid import Cell, Coord, Grid

logger = logging.getLogger(__name__)

Endpoint = Union[Cell, Coord]


class Strategy(Enum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"

    @classmethod
    def parse(cls, value: Union["Strategy", str]) -> "Strategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown search strategy {value!r}; expected one of {choices}") from exc


@dataclass
class SearchResult:
    strategy: Strategy
    start: Coord
    goal: Coord
    path: List[Cell] = field(default_factory=list)
    expanded: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> Optional[int]:
        """Number of edges on the path, or ``None`` when nothing was found."""

        return len(self.path) - 1 if self.path else None

    def coords(self) -> List[Coord]:
        return [cell.coord for cell in self.path]

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "start": list(self.start),
            "goal": list(self.goal),
            "found": self.found,
            "length": self.length,
            "expanded": self.expanded,
            "path": [list(coord) for coord in self.coords()],
        }


@dataclass
class PathFound(SearchResult):
    pass


@dataclass
class NoPathFound(SearchResult):
    pass


@dataclass
class SearchState:
    """Bookkeeping for one search call, keyed by cell coordinate."""

    grid: Grid
    strategy: Strategy
    start: Cell
    goal: Cell
    frontier: Any = None
    visited: Set[Coord] = field(default_factory=set)
    closed: Set[Coord] = field(default_factory=set)
    open: Set[Coord] = field(default_factory=set)
    came_from: Dict[Coord, Coord] = field(default_factory=dict)
    g: Dict[Coord, float] = field(default_factory=dict)
    h: Dict[Coord, float] = field(default_factory=dict)
    f: Dict[Coord, float] = field(default_factory=dict)
    entry_order: Dict[Coord, int] = field(default_factory=dict)
    expanded: int = 0
    result: Optional[SearchResult] = None

    @property
    def done(self) -> bool:
        return self.result is not None

    def g_score(self, coord: Coord) -> float:
        return self.g.get(coord, math.inf)

    def f_score(self, coord: Coord) -> float:
        return self.f.get(coord, math.inf)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


class SearchAlgorithm(ABC):
    """Shared frontier loop: pop, test for the goal, expand."""

    strategy: ClassVar[Strategy]

    def begin(self, grid: Grid, start: Cell, goal: Cell) -> SearchState:
        state = SearchState(grid=grid, strategy=self.strategy, start=start, goal=goal)
        self._seed(state)
        return state

    def step(self, state: SearchState) -> SearchState:
        """Pop one cell from the frontier and expand it."""

        if state.done:
            return state
        current = self._pop(state)
        if current is None:
            state.result = NoPathFound(
                strategy=self.strategy,
                start=state.start.coord,
                goal=state.goal.coord,
                expanded=state.expanded,
            )
            logger.info("%s: no solution found after %d expansions", self.strategy.value, state.expanded)
            return state

        state.expanded += 1
        logger.debug("%s: expanding %r", self.strategy.value, current)
        if current is state.goal:
            path = self._reconstruct(state)
            state.result = PathFound(
                strategy=self.strategy,
                start=state.start.coord,
                goal=state.goal.coord,
                path=path,
                expanded=state.expanded,
            )
            logger.info(
                "%s: solve completed, path of %d edges after %d expansions",
                self.strategy.value,
                len(path) - 1,
                state.expanded,
            )
            return state

        self._expand(state, current)
        return state

    def run(self, grid: Grid, start: Cell, goal: Cell) -> SearchResult:
        state = self.begin(grid, start, goal)
        while not state.done:
            self.step(state)
        return state.result

    @abstractmethod
    def _seed(self, state: SearchState) -> None:
        """Place the start cell on the frontier."""

    @abstractmethod
    def _pop(self, state: SearchState) -> Optional[Cell]:
        """Remove the next cell from the frontier, or return ``None`` when exhausted."""

    @abstractmethod
    def _expand(self, state: SearchState, current: Cell) -> None:
        """Push the open neighbors of ``current`` onto the frontier."""

    @staticmethod
    def _reconstruct(state: SearchState) -> List[Cell]:
        coords: List[Coord] = [state.goal.coord]
        while coords[-1] != state.start.coord:
            coords.append(state.came_from[coords[-1]])
        coords.reverse()
        return [state.grid.cell_at(row, col) for row, col in coords]


class _FrontierSearch(SearchAlgorithm):
    # Cells are marked visited when they are pushed, not when popped.

    def _seed(self, state: SearchState) -> None:
        state.visited.add(state.start.coord)
        state.frontier = deque([state.start])

    def _expand(self, state: SearchState, current: Cell) -> None:
        for neighbor in state.grid.open_neighbors(current):
            if neighbor.coord in state.visited:
                continue
            state.visited.add(neighbor.coord)
            state.came_from[neighbor.coord] = current.coord
            state.frontier.append(neighbor)


class BreadthFirstSearch(_FrontierSearch):
    """FIFO frontier; returns a path with the fewest edges."""

    strategy = Strategy.BFS

    def _pop(self, state: SearchState) -> Optional[Cell]:
        return state.frontier.popleft() if state.frontier else None


class DepthFirstSearch(_FrontierSearch):
    """LIFO frontier; returns the first path found, not necessarily the shortest."""

    strategy = Strategy.DFS

    def _pop(self, state: SearchState) -> Optional[Cell]:
        return state.frontier.pop() if state.frontier else None


class AStarSearch(SearchAlgorithm):
    """A* with unit edge cost and the Manhattan heuristic.

    The open set is a heap of ``(f, entry_order, coord)``. Among cells with
    equal ``f`` the one that entered the open set first is selected; a cell
    whose score improves keeps its original entry order. Superseded heap
    entries are discarded when popped.
    """

    strategy = Strategy.ASTAR

    def _seed(self, state: SearchState) -> None:
        start = state.start
        state.frontier = []
        state.g[start.coord] = 0
        state.h[start.coord] = manhattan(start, state.goal)
        state.f[start.coord] = state.h[start.coord]
        self._push(state, start)

    def _pop(self, state: SearchState) -> Optional[Cell]:
        while state.frontier:
            f, _, coord = heapq.heappop(state.frontier)
            if coord not in state.open or f != state.f_score(coord):
                continue
            state.open.discard(coord)
            return state.grid.cell_at(*coord)
        return None

    def _expand(self, state: SearchState, current: Cell) -> None:
        state.closed.add(current.coord)
        for neighbor in state.grid.open_neighbors(current):
            coord = neighbor.coord
            if coord in state.closed:
                continue
            tentative_g = state.g_score(current.coord) + 1
            if coord in state.open and tentative_g >= state.g_score(coord):
                continue
            state.came_from[coord] = current.coord
            state.g[coord] = tentative_g
            state.h[coord] = manhattan(neighbor, state.goal)
            state.f[coord] = tentative_g + state.h[coord]
            self._push(state, neighbor)

    @staticmethod
    def _push(state: SearchState, cell: Cell) -> None:
        coord = cell.coord
        if coord not in state.entry_order:
            state.entry_order[coord] = len(state.entry_order)
        state.open.add(coord)
        heapq.heappush(state.frontier, (state.f[coord], state.entry_order[coord], coord))


ALGORITHMS: Dict[Strategy, SearchAlgorithm] = {
    Strategy.BFS: BreadthFirstSearch(),
    Strategy.DFS: DepthFirstSearch(),
    Strategy.ASTAR: AStarSearch(),
}


class PathSearcher:
    """Find a path between two cells of a grid with the chosen strategy.

    ``start`` and ``goal`` default to the top-left and bottom-right corners
    and may be given as cells or ``(row, col)`` tuples. The search only reads
    connectivity through :meth:`Grid.open_neighbors`; all of its bookkeeping
    lives in a fresh :class:`SearchState` per call.
    """

    def __init__(self, strategy: Union[Strategy, str] = Strategy.BFS) -> None:
        self.strategy = Strategy.parse(strategy)

    def begin(
        self,
        grid: Grid,
        start: Optional[Endpoint] = None,
        goal: Optional[Endpoint] = None,
        strategy: Union[Strategy, str, None] = None,
    ) -> SearchState:
        chosen = self.strategy if strategy is None else Strategy.parse(strategy)
        rows, cols = grid.dimensions()
        start_cell = _resolve_endpoint(grid, start, (0, 0))
        goal_cell = _resolve_endpoint(grid, goal, (rows - 1, cols - 1))
        return ALGORITHMS[chosen].begin(grid, start_cell, goal_cell)

    def step(self, state: SearchState) -> SearchState:
        return ALGORITHMS[state.strategy].step(state)

    def solve(
        self,
        grid: Grid,
        start: Optional[Endpoint] = None,
        goal: Optional[Endpoint] = None,
        strategy: Union[Strategy, str, None] = None,
    ) -> SearchResult:
        state = self.begin(grid, start, goal, strategy)
        while not state.done:
            self.step(state)
        return state.result


def _resolve_endpoint(grid: Grid, value: Optional[Endpoint], default: Coord) -> Cell:
    if value is None:
        return grid.cell_at(*default)
    if isinstance(value, Cell):
        return grid.cell_at(value.row, value.col)
    row, col = value
    return grid.cell_at(row, col)


__all__ = [
    "ALGORITHMS",
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "NoPathFound",
    "PathFound",
    "PathSearcher",
    "SearchAlgorithm",
    "SearchResult",
    "SearchState",
    "Strategy",
    "manhattan",
]
