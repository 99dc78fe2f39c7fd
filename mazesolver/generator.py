"""Perfect maze generation by randomized depth-first backtracking."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .grid import Cell, Grid

logger = logging.getLogger(__name__)

RandomIndex = Callable[[int], int]


class Phase(Enum):
    CARVING = "carving"
    BACKTRACKING = "backtracking"
    DONE = "done"


@dataclass
class GeneratorState:
    grid: Grid
    current: Cell
    stack: List[Cell] = field(default_factory=list)
    phase: Phase = Phase.CARVING
    steps: int = 0
    carved: int = 0

    @property
    def done(self) -> bool:
        return self.phase is Phase.DONE


class MazeGenerator:
    """Carve a spanning tree into a fully walled grid.

    ``random_index`` picks among the unvisited neighbors of the current cell:
    it receives the candidate count ``n`` and must return an index in
    ``[0, n)``. Without one, ``random.Random(seed).randrange`` is used, so a
    fixed seed reproduces the same layout.

    The generator can be driven to completion with :meth:`generate` or one
    carve-or-backtrack at a time with :meth:`start` and :meth:`step`.
    """

    def __init__(
        self,
        random_index: Optional[RandomIndex] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        if random_index is None:
            random_index = random.Random(seed).randrange
        self._random_index = random_index

    def start(self, grid: Grid) -> GeneratorState:
        """Begin carving ``grid``, which must be freshly constructed.

        Regenerating means building a new :class:`Grid`; a grid that already
        has visited cells or removed walls is rejected.
        """

        if grid.passages() or any(cell.visited for cell in grid.cells()):
            raise ValueError("grid has already been carved; create a new Grid to regenerate")
        current = grid.cell_at(0, 0)
        current.visited = True
        state = GeneratorState(grid=grid, current=current)
        state.phase = self._next_phase(state)
        return state

    def step(self, state: GeneratorState) -> GeneratorState:
        if state.phase is Phase.CARVING:
            candidates = self._unvisited_neighbors(state.grid, state.current)
            index = self._random_index(len(candidates))
            if not 0 <= index < len(candidates):
                raise ValueError(
                    f"random_index returned {index} for {len(candidates)} candidates"
                )
            chosen = candidates[index]
            chosen.visited = True
            state.stack.append(state.current)
            state.grid.remove_wall_between(state.current, chosen)
            state.current = chosen
            state.carved += 1
        elif state.phase is Phase.BACKTRACKING:
            state.current = state.stack.pop()
        else:
            return state

        state.steps += 1
        state.phase = self._next_phase(state)
        return state

    def generate(self, grid: Grid) -> None:
        state = self.start(grid)
        while not state.done:
            self.step(state)
            if state.steps % 1000 == 0:
                logger.debug("Generation step %d, stack depth %d", state.steps, len(state.stack))
        rows, cols = grid.dimensions()
        logger.info(
            "Generated %dx%d maze: %d passages in %d steps",
            rows,
            cols,
            state.carved,
            state.steps,
        )

    def _next_phase(self, state: GeneratorState) -> Phase:
        if self._unvisited_neighbors(state.grid, state.current):
            return Phase.CARVING
        if state.stack:
            return Phase.BACKTRACKING
        return Phase.DONE

    @staticmethod
    def _unvisited_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
        return [neighbor for neighbor in grid.grid_neighbors(cell) if not neighbor.visited]


def generate_maze(
    rows: int,
    cols: int,
    *,
    seed: Optional[int] = None,
    random_index: Optional[RandomIndex] = None,
) -> Grid:
    """Create a ``rows x cols`` grid and carve a perfect maze into it."""

    grid = Grid(rows, cols)
    MazeGenerator(random_index, seed=seed).generate(grid)
    return grid


__all__ = ["GeneratorState", "MazeGenerator", "Phase", "RandomIndex", "generate_maze"]
