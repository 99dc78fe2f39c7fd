"""Pillow rendering of grid snapshots and solution paths."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from .grid import Cell, Coord, Grid

PathLike = Union[str, Path]
Color = Tuple[int, int, int]

WALL_COLOR = (0, 0, 0)
VISITED_COLOR = (255, 255, 255)
UNVISITED_COLOR = (160, 160, 160)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
PATH_COLOR = (30, 60, 220)


class MazeRenderer:
    """Draw a read-only snapshot of a grid, optionally with a path on top."""

    def __init__(self, *, cell_size: int = 32, wall_width: int = 2) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if wall_width <= 0:
            raise ValueError("wall_width must be positive")
        self.cell_size = cell_size
        self.wall_width = wall_width
        self.margin = wall_width

    def canvas_dimensions(self, grid: Grid) -> Tuple[int, int]:
        rows, cols = grid.dimensions()
        return (
            cols * self.cell_size + 2 * self.margin,
            rows * self.cell_size + 2 * self.margin,
        )

    def cell_bbox(self, row: int, col: int) -> Tuple[int, int, int, int]:
        left = self.margin + col * self.cell_size
        top = self.margin + row * self.cell_size
        return left, top, left + self.cell_size, top + self.cell_size

    def render(
        self,
        grid: Grid,
        *,
        path: Optional[Sequence[Cell]] = None,
        start: Optional[Coord] = None,
        goal: Optional[Coord] = None,
    ) -> Image.Image:
        rows, cols = grid.dimensions()
        start = start if start is not None else (0, 0)
        goal = goal if goal is not None else (rows - 1, cols - 1)

        canvas = Image.new("RGB", self.canvas_dimensions(grid), VISITED_COLOR)
        draw = ImageDraw.Draw(canvas)

        for r in range(rows):
            for c in range(cols):
                cell = grid.cell_at(r, c)
                if (r, c) == start:
                    fill = START_COLOR
                elif (r, c) == goal:
                    fill = GOAL_COLOR
                else:
                    fill = VISITED_COLOR if cell.visited else UNVISITED_COLOR
                self._fill_cell(draw, (r, c), fill)

        if path:
            self._draw_path(draw, path)

        for r in range(rows):
            for c in range(cols):
                self._draw_walls(draw, grid.cell_at(r, c))
        return canvas

    def save(
        self,
        grid: Grid,
        destination: PathLike,
        *,
        path: Optional[Sequence[Cell]] = None,
        start: Optional[Coord] = None,
        goal: Optional[Coord] = None,
    ) -> Path:
        target = Path(destination)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, path=path, start=start, goal=goal).save(target)
        return target

    # ------------------------------------------------------------------

    def _fill_cell(self, draw: ImageDraw.ImageDraw, coord: Coord, color: Color) -> None:
        left, top, right, bottom = self.cell_bbox(*coord)
        draw.rectangle((left, top, right - 1, bottom - 1), fill=color)

    def _draw_walls(self, draw: ImageDraw.ImageDraw, cell: Cell) -> None:
        left, top, right, bottom = self.cell_bbox(cell.row, cell.col)
        walls = cell.walls
        segments = (
            (walls.top, (left, top, right, top)),
            (walls.right, (right, top, right, bottom)),
            (walls.bottom, (left, bottom, right, bottom)),
            (walls.left, (left, top, left, bottom)),
        )
        for present, segment in segments:
            if present:
                draw.line(segment, fill=WALL_COLOR, width=self.wall_width)

    def _draw_path(self, draw: ImageDraw.ImageDraw, path: Sequence[Cell]) -> None:
        thickness = max(2, self.cell_size // 3)
        points = [
            (
                self.margin + cell.col * self.cell_size + self.cell_size / 2,
                self.margin + cell.row * self.cell_size + self.cell_size / 2,
            )
            for cell in path
        ]
        if len(points) >= 2:
            draw.line(points, fill=PATH_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            draw.ellipse(
                (x - thickness / 2, y - thickness / 2, x + thickness / 2, y + thickness / 2),
                fill=PATH_COLOR,
            )


__all__ = ["MazeRenderer"]
