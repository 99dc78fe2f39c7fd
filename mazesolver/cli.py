"""Command line entry point: generate a maze, solve it and report the result."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from .analysis import check_path, inspect_maze
from .config import DEFAULT_SIZE, MazeSettings
from .generator import generate_maze
from .render import MazeRenderer
from .search import PathSearcher, Strategy


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and search it")
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help="Rows and columns of the square maze (clamped to 5..50)",
    )
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        default=Strategy.BFS.value,
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional PNG of the solved maze")
    parser.add_argument("--cell-size", type=int, default=None)
    parser.add_argument("--no-walls", action="store_true", help="Omit the wall layout from the JSON output")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def run(settings: MazeSettings, *, output: Optional[Path] = None, include_walls: bool = True) -> dict:
    grid = generate_maze(settings.size, settings.size, seed=settings.seed)
    result = PathSearcher(settings.strategy).solve(grid)

    payload = {
        "settings": settings.to_dict(),
        "maze": inspect_maze(grid).to_dict(),
        "result": result.to_dict(),
        "evaluation": check_path(grid, result.path).to_dict(),
    }
    if include_walls:
        payload["walls"] = grid.to_dict()["walls"]
    if output is not None:
        renderer = MazeRenderer(cell_size=settings.cell_size)
        payload["image_path"] = str(renderer.save(grid, output, path=result.path))
    return payload


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = MazeSettings.create(
        size=args.size,
        strategy=args.strategy,
        seed=args.seed,
        cell_size=args.cell_size,
    )
    payload = run(settings, output=args.output, include_walls=not args.no_walls)
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
