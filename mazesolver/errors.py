"""Exception types raised by the maze core."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze construction and query failures."""


class InvalidDimension(MazeError, ValueError):
    """Raised when a grid is created with a non-positive size."""


class OutOfBounds(MazeError, IndexError):
    """Raised when a coordinate falls outside the grid."""


class NotAdjacent(MazeError, ValueError):
    """Raised when removing a wall between cells that do not share one."""


__all__ = ["MazeError", "InvalidDimension", "OutOfBounds", "NotAdjacent"]
