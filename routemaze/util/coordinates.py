from __future__ import annotations

import math
from collections.abc import Iterator

from routemaze.types import GridCoord, GridPos

"""Rectangles and small geometry helpers for grid coordinates."""


class Rect:
    """Rectangle/bounding box in grid coordinates.

    ``x2`` and ``y2`` are exclusive, so a Rect(0, 0, 2, 3) covers the cells
    x in {0, 1} and y in {0, 1, 2}.
    """

    def __init__(self, x: GridCoord, y: GridCoord, w: GridCoord, h: GridCoord) -> None:
        self.x1: GridCoord = x
        self.y1: GridCoord = y
        self.x2: GridCoord = x + w
        self.y2: GridCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: GridCoord, y1: GridCoord, x2: GridCoord, y2: GridCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        width = x2 - x1
        height = y2 - y1
        return cls(x1, y1, width, height)

    @property
    def width(self) -> GridCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> GridCoord:
        return self.y2 - self.y1

    def exact_center(self) -> tuple[float, float]:
        """Geometric center of the covered area in cell units."""
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    def cells(self) -> Iterator[GridPos]:
        """Yield every covered cell, x-major."""
        for x in range(self.x1, self.x2):
            for y in range(self.y1, self.y2):
                yield (x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_grid_pos(pos: GridPos, width: GridCoord, height: GridCoord) -> bool:
    """Check if a grid position is within bounds."""
    x, y = pos
    return 0 <= x < width and 0 <= y < height


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


# =============================================================================
# DISTANCES
# =============================================================================


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def manhattan_distance(a: GridPos, b: GridPos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
