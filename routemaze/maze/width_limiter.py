"""Corridor-width constraint checks.

The width constraint forbids any solid open block larger than
``max_width x max_width``. Equivalently, no axis-aligned square of side
``max_width + 1`` may be entirely PATH. Cells outside the grid never count as
PATH, so a square hanging over the border can never be completed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from routemaze.maze.grid import CellState

if TYPE_CHECKING:
    from routemaze.maze.grid import GridMap
    from routemaze.types import GridPos


def would_exceed_width(grid: GridMap, candidate: GridPos, max_width: int) -> bool:
    """Check whether carving ``candidate`` would complete an over-wide block.

    The candidate is treated as already PATH. Every square of side
    ``max_width + 1`` containing it is tested; if all of a square's other cells
    are PATH the carve is rejected. Pure, never mutates the grid.

    Args:
        grid: The grid to inspect.
        candidate: The cell about to be carved.
        max_width: Maximum allowed open-corridor width (>= 1).

    Returns:
        True if the carve must be rejected.
    """
    cx, cy = candidate
    size = max_width + 1
    if size > grid.width or size > grid.height:
        return False

    candidate_is_path = grid.is_path(cx, cy)

    # Only squares fully inside the grid can be completed.
    x_lo = max(0, cx - max_width)
    x_hi = min(cx, grid.width - size)
    y_lo = max(0, cy - max_width)
    y_hi = min(cy, grid.height - size)

    for ox in range(x_lo, x_hi + 1):
        for oy in range(y_lo, y_hi + 1):
            square = grid.tiles[ox : ox + size, oy : oy + size]
            others = int(np.count_nonzero(square == CellState.PATH))
            if candidate_is_path:
                others -= 1
            if others == size * size - 1:
                return True
    return False


def find_wide_blocks(tiles: np.ndarray, max_width: int) -> list[GridPos]:
    """Return the lower-left origin of every fully-PATH square of side
    ``max_width + 1`` in a tile array, x-major.
    """
    size = max_width + 1
    width, height = tiles.shape
    if size > width or size > height:
        return []

    windows = sliding_window_view(tiles == CellState.PATH, (size, size))
    full = windows.all(axis=(2, 3))
    return [(int(x), int(y)) for x, y in np.argwhere(full)]


def has_wide_block(grid: GridMap, max_width: int) -> bool:
    """True if the grid contains any open block wider than ``max_width``."""
    return bool(find_wide_blocks(grid.tiles, max_width))
