"""Read-only structural queries over a finished grid."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from routemaze.maze.grid import CellState
from routemaze.types import CARDINAL_DIRECTIONS

if TYPE_CHECKING:
    from routemaze.maze.grid import GridMap
    from routemaze.types import GridPos


def flood_fill(grid: GridMap, start: GridPos) -> set[GridPos]:
    """Return every PATH cell reachable from ``start`` by cardinal steps.

    Empty if ``start`` itself is not PATH.
    """
    if not grid.is_path(*start):
        return set()

    visited = np.full((grid.width, grid.height), False, dtype=bool, order="F")
    visited[start] = True
    queue = deque([start])
    reached: set[GridPos] = set()
    while queue:
        cx, cy = queue.popleft()
        reached.add((cx, cy))
        for dx, dy in CARDINAL_DIRECTIONS:
            nx, ny = cx + dx, cy + dy
            if grid.is_path(nx, ny) and not visited[nx, ny]:
                visited[nx, ny] = True
                queue.append((nx, ny))
    return reached


def is_connected(grid: GridMap) -> bool:
    """True if all PATH cells form a single component (vacuously for none)."""
    cells = grid.path_cells()
    if not cells:
        return True
    return len(flood_fill(grid, cells[0])) == len(cells)


def wall_neighbor_count(grid: GridMap, pos: GridPos) -> int:
    """Count cardinal neighbours that are WALL. Off-grid counts as WALL."""
    x, y = pos
    return sum(
        1 for dx, dy in CARDINAL_DIRECTIONS if not grid.is_path(x + dx, y + dy)
    )


def is_dead_end(grid: GridMap, pos: GridPos) -> bool:
    """A PATH cell closed in on at least three sides."""
    return grid.is_path(*pos) and wall_neighbor_count(grid, pos) >= 3


def path_ratio(grid: GridMap) -> float:
    """Fraction of cells that are PATH."""
    return float(np.count_nonzero(grid.tiles == CellState.PATH)) / grid.tiles.size
