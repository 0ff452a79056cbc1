"""Plain-text rendering of a grid for debugging and the command line."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from routemaze import config

if TYPE_CHECKING:
    from routemaze.maze.grid import GridMap
    from routemaze.util.coordinates import Rect


def render_ascii(
    grid: GridMap,
    mark_landmarks: bool = True,
    rest_stop_areas: Iterable[Rect] = (),
) -> str:
    """Render the grid one character per cell, north row first.

    Rest-stop cells are drawn first so the center and exits stay visible on
    top of them.
    """
    canvas = [
        [
            config.ASCII_PATH if grid.is_path(x, y) else config.ASCII_WALL
            for x in range(grid.width)
        ]
        for y in range(grid.height)
    ]

    for area in rest_stop_areas:
        for x, y in area.cells():
            canvas[y][x] = config.ASCII_REST_STOP

    if mark_landmarks:
        for x, y in grid.exits.values():
            canvas[y][x] = config.ASCII_EXIT
        cx, cy = grid.center
        canvas[cy][cx] = config.ASCII_CENTER

    return "\n".join("".join(row) for row in reversed(canvas))
