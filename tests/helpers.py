from __future__ import annotations

import random
from collections.abc import Sequence

from routemaze.maze import GenerationStage, GridMap, MazeConfig, SkeletonCarver
from routemaze.types import GridPos


def grid_from_rows(rows: Sequence[str], ready: bool = False) -> GridMap:
    """Build a grid from text rows, north row first. '.' is PATH, '#' is WALL."""
    height = len(rows)
    width = len(rows[0])
    grid = GridMap(width, height)
    for row_index, row in enumerate(rows):
        y = height - 1 - row_index
        for x, ch in enumerate(row):
            if ch == ".":
                grid.carve((x, y))
    if ready:
        grid.advance_to(GenerationStage.READY)
    return grid


def skeleton_cells(config: MazeConfig, seed: int) -> set[GridPos]:
    """PATH cells an engine run with ``random.Random(seed)`` has after its
    skeleton phase.

    The skeleton is the first consumer of the random stream, so carving it
    alone on a fresh grid with the same seed reproduces it exactly.
    """
    grid = GridMap(config.width, config.height)
    SkeletonCarver().carve(grid, random.Random(seed))
    return set(grid.path_cells())


class ScriptedRNG:
    """Random source returning fixed values, for steering the skeleton walk."""

    def __init__(
        self, random_value: float = 0.0, randrange_value: int = 0, randint_value: int = 1
    ) -> None:
        self.random_value = random_value
        self.randrange_value = randrange_value
        self.randint_value = randint_value

    def random(self) -> float:
        return self.random_value

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        return self.randrange_value

    def randint(self, a: int, b: int) -> int:
        return self.randint_value

    def shuffle(self, x: list) -> None:
        pass
