"""Density growth: randomized frontier expansion out of the skeleton.

Starting from the connected skeleton, WALL cells bordering the PATH region are
kept in a frontier. Each step removes one frontier cell uniformly at random
and either carves it (if that keeps every open block within the width limit)
or discards it for good. Every carved cell touches an existing PATH cell, so
the PATH region stays one connected component throughout.

Growth stops when the density target is reached or the frontier runs dry.
Running dry below target is normal for narrow width limits.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from routemaze.maze.grid import GenerationStage
from routemaze.maze.layer import GenerationLayer
from routemaze.maze.width_limiter import would_exceed_width
from routemaze.types import CARDINAL_DIRECTIONS

if TYPE_CHECKING:
    from routemaze.maze.context import GenerationContext
    from routemaze.maze.grid import GridMap
    from routemaze.types import GridPos
    from routemaze.util.rng import RNG

logger = logging.getLogger(__name__)


def density_target(width: int, height: int, wall_density: float) -> int:
    """Number of PATH cells wanted, rounded half up."""
    return math.floor(width * height * (1.0 - wall_density) + 0.5)


class Frontier:
    """Set of candidate cells with uniform random removal.

    Backed by a list for O(1) random pick (swap-to-end removal, so order is
    not preserved) and a set for O(1) membership.
    """

    def __init__(self) -> None:
        self._cells: list[GridPos] = []
        self._members: set[GridPos] = set()

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._members

    def add(self, pos: GridPos) -> bool:
        """Insert ``pos`` unless already present. Returns True if inserted."""
        if pos in self._members:
            return False
        self._cells.append(pos)
        self._members.add(pos)
        return True

    def pop_random(self, rng: RNG) -> GridPos:
        """Remove and return a uniformly chosen cell."""
        index = rng.randrange(len(self._cells))
        last = len(self._cells) - 1
        self._cells[index], self._cells[last] = self._cells[last], self._cells[index]
        pos = self._cells.pop()
        self._members.discard(pos)
        return pos


class DensityFiller(GenerationLayer):
    """Grows the PATH region toward the configured wall density."""

    def fill(
        self,
        grid: GridMap,
        wall_density: float,
        max_path_width: int,
        rng: RNG,
    ) -> int:
        """Grow PATH cells out of the existing region.

        A candidate rejected by the width limit is remembered and never
        re-enters the frontier, even if a later carve makes it look
        acceptable.

        Args:
            grid: Grid with its skeleton already carved.
            wall_density: Fraction of cells meant to stay WALL.
            max_path_width: Largest allowed solid open block side.
            rng: Random source.

        Returns:
            The number of cells carved.
        """
        target = density_target(grid.width, grid.height, wall_density)

        seeds = grid.path_cells()
        path_set = set(seeds)
        rejected: set[GridPos] = set()
        frontier = Frontier()
        for pos in seeds:
            self._extend_frontier(grid, pos, frontier, path_set, rejected)

        carved = 0
        while frontier and len(path_set) < target:
            candidate = frontier.pop_random(rng)

            if would_exceed_width(grid, candidate, max_path_width):
                rejected.add(candidate)
                continue

            grid.carve(candidate)
            path_set.add(candidate)
            carved += 1
            self._extend_frontier(grid, candidate, frontier, path_set, rejected)

        if len(path_set) < target:
            logger.debug(
                f"Frontier exhausted at {len(path_set)}/{target} path cells "
                f"({len(rejected)} candidates rejected by width limit)"
            )
        return carved

    @staticmethod
    def _extend_frontier(
        grid: GridMap,
        pos: GridPos,
        frontier: Frontier,
        path_set: set[GridPos],
        rejected: set[GridPos],
    ) -> None:
        x, y = pos
        for dx, dy in CARDINAL_DIRECTIONS:
            neighbor = (x + dx, y + dy)
            if (
                grid.in_bounds(*neighbor)
                and neighbor not in path_set
                and neighbor not in rejected
            ):
                frontier.add(neighbor)

    def apply(self, ctx: GenerationContext) -> None:
        """Grow the context grid to its density target and advance its stage.

        Args:
            ctx: The generation context to modify.
        """
        cfg = ctx.config
        ctx.filled_cells = self.fill(
            ctx.grid, cfg.wall_density, cfg.max_path_width, ctx.rng
        )
        ctx.grid.advance_to(GenerationStage.DENSITY_FILLED)
        logger.debug(f"Density fill carved {ctx.filled_cells} cells")
