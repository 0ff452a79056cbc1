"""Skeleton carving: the guaranteed-connected backbone of every maze.

The skeleton links the grid center to one exit on each border side. Each link
is a biased random walk that starts at the center and carves one cardinal
step at a time, so every carved cell touches the previously carved one and
the whole skeleton is a single connected component.

Walk rules:
- With probability GREEDY_STEP_CHANCE, step along the axis with the larger
  remaining distance to the target (ties go to the vertical axis); otherwise
  step in a uniformly random cardinal direction.
- A step that does not land on the target is clamped into the grid interior
  [1, dim - 2], so the walk only touches the border at its exit.
- At most width * height steps are taken. If the cap runs out first the walk
  stops where it is and generation carries on.

The walk is not width-checked. A walk that doubles back can leave a fully
open square wider than the maze limit. Only the density filler enforces it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from routemaze import config
from routemaze.maze.grid import GenerationStage
from routemaze.maze.layer import GenerationLayer
from routemaze.types import CARDINAL_DIRECTIONS
from routemaze.util.coordinates import clamp

if TYPE_CHECKING:
    from routemaze.maze.context import GenerationContext
    from routemaze.maze.grid import GridMap
    from routemaze.types import GridPos
    from routemaze.util.rng import RNG

logger = logging.getLogger(__name__)


class Side(Enum):
    """Border side an exit sits on. North is y = height - 1."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _random_interior_offset(dim: int, rng: RNG) -> int:
    """Pick a position along a side, excluding both corners.

    A side shorter than 3 cells has no interior; its middle cell is used.
    """
    if dim >= 3:
        return rng.randint(1, dim - 2)
    return dim // 2


def _clamp_to_interior(value: int, dim: int) -> int:
    low = min(1, dim - 1)
    high = max(dim - 2, low)
    return clamp(value, low, high)


class SkeletonCarver(GenerationLayer):
    """Carves the center, four border exits, and a walk from the center to each."""

    def __init__(self, greedy_step_chance: float = config.GREEDY_STEP_CHANCE) -> None:
        self.greedy_step_chance = greedy_step_chance

    def carve(self, grid: GridMap, rng: RNG) -> dict[Side, GridPos]:
        """Carve the skeleton into ``grid``.

        Exits are drawn in the order north, south, east, west, then walked
        in that same order.

        Args:
            grid: An all-WALL grid.
            rng: Random source.

        Returns:
            The exit coordinate chosen for each side.
        """
        width, height = grid.width, grid.height
        center = grid.center
        grid.carve(center)

        exits = {
            Side.NORTH: (_random_interior_offset(width, rng), height - 1),
            Side.SOUTH: (_random_interior_offset(width, rng), 0),
            Side.EAST: (width - 1, _random_interior_offset(height, rng)),
            Side.WEST: (0, _random_interior_offset(height, rng)),
        }
        for exit_pos in exits.values():
            grid.carve(exit_pos)

        for side, exit_pos in exits.items():
            if not self._walk(grid, center, exit_pos, rng):
                logger.debug(
                    f"Skeleton walk to {side.value} exit {exit_pos} hit the "
                    f"step cap before arriving"
                )

        grid.exits = exits
        return exits

    def _walk(self, grid: GridMap, start: GridPos, target: GridPos, rng: RNG) -> bool:
        """Carve a biased random walk from ``start`` toward ``target``.

        Returns:
            True if the walk reached the target within the step cap.
        """
        width, height = grid.width, grid.height
        tx, ty = target
        current = start

        for _ in range(width * height):
            if current == target:
                return True

            x, y = current
            dx = tx - x
            dy = ty - y

            if rng.random() < self.greedy_step_chance:
                if abs(dx) > abs(dy):
                    x += _sign(dx)
                else:
                    y += _sign(dy)
            else:
                step_x, step_y = CARDINAL_DIRECTIONS[rng.randrange(4)]
                x += step_x
                y += step_y

            if (x, y) != target:
                x = _clamp_to_interior(x, width)
                y = _clamp_to_interior(y, height)

            current = (x, y)
            grid.carve(current)

        return current == target

    def apply(self, ctx: GenerationContext) -> None:
        """Carve the skeleton into the context grid and advance its stage.

        Args:
            ctx: The generation context to modify.
        """
        exits = self.carve(ctx.grid, ctx.rng)
        ctx.skeleton_cells = ctx.grid.path_count()
        ctx.grid.advance_to(GenerationStage.SKELETON_CARVED)
        logger.debug(
            f"Skeleton carved: {ctx.skeleton_cells} cells, "
            f"exits {list(exits.values())}"
        )
