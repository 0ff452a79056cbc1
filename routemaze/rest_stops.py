"""Rest-stop placement: carving open rectangular zones into a finished maze.

Rest stops are placed in two rings around a reference cell (usually the
player start at the grid center):

1. Near ring: a few stops between NEAR_MIN and NEAR_MAX distance.
2. Far ring: more stops beyond the near ring, spaced further apart.

For each ring, PATH cells in the distance band are shuffled and taken in
order as long as they keep the ring's spacing from every stop placed so far.
An accepted cell is then moved to the first dead end found within a small
search square around it, if any, so stops tend to reward exploring side
branches. The zone is sized randomly, anchored on that cell, clipped to the
grid, and carved to PATH.

This is the one collaborator allowed to edit a READY grid. All of its
carving happens inside a single ``GridMap.post_process()`` window. The engine
does not re-check the width limit afterwards, so the placer skips any zone
that would open a new block wider than ``max_path_width``. Pass the limit the
maze was generated with.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from routemaze import config
from routemaze.maze.analysis import is_dead_end
from routemaze.maze.grid import CellState
from routemaze.maze.width_limiter import find_wide_blocks
from routemaze.util.coordinates import Rect, distance

if TYPE_CHECKING:
    from routemaze.maze.grid import GridMap
    from routemaze.types import GridPos
    from routemaze.util.rng import RNG

logger = logging.getLogger(__name__)


@dataclass
class RestStopRing:
    """One placement pass: how many stops, how far out, how far apart."""

    count: int
    min_distance: float
    max_distance: float
    spacing: float


def _near_ring() -> RestStopRing:
    return RestStopRing(
        count=config.REST_STOP_NEAR_COUNT,
        min_distance=config.REST_STOP_NEAR_MIN_DISTANCE,
        max_distance=config.REST_STOP_NEAR_MAX_DISTANCE,
        spacing=config.REST_STOP_NEAR_SPACING,
    )


def _far_ring() -> RestStopRing:
    return RestStopRing(
        count=config.REST_STOP_FAR_COUNT,
        min_distance=config.REST_STOP_NEAR_MAX_DISTANCE,
        max_distance=math.inf,
        spacing=config.REST_STOP_FAR_SPACING,
    )


@dataclass
class RestStopRules:
    """Sizing and placement rules for rest stops.

    Attributes:
        min_width: Smallest zone width in cells.
        max_width: Largest zone width in cells.
        min_height: Smallest zone height in cells.
        max_height: Largest zone height in cells.
        dead_end_search_radius: Half-size of the square searched for a dead
            end around each accepted candidate.
        rings: Placement passes, run in order.
    """

    min_width: int = config.REST_STOP_MIN_WIDTH
    max_width: int = config.REST_STOP_MAX_WIDTH
    min_height: int = config.REST_STOP_MIN_HEIGHT
    max_height: int = config.REST_STOP_MAX_HEIGHT
    dead_end_search_radius: int = config.REST_STOP_DEAD_END_SEARCH_RADIUS
    rings: list[RestStopRing] = field(
        default_factory=lambda: [_near_ring(), _far_ring()]
    )

    def __post_init__(self) -> None:
        if not 1 <= self.min_width <= self.max_width:
            raise ValueError(
                f"Rest stop widths must satisfy 1 <= min <= max, "
                f"got {self.min_width}..{self.max_width}"
            )
        if not 1 <= self.min_height <= self.max_height:
            raise ValueError(
                f"Rest stop heights must satisfy 1 <= min <= max, "
                f"got {self.min_height}..{self.max_height}"
            )


@dataclass(frozen=True)
class RestStop:
    """A carved rest-stop zone.

    Attributes:
        area: The carved cells, clipped to the grid.
        anchor: The cell the zone was built around.
    """

    area: Rect
    anchor: GridPos

    @property
    def center(self) -> tuple[float, float]:
        return self.area.exact_center()


class RestStopPlacer:
    """Places rest stops on a READY grid and carves them in.

    Attributes:
        rules: Sizing and ring settings.
        max_path_width: Width limit the maze was generated with. A zone that
            would complete a new fully-PATH square of side
            ``max_path_width + 1`` is skipped.
    """

    def __init__(
        self,
        rules: RestStopRules | None = None,
        max_path_width: int = config.DEFAULT_MAX_PATH_WIDTH,
    ) -> None:
        self.rules = rules if rules is not None else RestStopRules()
        self.max_path_width = max_path_width

    def place(self, grid: GridMap, origin: GridPos, rng: RNG) -> list[RestStop]:
        """Place and carve every ring's rest stops.

        Args:
            grid: A READY grid whose post-process window is still unused.
            origin: Reference cell distances are measured from.
            rng: Random source.

        Returns:
            The placed stops in placement order.

        Raises:
            GridLockedError: If the grid is not READY or was already
                post-processed.
        """
        stops: list[RestStop] = []
        with grid.post_process():
            # Candidates come from the maze as generated, not from earlier zones.
            path_cells = grid.path_cells()
            for ring in self.rules.rings:
                self._place_ring(grid, origin, ring, path_cells, stops, rng)

        logger.debug(f"Placed {len(stops)} rest stops: {[s.area for s in stops]}")
        return stops

    def _place_ring(
        self,
        grid: GridMap,
        origin: GridPos,
        ring: RestStopRing,
        path_cells: list[GridPos],
        stops: list[RestStop],
        rng: RNG,
    ) -> None:
        candidates = [
            pos
            for pos in path_cells
            if ring.min_distance <= distance(origin, pos) <= ring.max_distance
        ]
        rng.shuffle(candidates)

        placed = 0
        for candidate in candidates:
            if placed >= ring.count:
                break
            if any(distance(candidate, stop.center) < ring.spacing for stop in stops):
                continue

            anchor = self._find_dead_end_near(grid, candidate)
            area = self._zone_around(grid, anchor, rng)
            if self._would_break_width_limit(grid, area):
                logger.debug(f"Skipping rest stop at {area}: too wide for the maze")
                continue

            grid.carve_rect(area)
            stops.append(RestStop(area=area, anchor=anchor))
            placed += 1

    def _find_dead_end_near(self, grid: GridMap, pos: GridPos) -> GridPos:
        """First dead end in the search square around ``pos``, else ``pos``."""
        radius = self.rules.dead_end_search_radius
        x, y = pos
        min_x = max(1, x - radius)
        max_x = min(grid.width - 2, x + radius)
        min_y = max(1, y - radius)
        max_y = min(grid.height - 2, y + radius)

        for cx in range(min_x, max_x + 1):
            for cy in range(min_y, max_y + 1):
                if is_dead_end(grid, (cx, cy)):
                    return (cx, cy)
        return pos

    def _zone_around(self, grid: GridMap, anchor: GridPos, rng: RNG) -> Rect:
        rules = self.rules
        width = rng.randint(rules.min_width, rules.max_width)
        height = rng.randint(rules.min_height, rules.max_height)

        start_x = max(0, anchor[0] - width // 2)
        start_y = max(0, anchor[1] - height // 2)
        end_x = min(start_x + width, grid.width)
        end_y = min(start_y + height, grid.height)
        return Rect.from_bounds(start_x, start_y, end_x, end_y)

    def _would_break_width_limit(self, grid: GridMap, area: Rect) -> bool:
        trial = grid.tiles.copy()
        trial[area.x1 : area.x2, area.y1 : area.y2] = CellState.PATH
        # Blocks the skeleton already left behind are not this zone's doing.
        existing = set(find_wide_blocks(grid.tiles, self.max_path_width))
        return any(
            origin not in existing
            for origin in find_wide_blocks(trial, self.max_path_width)
        )
