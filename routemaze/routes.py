"""Route layer: one interactive node per PATH cell, indexed by coordinate.

The route layer only reads the grid. Drawing, undo, and stamina live in the
game; this module gives them the node index and the adjacency rules they
share.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from routemaze.types import CARDINAL_DIRECTIONS
from routemaze.util.coordinates import manhattan_distance

if TYPE_CHECKING:
    from routemaze.maze.grid import GridMap
    from routemaze.types import Direction, GridPos


class PathDirection(Enum):
    """Compass direction of a route segment leaving a node."""

    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def step(self) -> Direction:
        return self.value

    @property
    def opposite(self) -> PathDirection:
        dx, dy = self.value
        return PathDirection((-dx, -dy))

    @classmethod
    def from_step(cls, step: Direction) -> PathDirection:
        return cls(step)


@dataclass(frozen=True)
class RouteNode:
    """A routable point sitting on a PATH cell."""

    pos: GridPos

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]


class RouteGraph:
    """All route nodes of a grid, keyed by grid position."""

    def __init__(self, nodes: dict[GridPos, RouteNode]) -> None:
        self.nodes = nodes

    @classmethod
    def from_grid(cls, grid: GridMap) -> RouteGraph:
        """Create one node for every PATH cell, x-major."""
        return cls({pos: RouteNode(pos) for pos in grid.path_cells()})

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, pos: object) -> bool:
        return pos in self.nodes

    def __iter__(self) -> Iterator[RouteNode]:
        return iter(self.nodes.values())

    def node_at(self, pos: GridPos) -> RouteNode | None:
        return self.nodes.get(pos)

    def neighbors(self, pos: GridPos) -> list[RouteNode]:
        """Nodes one cardinal step away, in +x, -x, +y, -y order."""
        x, y = pos
        result = []
        for dx, dy in CARDINAL_DIRECTIONS:
            node = self.nodes.get((x + dx, y + dy))
            if node is not None:
                result.append(node)
        return result

    def is_adjacent(self, a: GridPos, b: GridPos) -> bool:
        """True if both positions hold nodes exactly one cardinal step apart."""
        return a in self.nodes and b in self.nodes and manhattan_distance(a, b) == 1

    def direction_between(self, a: GridPos, b: GridPos) -> PathDirection:
        """Direction of the segment leaving ``a`` toward ``b``.

        Raises:
            ValueError: If ``a`` and ``b`` are not adjacent nodes.
        """
        if not self.is_adjacent(a, b):
            raise ValueError(f"{a} and {b} are not adjacent route nodes")
        return PathDirection.from_step((b[0] - a[0], b[1] - a[1]))
