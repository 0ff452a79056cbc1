"""The mutable cell container that every generation phase writes into.

A GridMap stores one CellState per cell in a numpy ``uint8`` array of shape
``(width, height)``, indexed ``tiles[x, y]``. Cells only ever go from WALL to
PATH. Once the engine marks the grid READY the array is made read-only; the
single permitted post-generation edit (rest-stop carving) goes through
``post_process()``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from routemaze.types import GridCoord, GridPos
from routemaze.util.coordinates import Rect, is_valid_grid_pos

if TYPE_CHECKING:
    from routemaze.maze.skeleton import Side


class CellState(IntEnum):
    """The two mutually exclusive states of a grid cell."""

    WALL = 0
    PATH = 1


class GenerationStage(IntEnum):
    """Lifecycle of a single GridMap. Transitions only move forward."""

    EMPTY = 0
    SKELETON_CARVED = 1
    DENSITY_FILLED = 2
    READY = 3


class GridBoundsError(IndexError):
    """Raised when a coordinate outside the grid is addressed."""

    def __init__(self, x: GridCoord, y: GridCoord, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.pos = (x, y)


class GridLockedError(RuntimeError):
    """Raised when a READY grid is written outside its post-process window."""

    pass


class IrreversibleCarveError(ValueError):
    """Raised when a PATH cell would be turned back into a WALL."""

    pass


class InvalidStageTransitionError(RuntimeError):
    """Raised when a grid is moved back to an earlier (or the same) stage."""

    pass


class GridMap:
    """A width x height grid of WALL/PATH cells, created all-WALL."""

    def __init__(self, width: GridCoord, height: GridCoord) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width: GridCoord = width
        self.height: GridCoord = height
        self.tiles = np.full(
            (width, height),
            fill_value=CellState.WALL,
            dtype=np.uint8,
            order="F",
        )
        self.stage = GenerationStage.EMPTY

        # Filled in by the skeleton carver, keyed by border side.
        self.exits: dict[Side, GridPos] = {}

        self._post_process_used = False

    @property
    def center(self) -> GridPos:
        return (self.width // 2, self.height // 2)

    @property
    def is_ready(self) -> bool:
        return self.stage is GenerationStage.READY

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def in_bounds(self, x: GridCoord, y: GridCoord) -> bool:
        return is_valid_grid_pos((x, y), self.width, self.height)

    def _check_bounds(self, x: GridCoord, y: GridCoord) -> None:
        if not self.in_bounds(x, y):
            raise GridBoundsError(x, y, self.width, self.height)

    def get(self, x: GridCoord, y: GridCoord) -> CellState:
        self._check_bounds(x, y)
        return CellState(int(self.tiles[x, y]))

    def is_path(self, x: GridCoord, y: GridCoord) -> bool:
        """True if (x, y) is in range and PATH. Out-of-range cells are not PATH."""
        return self.in_bounds(x, y) and self.tiles[x, y] == CellState.PATH

    def set(self, x: GridCoord, y: GridCoord, state: CellState) -> None:
        self._check_bounds(x, y)
        if not self.tiles.flags.writeable:
            raise GridLockedError(
                "Grid is READY; edits are only allowed inside post_process()"
            )
        if state == CellState.WALL and self.tiles[x, y] == CellState.PATH:
            raise IrreversibleCarveError(f"({x}, {y}) is already PATH")
        self.tiles[x, y] = state

    def carve(self, pos: GridPos) -> None:
        """Mark a single cell PATH."""
        self.set(pos[0], pos[1], CellState.PATH)

    def carve_rect(self, rect: Rect) -> None:
        """Mark every cell of ``rect`` PATH. The rect must lie inside the grid."""
        if rect.width <= 0 or rect.height <= 0:
            return
        self._check_bounds(rect.x1, rect.y1)
        self._check_bounds(rect.x2 - 1, rect.y2 - 1)
        if not self.tiles.flags.writeable:
            raise GridLockedError(
                "Grid is READY; edits are only allowed inside post_process()"
            )
        self.tiles[rect.x1 : rect.x2, rect.y1 : rect.y2] = CellState.PATH

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def path_count(self) -> int:
        return int(np.count_nonzero(self.tiles == CellState.PATH))

    def path_cells(self) -> list[GridPos]:
        """All PATH coordinates in x-major order."""
        return [(int(x), int(y)) for x, y in np.argwhere(self.tiles == CellState.PATH)]

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def advance_to(self, stage: GenerationStage) -> None:
        """Move forward to a later lifecycle stage. READY locks the cell array."""
        if stage <= self.stage:
            raise InvalidStageTransitionError(
                f"Cannot move grid from {self.stage.name} to {stage.name}"
            )
        self.stage = stage
        if stage is GenerationStage.READY:
            self.tiles.flags.writeable = False

    @contextmanager
    def post_process(self) -> Iterator[GridMap]:
        """Open the one-time edit window on a READY grid.

        Usage:
            with grid.post_process():
                grid.carve_rect(Rect(3, 3, 2, 2))
        """
        if not self.is_ready:
            raise GridLockedError("post_process() is only available on a READY grid")
        if self._post_process_used:
            raise GridLockedError("post_process() may only be used once per grid")

        self._post_process_used = True
        self.tiles.flags.writeable = True
        try:
            yield self
        finally:
            self.tiles.flags.writeable = False

    def __repr__(self) -> str:
        return (
            f"GridMap(width={self.width}, height={self.height}, "
            f"stage={self.stage.name}, paths={self.path_count()})"
        )
