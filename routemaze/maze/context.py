"""Generation context for the maze pipeline.

The GenerationContext is a mutable container that holds all state during one
generate() call. Each layer receives the same context and modifies it in
place. Nothing in it outlives the call except the grid itself.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from routemaze.maze.grid import GridMap

if TYPE_CHECKING:
    from routemaze.maze.maze_config import MazeConfig
    from routemaze.util.rng import RNG


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        config: The validated settings for this maze.
        grid: The grid under construction, exclusively owned by this call.
        rng: Random source for every decision made by the layers.
        skeleton_cells: PATH count right after skeleton carving.
        filled_cells: Cells added by density growth.
    """

    config: MazeConfig
    grid: GridMap
    rng: RNG = field(default_factory=random.Random)
    skeleton_cells: int = 0
    filled_cells: int = 0

    @classmethod
    def create_empty(cls, config: MazeConfig, rng: RNG | None = None) -> GenerationContext:
        """Create a context holding a fresh all-WALL grid.

        Args:
            config: Already validated maze settings.
            rng: Random source; a fresh unseeded Random if omitted.

        Returns:
            A new GenerationContext ready for layer processing.
        """
        grid = GridMap(config.width, config.height)
        return cls(
            config=config,
            grid=grid,
            rng=rng if rng is not None else random.Random(),
        )
