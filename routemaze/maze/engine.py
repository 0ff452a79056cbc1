"""Maze generation engine that orchestrates the layer pipeline.

The engine validates a MazeConfig, allocates an all-WALL GridMap, runs
skeleton carving and then density growth over a shared GenerationContext, and
hands back the finished, READY grid.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from routemaze.maze.context import GenerationContext
from routemaze.maze.density import DensityFiller
from routemaze.maze.grid import GenerationStage
from routemaze.maze.maze_config import MazeConfig
from routemaze.maze.skeleton import SkeletonCarver
from routemaze.util.rng import RNGProvider

if TYPE_CHECKING:
    from routemaze.maze.grid import GridMap
    from routemaze.maze.layer import GenerationLayer
    from routemaze.types import RandomSeed
    from routemaze.util.rng import RNG

logger = logging.getLogger(__name__)


class MazeGenerationEngine:
    """Runs generation layers in order on a fresh grid per call.

    The engine keeps no per-call state, so one instance can serve any number
    of generate() calls. Regenerating means calling generate() again; a
    returned grid is never reset.

    Example:
        engine = MazeGenerationEngine()
        grid = engine.generate(
            MazeConfig(width=21, height=21, wall_density=0.6, max_path_width=1),
            random.Random(12345),
        )

    Attributes:
        layers: GenerationLayer instances applied in order. The default is
            skeleton carving followed by density growth.
    """

    def __init__(self, layers: list[GenerationLayer] | None = None) -> None:
        self.layers = (
            layers if layers is not None else [SkeletonCarver(), DensityFiller()]
        )

    def generate(self, config: MazeConfig, rng: RNG | None = None) -> GridMap:
        """Generate one maze.

        Args:
            config: Maze settings. Validated before anything is allocated.
            rng: Random source. Identical config and identical stream state
                give an identical grid. A fresh unseeded Random if omitted.

        Returns:
            The finished grid, in the READY stage.

        Raises:
            InvalidMazeConfigError: If a config field is out of range.
        """
        config.validate()

        ctx = GenerationContext.create_empty(config, rng)
        for layer in self.layers:
            layer.apply(ctx)

        grid = ctx.grid
        grid.advance_to(GenerationStage.READY)
        logger.debug(
            f"Generated {grid.width}x{grid.height} maze: "
            f"{ctx.skeleton_cells} skeleton + {ctx.filled_cells} filled "
            f"= {grid.path_count()} path cells"
        )
        return grid


def generate_maze(config: MazeConfig | None = None, seed: RandomSeed = None) -> GridMap:
    """Generate a maze from a seed using the default pipeline.

    The seed is expanded into the dedicated "maze.generate" stream, so the
    same seed always yields the same maze regardless of what else the caller
    draws from other streams of an RNGProvider with that seed.
    """
    provider = RNGProvider(seed)
    return MazeGenerationEngine().generate(
        config if config is not None else MazeConfig(),
        provider.get("maze.generate"),
    )
