"""Maze generation for Routemaze.

The default pipeline is two layers run by MazeGenerationEngine:
- SkeletonCarver: center, four border exits, and a biased walk to each
- DensityFiller: randomized frontier growth under the corridor-width limit

The result is a READY GridMap whose PATH cells form one connected component.
"""

from .context import GenerationContext
from .density import DensityFiller, Frontier, density_target
from .engine import MazeGenerationEngine, generate_maze
from .grid import (
    CellState,
    GenerationStage,
    GridBoundsError,
    GridLockedError,
    GridMap,
    InvalidStageTransitionError,
    IrreversibleCarveError,
)
from .layer import GenerationLayer
from .maze_config import InvalidMazeConfigError, MazeConfig
from .skeleton import Side, SkeletonCarver
from .width_limiter import find_wide_blocks, has_wide_block, would_exceed_width

__all__ = [
    "CellState",
    "DensityFiller",
    "Frontier",
    "GenerationContext",
    "GenerationLayer",
    "GenerationStage",
    "GridBoundsError",
    "GridLockedError",
    "GridMap",
    "InvalidMazeConfigError",
    "InvalidStageTransitionError",
    "IrreversibleCarveError",
    "MazeConfig",
    "MazeGenerationEngine",
    "Side",
    "SkeletonCarver",
    "density_target",
    "find_wide_blocks",
    "generate_maze",
    "has_wide_block",
    "would_exceed_width",
]
