"""Routemaze: connected grid mazes with tunable density and corridor width."""

from routemaze.maze import (
    CellState,
    GridMap,
    InvalidMazeConfigError,
    MazeConfig,
    MazeGenerationEngine,
    generate_maze,
)

__all__ = [
    "CellState",
    "GridMap",
    "InvalidMazeConfigError",
    "MazeConfig",
    "MazeGenerationEngine",
    "generate_maze",
]
