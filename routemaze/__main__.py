"""Command-line entry point: generate a maze and print it."""

import argparse
import logging
import sys

from routemaze import config
from routemaze.maze import InvalidMazeConfigError, MazeConfig, MazeGenerationEngine
from routemaze.maze.analysis import path_ratio
from routemaze.render import render_ascii
from routemaze.rest_stops import RestStopPlacer
from routemaze.util.rng import RNGProvider

logger = logging.getLogger("routemaze.main")


def get_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Configures and parses command-line arguments."""
    p = argparse.ArgumentParser(
        prog="routemaze",
        description="Generates a connected grid maze and prints it as text.",
    )
    p.add_argument("--width", type=int, default=config.DEFAULT_MAZE_WIDTH)
    p.add_argument("--height", type=int, default=config.DEFAULT_MAZE_HEIGHT)
    p.add_argument(
        "--wall-density",
        type=float,
        default=config.DEFAULT_WALL_DENSITY,
        help="Fraction of cells that stay wall (0.0 - 1.0).",
    )
    p.add_argument(
        "--max-path-width",
        type=int,
        default=config.DEFAULT_MAX_PATH_WIDTH,
        help="Largest allowed solid open block side.",
    )
    p.add_argument("--seed", help="Master seed for reproducible output.")
    p.add_argument(
        "--rest-stops",
        action="store_true",
        help="Carve rest-stop zones around the center after generation.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable INFO logging.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = get_cli_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    maze_config = MazeConfig(
        width=args.width,
        height=args.height,
        wall_density=args.wall_density,
        max_path_width=args.max_path_width,
    )
    provider = RNGProvider(args.seed)

    try:
        grid = MazeGenerationEngine().generate(
            maze_config, provider.get("maze.generate")
        )
    except InvalidMazeConfigError as e:
        logger.error(str(e))
        return 2

    logger.info(f"Generated {grid!r}, {path_ratio(grid):.0%} open")

    areas = []
    if args.rest_stops:
        placer = RestStopPlacer(max_path_width=maze_config.max_path_width)
        stops = placer.place(grid, grid.center, provider.get("maze.rest_stops"))
        areas = [stop.area for stop in stops]
        logger.info(f"Placed {len(stops)} rest stops")

    print(render_ascii(grid, rest_stop_areas=areas))
    return 0


if __name__ == "__main__":
    sys.exit(main())
