"""Per-call maze generation settings and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from routemaze import config
from routemaze.types import LevelSelector


class InvalidMazeConfigError(ValueError):
    """Raised before any generation work when a config field is out of range.

    Attributes:
        field: Name of the offending MazeConfig field.
        value: The rejected value.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid maze config: {field}={value!r} ({reason})")
        self.field = field
        self.value = value


@dataclass(frozen=True)
class MazeConfig:
    """Settings for one maze.

    Attributes:
        width: Grid width in cells (> 0, odd recommended).
        height: Grid height in cells (> 0, odd recommended).
        wall_density: Fraction of cells meant to stay WALL, in [0, 1].
        max_path_width: Largest allowed solid open block side (>= 1).
        level: Opaque level/theme selector for downstream consumers.
    """

    width: int = config.DEFAULT_MAZE_WIDTH
    height: int = config.DEFAULT_MAZE_HEIGHT
    wall_density: float = config.DEFAULT_WALL_DENSITY
    max_path_width: int = config.DEFAULT_MAX_PATH_WIDTH
    level: LevelSelector = None

    def validate(self) -> None:
        """Raise InvalidMazeConfigError naming the first invalid field."""
        for name in ("width", "height", "max_path_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidMazeConfigError(name, value, "must be an int")
        if isinstance(self.wall_density, bool) or not isinstance(
            self.wall_density, (int, float)
        ):
            raise InvalidMazeConfigError(
                "wall_density", self.wall_density, "must be a number"
            )

        if self.width <= 0:
            raise InvalidMazeConfigError("width", self.width, "must be > 0")
        if self.height <= 0:
            raise InvalidMazeConfigError("height", self.height, "must be > 0")
        # The negated form also rejects NaN.
        if not 0.0 <= self.wall_density <= 1.0:
            raise InvalidMazeConfigError(
                "wall_density", self.wall_density, "must be within [0, 1]"
            )
        if self.max_path_width < 1:
            raise InvalidMazeConfigError(
                "max_path_width", self.max_path_width, "must be >= 1"
            )
