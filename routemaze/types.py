from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

GridCoord: TypeAlias = int  # Always integer cell position

# Grid coordinates - absolute positions on the maze grid, x to the east and
# y to the north. (0, 0) is the south-west corner.
GridPos: TypeAlias = tuple[GridCoord, GridCoord]  # Example: (10, 10) = center of 21x21

# Directions - discrete grid steps
UnitStep: TypeAlias = Literal[-1, 0, 1]
Direction: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (0, 1) = northward step

# Fixed neighbour order used everywhere cells are expanded: +x, -x, +y, -y.
# Generation results depend on this order for a given seed.
CARDINAL_DIRECTIONS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "level-3".
RandomSeed: TypeAlias = int | str | None

# Opaque level/theme selector carried through config; never read by the
# generation algorithm itself.
LevelSelector: TypeAlias = int | str | None
