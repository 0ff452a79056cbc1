"""
Configuration constants.

Centralizes the default values and tuning numbers used by maze generation and
its grid-level collaborators. Organized by functional area.

Per-call settings go through MazeConfig; nothing in here is mutated at runtime.
"""

# =============================================================================
# MAZE DEFAULTS
# =============================================================================

# Odd sizes give a unique center cell.
DEFAULT_MAZE_WIDTH = 21
DEFAULT_MAZE_HEIGHT = 21

# 0.0 = all path, 1.0 = skeleton only
DEFAULT_WALL_DENSITY = 0.6

# Largest solid open block allowed is MAX_PATH_WIDTH x MAX_PATH_WIDTH.
DEFAULT_MAX_PATH_WIDTH = 1

# =============================================================================
# SKELETON WALK
# =============================================================================

# Probability that a walk step heads straight for the target instead of
# moving in a random cardinal direction.
GREEDY_STEP_CHANCE = 0.7

# =============================================================================
# REST STOPS
# =============================================================================

REST_STOP_MIN_WIDTH = 2
REST_STOP_MAX_WIDTH = 3
REST_STOP_MIN_HEIGHT = 2
REST_STOP_MAX_HEIGHT = 3

# Radius of the square searched for a dead end around a chosen candidate.
REST_STOP_DEAD_END_SEARCH_RADIUS = 3

# Near ring: a few stops within reach of the start.
REST_STOP_NEAR_COUNT = 2
REST_STOP_NEAR_MIN_DISTANCE = 10.0
REST_STOP_NEAR_MAX_DISTANCE = 30.0
REST_STOP_NEAR_SPACING = 8.0

# Far ring: everything past the near ring's outer edge.
REST_STOP_FAR_COUNT = 3
REST_STOP_FAR_SPACING = 15.0

# =============================================================================
# ASCII RENDERING
# =============================================================================

ASCII_WALL = "#"
ASCII_PATH = "."
ASCII_CENTER = "C"
ASCII_EXIT = "E"
ASCII_REST_STOP = "R"
