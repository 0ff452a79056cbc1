from __future__ import annotations

import random

import pytest

from routemaze.maze import MazeGenerationEngine


@pytest.fixture
def engine() -> MazeGenerationEngine:
    """A default two-layer engine."""
    return MazeGenerationEngine()


@pytest.fixture
def rng() -> random.Random:
    """A fixed-seed random source so failures reproduce."""
    return random.Random(1234)
