"""Tests for MazeGenerationEngine: validation, pipeline order, and the
end-to-end properties every generated maze must have."""

from __future__ import annotations

import math
import random
from typing import ClassVar

import numpy as np
import pytest

from routemaze.maze import (
    CellState,
    GenerationContext,
    GenerationLayer,
    GenerationStage,
    InvalidMazeConfigError,
    MazeConfig,
    MazeGenerationEngine,
    density_target,
    find_wide_blocks,
    generate_maze,
)
from routemaze.maze.analysis import flood_fill, is_connected
from tests.helpers import skeleton_cells

# =============================================================================
# Validation
# =============================================================================


class TestConfigValidation:
    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"width": 0}, "width"),
            ({"width": -4}, "width"),
            ({"height": 0}, "height"),
            ({"wall_density": 1.01}, "wall_density"),
            ({"wall_density": -0.1}, "wall_density"),
            ({"wall_density": math.nan}, "wall_density"),
            ({"max_path_width": 0}, "max_path_width"),
            ({"width": 5.5}, "width"),
            ({"width": True}, "width"),
            ({"height": "9"}, "height"),
            ({"max_path_width": 1.0}, "max_path_width"),
            ({"wall_density": "0.5"}, "wall_density"),
        ],
    )
    def test_invalid_field_is_named(self, overrides: dict, field: str) -> None:
        config = MazeConfig(**overrides)

        with pytest.raises(InvalidMazeConfigError) as excinfo:
            config.validate()

        assert excinfo.value.field == field
        assert field in str(excinfo.value)

    def test_invalid_config_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            MazeConfig(max_path_width=0).validate()

    def test_boundary_values_are_valid(self) -> None:
        MazeConfig(width=1, height=1, wall_density=0.0, max_path_width=1).validate()
        MazeConfig(wall_density=1.0).validate()

    def test_zero_width_rejected_before_allocation(
        self, engine: MazeGenerationEngine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail_create(*args: object, **kwargs: object) -> None:
            raise AssertionError("grid allocated for an invalid config")

        monkeypatch.setattr(GenerationContext, "create_empty", fail_create)

        with pytest.raises(InvalidMazeConfigError) as excinfo:
            engine.generate(MazeConfig(width=0, height=21), random.Random(0))
        assert excinfo.value.field == "width"

    def test_fractional_size_rejected_before_allocation(
        self, engine: MazeGenerationEngine
    ) -> None:
        with pytest.raises(InvalidMazeConfigError) as excinfo:
            engine.generate(MazeConfig(width=21, height=10.5), random.Random(0))
        assert excinfo.value.field == "height"
        assert excinfo.value.value == 10.5


# =============================================================================
# Pipeline
# =============================================================================


class RecordingLayer(GenerationLayer):
    """Test layer that records when it was applied."""

    call_order: ClassVar[list[str]] = []

    def __init__(self, name: str) -> None:
        self.name = name

    def apply(self, ctx: GenerationContext) -> None:
        RecordingLayer.call_order.append(self.name)
        ctx.grid.carve((0, 0))


class TestEnginePipeline:
    def test_layers_applied_in_order(self) -> None:
        RecordingLayer.call_order = []
        engine = MazeGenerationEngine(
            layers=[RecordingLayer("a"), RecordingLayer("b"), RecordingLayer("c")]
        )

        grid = engine.generate(MazeConfig(width=5, height=5), random.Random(0))

        assert RecordingLayer.call_order == ["a", "b", "c"]
        assert grid.path_cells() == [(0, 0)]

    def test_returned_grid_is_ready(
        self, engine: MazeGenerationEngine, rng: random.Random
    ) -> None:
        grid = engine.generate(MazeConfig(), rng)

        assert grid.stage is GenerationStage.READY
        assert not grid.tiles.flags.writeable

    def test_each_call_builds_a_new_grid(self, engine: MazeGenerationEngine) -> None:
        config = MazeConfig(width=11, height=11)
        first = engine.generate(config, random.Random(1))
        second = engine.generate(config, random.Random(1))

        assert first is not second
        assert np.array_equal(first.tiles, second.tiles)

    def test_rng_defaults_to_fresh_random(self, engine: MazeGenerationEngine) -> None:
        grid = engine.generate(MazeConfig(width=9, height=9))

        assert grid.is_ready
        assert is_connected(grid)


# =============================================================================
# Maze properties
# =============================================================================

PROPERTY_CONFIGS = [
    MazeConfig(width=21, height=21, wall_density=0.6, max_path_width=1),
    MazeConfig(width=15, height=9, wall_density=0.3, max_path_width=2),
    MazeConfig(width=31, height=31, wall_density=0.5, max_path_width=3),
    MazeConfig(width=8, height=12, wall_density=0.0, max_path_width=1),
]


class TestMazeProperties:
    @pytest.mark.parametrize("config", PROPERTY_CONFIGS)
    @pytest.mark.parametrize("seed", range(6))
    def test_every_cell_defined(self, config: MazeConfig, seed: int) -> None:
        grid = MazeGenerationEngine().generate(config, random.Random(seed))

        assert grid.tiles.shape == (config.width, config.height)
        assert np.all(np.isin(grid.tiles, [CellState.WALL, CellState.PATH]))

    @pytest.mark.parametrize("config", PROPERTY_CONFIGS)
    @pytest.mark.parametrize("seed", range(6))
    def test_single_component_with_landmarks(
        self, config: MazeConfig, seed: int
    ) -> None:
        grid = MazeGenerationEngine().generate(config, random.Random(seed))

        component = flood_fill(grid, grid.center)
        assert len(component) == grid.path_count()
        for pos in grid.exits.values():
            assert pos in component

    @pytest.mark.parametrize("config", PROPERTY_CONFIGS)
    @pytest.mark.parametrize("seed", range(6))
    def test_growth_never_widens_past_limit(self, config: MazeConfig, seed: int) -> None:
        grid = MazeGenerationEngine().generate(config, random.Random(seed))
        skeleton = skeleton_cells(config, seed)
        size = config.max_path_width + 1

        # Density growth never completes an over-wide block, so any such
        # block must have been laid down entirely by the skeleton walks.
        for ox, oy in find_wide_blocks(grid.tiles, config.max_path_width):
            block = {(ox + i, oy + j) for i in range(size) for j in range(size)}
            assert block <= skeleton

    @pytest.mark.parametrize("config", PROPERTY_CONFIGS)
    @pytest.mark.parametrize("seed", range(6))
    def test_path_count_never_exceeds_target(
        self, config: MazeConfig, seed: int
    ) -> None:
        grid = MazeGenerationEngine().generate(config, random.Random(seed))
        skeleton = skeleton_cells(config, seed)
        target = density_target(config.width, config.height, config.wall_density)

        assert skeleton <= set(grid.path_cells())
        assert grid.path_count() <= max(target, len(skeleton))

    @pytest.mark.parametrize("seed", range(6))
    def test_target_reached_when_width_is_unbounded(self, seed: int) -> None:
        config = MazeConfig(width=21, height=21, wall_density=0.5, max_path_width=21)
        grid = MazeGenerationEngine().generate(config, random.Random(seed))
        skeleton = skeleton_cells(config, seed)

        assert grid.path_count() == max(221, len(skeleton))

    def test_same_seed_same_grid(self) -> None:
        config = MazeConfig(width=25, height=19, wall_density=0.55, max_path_width=2)
        first = MazeGenerationEngine().generate(config, random.Random(77))
        second = MazeGenerationEngine().generate(config, random.Random(77))

        assert np.array_equal(first.tiles, second.tiles)
        assert first.exits == second.exits

    def test_different_seeds_differ(self) -> None:
        config = MazeConfig(width=21, height=21)
        first = MazeGenerationEngine().generate(config, random.Random(1))
        second = MazeGenerationEngine().generate(config, random.Random(2))

        assert not np.array_equal(first.tiles, second.tiles)

    def test_generate_maze_is_seed_deterministic(self) -> None:
        config = MazeConfig(width=17, height=17)

        first = generate_maze(config, seed="level-3")
        second = generate_maze(config, seed="level-3")

        assert np.array_equal(first.tiles, second.tiles)

    def test_level_selector_is_ignored(self) -> None:
        plain = MazeConfig(width=15, height=15)
        themed = MazeConfig(width=15, height=15, level="desert")

        first = MazeGenerationEngine().generate(plain, random.Random(4))
        second = MazeGenerationEngine().generate(themed, random.Random(4))

        assert np.array_equal(first.tiles, second.tiles)


# =============================================================================
# Reference scenarios
# =============================================================================


class TestScenarios:
    @pytest.mark.parametrize("seed", range(10))
    def test_full_wall_density_leaves_only_skeleton(self, seed: int) -> None:
        config = MazeConfig(width=5, height=5, wall_density=1.0, max_path_width=1)
        grid = MazeGenerationEngine().generate(config, random.Random(seed))

        assert set(grid.path_cells()) == skeleton_cells(config, seed)
        assert grid.is_path(2, 2)
        for x, y in grid.path_cells():
            on_border = x in (0, 4) or y in (0, 4)
            assert not on_border or (x, y) in grid.exits.values()

    def test_zero_density_unbounded_width_is_all_path(
        self, engine: MazeGenerationEngine, rng: random.Random
    ) -> None:
        config = MazeConfig(width=21, height=21, wall_density=0.0, max_path_width=21)
        grid = engine.generate(config, rng)

        assert grid.path_count() == 441

    @pytest.mark.parametrize("seed", range(10))
    def test_narrow_maze_at_sixty_percent_walls(self, seed: int) -> None:
        config = MazeConfig(width=21, height=21, wall_density=0.6, max_path_width=1)
        grid = MazeGenerationEngine().generate(config, random.Random(seed))
        skeleton = skeleton_cells(config, seed)

        assert grid.path_count() <= max(176, len(skeleton))
        assert (10, 10) in flood_fill(grid, (10, 10))
        assert is_connected(grid)
        for ox, oy in find_wide_blocks(grid.tiles, 1):
            assert {(ox, oy), (ox + 1, oy), (ox, oy + 1), (ox + 1, oy + 1)} <= skeleton

    def test_zero_width_rejected(self, engine: MazeGenerationEngine) -> None:
        with pytest.raises(InvalidMazeConfigError):
            engine.generate(MazeConfig(width=0), random.Random(0))
