from __future__ import annotations

import numpy as np
import pytest

from routemaze.__main__ import main
from routemaze.maze import find_wide_blocks


def _wide_blocks(output: str, max_width: int) -> set[tuple[int, int]]:
    """Wide-block origins of a printed maze. Every non-'#' glyph is open."""
    rows = output.splitlines()[::-1]
    tiles = np.array([[ch != "#" for ch in row] for row in rows], dtype=np.uint8).T
    return set(find_wide_blocks(tiles, max_width))


def test_prints_requested_size(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--width", "11", "--height", "7", "--seed", "1"])

    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert len(lines) == 7
    assert all(len(line) == 11 for line in lines)
    assert "C" in lines[3]


def test_same_seed_same_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--seed", "abc"])
    first = capsys.readouterr().out
    main(["--seed", "abc"])
    second = capsys.readouterr().out

    assert first == second


@pytest.mark.parametrize(
    ("size", "wall_density", "max_path_width"),
    [
        ("61", "0.4", "3"),
        ("41", "0.6", "1"),
    ],
)
def test_rest_stops_respect_max_path_width(
    capsys: pytest.CaptureFixture[str],
    size: str,
    wall_density: str,
    max_path_width: str,
) -> None:
    args = [
        "--width",
        size,
        "--height",
        size,
        "--wall-density",
        wall_density,
        "--max-path-width",
        max_path_width,
        "--seed",
        "2",
    ]
    main(args)
    plain = capsys.readouterr().out

    status = main([*args, "--rest-stops"])
    with_stops = capsys.readouterr().out

    assert status == 0
    limit = int(max_path_width)
    assert _wide_blocks(with_stops, limit) <= _wide_blocks(plain, limit)


def test_rest_stops_are_drawn(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(
        [
            "--width",
            "61",
            "--height",
            "61",
            "--wall-density",
            "0.4",
            "--max-path-width",
            "3",
            "--seed",
            "2",
            "--rest-stops",
        ]
    )

    assert status == 0
    assert "R" in capsys.readouterr().out


def test_invalid_config_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--width", "0"])

    assert status == 2
    assert capsys.readouterr().out == ""
