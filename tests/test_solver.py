"""End-to-end runs of the password solver."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

import dial_password
from dial_password import CountingMode, iter_rotations, solve_part1, solve_part2, solve_puzzle

EXAMPLE = """\
L68
L30
R48
L5
R60
L55
L1
L99
R14
L82
"""


def test_example_part1() -> None:
    assert solve_part1(EXAMPLE) == 3


def test_example_part2() -> None:
    assert solve_part2(EXAMPLE) == 6


def test_state_carries_across_lines() -> None:
    # 50 -> 82 -> 52 -> 0 -> 95
    assert solve_puzzle("L68\nL30\nR48\nL5\n", CountingMode.END_OF_ROTATION) == 1


def test_large_rotation_counts_every_lap() -> None:
    assert solve_puzzle("R1000", CountingMode.EVERY_STEP) == 10
    # 1000 % 100 == 0, so the dial is back at 50 and one more R50 lands on 0
    assert solve_puzzle("R1000\nR50", CountingMode.END_OF_ROTATION) == 1


def test_malformed_line_is_skipped(warnings_logged: list[str]) -> None:
    text = "L50\nX5\nR100\n"

    assert solve_puzzle(text, CountingMode.END_OF_ROTATION) == 2
    assert solve_puzzle(text, CountingMode.EVERY_STEP) == 2
    assert warnings_logged == [
        "Invalid rotation 'X5': Invalid direction in 'X5'",
        "Invalid rotation 'X5': Invalid direction in 'X5'",
    ]


def test_skip_preserves_position(warnings_logged: list[str]) -> None:
    # R5x must not move the dial: 50 -> 40 -> 0
    assert solve_puzzle("L10\nR5x\nR60\n") == 1
    assert len(warnings_logged) == 1
    assert warnings_logged[0].startswith("Invalid rotation 'R5x': Invalid number in 'R5x'")


def test_blank_lines_are_ignored(warnings_logged: list[str]) -> None:
    text = "\n   \nL68\n\t\n\n  L30  \r\nR48\n\n"

    assert solve_puzzle(text) == 1
    assert solve_puzzle(text, CountingMode.EVERY_STEP) == 2
    assert warnings_logged == []


def test_only_newline_separates_lines(warnings_logged: list[str]) -> None:
    # A form feed is not a line break, so R50 never runs and L49 ends on 1
    assert solve_puzzle("R50\x0cL3\nL49\n") == 0
    assert len(warnings_logged) == 1
    assert warnings_logged[0].startswith("Invalid rotation 'R50\x0cL3': Invalid number")


def test_library_use_is_silent() -> None:
    src_dir = Path(dial_password.__file__).resolve().parents[1]
    env = {**os.environ, "PYTHONPATH": os.pathsep.join([str(src_dir), os.environ.get("PYTHONPATH", "")])}
    result = subprocess.run(
        [sys.executable, "-c", "from dial_password import solve_part2; print(solve_part2('R1\\nL1\\nR50\\n'))"],
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
    )

    assert result.returncode == 0
    assert result.stdout == "1\n"
    assert result.stderr == ""


def test_empty_input() -> None:
    assert solve_puzzle("") == 0
    assert solve_puzzle("", CountingMode.EVERY_STEP) == 0


def test_only_bad_lines(warnings_logged: list[str]) -> None:
    assert solve_puzzle("L\nfoo\nR\n") == 0
    assert len(warnings_logged) == 3


def test_custom_initial_position() -> None:
    assert solve_puzzle("L5", initial_position=5) == 1
    assert solve_puzzle("R0", initial_position=0) == 1
    assert solve_puzzle("R0", CountingMode.EVERY_STEP, initial_position=0) == 0


@pytest.mark.parametrize("position", [-1, 100, 250])
def test_initial_position_out_of_range(position: int) -> None:
    with pytest.raises(ValueError):
        solve_puzzle("R1", initial_position=position)


def test_deterministic() -> None:
    assert [solve_part2(EXAMPLE) for _ in range(3)] == [6, 6, 6]


def test_iter_rotations_yields_only_valid_lines(warnings_logged: list[str]) -> None:
    rotations = list(iter_rotations("R1\n\nbad\n L2 \n"))

    assert [str(r) for r in rotations] == ["R1", "L2"]
    assert len(warnings_logged) == 1
