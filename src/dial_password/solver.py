"""Password solver: run every rotation in the input and count zeros."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from loguru import logger

from .dial import (
    INITIAL_POSITION,
    N_POSITION,
    apply_rotation,
    apply_rotation_with_zero_count,
)
from .rotation import Rotation, RotationParseError, parse_rotation


class CountingMode(Enum):
    END_OF_ROTATION = 1  # part 1
    EVERY_STEP = 2  # part 2


def iter_rotations(input_text: str) -> Iterator[Rotation]:
    """Yield the valid rotations in ``input_text``.

    Blank lines are skipped silently. Lines that fail to parse are logged as
    warnings and skipped, so one bad line never stops the run.
    """
    # Only \n separates lines; strip() drops the \r of \r\n endings
    for line in input_text.split("\n"):
        line = line.strip()
        if not line:
            continue

        try:
            yield parse_rotation(line)
        except RotationParseError as e:
            logger.warning(f"Invalid rotation '{line}': {e}")


def solve_puzzle(
    input_text: str,
    mode: CountingMode = CountingMode.END_OF_ROTATION,
    initial_position: int = INITIAL_POSITION,
) -> int:
    """Return the password: the number of times the dial points at 0."""
    if not 0 <= initial_position < N_POSITION:
        raise ValueError(
            f"initial_position must be in [0, {N_POSITION - 1}], got {initial_position}"
        )

    position = initial_position
    count = 0
    logger.debug(f"The dial starts by pointing at {position}")

    for rotation in iter_rotations(input_text):
        if mode is CountingMode.EVERY_STEP:
            position, zeros = apply_rotation_with_zero_count(position, rotation)
            count += zeros
        else:
            position = apply_rotation(position, rotation)
            if position == 0:
                count += 1

        logger.debug(f"The dial is rotated {rotation} to point at {position}")

    return count


def solve_part1(input_text: str) -> int:
    return solve_puzzle(input_text, CountingMode.END_OF_ROTATION)


def solve_part2(input_text: str) -> int:
    return solve_puzzle(input_text, CountingMode.EVERY_STEP)
