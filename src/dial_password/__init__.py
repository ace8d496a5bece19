"""Safe dial password - count how often a 0-99 dial lands on (or passes) zero."""

from loguru import logger

from .dial import (
    INITIAL_POSITION,
    N_POSITION,
    apply_rotation,
    apply_rotation_with_zero_count,
)
from .rotation import Direction, Rotation, RotationParseError, parse_rotation
from .solver import CountingMode, iter_rotations, solve_part1, solve_part2, solve_puzzle

# Silent when used as a library; configure_logging() turns it back on
logger.disable("dial_password")

__all__ = [
    "INITIAL_POSITION",
    "N_POSITION",
    "CountingMode",
    "Direction",
    "Rotation",
    "RotationParseError",
    "apply_rotation",
    "apply_rotation_with_zero_count",
    "iter_rotations",
    "parse_rotation",
    "solve_part1",
    "solve_part2",
    "solve_puzzle",
]
