"""NumPy closed-form versions of both counting modes, used to cross-check the solver."""

from typing import Iterable

import numpy as np

from .dial import INITIAL_POSITION, N_POSITION
from .rotation import Rotation

INT64_MAX = np.iinfo(np.int64).max


def to_offsets(rotations: Iterable[Rotation]) -> np.ndarray:
    """Signed offsets as int64 (left is negative).

    Raises:
        OverflowError: a distance does not fit in int64. The click-by-click
            solver has no such limit, so cross-check only inputs below 2**63.
    """
    offsets = []
    for rotation in rotations:
        if rotation.distance > INT64_MAX:
            raise OverflowError(f"Rotation {rotation} does not fit in int64")
        offsets.append(rotation.signed)
    return np.array(offsets, dtype=np.int64)


def end_positions(offsets: np.ndarray, initial_position: int = INITIAL_POSITION) -> np.ndarray:
    """Dial position after each rotation."""
    # Reduce first so the running sum stays small for any distance
    return (initial_position + np.cumsum(offsets % N_POSITION)) % N_POSITION


def start_positions(offsets: np.ndarray, initial_position: int = INITIAL_POSITION) -> np.ndarray:
    """Dial position before each rotation."""
    ends = end_positions(offsets, initial_position)
    return np.concatenate(([initial_position], ends[:-1])).astype(np.int64)


def count_end_zeros(offsets: np.ndarray, initial_position: int = INITIAL_POSITION) -> int:
    if offsets.size == 0:
        return 0
    return int(np.count_nonzero(end_positions(offsets, initial_position) == 0))


def count_step_zeros(offsets: np.ndarray, initial_position: int = INITIAL_POSITION) -> int:
    """Count every click that lands on 0 without simulating the clicks.

    Turning right from p by d passes 0 exactly (p + d) // N times. Turning left
    the first 0 is p clicks away (N clicks when starting on 0), then every N.
    """
    if offsets.size == 0:
        return 0

    starts = start_positions(offsets, initial_position)
    distances = np.abs(offsets)

    right = (starts + distances) // N_POSITION

    first_zero = np.where(starts > 0, starts, N_POSITION)
    left = np.where(
        distances >= first_zero,
        (distances - first_zero) // N_POSITION + 1,
        0,
    )

    return int(np.where(offsets >= 0, right, left).sum())
