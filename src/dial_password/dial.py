"""Dial position updates for a 100-position circular dial."""

from typing import Tuple

from .rotation import Direction, Rotation

INITIAL_POSITION: int = 50
N_POSITION: int = 100


def apply_rotation(position: int, rotation: Rotation) -> int:
    """Position after the full rotation, without looking at the positions in between."""
    # % with a positive modulus is never negative, so no +N_POSITION bias is needed
    return (position + rotation.signed) % N_POSITION


def apply_rotation_with_zero_count(position: int, rotation: Rotation) -> Tuple[int, int]:
    """Turn the dial one click at a time.

    Returns the final position and how many clicks left the dial pointing at 0.
    A rotation of R1000 from 50 passes 0 ten times and ends back at 50.
    """
    step = -1 if rotation.direction is Direction.LEFT else 1
    current = position
    zero_count = 0

    for _ in range(rotation.distance):
        current = (current + step) % N_POSITION
        if current == 0:
            zero_count += 1

    return current, zero_count
