"""Rotation commands - parsing `L68` / `R48` style lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


class RotationParseError(ValueError):
    """Raised when a line cannot be turned into a Rotation."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(reason)
        self.line = line
        self.reason = reason


@dataclass(frozen=True)
class Rotation:
    direction: Direction
    distance: int

    @property
    def signed(self) -> int:
        """Distance as a signed offset. L prefix = negative, R prefix = positive."""
        return -self.distance if self.direction is Direction.LEFT else self.distance

    def __str__(self) -> str:
        return f"{self.direction.value}{self.distance}"


def parse_rotation(line: str) -> Rotation:
    """Parse one trimmed line such as ``R48`` into a Rotation.

    Raises:
        RotationParseError: the line is too short, does not start with
            ``L`` or ``R``, or the remainder is not a non-negative integer.
    """
    if len(line) < 2:
        raise RotationParseError(line, f"Line too short: '{line}'")

    try:
        direction = Direction(line[0])
    except ValueError:
        raise RotationParseError(line, f"Invalid direction in '{line}'") from None

    digits = line[1:]
    # int() also accepts whitespace and underscores, which are not valid here
    if not digits.lstrip("+-").isdecimal() or not digits.isascii():
        error = f"invalid literal for int() with base 10: '{digits}'"
        raise RotationParseError(line, f"Invalid number in '{line}': {error}")
    try:
        distance = int(digits)
    except ValueError as e:
        raise RotationParseError(line, f"Invalid number in '{line}': {e}") from e

    if distance < 0:
        raise RotationParseError(
            line, f"Invalid number in '{line}': distance must be non-negative"
        )

    return Rotation(direction, distance)
