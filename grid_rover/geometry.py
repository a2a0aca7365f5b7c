"""
Grid geometry for the rover.

Provides integer cell coordinates and the four-way compass used for
headings, rotations and unit moves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coordinates:
    """Integer grid cell.

    Attributes
    ----------
    x : int
        Column, increasing to the east.
    y : int
        Row, increasing to the north.
    """

    x: int
    y: int

    def __add__(self, other: "Coordinates") -> "Coordinates":
        return Coordinates(self.x + other.x, self.y + other.y)

    def __neg__(self) -> "Coordinates":
        return Coordinates(-self.x, -self.y)

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def translate(coordinates: Coordinates, delta: Coordinates) -> Coordinates:
    """Return coordinates shifted by delta."""
    return coordinates + delta


# ---------------------------------------------------------------------------
# Compass
# ---------------------------------------------------------------------------


class Direction(Enum):
    """Cardinal heading, ordered clockwise starting from NORTH."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def next(self) -> "Direction":
        """Clockwise successor (one right turn)."""
        members = list(Direction)
        return members[(self.value + 1) % len(members)]

    @property
    def move(self) -> Coordinates:
        """Unit displacement for one step along this heading."""
        return _UNIT_MOVES[self]

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse a heading from its name or initial letter, case-insensitive."""
        key = str(text).strip().upper()
        for d in cls:
            if key == d.name or key == d.name[0]:
                return d
        raise ValueError(f"Unknown direction: {text!r}")

    def __str__(self) -> str:
        return self.name


_UNIT_MOVES = {
    Direction.NORTH: Coordinates(0, 1),
    Direction.EAST: Coordinates(1, 0),
    Direction.SOUTH: Coordinates(0, -1),
    Direction.WEST: Coordinates(-1, 0),
}
