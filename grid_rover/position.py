from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .geometry import Coordinates, Direction
from .sensors import Sensor


@dataclass
class Position:
    """Rover cell and heading.

    Only raw geometric updates happen here; safety checks belong to the
    move actions, which validate a copy before committing it.
    """

    coordinates: Coordinates
    direction: Direction

    def rotate_forward(self) -> None:
        """Turn one step clockwise."""
        self.direction = self.direction.next()

    def move_forward(self) -> None:
        """Advance one cell along the current heading."""
        self.coordinates = self.coordinates + self.direction.move

    def is_safe_for(self, sensor: Sensor) -> bool:
        return sensor.is_safe(self.coordinates.x, self.coordinates.y)

    def copy(self) -> "Position":
        return Position(coordinates=self.coordinates, direction=self.direction)

    def assign(self, other: "Position") -> None:
        """Overwrite this position in place with another one."""
        self.coordinates = other.coordinates
        self.direction = other.direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.coordinates.x,
            "y": self.coordinates.y,
            "direction": self.direction.name,
        }

    def __str__(self) -> str:
        return f"{self.coordinates} {self.direction.name}"
