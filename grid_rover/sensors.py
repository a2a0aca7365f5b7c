from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple
import json

import numpy as np


class Sensor(ABC):
    """Safety predicate consulted before every move.

    Sensors are shared, read-only capabilities: the same instance may back
    several rovers.
    """

    @abstractmethod
    def is_safe(self, x: int, y: int) -> bool:
        """Return True if the rover may occupy cell (x, y)."""


class AlwaysSafeSensor(Sensor):
    def is_safe(self, x: int, y: int) -> bool:
        return True


class NeverSafeSensor(Sensor):
    def is_safe(self, x: int, y: int) -> bool:
        return False


class FunctionSensor(Sensor):
    """Adapter turning a plain ``(x, y) -> bool`` callable into a Sensor."""

    def __init__(self, fn: Callable[[int, int], bool]) -> None:
        self.fn = fn

    def is_safe(self, x: int, y: int) -> bool:
        return bool(self.fn(x, y))


@dataclass
class BoundsSensor(Sensor):
    """Safe only inside the inclusive box [xmin, xmax] x [ymin, ymax]."""

    xmin: int
    ymin: int
    xmax: int
    ymax: int

    def is_safe(self, x: int, y: int) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax


class HazardMapSensor(Sensor):
    """Occupancy grid of hazardous cells (craters, rocks, cliffs).

    Parameters
    ----------
    hazards : np.ndarray
        Boolean array of shape (width, height); True marks a hazard.
        Index [i, j] covers cell (origin_x + i, origin_y + j).
    origin : tuple[int, int]
        Grid cell of array index [0, 0].
    outside_safe : bool
        Whether cells outside the mapped area count as safe.
    """

    def __init__(
        self,
        hazards: np.ndarray,
        origin: Tuple[int, int] = (0, 0),
        outside_safe: bool = False,
    ) -> None:
        grid = np.asarray(hazards, dtype=bool)
        if grid.ndim != 2:
            raise ValueError(f"Hazard grid must be 2-D, got shape {grid.shape}")
        self.hazards = grid
        self.origin = (int(origin[0]), int(origin[1]))
        self.outside_safe = outside_safe

    @property
    def width(self) -> int:
        return int(self.hazards.shape[0])

    @property
    def height(self) -> int:
        return int(self.hazards.shape[1])

    def is_safe(self, x: int, y: int) -> bool:
        i = x - self.origin[0]
        j = y - self.origin[1]
        if not (0 <= i < self.width and 0 <= j < self.height):
            return self.outside_safe
        return not bool(self.hazards[i, j])

    # ------------------------------------------------------------------
    # Map loading
    # ------------------------------------------------------------------
    @classmethod
    def from_cells(
        cls,
        width: int,
        height: int,
        cells: Iterable[Tuple[int, int]],
        origin: Tuple[int, int] = (0, 0),
        outside_safe: bool = False,
    ) -> "HazardMapSensor":
        """Create a map from absolute hazard cell coordinates."""
        grid = np.zeros((int(width), int(height)), dtype=bool)
        ox, oy = int(origin[0]), int(origin[1])
        for x, y in cells:
            i, j = int(x) - ox, int(y) - oy
            if not (0 <= i < width and 0 <= j < height):
                raise ValueError(f"Hazard ({x}, {y}) lies outside the mapped area")
            grid[i, j] = True
        return cls(grid, origin=(ox, oy), outside_safe=outside_safe)

    @classmethod
    def from_map_dict(cls, data: Dict[str, Any], outside_safe: Optional[bool] = None) -> "HazardMapSensor":
        """Create a map from a dict with origin, width, height and hazards."""
        origin_data = data.get("origin", {"x": 0, "y": 0})
        origin = (int(origin_data["x"]), int(origin_data["y"]))
        cells = [(int(h["x"]), int(h["y"])) for h in data.get("hazards", [])]
        if outside_safe is None:
            outside_safe = bool(data.get("outside_safe", False))
        return cls.from_cells(
            width=int(data["width"]),
            height=int(data["height"]),
            cells=cells,
            origin=origin,
            outside_safe=outside_safe,
        )

    @classmethod
    def from_map_file(cls, path: str, outside_safe: Optional[bool] = None) -> "HazardMapSensor":
        """Create a map from a JSON map file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_map_dict(data, outside_safe=outside_safe)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the map to the dict layout read by from_map_dict."""
        ox, oy = self.origin
        return {
            "origin": {"x": ox, "y": oy},
            "width": self.width,
            "height": self.height,
            "outside_safe": self.outside_safe,
            "hazards": [
                {"x": int(i) + ox, "y": int(j) + oy} for i, j in np.argwhere(self.hazards)
            ],
        }
