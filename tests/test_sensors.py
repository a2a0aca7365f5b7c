from __future__ import annotations

import json

import numpy as np
import pytest

from grid_rover.sensors import BoundsSensor, HazardMapSensor


def test_bounds_sensor_is_inclusive() -> None:
    sensor = BoundsSensor(xmin=-2, ymin=0, xmax=2, ymax=3)
    assert sensor.is_safe(-2, 0)
    assert sensor.is_safe(2, 3)
    assert not sensor.is_safe(3, 0)
    assert not sensor.is_safe(0, -1)


def test_hazard_map_marks_cells_relative_to_origin() -> None:
    sensor = HazardMapSensor.from_cells(width=4, height=3, cells=[(-1, 0)], origin=(-2, -1))
    assert not sensor.is_safe(-1, 0)
    assert sensor.is_safe(-2, -1)
    assert sensor.is_safe(1, 1)
    # Outside the mapped area
    assert not sensor.is_safe(2, 0)
    assert not sensor.is_safe(-3, 0)


def test_hazard_map_outside_safe() -> None:
    sensor = HazardMapSensor(np.zeros((2, 2), dtype=bool), outside_safe=True)
    assert sensor.is_safe(100, -100)


def test_hazard_map_rejects_cells_outside_area() -> None:
    with pytest.raises(ValueError):
        HazardMapSensor.from_cells(width=2, height=2, cells=[(5, 5)])
    with pytest.raises(ValueError):
        HazardMapSensor(np.zeros(3, dtype=bool))


def test_hazard_map_file_round_trip(tmp_path) -> None:
    data = {
        "origin": {"x": -1, "y": -1},
        "width": 3,
        "height": 3,
        "hazards": [{"x": 0, "y": 1}, {"x": 1, "y": -1}],
    }
    path = tmp_path / "map.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    sensor = HazardMapSensor.from_map_file(str(path))
    assert not sensor.is_safe(0, 1)
    assert not sensor.is_safe(1, -1)
    assert sensor.is_safe(0, 0)

    out = sensor.to_dict()
    assert out["origin"] == {"x": -1, "y": -1}
    assert out["outside_safe"] is False
    assert sorted((h["x"], h["y"]) for h in out["hazards"]) == [(0, 1), (1, -1)]
