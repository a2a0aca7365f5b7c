from __future__ import annotations

import pytest

from grid_rover.geometry import Coordinates, Direction, translate
from grid_rover.position import Position
from grid_rover.sensors import FunctionSensor


def test_next_is_cyclic_with_period_four() -> None:
    for d in Direction:
        assert d.next().next().next().next() is d
    assert Direction.NORTH.next() is Direction.EAST
    assert Direction.WEST.next() is Direction.NORTH


def test_unit_moves_and_names() -> None:
    assert Direction.NORTH.move == Coordinates(0, 1)
    assert Direction.EAST.move == Coordinates(1, 0)
    assert Direction.SOUTH.move == Coordinates(0, -1)
    assert Direction.WEST.move == Coordinates(-1, 0)
    assert [d.name for d in Direction] == ["NORTH", "EAST", "SOUTH", "WEST"]


def test_translate_adds_components() -> None:
    assert translate(Coordinates(2, -3), Coordinates(-1, 1)) == Coordinates(1, -2)
    assert -Coordinates(1, -1) == Coordinates(-1, 1)


def test_direction_parse_accepts_name_and_initial() -> None:
    assert Direction.parse("east") is Direction.EAST
    assert Direction.parse(" W ") is Direction.WEST
    with pytest.raises(ValueError):
        Direction.parse("up")


def test_position_moves_and_formats() -> None:
    p = Position(Coordinates(0, 0), Direction.EAST)
    p.move_forward()
    p.rotate_forward()
    p.move_forward()
    assert str(p) == "(1, -1) SOUTH"
    assert p.to_dict() == {"x": 1, "y": -1, "direction": "SOUTH"}


def test_position_copy_is_independent() -> None:
    p = Position(Coordinates(3, 4), Direction.NORTH)
    q = p.copy()
    q.move_forward()
    assert p.coordinates == Coordinates(3, 4)
    assert q.coordinates == Coordinates(3, 5)


def test_position_safety_query_uses_current_cell() -> None:
    seen = []

    def probe(x: int, y: int) -> bool:
        seen.append((x, y))
        return x >= 0

    p = Position(Coordinates(-2, 7), Direction.WEST)
    assert not p.is_safe_for(FunctionSensor(probe))
    assert seen == [(-2, 7)]
