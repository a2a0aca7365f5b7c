"""
Rover actions.

Each action updates a Position in place. Rotations always succeed. Moves
compute a candidate cell on a copy, consult every sensor, and only commit
the candidate when all of them agree it is safe; otherwise they return a
DangerousField describing the refusal and leave the position untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .geometry import Coordinates
from .position import Position
from .sensors import Sensor


@dataclass(frozen=True)
class DangerousField:
    """Refused move: the candidate cell failed a sensor check.

    Attributes
    ----------
    coordinates : Coordinates
        Cell the rover would have entered.
    sensor_index : int
        Index in the rover's sensor list of the first sensor that refused.
    """

    coordinates: Coordinates
    sensor_index: int

    def __str__(self) -> str:
        return f"Dangerous Field at {self.coordinates}"


# None on success.
ActionResult = Optional[DangerousField]


class Action(ABC):
    """A programmable rover command."""

    @abstractmethod
    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        """Apply the action to position, returning a DangerousField on refusal."""


# ---------------------------------------------------------------------------
# Rotations
# ---------------------------------------------------------------------------


class Rotate(Action):
    turns = 0

    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        for _ in range(self.turns):
            position.rotate_forward()
        return None


class RotateLeft(Rotate):
    turns = 3


class RotateRight(Rotate):
    turns = 1


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------


class Move(Action):
    """Sensor-gated single step; subclasses only choose the candidate."""

    @abstractmethod
    def candidate(self, position: Position) -> Position:
        """Return the position this move would lead to, without touching position."""

    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        new_position = self.candidate(position)
        for index, sensor in enumerate(sensors):
            if not new_position.is_safe_for(sensor):
                return DangerousField(coordinates=new_position.coordinates, sensor_index=index)
        position.assign(new_position)
        return None


class MoveForward(Move):
    def candidate(self, position: Position) -> Position:
        new_position = position.copy()
        new_position.move_forward()
        return new_position


class MoveBackward(Move):
    def candidate(self, position: Position) -> Position:
        # Turn around, step, turn back. Rotations never consult sensors.
        new_position = position.copy()
        new_position.rotate_forward()
        new_position.rotate_forward()
        new_position.move_forward()
        new_position.rotate_forward()
        new_position.rotate_forward()
        return new_position


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class Compose(Action):
    """Ordered sequence of actions, stopping at the first refusal.

    Children applied before the refusal keep their effect.
    """

    def __init__(self, actions: Sequence[Action]) -> None:
        self.actions: List[Action] = list(actions)

    def leaves(self) -> Iterator[Action]:
        """Yield the non-composite actions in execution order.

        Nested compositions are flattened with an explicit stack, so
        arbitrarily deep nesting does not recurse.
        """
        stack: List[Iterator[Action]] = [iter(self.actions)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
            elif isinstance(child, Compose):
                stack.append(iter(child.actions))
            else:
                yield child

    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        for action in self.leaves():
            result = action.execute(position, sensors)
            if result is not None:
                return result
        return None


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def move_forward() -> MoveForward:
    return MoveForward()


def move_backward() -> MoveBackward:
    return MoveBackward()


def rotate_left() -> RotateLeft:
    return RotateLeft()


def rotate_right() -> RotateRight:
    return RotateRight()


def compose(actions: Sequence[Action]) -> Compose:
    return Compose(actions)
