"""
Top-level package for the grid rover controller.

Components:
- geometry: integer coordinates and the four-way compass
- position: rover cell + heading
- sensors: safety predicates (bounds, hazard maps, fixed answers)
- actions: rotations, sensor-gated moves and compositions
- rover: command-string state machine
- builder: chained rover configuration
- config: YAML rover descriptions
"""

from .geometry import Coordinates, Direction
from .position import Position
from .sensors import (
    Sensor,
    AlwaysSafeSensor,
    NeverSafeSensor,
    FunctionSensor,
    BoundsSensor,
    HazardMapSensor,
)
from .actions import (
    Action,
    DangerousField,
    RotateLeft,
    RotateRight,
    MoveForward,
    MoveBackward,
    Compose,
    move_forward,
    move_backward,
    rotate_left,
    rotate_right,
    compose,
)
from .errors import RoverError, RoverDidNotLand, RoverConfigError
from .rover import Rover, RoverState, Halt, HaltReason
from .builder import RoverBuilder

__all__ = [
    "Coordinates",
    "Direction",
    "Position",
    "Sensor",
    "AlwaysSafeSensor",
    "NeverSafeSensor",
    "FunctionSensor",
    "BoundsSensor",
    "HazardMapSensor",
    "Action",
    "DangerousField",
    "RotateLeft",
    "RotateRight",
    "MoveForward",
    "MoveBackward",
    "Compose",
    "move_forward",
    "move_backward",
    "rotate_left",
    "rotate_right",
    "compose",
    "RoverError",
    "RoverDidNotLand",
    "RoverConfigError",
    "Rover",
    "RoverState",
    "Halt",
    "HaltReason",
    "RoverBuilder",
]
