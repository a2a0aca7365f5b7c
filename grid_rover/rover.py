from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .actions import Action, DangerousField
from .errors import RoverDidNotLand
from .geometry import Coordinates, Direction
from .position import Position
from .sensors import Sensor
from telemetry.logger import TelemetryLogger


class HaltReason(str, Enum):
    UNKNOWN_COMMAND = "unknown_command"
    DANGEROUS_FIELD = "dangerous_field"


@dataclass(frozen=True)
class Halt:
    """Why and where the last command string stopped early.

    Attributes
    ----------
    reason : HaltReason
        Unbound command character or refused move.
    index : int
        Offset of the offending character in the command string.
    command : str
        The offending character.
    field : DangerousField | None
        Refusal details for DANGEROUS_FIELD halts.
    """

    reason: HaltReason
    index: int
    command: str
    field: Optional[DangerousField] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "reason": self.reason.value,
            "index": self.index,
            "command": self.command,
        }
        if self.field is not None:
            out["field"] = {
                "x": self.field.coordinates.x,
                "y": self.field.coordinates.y,
                "sensor_index": self.field.sensor_index,
            }
        return out


@dataclass
class RoverState:
    """Snapshot of a rover, detached from the rover itself."""

    landed: bool
    stopped: bool
    position: Optional[Position]
    halt: Optional[Halt] = None


class Rover:
    """Grid rover driven by single-character commands.

    The command table and sensor list are fixed at construction. Each
    ``execute`` call clears the stopped flag and applies commands left to
    right until the string ends, a character has no binding, or a move is
    refused by a sensor; in the last two cases the rover stays on the last
    cell it safely reached and is marked stopped.
    """

    def __init__(
        self,
        commands: Mapping[str, Action],
        sensors: Sequence[Sensor],
        telemetry_logger: TelemetryLogger | None = None,
    ) -> None:
        self.commands: Mapping[str, Action] = MappingProxyType(dict(commands))
        self.sensors: Tuple[Sensor, ...] = tuple(sensors)
        self.telemetry_logger = telemetry_logger

        self._landed = False
        self._stopped = False
        # Meaningless until land() is called.
        self._position = Position(Coordinates(0, 0), Direction.NORTH)
        self._halt: Optional[Halt] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def landed(self) -> bool:
        return self._landed

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def halt(self) -> Optional[Halt]:
        """Details of the last early stop, or None if the last string completed."""
        return self._halt

    @property
    def position(self) -> Position:
        """Copy of the current position; raises RoverDidNotLand before landing."""
        if not self._landed:
            raise RoverDidNotLand()
        return self._position.copy()

    def get_state(self) -> RoverState:
        return RoverState(
            landed=self._landed,
            stopped=self._stopped,
            position=self._position.copy() if self._landed else None,
            halt=self._halt,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        return {
            "landed": self._landed,
            "stopped": self._stopped,
            "position": self._position.to_dict() if self._landed else None,
            "halt": self._halt.to_dict() if self._halt is not None else None,
            "display": str(self),
        }

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def land(self, x: int, y: int, direction: Direction) -> None:
        """Place the rover on (x, y) facing direction; allowed in any state."""
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction, got {direction!r}")
        self._position = Position(Coordinates(int(x), int(y)), direction)
        self._landed = True
        self._stopped = False
        self._halt = None
        self._log({"event": "land"})

    def execute(self, commands: str) -> None:
        """Interpret a command string.

        Raises
        ------
        RoverDidNotLand
            If called before land(); the rover is left unchanged.
        """
        if not self._landed:
            raise RoverDidNotLand()

        self._stopped = False
        self._halt = None
        applied = 0
        for index, name in enumerate(commands):
            action = self.commands.get(name)
            if action is None:
                self._stop(Halt(HaltReason.UNKNOWN_COMMAND, index, name))
                break
            field = action.execute(self._position, self.sensors)
            if field is not None:
                self._stop(Halt(HaltReason.DANGEROUS_FIELD, index, name, field))
                break
            applied += 1

        self._log({"event": "execute", "commands": commands, "applied": applied})

    def _stop(self, halt: Halt) -> None:
        self._stopped = True
        self._halt = halt

    def _log(self, record: Dict[str, Any]) -> None:
        if self.telemetry_logger is None:
            return
        record.update(self.to_dict())
        self.telemetry_logger.log_step(record)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        if not self._landed:
            return "unknown"
        text = str(self._position)
        if self._stopped:
            text += " stopped"
        return text

    def __repr__(self) -> str:
        return f"Rover({self}, commands={''.join(sorted(self.commands))!r}, sensors={len(self.sensors)})"
