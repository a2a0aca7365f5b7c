from __future__ import annotations

from typing import Dict, List

from .actions import Action
from .rover import Rover
from .sensors import Sensor
from telemetry.logger import TelemetryLogger


class RoverBuilder:
    """Chained configuration of a rover's commands and sensors.

    Example
    -------
    >>> rover = (
    ...     RoverBuilder()
    ...     .program_command("F", move_forward())
    ...     .add_sensor(AlwaysSafeSensor())
    ...     .build()
    ... )
    """

    def __init__(self) -> None:
        self.commands: Dict[str, Action] = {}
        self.sensors: List[Sensor] = []
        self.telemetry_logger: TelemetryLogger | None = None

    def program_command(self, name: str, action: Action) -> "RoverBuilder":
        """Bind a single character to an action; rebinding replaces it."""
        if not isinstance(name, str) or len(name) != 1:
            raise ValueError(f"Command name must be a single character, got {name!r}")
        self.commands[name] = action
        return self

    def add_sensor(self, sensor: Sensor) -> "RoverBuilder":
        self.sensors.append(sensor)
        return self

    def with_telemetry(self, logger: TelemetryLogger | None) -> "RoverBuilder":
        self.telemetry_logger = logger
        return self

    def build(self) -> Rover:
        """Create an unlanded rover; later builder changes do not affect it."""
        return Rover(
            commands=dict(self.commands),
            sensors=list(self.sensors),
            telemetry_logger=self.telemetry_logger,
        )
