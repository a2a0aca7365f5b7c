"""
YAML configuration for rovers.

A config names the command table, the sensors and, optionally, a landing
site and a telemetry path::

    rover:
      commands:
        F: move_forward
        U: [rotate_right, rotate_right]
      sensors:
        - type: bounds
          xmin: -10
          ymin: -10
          xmax: 10
          ymax: 10
        - type: hazard_map
          map: maps/crater_field.json
    land:
      x: 0
      y: 0
      direction: EAST
    logging:
      telemetry_path: runs/telemetry.jsonl

Map and telemetry paths are relative to the config file.
Quote command keys such as "Y" or "N": YAML reads them as booleans.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

from .actions import Action, compose, move_backward, move_forward, rotate_left, rotate_right
from .builder import RoverBuilder
from .errors import RoverConfigError
from .geometry import Direction
from .rover import Rover
from .sensors import AlwaysSafeSensor, BoundsSensor, HazardMapSensor, NeverSafeSensor, Sensor
from telemetry.logger import TelemetryLogger


ACTION_FACTORIES: Dict[str, Callable[[], Action]] = {
    "move_forward": move_forward,
    "move_backward": move_backward,
    "rotate_left": rotate_left,
    "rotate_right": rotate_right,
}


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_action(spec: Any) -> Action:
    """Build an action from a factory name or a (possibly nested) list of specs."""
    if isinstance(spec, str):
        factory = ACTION_FACTORIES.get(spec.strip().lower())
        if factory is None:
            raise RoverConfigError(f"Unknown action: {spec!r}")
        return factory()
    if isinstance(spec, list):
        return compose([parse_action(s) for s in spec])
    raise RoverConfigError(f"Action must be a name or a list, got {spec!r}")


def parse_sensor(spec: Dict[str, Any], base_dir: str = ".") -> Sensor:
    """Build a sensor from its config dict; relative map paths resolve against base_dir."""
    if not isinstance(spec, dict) or "type" not in spec:
        raise RoverConfigError(f"Sensor entry needs a 'type': {spec!r}")
    kind = spec["type"]
    try:
        if kind == "always_safe":
            return AlwaysSafeSensor()
        if kind == "never_safe":
            return NeverSafeSensor()
        if kind == "bounds":
            return BoundsSensor(
                xmin=int(spec["xmin"]),
                ymin=int(spec["ymin"]),
                xmax=int(spec["xmax"]),
                ymax=int(spec["ymax"]),
            )
        if kind == "hazard_map":
            outside_safe = spec.get("outside_safe")
            if "map" in spec:
                path = os.path.join(base_dir, spec["map"])
                return HazardMapSensor.from_map_file(path, outside_safe=outside_safe)
            return HazardMapSensor.from_map_dict(spec, outside_safe=outside_safe)
    except (KeyError, TypeError, ValueError, OSError) as exc:
        raise RoverConfigError(f"Invalid {kind!r} sensor: {exc}") from exc
    raise RoverConfigError(f"Unknown sensor type: {kind!r}")


def section(cfg: Dict[str, Any], key: str, kind: type) -> Any:
    """Return cfg[key], or an empty kind when absent or null; raise on a wrong type."""
    if not isinstance(cfg, dict):
        raise RoverConfigError(f"Config must be a mapping, got {type(cfg).__name__}")
    value = cfg.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise RoverConfigError(f"'{key}' must be a {kind.__name__}, got {type(value).__name__}")
    return value


def parse_landing(cfg: Dict[str, Any]) -> Optional[Tuple[int, int, Direction]]:
    land_cfg = section(cfg, "land", dict)
    if not land_cfg:
        return None
    try:
        return int(land_cfg["x"]), int(land_cfg["y"]), Direction.parse(land_cfg["direction"])
    except (KeyError, TypeError, ValueError) as exc:
        raise RoverConfigError(f"Invalid landing site: {exc}") from exc


def telemetry_path(cfg: Dict[str, Any], base_dir: str = ".") -> Optional[str]:
    """Telemetry file named in the config, resolved against base_dir."""
    path = section(cfg, "logging", dict).get("telemetry_path")
    if not path:
        return None
    return os.path.join(base_dir, str(path))


def build_rover_from_config(
    cfg: Dict[str, Any],
    base_dir: str = ".",
    telemetry_logger: TelemetryLogger | None = None,
) -> Rover:
    """Create an unlanded rover from a parsed config dict."""
    rover_cfg = section(cfg, "rover", dict)
    builder = RoverBuilder().with_telemetry(telemetry_logger)
    for name, spec in section(rover_cfg, "commands", dict).items():
        try:
            builder.program_command(str(name), parse_action(spec))
        except ValueError as exc:
            raise RoverConfigError(str(exc)) from exc
    for spec in section(rover_cfg, "sensors", list):
        builder.add_sensor(parse_sensor(spec, base_dir=base_dir))
    return builder.build()
