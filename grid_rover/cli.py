from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, List, Optional

import yaml

from .config import build_rover_from_config, load_yaml, parse_landing, telemetry_path
from .errors import RoverConfigError, RoverDidNotLand
from .geometry import Direction
from .rover import Rover
from telemetry.logger import TelemetryLogger


def run_commands(rover: Rover, command_strings: Iterable[str]) -> None:
    """Execute each string in turn, printing the rover after each one."""
    for commands in command_strings:
        rover.execute(commands)
        print(f"{commands!r:>16} -> {rover}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Drive a grid rover with command strings.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/rover.yaml",
        help="Path to rover YAML config.",
    )
    parser.add_argument(
        "--land",
        nargs=3,
        metavar=("X", "Y", "DIR"),
        default=None,
        help="Landing site, overriding the config (e.g. 0 0 EAST).",
    )
    parser.add_argument(
        "commands",
        nargs="*",
        help="Command strings to execute; read from stdin, one per line, when omitted.",
    )
    args = parser.parse_args(argv)

    base_dir = os.path.dirname(os.path.abspath(args.config))
    try:
        cfg = load_yaml(args.config)
        landing = parse_landing(cfg)
        if args.land is not None:
            landing = (int(args.land[0]), int(args.land[1]), Direction.parse(args.land[2]))
        log_path = telemetry_path(cfg, base_dir=base_dir)
        telemetry_logger = TelemetryLogger(log_path) if log_path else None
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 1

    try:
        rover = build_rover_from_config(cfg, base_dir=base_dir, telemetry_logger=telemetry_logger)
        if landing is not None:
            rover.land(*landing)
        print(f"Rover: {rover}")

        command_strings = args.commands or (line.strip() for line in sys.stdin)
        run_commands(rover, command_strings)
    except RoverConfigError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 1
    except RoverDidNotLand as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        if telemetry_logger is not None:
            telemetry_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
