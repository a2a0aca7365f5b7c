from __future__ import annotations

import json
import threading

from grid_rover.actions import move_forward
from grid_rover.builder import RoverBuilder
from grid_rover.geometry import Direction
from grid_rover.sensors import FunctionSensor
from telemetry.logger import TelemetryLogger


def read_records(path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_logger_appends_jsonl(tmp_path) -> None:
    path = tmp_path / "nested" / "log.jsonl"
    with TelemetryLogger(str(path), timestamps=False) as logger:
        logger.log_step({"a": 1})
        logger.log_step({"b": [1, 2]})
        assert logger.records_written == 2
    assert logger.closed
    logger.log_step({"ignored": True})
    assert read_records(path) == [{"a": 1}, {"b": [1, 2]}]


def test_rover_logs_land_and_execute(tmp_path) -> None:
    path = tmp_path / "telemetry.jsonl"
    logger = TelemetryLogger(str(path))
    rover = (
        RoverBuilder()
        .program_command("F", move_forward())
        .add_sensor(FunctionSensor(lambda x, y: y < 2))
        .with_telemetry(logger)
        .build()
    )
    rover.land(0, 0, Direction.NORTH)
    rover.execute("FFF")
    logger.close()

    land, execute = read_records(path)
    assert land["event"] == "land"
    assert "t" in land
    assert land["display"] == "(0, 0) NORTH"
    assert execute["event"] == "execute"
    assert execute["commands"] == "FFF"
    assert execute["applied"] == 1
    assert execute["stopped"] is True
    assert execute["halt"]["reason"] == "dangerous_field"
    assert execute["halt"]["field"] == {"x": 0, "y": 2, "sensor_index": 0}
    assert execute["position"] == {"x": 0, "y": 1, "direction": "NORTH"}


def test_close_while_logging_from_other_threads(tmp_path) -> None:
    path = tmp_path / "shared.jsonl"
    logger = TelemetryLogger(str(path), timestamps=False)
    errors = []

    def writer() -> None:
        try:
            for i in range(500):
                logger.log_step({"i": i})
        except Exception as exc:  # collected for the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    logger.close()
    for t in threads:
        t.join()

    assert errors == []
    assert len(read_records(path)) == logger.records_written
