from .logger import TelemetryLogger

__all__ = ["TelemetryLogger"]
