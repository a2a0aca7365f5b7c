from __future__ import annotations


class RoverError(RuntimeError):
    """Base class for rover contract violations."""


class RoverDidNotLand(RoverError):
    """Raised when a rover is driven or inspected before landing."""

    def __init__(self, message: str = "Rover did not land") -> None:
        super().__init__(message)


class RoverConfigError(ValueError):
    """Raised for malformed rover configuration files."""
