"""Exceptions raised by the fuel strategy engine.

Every error is a synchronous, caller-recoverable failure.  All of them
derive from :class:`FuelEngineError` and from :class:`ValueError`, so a
collaborator can surface ``str(exc)`` directly to the strategist.
"""

from __future__ import annotations

IMPOSSIBLE_RACE_MESSAGE: str = (
    "Race is impossible: total fuel needed exceeds maximum possible capacity"
)


class FuelEngineError(Exception):
    """Base exception for all fuel engine errors."""


class FieldInvalid(FuelEngineError, ValueError):
    """Raised when a single named input field fails validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class InvalidConfiguration(FuelEngineError, ValueError):
    """Raised when a race configuration fails one or more checks.

    Attributes:
        errors: Every validation message, in field order.  Includes
            :data:`IMPOSSIBLE_RACE_MESSAGE` when the fuel demand cannot be
            met.
    """

    def __init__(self, errors: list[str] | tuple[str, ...]) -> None:
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__(f"Invalid configuration: {', '.join(self.errors)}")


class PitStrategyError(FuelEngineError, ValueError):
    """Base class for structural problems with a supplied pit strategy."""


class InvalidPitStrategy(PitStrategyError):
    """Raised when a pit strategy is missing or malformed."""

    def __init__(self, message: str = "Invalid pit strategy") -> None:
        super().__init__(message)


class PitLapOutOfBounds(PitStrategyError):
    """Raised when a pit lap falls outside ``[1, final_lap - 1]``."""

    def __init__(self, pit_lap: int, final_lap: int, message: str | None = None) -> None:
        self.pit_lap = pit_lap
        self.final_lap = final_lap
        super().__init__(message or f"Pit lap {pit_lap} is out of bounds")


class PitLapsNotAscending(PitStrategyError):
    """Raised when a pit lap is not strictly after its predecessor."""

    def __init__(self, index: int, pit_lap: int, previous: int) -> None:
        self.index = index
        self.pit_lap = pit_lap
        self.previous = previous
        super().__init__("Pit laps must be in ascending order")
