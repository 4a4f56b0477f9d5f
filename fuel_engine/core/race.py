"""Race configuration record for the fuel strategy engine.

A :class:`RaceConfiguration` is the typed, immutable input to every engine
call.  Quantities derived from it (total laps, fuel needed, stint count)
are exposed as properties and recomputed on each access.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class RaceMode(str, Enum):
    """How the race length is expressed."""

    LAPS = "laps"
    TIME = "time"


@dataclass(frozen=True)
class RaceConfiguration:
    """Inputs describing one race.

    Attributes:
        mode: Whether ``race_length`` is a lap count or a duration.
        race_length: Lap count in laps mode (whole number), race duration
            in seconds in time mode.
        tank_capacity: Litres of fuel a full tank holds.
        fuel_per_lap: Litres consumed per lap.
        buffer_laps: Extra laps of fuel added to the final stint only.
        average_lap_time: Seconds per lap; used only in time mode.
    """

    mode: RaceMode
    race_length: float
    tank_capacity: float
    fuel_per_lap: float
    buffer_laps: int = 0
    average_lap_time: float | None = None

    @property
    def total_laps(self) -> float:
        """Race distance in laps (fractional in time mode)."""
        if self.mode == RaceMode.LAPS:
            return self.race_length
        if self.average_lap_time is None:
            raise ValueError("average_lap_time is required in time mode.")
        return self.race_length / self.average_lap_time

    @property
    def final_lap(self) -> int:
        """Number of the last lap driven, ``ceil(total_laps)``."""
        return math.ceil(self.total_laps)

    @property
    def total_fuel_needed(self) -> float:
        """Litres needed for the full race plus the buffer."""
        return (self.total_laps + self.buffer_laps) * self.fuel_per_lap

    @property
    def number_of_stints(self) -> int:
        """Full tanks needed to cover :attr:`total_fuel_needed`."""
        return math.ceil(self.total_fuel_needed / self.tank_capacity)

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain mapping."""
        data = asdict(self)
        data["mode"] = RaceMode(self.mode).value
        return data
