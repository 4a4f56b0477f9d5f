"""Stint partitioning for the fuel strategy engine.

A race of ``final_lap`` laps is split at each pit lap into consecutive,
non-overlapping stints covering laps ``1 .. final_lap``.  Every stint but
the last is fuelled with a full tank; the last carries its own laps plus
the buffer, capped at the tank capacity.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from fuel_engine.core.formatting import round_to_decimals
from fuel_engine.core.race import RaceConfiguration


@dataclass(frozen=True)
class StintCalculation:
    """Fuel requirement for one stint.

    Attributes:
        stint_number: 1-based position in the race.
        fuel_amount: Litres to load, rounded to 2 decimals.
        start_lap: First lap of the stint (1-based, inclusive).
        end_lap: Last lap of the stint (inclusive).
        lap_count: ``end_lap - start_lap + 1``.
        is_final_stint: True only for the last stint.
        includes_buffer: True iff the buffer laps were added (final stint).
    """

    stint_number: int
    fuel_amount: float
    start_lap: int
    end_lap: int
    lap_count: int
    is_final_stint: bool
    includes_buffer: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def stint_fuel(config: RaceConfiguration, lap_count: int, is_final: bool) -> float:
    """Return the rounded fuel load for a stint of *lap_count* laps.

    Non-final stints always take a full tank, regardless of how many laps
    they cover.
    """
    if not is_final:
        fuel = config.tank_capacity
    else:
        fuel = min(
            (lap_count + config.buffer_laps) * config.fuel_per_lap,
            config.tank_capacity,
        )
    return round_to_decimals(fuel, 2)


def build_stints(
    config: RaceConfiguration,
    pit_laps: Sequence[int],
    number_of_stints: int,
) -> list[StintCalculation]:
    """Partition the race at *pit_laps* into *number_of_stints* stints.

    No validation happens here: callers pass a configuration and pit laps
    that have already been checked.

    Args:
        config: Race configuration.
        pit_laps: Ascending pit laps, ``number_of_stints - 1`` of them.
        number_of_stints: Total stint count (>= 1).

    Returns:
        A new list of :class:`StintCalculation`, one per stint.
    """
    final_lap = config.final_lap
    stints: list[StintCalculation] = []

    for i in range(number_of_stints):
        is_final = i == number_of_stints - 1
        start_lap = 1 if i == 0 else pit_laps[i - 1] + 1
        end_lap = final_lap if is_final else pit_laps[i]
        lap_count = end_lap - start_lap + 1

        stints.append(
            StintCalculation(
                stint_number=i + 1,
                fuel_amount=stint_fuel(config, lap_count, is_final),
                start_lap=start_lap,
                end_lap=end_lap,
                lap_count=lap_count,
                is_final_stint=is_final,
                includes_buffer=is_final,
            )
        )

    return stints
