"""Fuel strategy engine: validation, optimal pit strategy and stint partitioning.

All functions are pure.  Each call validates its inputs up front and then
derives a complete, fresh result from one snapshot of configuration and
strategy; nothing is patched incrementally and nothing is cached.

Typical flow::

    config = parse_configuration(raw_form_values)
    strategy = calculate_optimal_pit_strategy(config)
    stints = calculate_stints(config, strategy)

    # strategist drags pit stop 0 to lap 18
    edited = strategy.with_pit_lap(0, 18)
    stints = recalculate_stints(config, edited)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fuel_engine.core.errors import (
    IMPOSSIBLE_RACE_MESSAGE,
    FieldInvalid,
    InvalidConfiguration,
    InvalidPitStrategy,
    PitLapOutOfBounds,
    PitLapsNotAscending,
)
from fuel_engine.core.formatting import clamp
from fuel_engine.core.race import RaceConfiguration, RaceMode
from fuel_engine.core.stint import StintCalculation, build_stints
from fuel_engine.core.strategy import PitStrategy
from fuel_engine.core.validation import validate_field, validate_time_format

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration validation
# ---------------------------------------------------------------------------

# Field name -> label used to prefix validation messages.
_FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("race_length", "Race length"),
    ("average_lap_time", "Average lap time"),
    ("tank_capacity", "Tank capacity"),
    ("fuel_per_lap", "Fuel per lap"),
    ("buffer_laps", "Buffer laps"),
)


@dataclass(frozen=True)
class ConfigurationValidation:
    """Result of :func:`validate_configuration`.

    Attributes:
        valid: True iff ``errors`` is empty.
        errors: Every failure message, in field order.
    """

    valid: bool
    errors: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.valid


def _get(config: Any, name: str) -> Any:
    if isinstance(config, Mapping):
        return config.get(name)
    return getattr(config, name, None)


def validate_configuration(
    config: RaceConfiguration | Mapping[str, Any],
) -> ConfigurationValidation:
    """Check every field of *config* and the feasibility of the race.

    All fields are checked so the caller can show every problem at once.
    Once the fields pass, the race is rejected as impossible when its fuel
    demand exceeds ``floor(total_laps)`` full tanks (one-lap stints).

    Args:
        config: A :class:`RaceConfiguration` or a raw mapping with the same
            snake_case keys.

    Returns:
        A :class:`ConfigurationValidation`.
    """
    errors: list[str] = []
    mode = _get(config, "mode")

    mode_result = validate_field("mode", mode)
    if not mode_result:
        errors.append(mode_result.message)

    for field_name, label in _FIELD_LABELS:
        if field_name == "average_lap_time" and mode != RaceMode.TIME:
            continue
        result = validate_field(field_name, _get(config, field_name), config)
        if not result:
            errors.append(f"{label}: {result.message}")

    if not errors:
        race_length = float(_get(config, "race_length"))
        if mode == RaceMode.LAPS:
            total_laps = race_length
        else:
            total_laps = race_length / float(_get(config, "average_lap_time"))
        fuel_per_lap = float(_get(config, "fuel_per_lap"))
        total_fuel_needed = (total_laps + float(_get(config, "buffer_laps"))) * fuel_per_lap
        max_possible_fuel = math.floor(total_laps) * float(_get(config, "tank_capacity"))
        if total_fuel_needed > max_possible_fuel:
            errors.append(IMPOSSIBLE_RACE_MESSAGE)

    return ConfigurationValidation(valid=not errors, errors=tuple(errors))


def _require_valid(config: RaceConfiguration) -> None:
    validation = validate_configuration(config)
    if not validation:
        raise InvalidConfiguration(validation.errors)


def parse_configuration(raw: Mapping[str, Any]) -> RaceConfiguration:
    """Turn raw form values into a validated :class:`RaceConfiguration`.

    Values may be strings or numbers.  In time mode a string
    ``average_lap_time`` is read with
    :func:`~fuel_engine.core.validation.validate_time_format`, so
    ``"1:45"`` becomes 105 seconds.  ``buffer_laps`` defaults to 0.

    Raises:
        FieldInvalid: If the lap-time string cannot be parsed.
        InvalidConfiguration: If any field or the feasibility check fails.
    """
    data = dict(raw)
    data.setdefault("buffer_laps", 0)

    lap_time = data.get("average_lap_time")
    if data.get("mode") == RaceMode.TIME and isinstance(lap_time, str):
        parsed = validate_time_format(lap_time)
        if not parsed:
            raise FieldInvalid("average_lap_time", parsed.message)
        data["average_lap_time"] = parsed.seconds

    validation = validate_configuration(data)
    if not validation:
        raise InvalidConfiguration(validation.errors)

    mode = RaceMode(data["mode"])
    return RaceConfiguration(
        mode=mode,
        race_length=float(data["race_length"]),
        tank_capacity=float(data["tank_capacity"]),
        fuel_per_lap=float(data["fuel_per_lap"]),
        buffer_laps=int(float(data["buffer_laps"])),
        average_lap_time=(
            float(data["average_lap_time"]) if mode == RaceMode.TIME else None
        ),
    )


# ---------------------------------------------------------------------------
# Strategy and stints
# ---------------------------------------------------------------------------


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_optimal_pit_strategy(config: RaceConfiguration) -> PitStrategy:
    """Spread the required pit stops evenly over the race.

    This is an even split, not a fuel-optimal search: pit ``i`` falls on
    ``round(i * total_laps / number_of_stints)``, clamped into
    ``[1, final_lap - 1]``.  The configuration is assumed valid; call
    :func:`validate_configuration` first when that is not guaranteed.

    Args:
        config: A valid race configuration.

    Returns:
        A :class:`PitStrategy` with ``number_of_stints - 1`` pit laps.
    """
    number_of_stints = config.number_of_stints
    if number_of_stints <= 1:
        return PitStrategy(pit_laps=(), number_of_stints=1)

    total_laps = config.total_laps
    last_pit_lap = config.final_lap - 1
    laps_per_stint = total_laps / number_of_stints

    pit_laps: list[int] = []
    for i in range(1, number_of_stints):
        pit_lap = _round_half_up(i * laps_per_stint)
        pit_laps.append(int(clamp(pit_lap, 1, last_pit_lap)))

    return PitStrategy(pit_laps=tuple(pit_laps), number_of_stints=number_of_stints)


def calculate_stints(
    config: RaceConfiguration,
    pit_strategy: PitStrategy | None = None,
) -> list[StintCalculation]:
    """Compute the stint list for *config*.

    Args:
        config: Race configuration.
        pit_strategy: Strategy to partition against.  The optimal strategy
            is computed when omitted.

    Returns:
        One :class:`StintCalculation` per stint, covering laps
        ``1 .. final_lap``.

    Raises:
        InvalidConfiguration: If the configuration fails validation.
    """
    _require_valid(config)

    strategy = pit_strategy
    if strategy is None:
        strategy = calculate_optimal_pit_strategy(config)

    stints = build_stints(config, strategy.pit_laps, strategy.stint_count)
    logger.debug(
        "Calculated %d stint(s) with pit laps %s", len(stints), list(strategy.pit_laps)
    )
    return stints


def recalculate_stints(
    config: RaceConfiguration,
    pit_strategy: PitStrategy,
) -> list[StintCalculation]:
    """Recompute stints after the strategist edits a pit lap.

    The strategy is checked structurally before use.  This is the
    interactive path: it is O(number of stints) and a pure function of its
    arguments.

    Args:
        config: Race configuration.
        pit_strategy: Edited strategy.

    Returns:
        A new stint list.

    Raises:
        InvalidConfiguration: If the configuration fails validation.
        InvalidPitStrategy: If the strategy is missing, ``pit_laps`` is not
            a list or tuple of integers, or ``number_of_stints`` does not
            match the number of pit laps.
        PitLapOutOfBounds: If a pit lap is ``< 1`` or ``>= final_lap``.
        PitLapsNotAscending: If a pit lap is not after its predecessor.
    """
    _require_valid(config)

    if pit_strategy is None:
        raise InvalidPitStrategy()
    pit_laps = getattr(pit_strategy, "pit_laps", None)
    if not isinstance(pit_laps, (list, tuple)):
        raise InvalidPitStrategy()
    for lap in pit_laps:
        if isinstance(lap, bool) or not isinstance(lap, int):
            raise InvalidPitStrategy(f"Pit lap {lap!r} is not a whole lap number")

    final_lap = config.final_lap
    for i, lap in enumerate(pit_laps):
        if lap < 1 or lap >= final_lap:
            raise PitLapOutOfBounds(lap, final_lap)
        if i > 0 and lap <= pit_laps[i - 1]:
            raise PitLapsNotAscending(i, lap, pit_laps[i - 1])

    number_of_stints = pit_strategy.stint_count
    if number_of_stints != len(pit_laps) + 1:
        raise InvalidPitStrategy(
            f"Pit strategy has {len(pit_laps)} pit stop(s) "
            f"but {number_of_stints} stints"
        )

    return build_stints(config, tuple(pit_laps), number_of_stints)


def pit_lap_bounds(
    config: RaceConfiguration,
    pit_strategy: PitStrategy,
    pit_index: int,
) -> tuple[int, int]:
    """Legal lap range for the pit stop at *pit_index*.

    A pit must come after the previous pit (or lap 0) and before the next
    pit (or the final lap).

    Returns:
        Inclusive ``(min_lap, max_lap)``.

    Raises:
        IndexError: If *pit_index* does not name an existing pit stop.
    """
    pit_laps = pit_strategy.pit_laps
    if not 0 <= pit_index < len(pit_laps):
        raise IndexError(
            f"pit_index {pit_index} out of range for {len(pit_laps)} pit stop(s)."
        )

    min_lap = 1 if pit_index == 0 else pit_laps[pit_index - 1] + 1
    if pit_index == len(pit_laps) - 1:
        max_lap = config.final_lap - 1
    else:
        max_lap = pit_laps[pit_index + 1] - 1
    return min_lap, max_lap
