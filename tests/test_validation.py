"""Tests for the field validator: numbers, context-aware fields, lap-time parsing."""

import math

import pytest

from fuel_engine.core.race import RaceConfiguration, RaceMode
from fuel_engine.core.validation import (
    ABOVE_MAXIMUM,
    BELOW_MINIMUM,
    INVALID_FORMAT,
    INVALID_MODE,
    NOT_A_NUMBER,
    NOT_FINITE,
    NOT_POSITIVE,
    NOT_WHOLE_NUMBER,
    REQUIRED,
    validate_field,
    validate_number,
    validate_time_format,
)

# ---------------------------------------------------------------------------
# validate_number
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [None, "", "   "])
def test_number_required(value: object) -> None:
    """Empty or absent values are reported as required."""
    result = validate_number(value)
    assert not result.valid
    assert result.code == REQUIRED
    assert result.message == "Value is required"


@pytest.mark.parametrize("value", ["abc", "12abc", True, [1]])
def test_number_not_a_number(value: object) -> None:
    """Values that do not parse to a number are rejected."""
    result = validate_number(value)
    assert result.code == NOT_A_NUMBER


@pytest.mark.parametrize("value", ["1_000", "1_5", "١٢", "１２", "0x10"])
def test_number_rejects_non_decimal_syntax(value: str) -> None:
    """Digit separators, non-ASCII digits and hex literals are not numbers."""
    result = validate_number(value)
    assert not result.valid
    assert result.code == NOT_A_NUMBER


@pytest.mark.parametrize("value", ["inf", "-inf", math.inf, "nan"])
def test_number_not_finite(value: object) -> None:
    """Infinite and NaN values are rejected after parsing."""
    assert validate_number(value).code == NOT_FINITE


def test_number_bounds() -> None:
    """Supplied bounds are inclusive and reported with their value."""
    low = validate_number(0.05, 0.1)
    assert low.code == BELOW_MINIMUM
    assert low.message == "Must be at least 0.1"

    high = validate_number("11", 1, 10)
    assert high.code == ABOVE_MAXIMUM
    assert high.message == "Must be at most 10"

    assert validate_number(0.1, 0.1).valid
    assert validate_number(10, 1, 10).valid


def test_number_default_domain_is_positive() -> None:
    """Without a non-positive minimum, zero and negatives are rejected."""
    assert validate_number(0).code == NOT_POSITIVE
    assert validate_number("-3").code == NOT_POSITIVE
    # An explicit minimum of zero opens the domain to zero.
    assert validate_number(0, 0).valid
    # A negative minimum allows negatives.
    assert validate_number(-2, -5).valid


def test_number_accepts_strings_and_numbers() -> None:
    """Numeric strings and numbers both pass."""
    assert validate_number("42.5").valid
    assert validate_number(" 7 ").valid
    assert validate_number(3).valid


def test_validation_result_truthiness() -> None:
    """A result is truthy exactly when it is valid."""
    assert validate_number(1)
    assert not validate_number("")


# ---------------------------------------------------------------------------
# validate_field
# ---------------------------------------------------------------------------


def test_mode_field() -> None:
    """Mode must be exactly 'laps' or 'time'."""
    assert validate_field("mode", "laps").valid
    assert validate_field("mode", "time").valid
    assert validate_field("mode", RaceMode.TIME).valid
    result = validate_field("mode", "distance")
    assert result.code == INVALID_MODE
    assert result.message == 'Mode must be "laps" or "time"'
    assert not validate_field("mode", "LAPS").valid


def test_race_length_whole_number_in_laps_mode() -> None:
    """Race length must be a whole number only in laps mode."""
    laps = {"mode": "laps"}
    time = {"mode": "time"}
    assert validate_field("race_length", "30", laps).valid
    assert validate_field("race_length", 30.0, laps).valid
    result = validate_field("race_length", "30.5", laps)
    assert result.code == NOT_WHOLE_NUMBER
    assert validate_field("race_length", "30.5", time).valid


def test_race_length_minimum() -> None:
    """Race length below 0.1 is rejected."""
    assert validate_field("race_length", 0.05).code == BELOW_MINIMUM


def test_race_length_uses_configuration_record() -> None:
    """A RaceConfiguration works as context just like a mapping."""
    config = RaceConfiguration(
        mode=RaceMode.LAPS, race_length=30, tank_capacity=100, fuel_per_lap=3
    )
    assert not validate_field("race_length", 12.5, config).valid


def test_average_lap_time_only_enforced_in_time_mode() -> None:
    """Lap time is ignored in laps mode and required in time mode."""
    assert validate_field("average_lap_time", "", {"mode": "laps"}).valid
    assert validate_field("average_lap_time", None).valid

    result = validate_field("average_lap_time", "", {"mode": "time"})
    assert not result.valid
    assert result.message == "Average lap time is required in time mode"
    assert validate_field("average_lap_time", 95.0, {"mode": "time"}).valid


def test_tank_and_fuel_minimums() -> None:
    """Tank capacity needs >= 0.1 and fuel per lap >= 0.001."""
    assert not validate_field("tank_capacity", 0.09).valid
    assert validate_field("tank_capacity", 0.1).valid
    assert not validate_field("fuel_per_lap", 0.0005).valid
    assert validate_field("fuel_per_lap", 0.001).valid


def test_buffer_laps() -> None:
    """Buffer laps may be zero but must be a non-negative whole number."""
    assert validate_field("buffer_laps", 0).valid
    assert validate_field("buffer_laps", "3").valid
    assert validate_field("buffer_laps", -1).code == BELOW_MINIMUM
    result = validate_field("buffer_laps", 1.5)
    assert result.code == NOT_WHOLE_NUMBER
    assert result.message == "Buffer laps must be a whole number"


def test_unknown_field_passes() -> None:
    """Unrecognised field names are always valid."""
    assert validate_field("driver_name", None).valid


# ---------------------------------------------------------------------------
# validate_time_format
# ---------------------------------------------------------------------------


def test_time_mmss() -> None:
    """mm:ss is converted to seconds."""
    result = validate_time_format("1:45")
    assert result.valid
    assert result.seconds == 105
    assert validate_time_format(" 03:30 ").seconds == 210


def test_time_mmss_rejects_bad_seconds() -> None:
    """Seconds of 60 or more are invalid."""
    result = validate_time_format("1:60")
    assert not result.valid
    assert result.code == INVALID_FORMAT
    assert result.message == "Seconds must be less than 60"


def test_time_mmss_rejects_zero() -> None:
    """A zero duration is invalid."""
    assert validate_time_format("0:00").code == INVALID_FORMAT


def test_time_minutes_seconds_boundary() -> None:
    """Bare numbers below 100 are minutes, from 100 upwards seconds."""
    assert validate_time_format("99").seconds == 99 * 60
    assert validate_time_format("100").seconds == 100
    assert validate_time_format("1.5").seconds == 90
    assert validate_time_format(120).seconds == 120


def test_time_required_and_invalid() -> None:
    """Empty input is required; unparseable input is an invalid format."""
    assert validate_time_format("").code == REQUIRED
    assert validate_time_format(None).code == REQUIRED
    for bad in ["abc", "1:2:3", "1:5", "inf", "-2", "0"]:
        result = validate_time_format(bad)
        assert not result.valid, bad
        assert result.code == INVALID_FORMAT, bad


@pytest.mark.parametrize("value", ["1_5", "١٢", "1e", "."])
def test_time_rejects_non_decimal_syntax(value: str) -> None:
    """Only plain ASCII decimals are read as a bare lap time."""
    result = validate_time_format(value)
    assert not result.valid
    assert result.code == INVALID_FORMAT
