"""Tests for rounding and display helpers."""

from fuel_engine.core.formatting import (
    clamp,
    format_fuel,
    format_lap_range,
    format_number,
    is_in_range,
    round_to_decimals,
)


def test_round_half_away_from_zero() -> None:
    """Halves round away from zero at the requested precision."""
    assert round_to_decimals(2.675) == 2.68
    assert round_to_decimals(1.005) == 1.01
    assert round_to_decimals(0.125) == 0.13
    assert round_to_decimals(-0.125) == -0.13
    assert round_to_decimals(12.5, 0) == 13.0


def test_format_fuel() -> None:
    """Fuel is shown with two decimals and a litre suffix."""
    assert format_fuel(96) == "96.00 L"
    assert format_fuel(80.456) == "80.46 L"
    assert format_number(3.14159, 3) == "3.142"


def test_format_lap_range() -> None:
    """Single-lap stints read 'Lap n', longer ones 'Laps a-b'."""
    assert format_lap_range(5, 5) == "Lap 5"
    assert format_lap_range(1, 20) == "Laps 1-20"


def test_clamp_and_range() -> None:
    """clamp() limits a value; is_in_range() is inclusive."""
    assert clamp(0, 1, 59) == 1
    assert clamp(75, 1, 59) == 59
    assert clamp(30, 1, 59) == 30
    assert is_in_range(1, 1, 59)
    assert is_in_range(59, 1, 59)
    assert not is_in_range(60, 1, 59)
