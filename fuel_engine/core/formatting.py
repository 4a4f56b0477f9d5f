"""Rounding and display helpers shared by the engine and its front ends."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_to_decimals(value: float, decimals: int = 2) -> float:
    """Round *value* to *decimals* places, halves away from zero.

    The value's shortest decimal representation is rounded, so
    ``round_to_decimals(2.675)`` is ``2.68`` rather than the binary
    artefact ``2.67``.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float, decimals: int = 2) -> str:
    return f"{round_to_decimals(value, decimals):.{decimals}f}"


def format_fuel(litres: float) -> str:
    """Format a fuel amount, e.g. ``"96.00 L"``."""
    return f"{format_number(litres, 2)} L"


def format_lap_range(start_lap: int, end_lap: int) -> str:
    """Format a stint's laps as ``"Lap 5"`` or ``"Laps 1-20"``."""
    if start_lap == end_lap:
        return f"Lap {start_lap}"
    return f"Laps {start_lap}-{end_lap}"


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    """Inclusive range check."""
    return minimum <= value <= maximum
