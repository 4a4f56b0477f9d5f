"""Field-level validation for race configuration inputs.

Each check looks at one scalar value at a time and returns a
:class:`ValidationResult` rather than raising, so an input form can give
live feedback per field.  Raw values may be strings or numbers; parsing
happens here.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Failure codes
# ---------------------------------------------------------------------------

REQUIRED: str = "required"
NOT_A_NUMBER: str = "not_a_number"
NOT_FINITE: str = "not_finite"
BELOW_MINIMUM: str = "below_minimum"
ABOVE_MAXIMUM: str = "above_maximum"
NOT_POSITIVE: str = "not_positive"
NOT_WHOLE_NUMBER: str = "not_whole_number"
INVALID_MODE: str = "invalid_mode"
INVALID_FORMAT: str = "invalid_format"

VALID_MODES: tuple[str, ...] = ("laps", "time")

# Bare lap-time numbers below this are read as minutes, otherwise seconds.
MINUTES_THRESHOLD: float = 100.0

_MMSS_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
# Plain ASCII decimals only: float() would also take "1_000" and non-ASCII digits.
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_NON_FINITE_PATTERN = re.compile(r"^[+-]?(inf|infinity|nan)$", re.ASCII | re.IGNORECASE)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single field check.

    Attributes:
        valid: Whether the value passed.
        message: Human-readable reason when ``valid`` is False.
        code: One of the module failure codes when ``valid`` is False.
        seconds: Parsed duration, set only by :func:`validate_time_format`.
    """

    valid: bool
    message: str | None = None
    code: str | None = None
    seconds: float | None = None

    def __bool__(self) -> bool:
        return self.valid


_OK = ValidationResult(valid=True)


def _fail(message: str, code: str) -> ValidationResult:
    return ValidationResult(valid=False, message=message, code=code)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _mode_of(configuration: Any) -> str | None:
    if configuration is None:
        return None
    if isinstance(configuration, Mapping):
        return configuration.get("mode")
    return getattr(configuration, "mode", None)


# ---------------------------------------------------------------------------
# Scalar checks
# ---------------------------------------------------------------------------


def validate_number(
    value: Any,
    minimum: float | None = None,
    maximum: float | None = None,
) -> ValidationResult:
    """Check that *value* parses to a finite number within bounds.

    The default domain is strictly positive: a value ``<= 0`` is rejected
    unless an explicit non-positive *minimum* was supplied.

    Args:
        value: Raw value (string or number).
        minimum: Inclusive lower bound, if any.
        maximum: Inclusive upper bound, if any.

    Returns:
        A :class:`ValidationResult`.
    """
    if _is_blank(value):
        return _fail("Value is required", REQUIRED)
    if isinstance(value, bool):
        return _fail("Must be a valid number", NOT_A_NUMBER)
    if isinstance(value, str):
        value = value.strip()
        if not (_DECIMAL_PATTERN.match(value) or _NON_FINITE_PATTERN.match(value)):
            return _fail("Must be a valid number", NOT_A_NUMBER)

    try:
        num = float(value)
    except (TypeError, ValueError):
        return _fail("Must be a valid number", NOT_A_NUMBER)

    if not math.isfinite(num):
        return _fail("Must be a finite number", NOT_FINITE)
    if minimum is not None and num < minimum:
        return _fail(f"Must be at least {minimum:g}", BELOW_MINIMUM)
    if maximum is not None and num > maximum:
        return _fail(f"Must be at most {maximum:g}", ABOVE_MAXIMUM)
    if num <= 0 and (minimum is None or minimum > 0):
        return _fail("Must be greater than zero", NOT_POSITIVE)

    return _OK


def _is_whole(value: Any) -> bool:
    return float(value).is_integer()


def validate_field(
    field_name: str,
    value: Any,
    configuration: Any = None,
) -> ValidationResult:
    """Validate one configuration field with context-aware rules.

    Args:
        field_name: Snake-case field name (``"race_length"``, ...).
        value: Raw field value.
        configuration: Optional full configuration (mapping or
            ``RaceConfiguration``); only its ``mode`` is consulted.

    Returns:
        A :class:`ValidationResult`.  Unknown field names always pass.
    """
    mode = _mode_of(configuration)

    if field_name == "mode":
        if value not in VALID_MODES:
            return _fail('Mode must be "laps" or "time"', INVALID_MODE)
        return _OK

    if field_name == "race_length":
        result = validate_number(value, 0.1)
        if not result:
            return result
        if mode == "laps" and not _is_whole(value):
            return _fail(
                "Race length must be a whole number in laps mode", NOT_WHOLE_NUMBER
            )
        return _OK

    if field_name == "average_lap_time":
        if mode == "time":
            result = validate_number(value, 0.1)
            if not result:
                return _fail("Average lap time is required in time mode", result.code)
        return _OK

    if field_name == "tank_capacity":
        return validate_number(value, 0.1)

    if field_name == "fuel_per_lap":
        return validate_number(value, 0.001)

    if field_name == "buffer_laps":
        result = validate_number(value, 0)
        if not result:
            return result
        if not _is_whole(value):
            return _fail("Buffer laps must be a whole number", NOT_WHOLE_NUMBER)
        return _OK

    return _OK


# ---------------------------------------------------------------------------
# Lap time parsing
# ---------------------------------------------------------------------------


def validate_time_format(value: Any) -> ValidationResult:
    """Parse a lap-time string into seconds.

    Accepted forms:

    * ``mm:ss`` -- e.g. ``"1:45"`` is 105 seconds.  Seconds must be < 60.
    * A bare decimal -- read as **minutes** when below 100 (``"1.5"`` is
      90 seconds) and as **seconds** from 100 upwards (``"120"`` is 120
      seconds).

    Returns:
        A :class:`ValidationResult` whose ``seconds`` is set on success.
    """
    if _is_blank(value):
        return _fail("Time is required", REQUIRED)

    text = str(value).strip()

    match = _MMSS_PATTERN.match(text)
    if match:
        minutes = int(match.group(1))
        seconds = int(match.group(2))
        if seconds >= 60:
            return _fail("Seconds must be less than 60", INVALID_FORMAT)
        total = float(minutes * 60 + seconds)
        if total <= 0:
            return _fail("Time must be greater than zero", INVALID_FORMAT)
        return ValidationResult(valid=True, seconds=total)

    if _DECIMAL_PATTERN.match(text):
        num = float(text)
    else:
        num = math.nan

    if math.isfinite(num):
        if num <= 0:
            return _fail("Time must be greater than zero", INVALID_FORMAT)
        total = num * 60 if num < MINUTES_THRESHOLD else num
        return ValidationResult(valid=True, seconds=total)

    return _fail(
        "Invalid time format. Use mm:ss, seconds, or decimal minutes",
        INVALID_FORMAT,
    )
