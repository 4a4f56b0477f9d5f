"""Core calculation modules for the fuel strategy engine."""

from fuel_engine.core.calculator import (
    ConfigurationValidation,
    calculate_optimal_pit_strategy,
    calculate_stints,
    parse_configuration,
    pit_lap_bounds,
    recalculate_stints,
    validate_configuration,
)
from fuel_engine.core.errors import (
    IMPOSSIBLE_RACE_MESSAGE,
    FieldInvalid,
    FuelEngineError,
    InvalidConfiguration,
    InvalidPitStrategy,
    PitLapOutOfBounds,
    PitLapsNotAscending,
    PitStrategyError,
)
from fuel_engine.core.race import RaceConfiguration, RaceMode
from fuel_engine.core.session import StrategyResult, StrategySession, StrategySummary
from fuel_engine.core.stint import StintCalculation
from fuel_engine.core.strategy import PitStrategy
from fuel_engine.core.validation import (
    ValidationResult,
    validate_field,
    validate_number,
    validate_time_format,
)

__all__ = [
    "ConfigurationValidation",
    "FieldInvalid",
    "FuelEngineError",
    "IMPOSSIBLE_RACE_MESSAGE",
    "InvalidConfiguration",
    "InvalidPitStrategy",
    "PitLapOutOfBounds",
    "PitLapsNotAscending",
    "PitStrategy",
    "PitStrategyError",
    "RaceConfiguration",
    "RaceMode",
    "StintCalculation",
    "StrategyResult",
    "StrategySession",
    "StrategySummary",
    "ValidationResult",
    "calculate_optimal_pit_strategy",
    "calculate_stints",
    "parse_configuration",
    "pit_lap_bounds",
    "recalculate_stints",
    "validate_configuration",
    "validate_field",
    "validate_number",
    "validate_time_format",
]
