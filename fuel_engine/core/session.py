"""Interactive strategy session.

A :class:`StrategySession` is the front-end-agnostic half of the editing
workflow: it keeps the last valid strategy and stint list for one
configuration, applies a single pit-lap edit at a time and leaves the
previous result untouched when an edit is rejected.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from fuel_engine.core.calculator import (
    calculate_optimal_pit_strategy,
    calculate_stints,
    pit_lap_bounds,
    recalculate_stints,
)
from fuel_engine.core.errors import FuelEngineError, PitLapOutOfBounds
from fuel_engine.core.formatting import is_in_range, round_to_decimals
from fuel_engine.core.race import RaceConfiguration
from fuel_engine.core.stint import StintCalculation
from fuel_engine.core.strategy import PitStrategy

logger = logging.getLogger(__name__)

RECALCULATION_BUDGET_MS: float = 50.0


@dataclass(frozen=True)
class StrategyResult:
    """A strategy together with the stints derived from it."""

    strategy: PitStrategy
    stints: tuple[StintCalculation, ...]


@dataclass(frozen=True)
class StrategySummary:
    """Race-level totals for display.

    Attributes:
        total_fuel: Sum of every stint's fuel load (litres, 2 decimals).
        pit_stops: Number of pit stops.
        final_lap: Last lap of the race.
    """

    total_fuel: float
    pit_stops: int
    final_lap: int


class StrategySession:
    """Holds the current strategy for one race configuration.

    Attributes:
        config: Configuration the session was opened with.
        result: Last successfully computed strategy and stints, or None.
        last_error: Message of the last rejected operation, or None.
    """

    __slots__ = ("config", "result", "last_error")

    def __init__(self, config: RaceConfiguration) -> None:
        self.config: RaceConfiguration = config
        self.result: StrategyResult | None = None
        self.last_error: str | None = None

    def __repr__(self) -> str:
        pits = list(self.result.strategy.pit_laps) if self.result else None
        return f"StrategySession(final_lap={self.config.final_lap}, pit_laps={pits})"

    def calculate(self) -> StrategyResult:
        """Compute and store the optimal strategy.

        Raises:
            InvalidConfiguration: If the configuration fails validation.
        """
        try:
            stints = calculate_stints(self.config)
        except FuelEngineError as exc:
            self.last_error = str(exc)
            logger.warning("Calculation rejected: %s", exc)
            raise

        strategy = calculate_optimal_pit_strategy(self.config)
        self.result = StrategyResult(strategy=strategy, stints=tuple(stints))
        self.last_error = None
        logger.info(
            "Optimal strategy: %d stint(s), pit laps %s",
            strategy.stint_count,
            list(strategy.pit_laps),
        )
        return self.result

    def _require_result(self) -> StrategyResult:
        if self.result is None:
            raise RuntimeError("No strategy yet; call calculate() first.")
        return self.result

    def bounds(self) -> list[tuple[int, int]]:
        """Inclusive ``(min_lap, max_lap)`` for every pit stop."""
        strategy = self._require_result().strategy
        return [
            pit_lap_bounds(self.config, strategy, i)
            for i in range(len(strategy.pit_laps))
        ]

    def edit_pit_lap(self, pit_index: int, lap: int) -> StrategyResult:
        """Move one pit stop and recompute the stints.

        On failure the previous result is kept and ``last_error`` is set.

        Args:
            pit_index: 0-based index of the pit stop to move.
            lap: New pit lap.

        Returns:
            The new :class:`StrategyResult`.

        Raises:
            RuntimeError: If :meth:`calculate` has not run yet.
            IndexError: If *pit_index* is not an existing pit stop.
            PitLapOutOfBounds: If *lap* is outside the legal range.
            FuelEngineError: Any other engine rejection.
        """
        current = self._require_result()
        min_lap, max_lap = pit_lap_bounds(self.config, current.strategy, pit_index)

        if not is_in_range(lap, min_lap, max_lap):
            message = f"Pit lap must be between {min_lap} and {max_lap}"
            self.last_error = message
            logger.warning("Rejected edit of pit %d to lap %s: %s", pit_index, lap, message)
            raise PitLapOutOfBounds(lap, self.config.final_lap, message)

        updated = current.strategy.with_pit_lap(pit_index, lap)

        start = time.perf_counter()
        try:
            stints = recalculate_stints(self.config, updated)
        except FuelEngineError as exc:
            self.last_error = str(exc)
            logger.warning("Rejected edit of pit %d to lap %s: %s", pit_index, lap, exc)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if elapsed_ms > RECALCULATION_BUDGET_MS:
            logger.warning(
                "Recalculation took %.1fms, target is < %.0fms",
                elapsed_ms,
                RECALCULATION_BUDGET_MS,
            )

        self.result = StrategyResult(strategy=updated, stints=tuple(stints))
        self.last_error = None
        logger.info("Pit %d moved to lap %d", pit_index, lap)
        return self.result

    def summary(self) -> StrategySummary:
        """Totals for the current result."""
        current = self._require_result()
        total_fuel = round_to_decimals(sum(s.fuel_amount for s in current.stints), 2)
        return StrategySummary(
            total_fuel=total_fuel,
            pit_stops=len(current.strategy.pit_laps),
            final_lap=self.config.final_lap,
        )

    def reset(self) -> None:
        """Forget the current strategy and error."""
        self.result = None
        self.last_error = None
