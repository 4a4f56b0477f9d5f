"""CLI entrypoint for the endurance fuel strategy engine.

Usage::

    python main.py              # every preset in data/presets.yaml
    python main.py sprint       # named presets only
"""

from __future__ import annotations

import logging
import os
import sys

from fuel_engine import __version__
from fuel_engine.config import load_presets
from fuel_engine.core.calculator import (
    calculate_optimal_pit_strategy,
    calculate_stints,
)
from fuel_engine.core.errors import FuelEngineError
from fuel_engine.core.formatting import format_fuel, format_lap_range
from fuel_engine.core.race import RaceConfiguration, RaceMode


def _configure_logging() -> None:
    level = os.environ.get("FUEL_ENGINE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def _print_strategy(name: str, config: RaceConfiguration) -> None:
    strategy = calculate_optimal_pit_strategy(config)
    stints = calculate_stints(config, strategy)

    print(f"\nPreset : {name}")
    if config.mode == RaceMode.TIME:
        print(
            f"Length : {config.race_length:.0f}s at {config.average_lap_time:.1f}s/lap "
            f"({config.total_laps:.2f} laps)"
        )
    else:
        print(f"Length : {config.final_lap} laps")
    print(f"Fuel   : {format_fuel(config.total_fuel_needed)} needed, "
          f"{format_fuel(config.tank_capacity)} tank")
    pits = ", ".join(str(lap) for lap in strategy.pit_laps) or "none"
    print(f"Pits   : {pits}")
    print("-" * 56)
    print(f"  {'Stint':>5}  {'Laps':<14}  {'Count':>5}  {'Fuel':>10}")
    print(f"  {'-----':>5}  {'-' * 14:<14}  {'-----':>5}  {'-' * 10:>10}")

    for stint in stints:
        marker = " *" if stint.includes_buffer and config.buffer_laps else ""
        print(
            f"  {stint.stint_number:5d}  "
            f"{format_lap_range(stint.start_lap, stint.end_lap):<14}  "
            f"{stint.lap_count:5d}  {format_fuel(stint.fuel_amount):>10}{marker}"
        )

    if config.buffer_laps:
        print(f"\n  * includes {config.buffer_laps} buffer lap(s)")


def main(argv: list[str] | None = None) -> int:
    """Print the optimal fuel strategy for the requested presets."""
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv

    print(f"Endurance Fuel Strategy Engine v{__version__}")
    print("=" * 56)

    try:
        presets = load_presets()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    names = args or list(presets)
    unknown = [name for name in names if name not in presets]
    if unknown:
        print(f"error: unknown preset(s): {', '.join(unknown)}", file=sys.stderr)
        print(f"available: {', '.join(presets)}", file=sys.stderr)
        return 1

    for name in names:
        try:
            _print_strategy(name, presets[name])
        except FuelEngineError as exc:
            print(f"error: {name}: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
