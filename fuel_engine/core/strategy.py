"""Pit-stop strategy model for the fuel strategy engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class PitStrategy:
    """Laps on which the car pits, splitting the race into stints.

    The constructor only normalises ``pit_laps`` (a list becomes a tuple).
    Bounds and ordering are checked by
    :func:`~fuel_engine.core.calculator.recalculate_stints`, which must be
    able to report a malformed strategy instead of failing on construction.

    Attributes:
        pit_laps: Ascending 1-based lap numbers; the car pits at the end of
            each listed lap.
        number_of_stints: Stint count.  ``None`` means
            ``len(pit_laps) + 1``.
    """

    pit_laps: tuple[int, ...] = ()
    number_of_stints: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.pit_laps, list):
            object.__setattr__(self, "pit_laps", tuple(self.pit_laps))

    @property
    def stint_count(self) -> int:
        """Resolved number of stints."""
        if self.number_of_stints:
            return self.number_of_stints
        return len(self.pit_laps) + 1

    def with_pit_lap(self, pit_index: int, lap: int) -> PitStrategy:
        """Return a copy with the pit at *pit_index* moved to *lap*.

        Raises:
            IndexError: If *pit_index* does not name an existing pit stop.
        """
        if not 0 <= pit_index < len(self.pit_laps):
            raise IndexError(
                f"pit_index {pit_index} out of range for "
                f"{len(self.pit_laps)} pit stop(s)."
            )
        laps = list(self.pit_laps)
        laps[pit_index] = lap
        return replace(self, pit_laps=tuple(laps))

    def to_dict(self) -> dict[str, Any]:
        return {
            "pit_laps": list(self.pit_laps),
            "number_of_stints": self.stint_count,
        }
