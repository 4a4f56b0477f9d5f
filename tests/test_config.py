"""Tests for loading race presets from YAML."""

from pathlib import Path

import pytest

from fuel_engine.config import load_presets
from fuel_engine.core.errors import FieldInvalid, InvalidConfiguration
from fuel_engine.core.race import RaceConfiguration, RaceMode

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "presets.yaml"
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_bundled_presets_load() -> None:
    """The shipped presets parse into valid configurations."""
    presets = load_presets()
    assert list(presets) == ["sprint", "feature", "six_hours", "twenty_four_hours"]
    for config in presets.values():
        assert isinstance(config, RaceConfiguration)


def test_bundled_sprint_preset() -> None:
    """The sprint preset is the 30-lap single-stint race."""
    sprint = load_presets()["sprint"]
    assert sprint.mode is RaceMode.LAPS
    assert sprint.total_fuel_needed == 96
    assert sprint.number_of_stints == 1


def test_time_preset_lap_time_parsed(tmp_path: Path) -> None:
    """A mm:ss lap time in YAML becomes seconds."""
    path = _write(
        tmp_path,
        """
presets:
  - name: endurance
    mode: time
    race_length: 21600
    average_lap_time: "1:45"
    tank_capacity: 110
    fuel_per_lap: 3.2
""",
    )
    config = load_presets(path)["endurance"]
    assert config.average_lap_time == 105
    assert config.buffer_laps == 0


def test_missing_file(tmp_path: Path) -> None:
    """A missing presets file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_presets(tmp_path / "nope.yaml")


def test_empty_file(tmp_path: Path) -> None:
    """An empty file yields no presets."""
    assert load_presets(_write(tmp_path, "")) == {}


def test_missing_name(tmp_path: Path) -> None:
    """Entries without a name are rejected."""
    path = _write(
        tmp_path,
        """
presets:
  - mode: laps
    race_length: 30
    tank_capacity: 100
    fuel_per_lap: 3
""",
    )
    with pytest.raises(ValueError, match="missing required field 'name'"):
        load_presets(path)


def test_duplicate_name(tmp_path: Path) -> None:
    """Two entries with the same name are rejected."""
    entry = """
  - name: sprint
    mode: laps
    race_length: 30
    tank_capacity: 100
    fuel_per_lap: 3
"""
    path = _write(tmp_path, "presets:" + entry + entry)
    with pytest.raises(ValueError, match="duplicate name 'sprint'"):
        load_presets(path)


def test_invalid_entry(tmp_path: Path) -> None:
    """An entry failing validation raises InvalidConfiguration."""
    path = _write(
        tmp_path,
        """
presets:
  - name: broken
    mode: laps
    race_length: 30.5
    tank_capacity: 100
    fuel_per_lap: 3
""",
    )
    with pytest.raises(InvalidConfiguration):
        load_presets(path)


def test_invalid_lap_time(tmp_path: Path) -> None:
    """An unparseable lap time raises FieldInvalid."""
    path = _write(
        tmp_path,
        """
presets:
  - name: broken
    mode: time
    race_length: 3600
    average_lap_time: "soon"
    tank_capacity: 100
    fuel_per_lap: 3
""",
    )
    with pytest.raises(FieldInvalid):
        load_presets(path)
