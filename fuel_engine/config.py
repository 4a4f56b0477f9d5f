"""Preset loader for the fuel strategy engine."""

from pathlib import Path

import yaml

from fuel_engine.core.calculator import parse_configuration
from fuel_engine.core.race import RaceConfiguration

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
PRESETS_PATH: Path = DATA_DIR / "presets.yaml"


def load_presets(path: Path | None = None) -> dict[str, RaceConfiguration]:
    """Load named race configurations from a YAML file.

    Each entry is parsed with
    :func:`~fuel_engine.core.calculator.parse_configuration`, so raw values
    follow the same rules as form input.

    Args:
        path: Optional override for the presets file path.

    Returns:
        Mapping from preset name to :class:`RaceConfiguration`, in file
        order.

    Raises:
        FileNotFoundError: If the presets file does not exist.
        ValueError: If an entry has no name or repeats a name.
        InvalidConfiguration: If an entry fails validation.
        FieldInvalid: If an entry's lap time cannot be parsed.
    """
    presets_path = path or PRESETS_PATH
    if not presets_path.exists():
        raise FileNotFoundError(f"Presets file not found: {presets_path}")

    with open(presets_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries: list[dict] = data.get("presets") or []
    presets: dict[str, RaceConfiguration] = {}

    for idx, entry in enumerate(entries):
        name = entry.get("name")
        if not name:
            raise ValueError(f"Preset entry {idx} is missing required field 'name'")
        if name in presets:
            raise ValueError(f"Preset entry {idx}: duplicate name '{name}'")

        fields = {key: value for key, value in entry.items() if key != "name"}
        presets[str(name)] = parse_configuration(fields)

    return presets
