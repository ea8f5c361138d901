"""Configuration loader for the EcoRoute estimation core."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ecoroute.core.vehicle import VehicleState

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
VEHICLES_PATH: Path = DATA_DIR / "vehicles.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "battery_level",
    "max_battery_capacity",
    "efficiency",
    "range",
)

_NUMERIC_FIELDS: tuple[str, ...] = _REQUIRED_FIELDS[1:]  # all except name


def load_vehicles(path: Path | None = None) -> dict[str, VehicleState]:
    """Load vehicle presets from a YAML file.

    Each entry is validated and converted into a :class:`VehicleState`.

    Args:
        path: Optional override for the presets file path.

    Returns:
        Mapping from vehicle name to :class:`VehicleState`, in file order.

    Raises:
        FileNotFoundError: If the presets file does not exist.
        ValueError: If any entry is missing fields, has non-numeric or
            out-of-range values, or repeats a name.
    """
    vehicles_path = path or VEHICLES_PATH
    if not vehicles_path.exists():
        raise FileNotFoundError(f"Vehicle presets file not found: {vehicles_path}")

    with open(vehicles_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries: list[dict] = data.get("vehicles") or []
    vehicles: dict[str, VehicleState] = {}

    for idx, entry in enumerate(entries):
        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Vehicle entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        # --- Validate numeric types ---
        for field in _NUMERIC_FIELDS:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Vehicle entry {idx} ({entry['name']}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )

        name = str(entry["name"])
        if name in vehicles:
            raise ValueError(f"Vehicle entry {idx}: duplicate name '{name}'")

        # VehicleState raises InvalidInputError (a ValueError) on bad ranges.
        vehicles[name] = VehicleState(
            name=name,
            battery_level=float(entry["battery_level"]),
            max_battery_capacity=float(entry["max_battery_capacity"]),
            efficiency=float(entry["efficiency"]),
            range=float(entry["range"]),
        )

    logger.debug("loaded %d vehicle preset(s) from %s", len(vehicles), vehicles_path)
    return vehicles
