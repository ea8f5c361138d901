"""Tests for vehicle preset loading."""

from pathlib import Path

import pytest

from ecoroute.config import load_vehicles
from ecoroute.core.vehicle import VehicleState


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "vehicles.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_default_presets_load() -> None:
    vehicles = load_vehicles()
    assert len(vehicles) == 5
    for name, vehicle in vehicles.items():
        assert isinstance(vehicle, VehicleState)
        assert vehicle.name == name


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_vehicles(tmp_path / "absent.yaml")


def test_missing_field_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "vehicles:\n  - name: Stub\n    battery_level: 50\n    efficiency: 15\n    range: 100\n",
    )
    with pytest.raises(ValueError, match="missing required field 'max_battery_capacity'"):
        load_vehicles(path)


def test_non_numeric_field_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "vehicles:\n"
        "  - name: Stub\n"
        "    battery_level: full\n"
        "    max_battery_capacity: 40\n"
        "    efficiency: 15\n"
        "    range: 100\n",
    )
    with pytest.raises(ValueError, match="must be numeric"):
        load_vehicles(path)


def test_out_of_range_value_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "vehicles:\n"
        "  - name: Stub\n"
        "    battery_level: 150\n"
        "    max_battery_capacity: 40\n"
        "    efficiency: 15\n"
        "    range: 100\n",
    )
    with pytest.raises(ValueError, match="battery_level"):
        load_vehicles(path)


def test_duplicate_name_raises(tmp_path: Path) -> None:
    entry = (
        "  - name: Stub\n"
        "    battery_level: 50\n"
        "    max_battery_capacity: 40\n"
        "    efficiency: 15\n"
        "    range: 100\n"
    )
    path = _write(tmp_path, "vehicles:\n" + entry + entry)
    with pytest.raises(ValueError, match="duplicate name"):
        load_vehicles(path)
