"""Tests for the fuzzy membership library."""

import numpy as np
import pytest

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.membership import (
    MembershipDegree,
    battery_membership,
    elevation_membership,
    membership,
    membership_curve,
    temperature_membership,
    traffic_membership,
    wind_membership,
)

# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------


def test_temperature_plateau_centres() -> None:
    """Each set reads exactly 1.0 in the middle of its plateau."""
    assert temperature_membership(20.0) == MembershipDegree(1.0, 0.0, 0.0)
    assert temperature_membership(31.5) == MembershipDegree(0.0, 1.0, 0.0)
    assert temperature_membership(45.0) == MembershipDegree(0.0, 0.0, 1.0)


def test_cold_temperatures_belong_to_no_set() -> None:
    """At or below 10 degC every temperature set is zero."""
    for temp in (-20.0, 0.0, 5.0, 10.0):
        assert temperature_membership(temp) == MembershipDegree(0.0, 0.0, 0.0)


def test_temperature_ramps() -> None:
    m = temperature_membership(12.5)
    assert m.low == pytest.approx(0.5)

    m = temperature_membership(27.5)
    assert m.low == pytest.approx(0.5)
    assert m.medium == pytest.approx(0.5)
    assert m.high == 0.0

    m = temperature_membership(35.5)
    assert m.medium == pytest.approx(0.5)
    assert m.high == pytest.approx(0.5)


def test_temperature_ramp_endpoints() -> None:
    """Plateau edges are inclusive; ramp feet read zero."""
    assert temperature_membership(15.0).low == 1.0
    assert temperature_membership(25.0) == MembershipDegree(1.0, 0.0, 0.0)
    assert temperature_membership(30.0) == MembershipDegree(0.0, 1.0, 0.0)
    assert temperature_membership(38.0) == MembershipDegree(0.0, 0.0, 1.0)


# ---------------------------------------------------------------------------
# Other variables
# ---------------------------------------------------------------------------


def test_wind_sets() -> None:
    assert wind_membership(0.0) == MembershipDegree(1.0, 0.0, 0.0)
    m = wind_membership(7.5)
    assert m.low == pytest.approx(0.5)
    assert m.medium == pytest.approx(0.5)
    assert wind_membership(12.0) == MembershipDegree(0.0, 1.0, 0.0)
    assert wind_membership(25.0) == MembershipDegree(0.0, 0.0, 1.0)


def test_traffic_sets() -> None:
    assert traffic_membership(1.0) == MembershipDegree(1.0, 0.0, 0.0)
    m = traffic_membership(3.5)
    assert m.low == pytest.approx(0.5)
    assert m.medium == pytest.approx(0.5)
    m = traffic_membership(10.0)
    assert m.medium == pytest.approx(0.5)
    assert m.high == pytest.approx(0.5)
    assert traffic_membership(15.0) == MembershipDegree(0.0, 0.0, 1.0)


def test_elevation_sets() -> None:
    assert elevation_membership(20.0) == MembershipDegree(1.0, 0.0, 0.0)
    m = elevation_membership(75.0)
    assert m.low == pytest.approx(0.5)
    assert m.medium == pytest.approx(0.5)
    assert elevation_membership(120.0) == MembershipDegree(0.0, 1.0, 0.0)
    assert elevation_membership(250.0) == MembershipDegree(0.0, 0.0, 1.0)


def test_battery_sets() -> None:
    assert battery_membership(10.0) == MembershipDegree(1.0, 0.0, 0.0)
    m = battery_membership(30.0)
    assert m.low == pytest.approx(0.5)
    assert m.medium == pytest.approx(0.5)
    assert battery_membership(50.0) == MembershipDegree(0.0, 1.0, 0.0)
    assert battery_membership(90.0) == MembershipDegree(0.0, 0.0, 1.0)


# ---------------------------------------------------------------------------
# Partition properties
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("kind", "lo", "hi"),
    [
        ("temperature", -10.0, 50.0),
        ("wind", 0.0, 30.0),
        ("traffic", 0.0, 20.0),
        ("elevation", 0.0, 300.0),
        ("battery", 0.0, 100.0),
    ],
)
def test_partition_sum_and_overlap(kind: str, lo: float, hi: float) -> None:
    """Degrees stay in [0, 1], sum to at most 1 and at most two are non-zero."""
    for value in np.linspace(lo, hi, 601):
        m = membership(kind, float(value))
        degrees = [m.low, m.medium, m.high]
        assert all(0.0 <= d <= 1.0 for d in degrees)
        assert sum(degrees) <= 1.0 + 1e-9
        assert sum(1 for d in degrees if d > 0.0) <= 2


def test_generic_membership_matches_dedicated_functions() -> None:
    assert membership("temperature", 27.0) == temperature_membership(27.0)
    assert membership("wind", 17.0) == wind_membership(17.0)
    assert membership("traffic", 9.0) == traffic_membership(9.0)
    assert membership("elevation", 160.0) == elevation_membership(160.0)
    assert membership("battery", 65.0) == battery_membership(65.0)


def test_unknown_kind_rejected() -> None:
    with pytest.raises(InvalidInputError, match="Unknown variable kind"):
        membership("humidity", 50.0)


def test_membership_degree_rejects_out_of_range() -> None:
    with pytest.raises(InvalidInputError, match="must be in"):
        MembershipDegree(1.2, 0.0, 0.0)


def test_membership_curve_matches_scalar_evaluation() -> None:
    universe = np.arange(0, 41, 1)
    curve = membership_curve("temperature", universe)
    assert set(curve) == {"low", "medium", "high"}
    for label, values in curve.items():
        assert values.shape == universe.shape
        expected = [getattr(temperature_membership(float(x)), label) for x in universe]
        np.testing.assert_allclose(values, expected)
