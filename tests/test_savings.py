"""Tests for CO2 and cost savings."""

import pytest

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.savings import co2_savings, cost_savings


def test_co2_savings() -> None:
    assert co2_savings(100.0) == 3.5
    assert co2_savings(0.0) == 0.0
    assert co2_savings(60.0) == 2.1


def test_cost_savings_defaults() -> None:
    # 100 / 12 * 95 - 100 / 6 * 8 = 658.33
    assert cost_savings(100.0) == 658


def test_cost_savings_custom_rates() -> None:
    # 12 km: 1 litre at 100 against 2 kWh at 10
    assert cost_savings(12.0, electricity_rate=10.0, petrol_rate=100.0, ev_eff=6.0) == 80


def test_invalid_savings_inputs_rejected() -> None:
    with pytest.raises(InvalidInputError):
        co2_savings(-1.0)
    with pytest.raises(InvalidInputError):
        cost_savings(-1.0)
    with pytest.raises(InvalidInputError):
        cost_savings(10.0, ev_eff=0.0)
