"""Tests for the fuzzy rule engine."""

import pytest

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.membership import MembershipDegree
from ecoroute.core.rules import (
    CATEGORIES,
    MULTIPLIERS,
    RULES,
    OutputMembership,
    evaluate_rules,
    fired_rules,
)

_ZERO = MembershipDegree(0.0, 0.0, 0.0)
_LOW = MembershipDegree(1.0, 0.0, 0.0)


def _degree(low: float = 0.0, medium: float = 0.0, high: float = 0.0) -> MembershipDegree:
    return MembershipDegree(low, medium, high)


# ---------------------------------------------------------------------------
# Constant tables
# ---------------------------------------------------------------------------


def test_multiplier_table() -> None:
    assert MULTIPLIERS == {
        "low": 1.0,
        "medium_low": 1.1,
        "medium": 1.2,
        "medium_high": 1.3,
        "high": 1.4,
        "very_high": 1.5,
    }


def test_each_category_targeted_by_exactly_one_rule() -> None:
    targets = [rule.consequent for rule in RULES]
    assert sorted(targets) == sorted(CATEGORIES)


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


def test_rule_1_all_low() -> None:
    out = evaluate_rules(_degree(0.9), _degree(0.6), _degree(0.8), _degree(0.7))
    assert out.low == pytest.approx(0.6)


def test_rule_2_weather_or_wind_medium() -> None:
    out = evaluate_rules(_degree(medium=0.3), _degree(medium=0.6), _ZERO, _ZERO)
    assert out.medium == pytest.approx(0.6)


def test_rule_3_traffic_or_elevation_high() -> None:
    out = evaluate_rules(_ZERO, _ZERO, _degree(high=0.2), _degree(high=0.7))
    assert out.high == pytest.approx(0.7)


def test_rule_4_weather_and_wind_high() -> None:
    out = evaluate_rules(_degree(high=0.7), _degree(high=0.4), _ZERO, _ZERO)
    assert out.very_high == pytest.approx(0.4)


def test_rule_5_weather_and_elevation_medium() -> None:
    out = evaluate_rules(_degree(medium=0.8), _ZERO, _ZERO, _degree(medium=0.5))
    assert out.medium_high == pytest.approx(0.5)


def test_rule_6_wind_low_and_traffic_medium() -> None:
    out = evaluate_rules(_ZERO, _degree(low=0.9), _degree(medium=0.6), _ZERO)
    assert out.medium_low == pytest.approx(0.6)


def test_calm_conditions_fire_only_low() -> None:
    out = evaluate_rules(_LOW, _LOW, _LOW, _LOW)
    assert out.as_dict() == {
        "low": 1.0,
        "medium_low": 0.0,
        "medium": 0.0,
        "medium_high": 0.0,
        "high": 0.0,
        "very_high": 0.0,
    }


def test_unfired_categories_read_zero() -> None:
    out = evaluate_rules(_ZERO, _ZERO, _ZERO, _ZERO)
    assert all(value == 0.0 for value in out.as_dict().values())


# ---------------------------------------------------------------------------
# Fired rules and descriptions
# ---------------------------------------------------------------------------


def test_fired_rules_lists_non_zero_rules_in_order() -> None:
    fired = fired_rules(_LOW, _LOW, _degree(low=0.5, medium=0.5), _LOW)
    assert [rule.number for rule, _ in fired] == [1, 6]
    assert [strength for _, strength in fired] == pytest.approx([0.5, 0.5])


def test_fired_rules_empty_when_nothing_fires() -> None:
    assert fired_rules(_ZERO, _ZERO, _ZERO, _ZERO) == []


def test_rule_descriptions() -> None:
    assert RULES[5].description == (
        "If wind is low AND traffic is medium THEN energy consumption is medium_low"
    )
    assert RULES[1].description == (
        "If weather is medium OR wind is medium THEN energy consumption is medium"
    )


def test_output_membership_rejects_out_of_range() -> None:
    with pytest.raises(InvalidInputError, match="must be in"):
        OutputMembership(high=1.5)
