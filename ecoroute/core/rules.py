"""Fuzzy rule base mapping environmental memberships to energy multipliers.

The rule base is a fixed table of six rules.  Each rule combines degrees
from the weather (temperature), wind, traffic and elevation variables with
either AND (minimum) or OR (maximum) and writes the result into exactly one
output category.  All rules are evaluated on every call; an unfired
category reads 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.membership import MembershipDegree

# ---------------------------------------------------------------------------
# Output categories
# ---------------------------------------------------------------------------

# Singleton energy multiplier per output category.
MULTIPLIERS: dict[str, float] = {
    "low": 1.0,
    "medium_low": 1.1,
    "medium": 1.2,
    "medium_high": 1.3,
    "high": 1.4,
    "very_high": 1.5,
}

CATEGORIES: tuple[str, ...] = tuple(MULTIPLIERS)


@dataclass(frozen=True)
class OutputMembership:
    """Degree of each energy-multiplier category after rule evaluation."""

    low: float = 0.0
    medium_low: float = 0.0
    medium: float = 0.0
    medium_high: float = 0.0
    high: float = 0.0
    very_high: float = 0.0

    def __post_init__(self) -> None:
        for category in CATEGORIES:
            if not 0.0 <= getattr(self, category) <= 1.0:
                raise InvalidInputError(f"{category} degree must be in [0, 1].")

    def as_dict(self) -> dict[str, float]:
        return {category: getattr(self, category) for category in CATEGORIES}


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FuzzyRule:
    """One rule of the rule base.

    Attributes:
        number: 1-based rule index.
        operator: ``"and"`` (minimum) or ``"or"`` (maximum).
        antecedents: ``(variable, set)`` pairs, e.g. ``("wind", "low")``.
        consequent: Output category receiving the rule strength.
    """

    number: int
    operator: str
    antecedents: tuple[tuple[str, str], ...]
    consequent: str

    def strength(self, inputs: dict[str, MembershipDegree]) -> float:
        """Firing strength of the rule for the given fuzzified inputs."""
        degrees = [getattr(inputs[variable], label) for variable, label in self.antecedents]
        return min(degrees) if self.operator == "and" else max(degrees)

    @property
    def description(self) -> str:
        """Readable form, e.g. ``If wind is low AND traffic is medium THEN ...``."""
        joiner = f" {self.operator.upper()} "
        clauses = joiner.join(f"{variable} is {label}" for variable, label in self.antecedents)
        return f"If {clauses} THEN energy consumption is {self.consequent}"


RULES: tuple[FuzzyRule, ...] = (
    FuzzyRule(
        1,
        "and",
        (("weather", "low"), ("wind", "low"), ("traffic", "low"), ("elevation", "low")),
        "low",
    ),
    FuzzyRule(2, "or", (("weather", "medium"), ("wind", "medium")), "medium"),
    FuzzyRule(3, "or", (("traffic", "high"), ("elevation", "high")), "high"),
    FuzzyRule(4, "and", (("weather", "high"), ("wind", "high")), "very_high"),
    FuzzyRule(5, "and", (("weather", "medium"), ("elevation", "medium")), "medium_high"),
    FuzzyRule(6, "and", (("wind", "low"), ("traffic", "medium")), "medium_low"),
)

# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def _inputs(
    weather_m: MembershipDegree,
    wind_m: MembershipDegree,
    traffic_m: MembershipDegree,
    elevation_m: MembershipDegree,
) -> dict[str, MembershipDegree]:
    return {
        "weather": weather_m,
        "wind": wind_m,
        "traffic": traffic_m,
        "elevation": elevation_m,
    }


def evaluate_rules(
    weather_m: MembershipDegree,
    wind_m: MembershipDegree,
    traffic_m: MembershipDegree,
    elevation_m: MembershipDegree,
) -> OutputMembership:
    """Apply the rule base to four fuzzified inputs.

    Args:
        weather_m: Temperature memberships.
        wind_m: Wind-speed memberships.
        traffic_m: Traffic-delay memberships.
        elevation_m: Elevation-gain memberships.

    Returns:
        Degree of every output category.  Each category is written by
        exactly one rule.
    """
    inputs = _inputs(weather_m, wind_m, traffic_m, elevation_m)
    return OutputMembership(**{rule.consequent: rule.strength(inputs) for rule in RULES})


def fired_rules(
    weather_m: MembershipDegree,
    wind_m: MembershipDegree,
    traffic_m: MembershipDegree,
    elevation_m: MembershipDegree,
) -> list[tuple[FuzzyRule, float]]:
    """Return ``(rule, strength)`` for every rule with strength > 0, in rule order."""
    inputs = _inputs(weather_m, wind_m, traffic_m, elevation_m)
    fired: list[tuple[FuzzyRule, float]] = []
    for rule in RULES:
        strength = rule.strength(inputs)
        if strength > 0.0:
            fired.append((rule, strength))
    return fired
