"""Defuzzification and the end-to-end energy multiplier inference.

The output categories are singletons, so centre-of-gravity
defuzzification reduces to a weighted mean of the category multipliers::

    multiplier = sum(degree_i * value_i) / sum(degree_i)

When no rule fires the denominator is zero and the multiplier falls back
to the neutral value 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecoroute.core.membership import (
    MembershipDegree,
    elevation_membership,
    temperature_membership,
    traffic_membership,
    wind_membership,
)
from ecoroute.core.rules import (
    MULTIPLIERS,
    FuzzyRule,
    OutputMembership,
    evaluate_rules,
    fired_rules,
)

NEUTRAL_MULTIPLIER: float = 1.0


def defuzzify(output: OutputMembership) -> float:
    """Collapse an output membership into a single energy multiplier.

    Args:
        output: Degrees of the six multiplier categories.

    Returns:
        Weighted-centroid multiplier in [1.0, 1.5], or 1.0 if every degree
        is zero.
    """
    numerator = 0.0
    denominator = 0.0
    for category, degree in output.as_dict().items():
        numerator += degree * MULTIPLIERS[category]
        denominator += degree
    if denominator <= 0.0:
        return NEUTRAL_MULTIPLIER
    return numerator / denominator


@dataclass(frozen=True)
class FuzzyInference:
    """Full trace of one multiplier inference.

    Attributes:
        weather: Temperature memberships.
        wind: Wind-speed memberships.
        traffic: Traffic-delay memberships.
        elevation: Elevation-gain memberships.
        output: Aggregated output category degrees.
        fired: Rules with non-zero strength and their strengths.
        multiplier: Defuzzified energy multiplier.
    """

    weather: MembershipDegree
    wind: MembershipDegree
    traffic: MembershipDegree
    elevation: MembershipDegree
    output: OutputMembership
    fired: tuple[tuple[FuzzyRule, float], ...]
    multiplier: float


def infer_energy_multiplier(
    temperature: float,
    wind_speed: float,
    traffic_delay: float,
    elevation_gain: float,
) -> FuzzyInference:
    """Run fuzzification, rule evaluation and defuzzification.

    Args:
        temperature: Air temperature in degC.
        wind_speed: Wind speed in km/h.
        traffic_delay: Traffic delay in minutes.
        elevation_gain: Elevation gain in metres.

    Returns:
        A :class:`FuzzyInference` with every intermediate result.
    """
    weather_m = temperature_membership(temperature)
    wind_m = wind_membership(wind_speed)
    traffic_m = traffic_membership(traffic_delay)
    elevation_m = elevation_membership(elevation_gain)

    output = evaluate_rules(weather_m, wind_m, traffic_m, elevation_m)

    return FuzzyInference(
        weather=weather_m,
        wind=wind_m,
        traffic=traffic_m,
        elevation=elevation_m,
        output=output,
        fired=tuple(fired_rules(weather_m, wind_m, traffic_m, elevation_m)),
        multiplier=defuzzify(output),
    )


def fuzzy_energy_multiplier(
    temperature: float,
    wind_speed: float,
    traffic_delay: float,
    elevation_gain: float,
) -> float:
    """Return only the defuzzified multiplier of :func:`infer_energy_multiplier`."""
    weather_m = temperature_membership(temperature)
    wind_m = wind_membership(wind_speed)
    traffic_m = traffic_membership(traffic_delay)
    elevation_m = elevation_membership(elevation_gain)
    return defuzzify(evaluate_rules(weather_m, wind_m, traffic_m, elevation_m))
