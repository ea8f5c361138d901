"""Eco-score estimation (0-100) for a route.

The score starts from energy efficiency, is damped by a weather
multiplier, and loses points for climbing and traffic.  The climbing and
traffic penalties are fuzzy-weighted: each linguistic set contributes its
membership degree times a fixed weight.
"""

from __future__ import annotations

import math

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.membership import MembershipDegree, elevation_membership, traffic_membership
from ecoroute.core.rounding import round_half_away
from ecoroute.core.weather import classify_condition

EFFICIENCY_SCALE: float = 250.0  # score points lost per kWh/km

SNOW_MULTIPLIER: float = 0.75
RAIN_MULTIPLIER: float = 0.85
FAIR_MULTIPLIER: float = 0.95

ELEVATION_PENALTIES: dict[str, float] = {"low": 5.0, "medium": 10.0, "high": 15.0}
TRAFFIC_PENALTIES: dict[str, float] = {"low": 2.0, "medium": 5.0, "high": 10.0}


def weather_multiplier(condition: str) -> float:
    """Score multiplier for a weather condition; rain is checked before snow."""
    flags = classify_condition(condition)
    if flags.rain:
        return RAIN_MULTIPLIER
    if flags.snow:
        return SNOW_MULTIPLIER
    return FAIR_MULTIPLIER


def _penalty(degree: MembershipDegree, weights: dict[str, float]) -> float:
    return sum(value * weights[label] for label, value in degree.as_dict().items())


def eco_score(
    energy_usage: float,
    distance: float,
    elevation_gain: float,
    traffic_delay: float,
    weather_condition: str = "Clear",
) -> int:
    """Rate a route's energy efficiency on a 0-100 scale.

    Args:
        energy_usage: Predicted route energy in kWh (> 0).
        distance: Route length in km (> 0).
        elevation_gain: Cumulative climb in metres (>= 0).
        traffic_delay: Traffic delay in minutes (>= 0).
        weather_condition: Free-text weather condition.

    Returns:
        Integer score in [0, 100].

    Raises:
        InvalidInputError: If any argument is out of range.
    """
    if not math.isfinite(energy_usage) or energy_usage <= 0.0:
        raise InvalidInputError("energy_usage must be finite and > 0.")
    if not math.isfinite(distance) or distance <= 0.0:
        raise InvalidInputError("distance must be finite and > 0.")
    if not math.isfinite(elevation_gain) or elevation_gain < 0.0:
        raise InvalidInputError("elevation_gain must be finite and >= 0.")
    if not math.isfinite(traffic_delay) or traffic_delay < 0.0:
        raise InvalidInputError("traffic_delay must be finite and >= 0.")

    efficiency = energy_usage / distance
    base_score = max(0.0, 100.0 - efficiency * EFFICIENCY_SCALE)

    elevation_penalty = _penalty(elevation_membership(elevation_gain), ELEVATION_PENALTIES)
    traffic_penalty = _penalty(traffic_membership(traffic_delay), TRAFFIC_PENALTIES)

    score = base_score * weather_multiplier(weather_condition) - elevation_penalty - traffic_penalty
    score = max(0.0, min(100.0, score))
    return int(round_half_away(score))
