"""Charging-stop planning and the fuzzy charging-need decision."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.membership import battery_membership
from ecoroute.core.weather import classify_condition

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Charging stops
# ---------------------------------------------------------------------------

DEFAULT_SAFETY_BUFFER: float = 0.2

RAIN_RANGE_FACTOR: float = 0.9
SNOW_RANGE_FACTOR: float = 0.8
WIND_RANGE_FACTOR: float = 0.85


def range_weather_factor(condition: str) -> float:
    """Fraction of range retained in the given weather.

    Rain is checked before snow, snow before wind; the first match wins.
    """
    flags = classify_condition(condition)
    if flags.rain:
        return RAIN_RANGE_FACTOR
    if flags.snow:
        return SNOW_RANGE_FACTOR
    if flags.wind:
        return WIND_RANGE_FACTOR
    return 1.0


def effective_range(
    vehicle_range: float,
    battery_level: float = 100.0,
    safety_buffer: float = DEFAULT_SAFETY_BUFFER,
) -> float:
    """Usable range in km after battery level and safety margin.

    Raises:
        InvalidInputError: If any argument is out of range.
    """
    if not math.isfinite(vehicle_range) or vehicle_range <= 0.0:
        raise InvalidInputError("vehicle_range must be finite and > 0.")
    if not 0.0 <= battery_level <= 100.0:
        raise InvalidInputError("battery_level must be between 0 and 100.")
    if not 0.0 <= safety_buffer < 1.0:
        raise InvalidInputError("safety_buffer must be in [0, 1).")
    return vehicle_range * (battery_level / 100.0) * (1.0 - safety_buffer)


def charging_stops(
    distance: float,
    vehicle_range: float,
    battery_level: float = 100.0,
    weather_condition: str = "Clear",
    safety_buffer: float = DEFAULT_SAFETY_BUFFER,
) -> int:
    """Number of intermediate charging stops a trip requires.

    A trip within the effective range needs no stop.  Otherwise the range
    is further reduced for weather and the trip is split into legs of
    that length; the destination itself is not counted as a stop::

        stops = ceil(distance / (effective_range * weather_factor)) - 1

    Args:
        distance: Trip length in km (> 0).
        vehicle_range: Full-battery range in km (> 0).
        battery_level: Current state of charge in percent (0-100).
        weather_condition: Free-text weather condition.
        safety_buffer: Fraction of range held in reserve, in [0, 1).

    Returns:
        Non-negative number of stops.

    Raises:
        InvalidInputError: If any argument is out of range, or the battery
            is empty so no leg can be driven.
    """
    if not math.isfinite(distance) or distance <= 0.0:
        raise InvalidInputError("distance must be finite and > 0.")
    usable = effective_range(vehicle_range, battery_level, safety_buffer)
    if distance <= usable:
        return 0

    adjusted = usable * range_weather_factor(weather_condition)
    if adjusted <= 0.0:
        raise InvalidInputError("effective range is zero; battery_level must be > 0.")

    stops = max(0, math.ceil(distance / adjusted) - 1)
    logger.debug(
        "charging stops: %.1f km over %.1f km legs -> %d stop(s)",
        distance,
        adjusted,
        stops,
    )
    return stops


# ---------------------------------------------------------------------------
# Charging-need decision
# ---------------------------------------------------------------------------

CRITICAL_REMAINING: float = 10.0  # percent
LOW_REMAINING: float = 20.0
MARGINAL_REMAINING: float = 30.0
WET_WEATHER_BONUS: float = 0.2
LOW_BATTERY_WEIGHT: float = 0.7
DECISION_THRESHOLD: float = 0.5


@dataclass(frozen=True)
class ChargingDecision:
    """Whether to charge before the trip, with the supporting confidence.

    Attributes:
        needed: True when ``confidence`` exceeds 0.5.
        confidence: Strength of the recommendation in [0, 1].
    """

    needed: bool
    confidence: float


def charging_needed(
    battery_pct: float,
    distance_km: float,
    expected_consumption_pct: float,
    weather_condition: str = "Clear",
) -> ChargingDecision:
    """Decide whether the vehicle should charge before setting off.

    The confidence follows the battery share expected to remain on
    arrival:

    * below 10 %: 1.0
    * below 20 %: 0.8, plus 0.2 in rain or snow
    * below 30 %: 0.5, plus 0.2 in rain or snow
    * otherwise: 0.7 times the "low" membership of the current level

    Args:
        battery_pct: Current state of charge in percent (0-100).
        distance_km: Distance to destination in km (>= 0).  Validated but
            otherwise informational; the consumption already reflects it.
        expected_consumption_pct: Battery share the trip will use (>= 0).
        weather_condition: Free-text weather condition.

    Returns:
        A :class:`ChargingDecision`.

    Raises:
        InvalidInputError: If any argument is out of range.
    """
    if not 0.0 <= battery_pct <= 100.0:
        raise InvalidInputError("battery_pct must be between 0 and 100.")
    if distance_km < 0.0:
        raise InvalidInputError("distance_km must be >= 0.")
    if expected_consumption_pct < 0.0:
        raise InvalidInputError("expected_consumption_pct must be >= 0.")

    remaining = max(0.0, battery_pct - expected_consumption_pct)
    bonus = WET_WEATHER_BONUS if classify_condition(weather_condition).wet else 0.0

    if remaining < CRITICAL_REMAINING:
        confidence = 1.0
    elif remaining < LOW_REMAINING:
        confidence = 0.8 + bonus
    elif remaining < MARGINAL_REMAINING:
        confidence = 0.5 + bonus
    else:
        confidence = battery_membership(battery_pct).low * LOW_BATTERY_WEIGHT

    confidence = min(1.0, confidence)
    return ChargingDecision(needed=confidence > DECISION_THRESHOLD, confidence=confidence)
