"""Fuzzy membership functions for the EcoRoute inference layer.

Every input variable is partitioned into three linguistic sets (low,
medium, high).  Each set is a trapezoid described by four breakpoints::

    lower < lower_core <= upper_core < upper

The degree is 1 on ``[lower_core, upper_core]``, ramps linearly on the open
intervals ``(lower, lower_core)`` and ``(upper_core, upper)``, and is 0
everywhere else.  Shoulder sets use infinite breakpoints so that, for
example, any wind speed at or below 5 km/h reads fully "low".

Adjacent sets share ramp endpoints, so at most two sets are non-zero for a
given value.  The temperature partition deliberately leaves everything at
or below 10 degC outside all three sets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ecoroute.core.errors import InvalidInputError

_INF = math.inf

# ---------------------------------------------------------------------------
# Set and variable definitions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FuzzySet:
    """Trapezoidal fuzzy set.

    Attributes:
        name: Linguistic label ("low", "medium" or "high").
        lower: Left foot of the trapezoid (degree 0 at and below).
        lower_core: Start of the plateau.
        upper_core: End of the plateau.
        upper: Right foot of the trapezoid (degree 0 at and above).
    """

    name: str
    lower: float
    lower_core: float
    upper_core: float
    upper: float

    def degree(self, value: float) -> float:
        """Return the membership degree of *value*, clamped to [0, 1]."""
        if self.lower_core <= value <= self.upper_core:
            return 1.0
        if self.lower < value < self.lower_core:
            raw = (value - self.lower) / (self.lower_core - self.lower)
        elif self.upper_core < value < self.upper:
            raw = (self.upper - value) / (self.upper - self.upper_core)
        else:
            return 0.0
        return min(1.0, max(0.0, raw))


@dataclass(frozen=True)
class LinguisticVariable:
    """A named input variable partitioned into low/medium/high sets."""

    name: str
    low: FuzzySet
    medium: FuzzySet
    high: FuzzySet

    def fuzzify(self, value: float) -> MembershipDegree:
        """Evaluate all three sets at *value*."""
        return MembershipDegree(
            low=self.low.degree(value),
            medium=self.medium.degree(value),
            high=self.high.degree(value),
        )


@dataclass(frozen=True)
class MembershipDegree:
    """Degrees of membership of one value in the low/medium/high sets."""

    low: float
    medium: float
    high: float

    def __post_init__(self) -> None:
        for label in ("low", "medium", "high"):
            if not 0.0 <= getattr(self, label) <= 1.0:
                raise InvalidInputError(f"{label} degree must be in [0, 1].")

    def as_dict(self) -> dict[str, float]:
        return {"low": self.low, "medium": self.medium, "high": self.high}


def _variable(
    name: str,
    low: tuple[float, float],
    medium: tuple[float, float, float, float],
    high: tuple[float, float],
) -> LinguisticVariable:
    """Build a shouldered variable from its ramp breakpoints.

    *low* is ``(upper_core, upper)`` of the left shoulder, *high* is
    ``(lower, lower_core)`` of the right shoulder.
    """
    return LinguisticVariable(
        name=name,
        low=FuzzySet("low", -_INF, -_INF, low[0], low[1]),
        medium=FuzzySet("medium", *medium),
        high=FuzzySet("high", high[0], high[1], _INF, _INF),
    )


# Temperature in degC.  Unlike the other variables its "low" set has a
# left ramp too, so cold readings belong to no set at all.
TEMPERATURE = LinguisticVariable(
    name="temperature",
    low=FuzzySet("low", 10.0, 15.0, 25.0, 30.0),
    medium=FuzzySet("medium", 25.0, 30.0, 33.0, 38.0),
    high=FuzzySet("high", 33.0, 38.0, _INF, _INF),
)

# Wind speed in km/h.
WIND = _variable("wind", low=(5.0, 10.0), medium=(5.0, 10.0, 15.0, 20.0), high=(15.0, 20.0))

# Traffic delay in minutes.
TRAFFIC = _variable("traffic", low=(2.0, 5.0), medium=(2.0, 5.0, 8.0, 12.0), high=(8.0, 12.0))

# Elevation gain in metres.
ELEVATION = _variable(
    "elevation", low=(50.0, 100.0), medium=(50.0, 100.0, 150.0, 200.0), high=(150.0, 200.0)
)

# Battery state of charge in percent.
BATTERY = _variable("battery", low=(20.0, 40.0), medium=(20.0, 40.0, 60.0, 80.0), high=(60.0, 80.0))

VARIABLES: dict[str, LinguisticVariable] = {
    v.name: v for v in (TEMPERATURE, WIND, TRAFFIC, ELEVATION, BATTERY)
}

# ---------------------------------------------------------------------------
# Public membership functions
# ---------------------------------------------------------------------------


def _lookup(kind: str) -> LinguisticVariable:
    try:
        return VARIABLES[kind]
    except KeyError:
        raise InvalidInputError(
            f"Unknown variable kind '{kind}'; expected one of {sorted(VARIABLES)}"
        ) from None


def membership(kind: str, value: float) -> MembershipDegree:
    """Fuzzify *value* for the variable named *kind*.

    Args:
        kind: One of ``"temperature"``, ``"wind"``, ``"traffic"``,
            ``"elevation"`` or ``"battery"``.
        value: Raw reading in the variable's unit.

    Raises:
        InvalidInputError: If *kind* is unknown.
    """
    return _lookup(kind).fuzzify(value)


def temperature_membership(temperature: float) -> MembershipDegree:
    return TEMPERATURE.fuzzify(temperature)


def wind_membership(wind_speed: float) -> MembershipDegree:
    return WIND.fuzzify(wind_speed)


def traffic_membership(traffic_delay: float) -> MembershipDegree:
    return TRAFFIC.fuzzify(traffic_delay)


def elevation_membership(elevation_gain: float) -> MembershipDegree:
    return ELEVATION.fuzzify(elevation_gain)


def battery_membership(battery_pct: float) -> MembershipDegree:
    return BATTERY.fuzzify(battery_pct)


def membership_curve(kind: str, universe: ArrayLike) -> dict[str, NDArray[np.float64]]:
    """Sample the three sets of a variable over a range of values.

    Intended for plotting the partition of a variable.

    Args:
        kind: Variable name, as accepted by :func:`membership`.
        universe: Values at which to evaluate the sets.

    Returns:
        ``{"low": array, "medium": array, "high": array}``, each the same
        length as *universe*.
    """
    variable = _lookup(kind)
    points = np.asarray(universe, dtype=np.float64).ravel()
    return {
        fuzzy_set.name: np.fromiter(
            (fuzzy_set.degree(float(x)) for x in points),
            dtype=np.float64,
            count=points.size,
        )
        for fuzzy_set in (variable.low, variable.medium, variable.high)
    }
