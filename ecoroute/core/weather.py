"""Weather snapshot model and free-text condition classification.

Weather providers describe conditions with loose strings such as
``"Light Rain"`` or ``"Partly Cloudy"``.  All substring matching on those
strings goes through :func:`classify_condition`, so replacing the free text
with a structured field later only touches this module.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ecoroute.core.errors import InvalidInputError


@dataclass(frozen=True)
class ConditionFlags:
    """Keywords found in a weather condition string.

    Attributes:
        rain: Condition mentions rain.
        snow: Condition mentions snow.
        wind: Condition mentions wind.
        cloud: Condition mentions cloud.
    """

    rain: bool = False
    snow: bool = False
    wind: bool = False
    cloud: bool = False

    @property
    def wet(self) -> bool:
        """True for rain or snow."""
        return self.rain or self.snow


def classify_condition(condition: str) -> ConditionFlags:
    """Classify a free-text weather condition, case-insensitively.

    Args:
        condition: Provider description, e.g. ``"Heavy Snow"``.

    Returns:
        The keyword flags present in *condition*.
    """
    text = condition.lower()
    return ConditionFlags(
        rain="rain" in text,
        snow="snow" in text,
        wind="wind" in text,
        cloud="cloud" in text,
    )


@dataclass(frozen=True)
class WeatherSnapshot:
    """Weather at the time a route is evaluated.

    Attributes:
        temperature: Air temperature in degrees Celsius.
        wind_speed: Wind speed in km/h (>= 0).
        condition: Free-text classification, e.g. ``"Clear"`` or ``"Rain"``.
        humidity: Relative humidity in percent (0-100).
    """

    temperature: float
    wind_speed: float
    condition: str = "Clear"
    humidity: float = 50.0

    def __post_init__(self) -> None:
        """Validate weather parameters."""
        if not math.isfinite(self.temperature):
            raise InvalidInputError("temperature must be finite.")
        if not math.isfinite(self.wind_speed) or self.wind_speed < 0.0:
            raise InvalidInputError("wind_speed must be finite and >= 0.")
        if not self.condition:
            raise InvalidInputError("condition must not be empty.")
        if not 0.0 <= self.humidity <= 100.0:
            raise InvalidInputError("humidity must be between 0 and 100.")

    @property
    def flags(self) -> ConditionFlags:
        """Keyword classification of :attr:`condition`."""
        return classify_condition(self.condition)
