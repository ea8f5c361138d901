"""Route energy estimation for the EcoRoute core.

The estimate combines a flat per-kilometre consumption with additive
climbing and traffic terms, then scales the sum by the fuzzy
environmental multiplier::

    energy = (distance * base_efficiency
              + elevation_gain * ELEVATION_FACTOR
              + traffic_delay * TRAFFIC_FACTOR) * multiplier

The breakdown variant reports the same total but decomposes it using the
vehicle's own efficiency for the base term.  The components therefore do
not generally sum to the total; callers display them as an indicative
split only.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.inference import fuzzy_energy_multiplier
from ecoroute.core.rounding import round_half_away
from ecoroute.core.route import BALANCED, RouteType
from ecoroute.core.vehicle import VehicleState
from ecoroute.core.weather import WeatherSnapshot

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ELEVATION_FACTOR: float = 0.002  # kWh per metre of climb
TRAFFIC_FACTOR: float = 0.05  # kWh per minute of traffic delay
CLIMATE_CONTROL_FACTOR: float = 0.01  # kWh per km with heating or cooling on
CLIMATE_HOT_ABOVE: float = 30.0  # degC
CLIMATE_COLD_BELOW: float = 15.0  # degC


def _validate_route_inputs(distance: float, elevation_gain: float, traffic_delay: float) -> None:
    if not math.isfinite(distance) or distance <= 0.0:
        raise InvalidInputError("distance must be finite and > 0.")
    if not math.isfinite(elevation_gain) or elevation_gain < 0.0:
        raise InvalidInputError("elevation_gain must be finite and >= 0.")
    if not math.isfinite(traffic_delay) or traffic_delay < 0.0:
        raise InvalidInputError("traffic_delay must be finite and >= 0.")


# ---------------------------------------------------------------------------
# Total energy
# ---------------------------------------------------------------------------


def estimate_energy(
    distance: float,
    elevation_gain: float,
    traffic_delay: float,
    weather: WeatherSnapshot,
    route_type: RouteType = BALANCED,
) -> float:
    """Predict the energy a route will use.

    Args:
        distance: Route length in km (> 0).
        elevation_gain: Cumulative climb in metres (>= 0).
        traffic_delay: Expected traffic delay in minutes (>= 0).
        weather: Conditions along the route.
        route_type: Route variant supplying the base consumption.

    Returns:
        Predicted energy in kWh, rounded to one decimal place.

    Raises:
        InvalidInputError: If any route figure is out of range.
    """
    _validate_route_inputs(distance, elevation_gain, traffic_delay)

    energy = distance * route_type.base_efficiency
    energy += elevation_gain * ELEVATION_FACTOR
    energy += traffic_delay * TRAFFIC_FACTOR

    multiplier = fuzzy_energy_multiplier(
        weather.temperature, weather.wind_speed, traffic_delay, elevation_gain
    )
    logger.debug(
        "energy estimate: %s route %.1f km, raw %.3f kWh, multiplier %.4f",
        route_type.name,
        distance,
        energy,
        multiplier,
    )
    return round_half_away(energy * multiplier, 1)


# ---------------------------------------------------------------------------
# Breakdown
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EnergyBreakdown:
    """Decomposition of a route's energy estimate, all in kWh.

    Attributes:
        total: Same value as :func:`estimate_energy` for the route.
        base: Rolling consumption at the vehicle's own efficiency.
        elevation: Climbing term.
        traffic: Stop-and-go term.
        weather: Extra base consumption implied by the fuzzy multiplier.
        climate_control: Heating or cooling load.
    """

    total: float
    base: float
    elevation: float
    traffic: float
    weather: float
    climate_control: float

    def as_dict(self) -> dict[str, float]:
        return {
            "total": self.total,
            "base": self.base,
            "elevation": self.elevation,
            "traffic": self.traffic,
            "weather": self.weather,
            "climate_control": self.climate_control,
        }


def climate_control_energy(distance: float, temperature: float) -> float:
    """Heating or cooling energy in kWh; zero between 15 and 30 degC inclusive."""
    if temperature > CLIMATE_HOT_ABOVE or temperature < CLIMATE_COLD_BELOW:
        return distance * CLIMATE_CONTROL_FACTOR
    return 0.0


def estimate_energy_breakdown(
    distance: float,
    elevation_gain: float,
    traffic_delay: float,
    vehicle: VehicleState,
    weather: WeatherSnapshot,
    route_type: RouteType = BALANCED,
) -> EnergyBreakdown:
    """Predict route energy and split it into contributing terms.

    Each component is rounded to one decimal place.  ``total`` comes from
    :func:`estimate_energy` and uses the route-type consumption, while
    ``base`` uses ``vehicle.efficiency``.

    Args:
        distance: Route length in km (> 0).
        elevation_gain: Cumulative climb in metres (>= 0).
        traffic_delay: Expected traffic delay in minutes (>= 0).
        vehicle: Vehicle whose efficiency drives the base term.
        weather: Conditions along the route.
        route_type: Route variant used for the total.

    Returns:
        An :class:`EnergyBreakdown`.
    """
    total = estimate_energy(distance, elevation_gain, traffic_delay, weather, route_type)

    base = distance * vehicle.efficiency / 100.0
    multiplier = fuzzy_energy_multiplier(
        weather.temperature, weather.wind_speed, traffic_delay, elevation_gain
    )

    return EnergyBreakdown(
        total=total,
        base=round_half_away(base, 1),
        elevation=round_half_away(elevation_gain * ELEVATION_FACTOR, 1),
        traffic=round_half_away(traffic_delay * TRAFFIC_FACTOR, 1),
        weather=round_half_away(base * (multiplier - 1.0), 1),
        climate_control=round_half_away(
            climate_control_energy(distance, weather.temperature), 1
        ),
    )


# ---------------------------------------------------------------------------
# Battery bookkeeping
# ---------------------------------------------------------------------------


def consumption_pct(vehicle: VehicleState, energy_usage: float) -> float:
    """Express an energy amount as a share of the vehicle's pack, in percent."""
    if energy_usage < 0.0:
        raise InvalidInputError("energy_usage must be >= 0.")
    return energy_usage / vehicle.max_battery_capacity * 100.0


def range_after_trip(vehicle: VehicleState, energy_usage: float) -> int:
    """Remaining range in km after using *energy_usage* kWh.

    The energy is converted to distance at the vehicle's efficiency and
    deducted from :attr:`VehicleState.current_range`.  The result is
    floored at zero and rounded to the nearest kilometre.

    Raises:
        InvalidInputError: If *energy_usage* is negative.
    """
    if energy_usage < 0.0:
        raise InvalidInputError("energy_usage must be >= 0.")
    used_range = energy_usage / vehicle.efficiency * 100.0
    return int(round_half_away(max(0.0, vehicle.current_range - used_range)))
