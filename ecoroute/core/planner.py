"""Route evaluation and comparison for the EcoRoute core.

Bundles every estimator into a single per-route result and ranks a set of
candidate routes in a :class:`pandas.DataFrame`, ready for a route picker
to display.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass

import pandas as pd

from ecoroute.core.charging import ChargingDecision, charging_needed, charging_stops
from ecoroute.core.eco_score import eco_score
from ecoroute.core.energy import consumption_pct, estimate_energy, range_after_trip
from ecoroute.core.errors import InvalidInputError
from ecoroute.core.route import RouteMetrics
from ecoroute.core.savings import co2_savings, cost_savings
from ecoroute.core.vehicle import VehicleState
from ecoroute.core.weather import WeatherSnapshot

logger = logging.getLogger(__name__)

_COLUMNS: list[str] = [
    "route",
    "route_type",
    "distance",
    "energy_usage",
    "eco_score",
    "co2_saved",
    "cost_saved",
    "charging_stops",
    "charging_needed",
    "charging_confidence",
    "range_after_trip",
]


@dataclass(frozen=True)
class RouteEvaluation:
    """Every estimate for one candidate route.

    Attributes:
        energy_usage: Predicted energy in kWh.
        eco_score: 0-100 efficiency rating.
        co2_saved: CO2 avoided against a petrol car, in kg.
        cost_saved: Running-cost saving against a petrol car.
        charging_stops: Intermediate stops needed at the current charge.
        charging: Pre-trip charging recommendation.
        range_after_trip: Range left on arrival in km.
    """

    energy_usage: float
    eco_score: int
    co2_saved: float
    cost_saved: float
    charging_stops: int
    charging: ChargingDecision
    range_after_trip: int


def evaluate_route(
    route: RouteMetrics,
    weather: WeatherSnapshot,
    vehicle: VehicleState,
) -> RouteEvaluation:
    """Run all estimators for a single route.

    Charging stops and the range on arrival both start from
    :attr:`VehicleState.current_range`, which already reflects the current
    charge, so the stop planner is run at a 100 % battery level.
    """
    energy = estimate_energy(
        route.distance,
        route.elevation_gain,
        route.traffic_delay,
        weather,
        route.route_type,
    )

    return RouteEvaluation(
        energy_usage=energy,
        eco_score=eco_score(
            energy,
            route.distance,
            route.elevation_gain,
            route.traffic_delay,
            weather.condition,
        ),
        co2_saved=co2_savings(route.distance),
        cost_saved=cost_savings(route.distance),
        charging_stops=charging_stops(
            route.distance,
            vehicle.current_range,
            100.0,
            weather.condition,
        ),
        charging=charging_needed(
            vehicle.battery_level,
            route.distance,
            consumption_pct(vehicle, energy),
            weather.condition,
        ),
        range_after_trip=range_after_trip(vehicle, energy),
    )


def compare_routes(
    routes: Mapping[str, RouteMetrics],
    weather: WeatherSnapshot,
    vehicle: VehicleState,
) -> pd.DataFrame:
    """Evaluate and rank candidate routes.

    Args:
        routes: Candidate routes keyed by display name.
        weather: Conditions shared by all candidates.
        vehicle: Vehicle making the trip.

    Returns:
        One row per route with columns ``route``, ``route_type``,
        ``distance``, ``energy_usage``, ``eco_score``, ``co2_saved``,
        ``cost_saved``, ``charging_stops``, ``charging_needed``,
        ``charging_confidence`` and ``range_after_trip``; sorted by
        eco-score (best first), ties broken by lower energy.

    Raises:
        InvalidInputError: If *routes* is empty.
    """
    if not routes:
        raise InvalidInputError("routes must contain at least one candidate.")

    rows: list[dict[str, object]] = []
    for name, route in routes.items():
        evaluation = evaluate_route(route, weather, vehicle)
        row = asdict(evaluation)
        charging = row.pop("charging")
        row.update(
            route=name,
            route_type=route.route_type.name,
            distance=route.distance,
            charging_needed=charging["needed"],
            charging_confidence=charging["confidence"],
        )
        rows.append(row)
        logger.debug("route %s: %s", name, row)

    df = pd.DataFrame(rows, columns=_COLUMNS)
    return df.sort_values(
        ["eco_score", "energy_usage"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)
