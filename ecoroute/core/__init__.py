"""Core estimation modules for the EcoRoute engine."""

from ecoroute.core.charging import (
    ChargingDecision,
    charging_needed,
    charging_stops,
    effective_range,
    range_weather_factor,
)
from ecoroute.core.eco_score import eco_score, weather_multiplier
from ecoroute.core.energy import (
    EnergyBreakdown,
    consumption_pct,
    estimate_energy,
    estimate_energy_breakdown,
    range_after_trip,
)
from ecoroute.core.errors import InvalidInputError
from ecoroute.core.inference import (
    FuzzyInference,
    defuzzify,
    fuzzy_energy_multiplier,
    infer_energy_multiplier,
)
from ecoroute.core.membership import (
    MembershipDegree,
    battery_membership,
    elevation_membership,
    membership,
    membership_curve,
    temperature_membership,
    traffic_membership,
    wind_membership,
)
from ecoroute.core.planner import RouteEvaluation, compare_routes, evaluate_route
from ecoroute.core.route import BALANCED, ECO, FAST, RouteMetrics, RouteType
from ecoroute.core.rules import MULTIPLIERS, OutputMembership, evaluate_rules
from ecoroute.core.savings import co2_savings, cost_savings
from ecoroute.core.vehicle import VehicleState
from ecoroute.core.weather import ConditionFlags, WeatherSnapshot, classify_condition

__all__ = [
    "BALANCED",
    "ChargingDecision",
    "ConditionFlags",
    "ECO",
    "EnergyBreakdown",
    "FAST",
    "FuzzyInference",
    "InvalidInputError",
    "MULTIPLIERS",
    "MembershipDegree",
    "OutputMembership",
    "RouteEvaluation",
    "RouteMetrics",
    "RouteType",
    "VehicleState",
    "WeatherSnapshot",
    "battery_membership",
    "charging_needed",
    "charging_stops",
    "classify_condition",
    "co2_savings",
    "compare_routes",
    "consumption_pct",
    "cost_savings",
    "defuzzify",
    "eco_score",
    "effective_range",
    "elevation_membership",
    "estimate_energy",
    "estimate_energy_breakdown",
    "evaluate_route",
    "evaluate_rules",
    "fuzzy_energy_multiplier",
    "infer_energy_multiplier",
    "membership",
    "membership_curve",
    "range_after_trip",
    "range_weather_factor",
    "temperature_membership",
    "traffic_membership",
    "weather_multiplier",
    "wind_membership",
]
