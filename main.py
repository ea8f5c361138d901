"""CLI entrypoint for the EcoRoute estimation engine."""

from __future__ import annotations

import logging
import sys

from ecoroute import __version__
from ecoroute.config import load_vehicles
from ecoroute.core.energy import estimate_energy_breakdown
from ecoroute.core.inference import infer_energy_multiplier
from ecoroute.core.planner import compare_routes
from ecoroute.core.route import BALANCED, ECO, FAST, RouteMetrics
from ecoroute.core.weather import WeatherSnapshot


def main() -> None:
    """Run a demonstration of the route estimation core."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print(f"EcoRoute Estimation Engine v{__version__}")
    print("=" * 56)

    # -- Load vehicle presets -------------------------------------------------
    vehicles = load_vehicles()
    print(f"\nVehicle presets: {len(vehicles)} loaded")
    for i, name in enumerate(vehicles, start=1):
        print(f"  V{i:02d}: {name}")

    vehicle = next(iter(vehicles.values()))
    weather = WeatherSnapshot(temperature=32.0, wind_speed=12.0, condition="Light Rain", humidity=78.0)

    routes = {
        "Eco route": RouteMetrics(distance=48.0, elevation_gain=60.0, traffic_delay=3.0, route_type=ECO),
        "Fast route": RouteMetrics(distance=42.0, elevation_gain=140.0, traffic_delay=9.0, route_type=FAST),
        "Balanced route": RouteMetrics(
            distance=45.0, elevation_gain=90.0, traffic_delay=5.0, route_type=BALANCED
        ),
    }

    print(f"\nVehicle : {vehicle.name} ({vehicle.battery_level:.0f}% charge)")
    print(f"Weather : {weather.condition}, {weather.temperature:.1f} degC, wind {weather.wind_speed:.0f} km/h")
    print("-" * 56)

    # -- Fuzzy inference trace ------------------------------------------------
    best = routes["Eco route"]
    trace = infer_energy_multiplier(
        weather.temperature, weather.wind_speed, best.traffic_delay, best.elevation_gain
    )
    print("\nFired rules (eco route):")
    for rule, strength in trace.fired:
        print(f"  R{rule.number} [{strength:.2f}] {rule.description}")
    print(f"  -> energy multiplier {trace.multiplier:.3f}")

    breakdown = estimate_energy_breakdown(
        best.distance, best.elevation_gain, best.traffic_delay, vehicle, weather, best.route_type
    )
    print("\nEnergy breakdown (kWh):")
    for label, value in breakdown.as_dict().items():
        print(f"  {label:>15}: {value:6.1f}")

    # -- Route comparison -----------------------------------------------------
    print("\nRoute comparison:\n")
    print(compare_routes(routes, weather, vehicle).to_string(index=False))


if __name__ == "__main__":
    sys.exit(main() or 0)
