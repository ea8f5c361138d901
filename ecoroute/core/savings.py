"""CO2 and running-cost savings of an EV trip against a petrol car."""

from ecoroute.core.errors import InvalidInputError
from ecoroute.core.rounding import round_half_away

# Petrol car ~120 g/km against ~85 g/km for an EV on the Indian grid mix.
CO2_SAVINGS_PER_KM: float = 0.035  # kg

DEFAULT_ELECTRICITY_RATE: float = 8.0  # currency per kWh
DEFAULT_PETROL_RATE: float = 95.0  # currency per litre
DEFAULT_PETROL_EFFICIENCY: float = 12.0  # km per litre
DEFAULT_EV_EFFICIENCY: float = 6.0  # km per kWh


def co2_savings(distance: float) -> float:
    """CO2 avoided over *distance* km, in kg rounded to one decimal place."""
    if distance < 0.0:
        raise InvalidInputError("distance must be >= 0.")
    return round_half_away(distance * CO2_SAVINGS_PER_KM, 1)


def cost_savings(
    distance: float,
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
    petrol_rate: float = DEFAULT_PETROL_RATE,
    petrol_eff: float = DEFAULT_PETROL_EFFICIENCY,
    ev_eff: float = DEFAULT_EV_EFFICIENCY,
) -> float:
    """Fuel cost minus electricity cost for a trip, rounded to a whole unit.

    Args:
        distance: Trip length in km (>= 0).
        electricity_rate: Price per kWh.
        petrol_rate: Price per litre of petrol.
        petrol_eff: Petrol car economy in km per litre (> 0).
        ev_eff: EV economy in km per kWh (> 0).

    Raises:
        InvalidInputError: If an argument is out of range.
    """
    if distance < 0.0:
        raise InvalidInputError("distance must be >= 0.")
    if petrol_eff <= 0.0 or ev_eff <= 0.0:
        raise InvalidInputError("petrol_eff and ev_eff must be > 0.")
    if electricity_rate < 0.0 or petrol_rate < 0.0:
        raise InvalidInputError("rates must be >= 0.")

    petrol_cost = distance / petrol_eff * petrol_rate
    electricity_cost = distance / ev_eff * electricity_rate
    return round_half_away(petrol_cost - electricity_cost)
