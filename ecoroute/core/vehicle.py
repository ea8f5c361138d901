"""Vehicle state model for the EcoRoute estimation core."""

import math
from dataclasses import dataclass

from ecoroute.core.errors import InvalidInputError


@dataclass(frozen=True)
class VehicleState:
    """Battery and efficiency figures reported by the vehicle.

    Attributes:
        battery_level: State of charge in percent (0-100).
        max_battery_capacity: Usable pack capacity in kWh (> 0).
        efficiency: Average consumption in kWh per 100 km (> 0).
        range: Displayed range in km at the current charge (>= 0).
            Zero means the vehicle did not report one.
        name: Optional model label.
    """

    battery_level: float
    max_battery_capacity: float
    efficiency: float
    range: float
    name: str = ""

    def __post_init__(self) -> None:
        """Validate vehicle parameters."""
        if not 0.0 <= self.battery_level <= 100.0:
            raise InvalidInputError("battery_level must be between 0 and 100.")
        if not math.isfinite(self.max_battery_capacity) or self.max_battery_capacity <= 0.0:
            raise InvalidInputError("max_battery_capacity must be finite and > 0.")
        if not math.isfinite(self.efficiency) or self.efficiency <= 0.0:
            raise InvalidInputError("efficiency must be finite and > 0.")
        if not math.isfinite(self.range) or self.range < 0.0:
            raise InvalidInputError("range must be finite and >= 0.")

    @property
    def available_energy(self) -> float:
        """Energy left in the pack in kWh."""
        return self.max_battery_capacity * self.battery_level / 100.0

    @property
    def current_range(self) -> float:
        """Range in km at the current charge.

        The displayed :attr:`range` when reported, otherwise the distance
        :attr:`available_energy` covers at :attr:`efficiency`.
        """
        if self.range > 0.0:
            return self.range
        return self.available_energy / self.efficiency * 100.0
