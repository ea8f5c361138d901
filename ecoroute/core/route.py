"""Route type and route metrics models.

Each route type carries the flat per-kilometre consumption used by the
energy estimator.  Eco routes trade time for a gentler driving profile,
fast routes the opposite.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ecoroute.core.errors import InvalidInputError

# ---------------------------------------------------------------------------
# Route type
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouteType:
    """Immutable description of a route variant.

    Attributes:
        name: Variant label (e.g. ``"ECO"``).
        base_efficiency: Baseline consumption in kWh per km.
    """

    name: str
    base_efficiency: float

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidInputError("Route type name must be non-empty.")
        if self.base_efficiency <= 0.0:
            raise InvalidInputError("base_efficiency must be > 0.")


# Pre-defined route types ----------------------------------------------------

ECO = RouteType(name="ECO", base_efficiency=0.15)
BALANCED = RouteType(name="BALANCED", base_efficiency=0.16)
FAST = RouteType(name="FAST", base_efficiency=0.18)

ROUTE_TYPES: dict[str, RouteType] = {rt.name: rt for rt in (ECO, BALANCED, FAST)}


def route_type_from_name(name: str) -> RouteType:
    """Look up a pre-defined route type by name, case-insensitively.

    Raises:
        InvalidInputError: If *name* is not one of ECO, BALANCED, FAST.
    """
    try:
        return ROUTE_TYPES[name.upper()]
    except KeyError:
        raise InvalidInputError(
            f"Unknown route type '{name}'; expected one of {sorted(ROUTE_TYPES)}"
        ) from None


# ---------------------------------------------------------------------------
# Route metrics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouteMetrics:
    """Already-resolved figures for a candidate route.

    Attributes:
        distance: Route length in km (> 0).
        elevation_gain: Cumulative climb in metres (>= 0).
        traffic_delay: Expected delay over free-flow time in minutes (>= 0).
        route_type: Variant used to pick the base consumption.
    """

    distance: float
    elevation_gain: float = 0.0
    traffic_delay: float = 0.0
    route_type: RouteType = BALANCED

    def __post_init__(self) -> None:
        """Validate route parameters."""
        if not math.isfinite(self.distance) or self.distance <= 0.0:
            raise InvalidInputError("distance must be finite and > 0.")
        if not math.isfinite(self.elevation_gain) or self.elevation_gain < 0.0:
            raise InvalidInputError("elevation_gain must be finite and >= 0.")
        if not math.isfinite(self.traffic_delay) or self.traffic_delay < 0.0:
            raise InvalidInputError("traffic_delay must be finite and >= 0.")
