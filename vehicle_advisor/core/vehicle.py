"""Vehicle catalog record for the recommendation engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Vehicle types
# ---------------------------------------------------------------------------

ELECTRIC: str = "electric"
HYBRID: str = "hybrid"
SUV: str = "suv"
SEDAN: str = "sedan"
HATCHBACK: str = "hatchback"
MINIVAN: str = "minivan"
PICKUP: str = "pickup"
SPORTS: str = "sports"

VEHICLE_TYPES: frozenset[str] = frozenset(
    {ELECTRIC, HYBRID, SUV, SEDAN, HATCHBACK, MINIVAN, PICKUP, SPORTS}
)


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VehicleRecord:
    """Immutable catalog entry describing one vehicle.

    Attributes:
        name: Unique display label.
        type: Drivetrain / body category, one of :data:`VEHICLE_TYPES`.
        range: Maximum distance in km on one charge or tank (> 0).
        seats: Passenger capacity (>= 1).
    """

    name: str
    type: str
    range: float
    seats: int

    def __post_init__(self) -> None:
        """Validate vehicle parameters.

        An integer ``range`` is stored as ``float``.

        Raises:
            ValueError: If any field has the wrong type or is out of range.
        """
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Vehicle name must be a non-empty string.")
        if not isinstance(self.type, str) or self.type not in VEHICLE_TYPES:
            raise ValueError(
                f"Unknown vehicle type '{self.type}' for {self.name}; "
                f"expected one of {sorted(VEHICLE_TYPES)}."
            )
        if isinstance(self.range, bool) or not isinstance(self.range, (int, float)):
            raise ValueError(
                f"range must be numeric, got {type(self.range).__name__}."
            )
        if not math.isfinite(self.range):
            raise ValueError(f"range must be finite, got {self.range}.")
        if self.range <= 0.0:
            raise ValueError(f"range must be > 0, got {self.range}.")
        if isinstance(self.seats, bool) or not isinstance(self.seats, int):
            raise ValueError(
                f"seats must be an integer, got {type(self.seats).__name__}."
            )
        if self.seats < 1:
            raise ValueError(f"seats must be >= 1, got {self.seats}.")
        object.__setattr__(self, "range", float(self.range))
