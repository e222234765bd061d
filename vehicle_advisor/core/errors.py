"""Tagged error values returned by the recommendation engine.

The engine reports user-facing failures as values rather than raising, so
callers can pattern-match on the outcome::

    match recommend(request):
        case RecommendationResult() as result:
            ...
        case InsufficientLocationData() | NoSuitableVehicle() as error:
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class RecommendationError:
    """Base class for tagged recommendation errors."""

    kind: ClassVar[str] = "error"

    @property
    def message(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class InsufficientLocationData(RecommendationError):
    """One or more of the three required points is missing or malformed.

    Attributes:
        missing: Labels of the offending points, in request order.
    """

    missing: tuple[str, ...]
    kind: ClassVar[str] = "insufficient_location_data"

    @property
    def message(self) -> str:
        return (
            "Not enough location data to provide a recommendation. "
            "Please select all three points: house, workplace and holiday "
            f"(missing or invalid: {', '.join(self.missing)})."
        )


@dataclass(frozen=True)
class NoSuitableVehicle(RecommendationError):
    """No catalog entry satisfies the combined range and seat requirement.

    Attributes:
        total_distance: Distance in km the vehicle would need to cover.
        min_seats: Requested minimum seat count.
    """

    total_distance: float
    min_seats: int
    kind: ClassVar[str] = "no_suitable_vehicle"

    @property
    def message(self) -> str:
        return (
            f"No vehicle in the catalog covers {self.total_distance:.2f} km "
            f"with at least {self.min_seats} seats. "
            "Try adjusting your preferences."
        )


class RecommendationFailed(Exception):
    """Raised by :func:`recommend_or_raise` when the engine returns an error."""

    def __init__(self, error: RecommendationError) -> None:
        super().__init__(error.message)
        self.error = error
