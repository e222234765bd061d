"""Recommendation engine: distance, filtering, ranking, pricing and rating.

``recommend`` is a pure function.  Given three points and a
:class:`PreferenceSet` it computes the commute and holiday distances,
keeps the catalog entries that can cover their sum with enough seats,
ranks them by range and derives a price breakdown and carbon rating for
the winner.  User-facing failures are returned as tagged error values
(see :mod:`vehicle_advisor.core.errors`); only defects raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from vehicle_advisor.core.distance import haversine
from vehicle_advisor.core.errors import (
    InsufficientLocationData,
    NoSuitableVehicle,
    RecommendationError,
    RecommendationFailed,
)
from vehicle_advisor.core.point import Point, coerce_point
from vehicle_advisor.core.request import RecommendationRequest
from vehicle_advisor.core.summary import build_summary
from vehicle_advisor.core.vehicle import ELECTRIC, HYBRID, SUV, VehicleRecord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

COST_FACTOR: float = 0.2  # currency units per km
RUNNER_UP_PREMIUM: float = 1.1  # runner-up priced 10% above the primary

DEFAULT_CARBON_RATING: int = 1
CARBON_RATINGS: dict[str, int] = {
    ELECTRIC: 5,
    HYBRID: 3,
    SUV: 1,
}

_POINT_LABELS: tuple[str, ...] = ("house", "workplace", "holiday")

# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PriceBreakdown:
    """Estimated travel cost for the two recommended vehicles."""

    primary: float
    runner_up: float


@dataclass(frozen=True)
class RecommendationResult:
    """Outcome of a successful recommendation.

    Attributes:
        primary: Highest-range vehicle meeting the requirements.
        runner_up: Second-ranked vehicle, or *primary* if it was the
            only candidate.
        price_breakdown: Distance-based cost estimates.
        carbon_rating: 1 (combustion) to 5 (no combustion).
        summary: Human-readable explanation.
        commute_distance: House to workplace distance in km.
        holiday_distance: House to holiday distance in km.
        total_distance: Sum of commute and holiday distance in km.
        candidates: All ranked candidates, best first.
    """

    primary: VehicleRecord
    runner_up: VehicleRecord
    price_breakdown: PriceBreakdown
    carbon_rating: int
    summary: str
    commute_distance: float
    holiday_distance: float
    total_distance: float
    candidates: tuple[VehicleRecord, ...]


RecommendationOutcome = (
    RecommendationResult | InsufficientLocationData | NoSuitableVehicle
)

# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


def filter_candidates(
    catalog: Iterable[VehicleRecord],
    min_seats: int,
    total_distance: float,
) -> list[VehicleRecord]:
    """Return catalog entries with enough seats and range, in catalog order.

    Both bounds are inclusive.
    """
    return [
        vehicle
        for vehicle in catalog
        if vehicle.seats >= min_seats and vehicle.range >= total_distance
    ]


def rank_candidates(candidates: Sequence[VehicleRecord]) -> list[VehicleRecord]:
    """Sort candidates by range, longest first.

    ``sorted`` is stable, so vehicles with equal range keep their catalog
    order.
    """
    return sorted(candidates, key=lambda vehicle: vehicle.range, reverse=True)


def price_breakdown(total_distance: float) -> PriceBreakdown:
    """Compute the primary and runner-up cost for *total_distance* km."""
    primary_cost = total_distance * COST_FACTOR
    runner_up_cost = total_distance * COST_FACTOR * RUNNER_UP_PREMIUM
    return PriceBreakdown(primary=primary_cost, runner_up=runner_up_cost)


def carbon_rating(vehicle_type: str) -> int:
    """Map a vehicle type to its 1-5 carbon rating; unlisted types score 1."""
    return CARBON_RATINGS.get(vehicle_type, DEFAULT_CARBON_RATING)


def _validate_points(
    request: RecommendationRequest,
) -> tuple[Point, Point, Point] | InsufficientLocationData:
    raw = (request.house, request.workplace, request.holiday)
    points = [coerce_point(value) for value in raw]
    missing = tuple(
        label for label, point in zip(_POINT_LABELS, points) if point is None
    )
    if missing:
        return InsufficientLocationData(missing=missing)
    house, workplace, holiday = points
    return house, workplace, holiday


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def recommend(
    request: RecommendationRequest,
    catalog: Sequence[VehicleRecord] | None = None,
) -> RecommendationOutcome:
    """Recommend a primary and runner-up vehicle for *request*.

    Args:
        request: The three locations and user preferences.
        catalog: Vehicles to choose from.  Defaults to the process-wide
            catalog loaded from configuration.

    Returns:
        A :class:`RecommendationResult`, or
        :class:`InsufficientLocationData` when any point is missing or
        malformed, or :class:`NoSuitableVehicle` when no vehicle meets the
        seat and range requirement.
    """
    validated = _validate_points(request)
    if isinstance(validated, InsufficientLocationData):
        logger.info("Rejected request: %s", validated.message)
        return validated
    house, workplace, holiday = validated

    if catalog is None:
        # Deferred: config imports this package's vehicle module.
        from vehicle_advisor.config import default_catalog

        catalog = default_catalog()

    preferences = request.preferences
    commute_distance = haversine(house, workplace)
    holiday_distance = haversine(house, holiday)
    total_distance = commute_distance + holiday_distance
    logger.debug(
        "Distances: commute=%.2f km holiday=%.2f km total=%.2f km",
        commute_distance,
        holiday_distance,
        total_distance,
    )

    candidates = filter_candidates(catalog, preferences.min_seats, total_distance)
    logger.debug(
        "%d of %d vehicles have >= %d seats and >= %.2f km range",
        len(candidates),
        len(catalog),
        preferences.min_seats,
        total_distance,
    )
    if not candidates:
        error = NoSuitableVehicle(
            total_distance=total_distance,
            min_seats=preferences.min_seats,
        )
        logger.info("Rejected request: %s", error.message)
        return error

    ranked = rank_candidates(candidates)
    primary = ranked[0]
    runner_up = ranked[1] if len(ranked) > 1 else ranked[0]

    summary = build_summary(
        commute_distance=commute_distance,
        holiday_distance=holiday_distance,
        total_distance=total_distance,
        primary=primary,
        runner_up=runner_up,
        preferences=preferences,
    )

    return RecommendationResult(
        primary=primary,
        runner_up=runner_up,
        price_breakdown=price_breakdown(total_distance),
        carbon_rating=carbon_rating(primary.type),
        summary=summary,
        commute_distance=commute_distance,
        holiday_distance=holiday_distance,
        total_distance=total_distance,
        candidates=tuple(ranked),
    )


def recommend_or_raise(
    request: RecommendationRequest,
    catalog: Sequence[VehicleRecord] | None = None,
) -> RecommendationResult:
    """Like :func:`recommend`, but raise on a tagged error.

    Raises:
        RecommendationFailed: Wrapping the :class:`RecommendationError`.
    """
    outcome = recommend(request, catalog)
    if isinstance(outcome, RecommendationError):
        raise RecommendationFailed(outcome)
    return outcome
