"""Request value objects for the recommendation engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PreferenceSet:
    """User preferences supplied with every recommendation request.

    Attributes:
        min_seats: Minimum acceptable seating capacity (>= 1).
        has_kids: Whether the household travels with children.
        trunk_preference: Whether ample trunk space is wanted.
    """

    min_seats: int = 5
    has_kids: bool = False
    trunk_preference: bool = False

    def __post_init__(self) -> None:
        """Validate preference values."""
        if isinstance(self.min_seats, bool) or not isinstance(self.min_seats, int):
            raise ValueError("min_seats must be an integer.")
        if self.min_seats < 1:
            raise ValueError("min_seats must be >= 1.")
        if not isinstance(self.has_kids, bool):
            raise ValueError("has_kids must be a bool.")
        if not isinstance(self.trunk_preference, bool):
            raise ValueError("trunk_preference must be a bool.")


@dataclass(frozen=True)
class RecommendationRequest:
    """Three ordered locations plus preferences.

    Locations are kept as supplied by the caller (``Point``, ``(lat, lng)``
    pair, ``{"lat": .., "lng": ..}`` mapping, or ``None``); the engine
    validates them before computing anything.

    Attributes:
        house: Home location.
        workplace: Daily commute destination.
        holiday: Occasional long-trip destination.
        preferences: Seat and lifestyle preferences.
    """

    house: Any
    workplace: Any
    holiday: Any
    preferences: PreferenceSet = PreferenceSet()

    @classmethod
    def from_points(
        cls,
        points: Sequence[Any],
        preferences: PreferenceSet | None = None,
    ) -> RecommendationRequest:
        """Build a request from captured points in house, workplace, holiday order.

        Missing trailing points become ``None`` so that the engine reports
        insufficient location data instead of failing here.

        Raises:
            ValueError: If more than three points are supplied.
        """
        if len(points) > 3:
            raise ValueError(
                "Expected at most 3 points (house, workplace, holiday), "
                f"got {len(points)}."
            )
        padded = list(points) + [None] * (3 - len(points))
        return cls(
            house=padded[0],
            workplace=padded[1],
            holiday=padded[2],
            preferences=preferences if preferences is not None else PreferenceSet(),
        )
