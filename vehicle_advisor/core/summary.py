"""Natural-language report formatting for recommendation results.

Formatting is kept apart from the numeric core: every function here is a
pure transformation of already-computed figures into text.
"""

from __future__ import annotations

from vehicle_advisor.core.request import PreferenceSet
from vehicle_advisor.core.vehicle import VehicleRecord

MAX_RATING: int = 5

_SUMMARY_TEMPLATE: str = (
    "Based on your input, your daily commute is approximately {commute:.2f} km, "
    "and your holiday trip is around {holiday:.2f} km, totaling {total:.2f} km. "
    "We recommend the {primary_name} as your primary option because it offers "
    "a range of {primary_range} km and {primary_seats} seats, meeting your "
    "seating requirement of {min_seats} seats. Its design is well-suited for "
    "both daily commutes and longer trips. As a runner-up, we suggest the "
    "{runner_up_name}. Considering your preferences for {family_framing} and "
    "{trunk_framing}, this recommendation is tailored to your needs."
)


def family_framing(has_kids: bool) -> str:
    """Return the phrase reflecting the household's children preference."""
    return "family-friendly features" if has_kids else "a compact design"


def trunk_framing(trunk_preference: bool) -> str:
    """Return the phrase reflecting the trunk-space preference."""
    return "ample trunk space" if trunk_preference else "a sportier look"


def build_summary(
    commute_distance: float,
    holiday_distance: float,
    total_distance: float,
    primary: VehicleRecord,
    runner_up: VehicleRecord,
    preferences: PreferenceSet,
) -> str:
    """Assemble the recommendation paragraph.

    Args:
        commute_distance: House to workplace distance in km.
        holiday_distance: House to holiday distance in km.
        total_distance: Sum of both distances in km.
        primary: Top-ranked vehicle.
        runner_up: Second-ranked vehicle (may equal *primary*).
        preferences: The preferences the request was made with.

    Returns:
        A single deterministic paragraph.
    """
    return _SUMMARY_TEMPLATE.format(
        commute=commute_distance,
        holiday=holiday_distance,
        total=total_distance,
        primary_name=primary.name,
        primary_range=format_range(primary.range),
        primary_seats=primary.seats,
        min_seats=preferences.min_seats,
        runner_up_name=runner_up.name,
        family_framing=family_framing(preferences.has_kids),
        trunk_framing=trunk_framing(preferences.trunk_preference),
    )


def format_rating(rating: int) -> str:
    """Render a 1-5 carbon rating as filled and empty stars, e.g. ``★★★☆☆``."""
    if not 1 <= rating <= MAX_RATING:
        raise ValueError(f"rating must be between 1 and {MAX_RATING}, got {rating}.")
    return "★" * rating + "☆" * (MAX_RATING - rating)


def format_cost(value: float) -> str:
    """Render an estimated travel cost with two decimals."""
    return f"${value:,.2f}"


def format_range(value: float) -> str:
    """Render a range in km in full, without exponent notation.

    Whole numbers drop the decimal part (``1070``); fractional values keep
    their digits (``629.5``).
    """
    if float(value).is_integer():
        return f"{value:.0f}"
    return repr(float(value))
