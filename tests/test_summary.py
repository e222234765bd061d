"""Tests for summary and result-panel formatting."""

import pytest

from vehicle_advisor.core.request import PreferenceSet
from vehicle_advisor.core.summary import (
    build_summary,
    family_framing,
    format_cost,
    format_range,
    format_rating,
    trunk_framing,
)
from vehicle_advisor.core.vehicle import VehicleRecord

_PRIMARY = VehicleRecord(name="Toyota Sienna Hybrid", type="hybrid", range=1070.0, seats=8)
_RUNNER_UP = VehicleRecord(name="Toyota Prius", type="hybrid", range=1030.0, seats=5)


def _summary(has_kids: bool = True, trunk_preference: bool = True) -> str:
    return build_summary(
        commute_distance=13.4321,
        holiday_distance=559.1262,
        total_distance=572.5583,
        primary=_PRIMARY,
        runner_up=_RUNNER_UP,
        preferences=PreferenceSet(
            min_seats=5, has_kids=has_kids, trunk_preference=trunk_preference
        ),
    )


def test_summary_reports_all_figures() -> None:
    text = _summary()
    assert "13.43 km" in text
    assert "559.13 km" in text
    assert "572.56 km" in text
    assert "Toyota Sienna Hybrid" in text
    assert "1070 km" in text
    assert "8 seats" in text
    assert "seating requirement of 5 seats" in text
    assert "Toyota Prius" in text


def test_summary_reflects_preferences() -> None:
    both = _summary(has_kids=True, trunk_preference=True)
    assert "family-friendly features" in both
    assert "ample trunk space" in both

    neither = _summary(has_kids=False, trunk_preference=False)
    assert "a compact design" in neither
    assert "a sportier look" in neither
    assert "family-friendly" not in neither


def test_summary_deterministic() -> None:
    assert _summary() == _summary()


def test_framing_helpers() -> None:
    assert family_framing(True) == "family-friendly features"
    assert family_framing(False) == "a compact design"
    assert trunk_framing(True) == "ample trunk space"
    assert trunk_framing(False) == "a sportier look"


@pytest.mark.parametrize(
    "rating, stars",
    [(1, "★☆☆☆☆"), (3, "★★★☆☆"), (5, "★★★★★")],
)
def test_format_rating(rating: int, stars: str) -> None:
    assert format_rating(rating) == stars


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_format_rating_out_of_range(rating: int) -> None:
    with pytest.raises(ValueError):
        format_rating(rating)


def test_format_cost() -> None:
    assert format_cost(114.5) == "$114.50"
    assert format_cost(1234.567) == "$1,234.57"


@pytest.mark.parametrize(
    "value, text",
    [(1070.0, "1070"), (1234567.0, "1234567"), (629.5, "629.5"), (700, "700")],
)
def test_format_range(value: float, text: str) -> None:
    """Ranges are printed in full, never in exponent notation."""
    assert format_range(value) == text


def test_summary_prints_large_range_in_full() -> None:
    primary = VehicleRecord(name="Endurance", type="electric", range=1234567.0, seats=5)
    text = build_summary(
        commute_distance=10.0,
        holiday_distance=20.0,
        total_distance=30.0,
        primary=primary,
        runner_up=primary,
        preferences=PreferenceSet(min_seats=5),
    )
    assert "a range of 1234567 km" in text
    assert "e+" not in text
