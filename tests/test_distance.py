"""Tests for the haversine distance module."""

import pytest

from vehicle_advisor.core.distance import EARTH_RADIUS_KM, haversine
from vehicle_advisor.core.point import Point

SAN_FRANCISCO = Point(lat=37.7749, lng=-122.4194)
OAKLAND = Point(lat=37.8044, lng=-122.2712)
LOS_ANGELES = Point(lat=34.0522, lng=-118.2437)

_SAMPLE_POINTS: list[Point] = [
    SAN_FRANCISCO,
    OAKLAND,
    LOS_ANGELES,
    Point(lat=51.5074, lng=-0.1278),
    Point(lat=-33.8688, lng=151.2093),
    Point(lat=0.0, lng=0.0),
    Point(lat=90.0, lng=0.0),
]


def test_zero_distance_identity() -> None:
    """Distance from a point to itself must be exactly zero."""
    for p in _SAMPLE_POINTS:
        assert haversine(p, p) == 0.0


def test_distance_symmetry() -> None:
    """haversine(A, B) must equal haversine(B, A)."""
    for a in _SAMPLE_POINTS:
        for b in _SAMPLE_POINTS:
            assert haversine(a, b) == pytest.approx(haversine(b, a), rel=1e-12)


def test_distance_non_negative() -> None:
    """Distances are never negative."""
    for a in _SAMPLE_POINTS:
        for b in _SAMPLE_POINTS:
            assert haversine(a, b) >= 0.0


def test_known_city_distances() -> None:
    """SF to Oakland is ~13 km and SF to LA is ~559 km."""
    assert haversine(SAN_FRANCISCO, OAKLAND) == pytest.approx(13.4, abs=0.5)
    assert haversine(SAN_FRANCISCO, LOS_ANGELES) == pytest.approx(559.1, abs=1.0)


def test_quarter_meridian() -> None:
    """Equator to pole is a quarter of the great circle."""
    d = haversine(Point(lat=0.0, lng=0.0), Point(lat=90.0, lng=0.0))
    assert d == pytest.approx(EARTH_RADIUS_KM * 3.141592653589793 / 2.0, rel=1e-9)


def test_antipodal_points_half_circumference() -> None:
    """Antipodal points are half the circumference apart."""
    d = haversine(Point(lat=0.0, lng=0.0), Point(lat=0.0, lng=180.0))
    assert d == pytest.approx(EARTH_RADIUS_KM * 3.141592653589793, rel=1e-9)
