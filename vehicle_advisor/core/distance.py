"""Great-circle distance calculations."""

import math

from vehicle_advisor.core.point import Point

EARTH_RADIUS_KM: float = 6371.0


def haversine(p1: Point, p2: Point) -> float:
    """Return the great-circle distance between two points in kilometres.

    Uses the haversine formula on a sphere of radius
    :data:`EARTH_RADIUS_KM`:

        a = sin^2(dlat / 2) + cos(lat1) * cos(lat2) * sin^2(dlng / 2)
        d = 2 * R * atan2(sqrt(a), sqrt(1 - a))

    Args:
        p1: First point.
        p2: Second point.

    Returns:
        Distance in km (>= 0).
    """
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    d_lat = math.radians(p2.lat - p1.lat)
    d_lng = math.radians(p2.lng - p1.lng)

    a = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2.0) ** 2
    )
    # Rounding can push a marginally past 1.0 for antipodal points.
    a = min(1.0, a)
    return 2.0 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
