"""Geographic point model for the vehicle recommendation engine."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Point:
    """A coordinate pair in decimal degrees.

    Attributes:
        lat: Latitude in degrees (-90.0 to 90.0).
        lng: Longitude in degrees (-180.0 to 180.0).
    """

    lat: float
    lng: float

    def as_tuple(self) -> tuple[float, float]:
        """Return the point as a ``(lat, lng)`` tuple."""
        return (self.lat, self.lng)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_point(value: Any) -> Point | None:
    """Convert a caller-supplied location into a :class:`Point`.

    Accepted shapes are a :class:`Point`, a ``(lat, lng)`` pair, or a
    mapping with ``lat`` and ``lng`` keys (the shape map widgets emit).

    Args:
        value: The location to convert.

    Returns:
        The validated point, or ``None`` if *value* is absent, has the
        wrong shape, holds non-finite numbers, or lies outside the valid
        latitude/longitude ranges.
    """
    if value is None:
        return None

    if isinstance(value, Point):
        lat, lng = value.lat, value.lng
    elif isinstance(value, Mapping):
        if "lat" not in value or "lng" not in value:
            return None
        lat, lng = value["lat"], value["lng"]
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 2:
            return None
        lat, lng = value[0], value[1]
    else:
        return None

    if not (_is_number(lat) and _is_number(lng)):
        return None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        return None

    return Point(lat=float(lat), lng=float(lng))
