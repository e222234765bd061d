"""Core recommendation modules for the vehicle advisor."""

from vehicle_advisor.core.distance import EARTH_RADIUS_KM, haversine
from vehicle_advisor.core.engine import (
    CARBON_RATINGS,
    COST_FACTOR,
    RUNNER_UP_PREMIUM,
    PriceBreakdown,
    RecommendationOutcome,
    RecommendationResult,
    carbon_rating,
    filter_candidates,
    price_breakdown,
    rank_candidates,
    recommend,
    recommend_or_raise,
)
from vehicle_advisor.core.errors import (
    InsufficientLocationData,
    NoSuitableVehicle,
    RecommendationError,
    RecommendationFailed,
)
from vehicle_advisor.core.point import Point, coerce_point
from vehicle_advisor.core.request import PreferenceSet, RecommendationRequest
from vehicle_advisor.core.summary import (
    build_summary,
    format_cost,
    format_range,
    format_rating,
)
from vehicle_advisor.core.vehicle import VEHICLE_TYPES, VehicleRecord

__all__ = [
    "CARBON_RATINGS",
    "COST_FACTOR",
    "EARTH_RADIUS_KM",
    "InsufficientLocationData",
    "NoSuitableVehicle",
    "Point",
    "PreferenceSet",
    "PriceBreakdown",
    "RUNNER_UP_PREMIUM",
    "RecommendationError",
    "RecommendationFailed",
    "RecommendationOutcome",
    "RecommendationRequest",
    "RecommendationResult",
    "VEHICLE_TYPES",
    "VehicleRecord",
    "build_summary",
    "carbon_rating",
    "coerce_point",
    "filter_candidates",
    "format_cost",
    "format_range",
    "format_rating",
    "haversine",
    "price_breakdown",
    "rank_candidates",
    "recommend",
    "recommend_or_raise",
]
