"""CLI entrypoint for the Vehicle Advisor recommendation engine."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vehicle_advisor import __version__
from vehicle_advisor.config import default_catalog, load_catalog
from vehicle_advisor.core.engine import RecommendationResult, recommend
from vehicle_advisor.core.errors import RecommendationError
from vehicle_advisor.core.point import Point
from vehicle_advisor.core.request import PreferenceSet, RecommendationRequest
from vehicle_advisor.core.summary import format_cost, format_range, format_rating
from vehicle_advisor.core.vehicle import VehicleRecord

# San Francisco -> Oakland commute, Los Angeles holiday.
_DEFAULT_HOUSE: str = "37.7749,-122.4194"
_DEFAULT_WORKPLACE: str = "37.8044,-122.2712"
_DEFAULT_HOLIDAY: str = "34.0522,-118.2437"


def _parse_point(text: str) -> Point:
    """Parse ``"LAT,LNG"`` into a :class:`Point`."""
    try:
        lat_text, lng_text = text.split(",")
        return Point(lat=float(lat_text), lng=float(lng_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected LAT,LNG in decimal degrees, got '{text}'"
        ) from exc


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend a vehicle for your commute and holiday trips.",
    )
    parser.add_argument("--house", type=_parse_point, default=_DEFAULT_HOUSE)
    parser.add_argument("--workplace", type=_parse_point, default=_DEFAULT_WORKPLACE)
    parser.add_argument("--holiday", type=_parse_point, default=_DEFAULT_HOLIDAY)
    parser.add_argument("--min-seats", type=_positive_int, default=5)
    parser.add_argument("--kids", action="store_true", help="household has kids")
    parser.add_argument("--trunk", action="store_true", help="need ample trunk space")
    parser.add_argument("--catalog", type=Path, default=None, help="catalog YAML file")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _print_vehicle(title: str, vehicle: VehicleRecord, cost: float) -> None:
    print(f"\n{title}")
    print(f"  Name      : {vehicle.name}")
    print(f"  Type      : {vehicle.type.capitalize()}")
    print(f"  Range     : {format_range(vehicle.range)} km")
    print(f"  Seats     : {vehicle.seats}")
    print(f"  Est. cost : {format_cost(cost)}")


def _print_result(result: RecommendationResult) -> None:
    print(f"\nCommute : {result.commute_distance:10.2f} km")
    print(f"Holiday : {result.holiday_distance:10.2f} km")
    print(f"Total   : {result.total_distance:10.2f} km")
    print("-" * 56)

    _print_vehicle("Primary option", result.primary, result.price_breakdown.primary)
    _print_vehicle(
        "Runner-up option", result.runner_up, result.price_breakdown.runner_up
    )

    print(f"\nEnvironmental rating: {format_rating(result.carbon_rating)}")
    print(f"\n{result.summary}")


def main(argv: list[str] | None = None) -> int:
    """Run a single recommendation and print the result panel."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Vehicle Advisor v{__version__}")
    print("=" * 56)

    catalog = load_catalog(args.catalog) if args.catalog else default_catalog()

    request = RecommendationRequest(
        house=args.house,
        workplace=args.workplace,
        holiday=args.holiday,
        preferences=PreferenceSet(
            min_seats=args.min_seats,
            has_kids=args.kids,
            trunk_preference=args.trunk,
        ),
    )

    outcome = recommend(request, catalog)
    match outcome:
        case RecommendationError():
            print(f"\n{outcome.message}", file=sys.stderr)
            return 1
        case _:
            _print_result(outcome)
            return 0


if __name__ == "__main__":
    sys.exit(main())
