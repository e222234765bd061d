"""Vehicle Advisor Dashboard.

Interactive front end built with Streamlit and Plotly.  Collects the three
locations and preferences, calls the recommendation engine, and renders
the points on a map together with the result panel and the ranked
candidate table.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from vehicle_advisor.config import default_catalog
from vehicle_advisor.core.engine import RecommendationResult, recommend
from vehicle_advisor.core.errors import RecommendationError
from vehicle_advisor.core.point import Point
from vehicle_advisor.core.request import PreferenceSet, RecommendationRequest
from vehicle_advisor.core.summary import format_cost, format_range, format_rating
from vehicle_advisor.core.vehicle import VehicleRecord

# ---------------------------------------------------------------------------
# Defaults -- San Francisco home, Oakland office, Los Angeles holiday
# ---------------------------------------------------------------------------

_DEFAULT_POINTS: dict[str, tuple[float, float]] = {
    "House": (37.7749, -122.4194),
    "Workplace": (37.8044, -122.2712),
    "Holiday": (34.0522, -118.2437),
}

_MARKER_COLOURS: dict[str, str] = {
    "House": "#1f77b4",
    "Workplace": "#2ca02c",
    "Holiday": "#d62728",
}

_ARC_STEPS: int = 64


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _unit_vector(point: Point) -> np.ndarray:
    """Return the point as a unit vector on the sphere."""
    lat, lng = math.radians(point.lat), math.radians(point.lng)
    return np.array(
        [math.cos(lat) * math.cos(lng), math.cos(lat) * math.sin(lng), math.sin(lat)]
    )


def _great_circle_arc(
    p1: Point,
    p2: Point,
    steps: int = _ARC_STEPS,
) -> tuple[np.ndarray, np.ndarray]:
    """Interpolate a great-circle path between two points.

    Returns:
        ``(lats, lngs)`` arrays in degrees.
    """
    v1 = _unit_vector(p1)
    v2 = _unit_vector(p2)

    omega = math.acos(float(np.clip(np.dot(v1, v2), -1.0, 1.0)))
    if omega < 1e-12:
        return np.array([p1.lat, p2.lat]), np.array([p1.lng, p2.lng])

    t = np.linspace(0.0, 1.0, steps)[:, None]
    path = (np.sin((1.0 - t) * omega) * v1 + np.sin(t * omega) * v2) / math.sin(omega)
    lats = np.degrees(np.arctan2(path[:, 2], np.hypot(path[:, 0], path[:, 1])))
    lngs = np.degrees(np.arctan2(path[:, 1], path[:, 0]))
    return lats, lngs


def _build_map(points: dict[str, Point]) -> go.Figure:
    """Plot the three locations with commute and holiday arcs."""
    fig = go.Figure()
    house = points["House"]
    for label in ("Workplace", "Holiday"):
        lats, lngs = _great_circle_arc(house, points[label])
        fig.add_trace(
            go.Scattergeo(
                lat=lats,
                lon=lngs,
                mode="lines",
                line=dict(width=2, color=_MARKER_COLOURS[label]),
                name=f"House to {label.lower()}",
            )
        )
    for label, point in points.items():
        fig.add_trace(
            go.Scattergeo(
                lat=[point.lat],
                lon=[point.lng],
                mode="markers+text",
                text=[label],
                textposition="top center",
                marker=dict(size=10, color=_MARKER_COLOURS[label]),
                name=label,
            )
        )
    fig.update_geos(fitbounds="locations", showcountries=True, showland=True)
    fig.update_layout(height=450, margin=dict(l=0, r=0, t=0, b=0))
    return fig


def _candidate_frame(result: RecommendationResult) -> pd.DataFrame:
    """Tabulate the ranked candidates with their role in the result."""
    rows = []
    for rank, vehicle in enumerate(result.candidates, start=1):
        role = ""
        if vehicle == result.primary:
            role = "Primary"
        elif vehicle == result.runner_up:
            role = "Runner-up"
        rows.append(
            {
                "Rank": rank,
                "Name": vehicle.name,
                "Type": vehicle.type.capitalize(),
                "Range (km)": vehicle.range,
                "Seats": vehicle.seats,
                "Role": role,
            }
        )
    return pd.DataFrame(rows).set_index("Rank")


def _vehicle_card(title: str, vehicle: VehicleRecord, cost: float) -> None:
    st.subheader(title)
    st.markdown(
        f"**Name:** {vehicle.name}  \n"
        f"**Type:** {vehicle.type.capitalize()}  \n"
        f"**Range:** {format_range(vehicle.range)} km  \n"
        f"**Seating capacity:** {vehicle.seats}  \n"
        f"**Estimated travel cost:** {format_cost(cost)}"
    )


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Vehicle Advisor", layout="wide")
    st.title("Vehicle Advisor")

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Preferences")
    min_seats: int = st.sidebar.number_input(
        "Minimum seats needed", min_value=1, max_value=9, value=5, step=1
    )
    has_kids: bool = st.sidebar.checkbox("I have kids", value=False)
    trunk_preference: bool = st.sidebar.checkbox("Need ample trunk space", value=False)

    st.sidebar.header("Locations")
    points: dict[str, Point] = {}
    for label, (lat, lng) in _DEFAULT_POINTS.items():
        col_lat, col_lng = st.sidebar.columns(2)
        points[label] = Point(
            lat=col_lat.number_input(
                f"{label} lat",
                min_value=-90.0,
                max_value=90.0,
                value=lat,
                format="%.4f",
            ),
            lng=col_lng.number_input(
                f"{label} lng",
                min_value=-180.0,
                max_value=180.0,
                value=lng,
                format="%.4f",
            ),
        )

    # ── Section 1: Map ───────────────────────────────────────────────────
    st.header("1 -- Your Locations")
    st.plotly_chart(_build_map(points), use_container_width=True)

    # ── Section 2: Recommendation ────────────────────────────────────────
    st.header("2 -- Recommendation")

    request = RecommendationRequest(
        house=points["House"],
        workplace=points["Workplace"],
        holiday=points["Holiday"],
        preferences=PreferenceSet(
            min_seats=int(min_seats),
            has_kids=has_kids,
            trunk_preference=trunk_preference,
        ),
    )
    outcome = recommend(request, default_catalog())

    if isinstance(outcome, RecommendationError):
        st.error(outcome.message)
        return

    col_c, col_h, col_t = st.columns(3)
    col_c.metric("Commute", f"{outcome.commute_distance:.2f} km")
    col_h.metric("Holiday", f"{outcome.holiday_distance:.2f} km")
    col_t.metric("Total", f"{outcome.total_distance:.2f} km")

    st.write(outcome.summary)

    col_primary, col_runner_up = st.columns(2)
    with col_primary:
        _vehicle_card(
            "Primary option", outcome.primary, outcome.price_breakdown.primary
        )
    with col_runner_up:
        _vehicle_card(
            "Runner-up option", outcome.runner_up, outcome.price_breakdown.runner_up
        )

    st.markdown(f"### Environmental rating: {format_rating(outcome.carbon_rating)}")

    # ── Section 3: Candidates ────────────────────────────────────────────
    st.header("3 -- All Suitable Vehicles")
    st.dataframe(_candidate_frame(outcome), use_container_width=True)


if __name__ == "__main__":
    main()
