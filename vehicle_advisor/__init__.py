"""Vehicle Advisor: distance-based vehicle recommendation engine."""

__version__ = "0.1.0"
