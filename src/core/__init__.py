"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Weather observation parsing
- Weather risk assessment
- Advisory text and condition labels
- Center search, proximity ranking and statistics
- FAQ responses
- Message formatting

All functions here are deterministic and have no I/O.
"""

from src.core.weather import WeatherObservation, parse_observation
from src.core.risk import RiskAssessment, RiskLevel, assess_risks, assess_observation
from src.core.advisory import compose_advisory, condition_icon, condition_label
from src.core.geo import Location, calculate_distance
from src.core.centers import Center, compute_stats, filter_centers, sort_by_distance
from src.core.faq import respond
from src.core.formatter import format_alert_email, format_minimal_view

__all__ = [
    # Weather
    "WeatherObservation",
    "parse_observation",
    # Risk
    "RiskAssessment",
    "RiskLevel",
    "assess_risks",
    "assess_observation",
    # Advisory
    "compose_advisory",
    "condition_icon",
    "condition_label",
    # Geo
    "Location",
    "calculate_distance",
    # Centers
    "Center",
    "compute_stats",
    "filter_centers",
    "sort_by_distance",
    # FAQ
    "respond",
    # Formatter
    "format_alert_email",
    "format_minimal_view",
]
