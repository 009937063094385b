"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the src package.
"""

from src.main import (
    dashboard_api,
    weather_alert_monitor,
    weather_alert_monitor_pubsub,
)

__all__ = [
    "dashboard_api",
    "weather_alert_monitor",
    "weather_alert_monitor_pubsub",
]
