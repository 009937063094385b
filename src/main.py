"""Cloud Function Entry Point.

This module provides the entry points for Google Cloud Functions.
They are thin wrappers that load configuration and invoke the dashboard.
"""

import json
import logging
import os
from typing import Any

import functions_framework
from flask import Request, Response

from src.api_handler import handle_request
from src.core.config import Config, validate_config
from src.dashboard import Dashboard
from src.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file, then apply environment overrides."""
    config = load_config_from_env(load_config())

    validation = validate_config(config)
    for error in validation.errors:
        log = logger.error if error.severity == "error" else logger.warning
        log("Config %s: %s", error.field, error.message)

    return config


@functions_framework.http
def dashboard_api(request: Request) -> Response:
    """HTTP Cloud Function entry point for the dashboard API.

    Routes by path (e.g., /api-weather, /api-centers).

    Args:
        request: Flask request object

    Returns:
        Flask response
    """
    try:
        return handle_request(request, Dashboard(_get_config()))
    except Exception as e:
        logger.exception("Unexpected error in dashboard API")
        return Response(
            json.dumps({"status": "error", "message": str(e)}),
            status=500,
            mimetype="application/json",
        )


@functions_framework.http
def weather_alert_monitor(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point for the alert cycle.

    Triggered by Cloud Scheduler or direct HTTP requests. Assesses the
    weather at every subscriber's location and emails those at risk.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Starting weather alert cycle")

    try:
        config = _get_config()

        if not config.subscribers:
            logger.warning("No alert subscribers configured")
            return {
                "status": "error",
                "message": "No alert subscribers configured",
            }, 400

        result = Dashboard(config).notify_subscribers()

        response: dict[str, Any] = {
            "status": "success" if result.success else "partial_failure",
            "summary": result.summary,
            "alerts_sent": len(result.alerts_sent),
            "alerts_failed": len(result.alerts_failed),
            "skipped": result.skipped,
        }

        if result.errors:
            response["errors"] = result.errors

        logger.info("Completed: %s", result.summary)

        status_code = 200 if result.success else 207  # 207 = Multi-Status
        return response, status_code

    except Exception as e:
        logger.exception("Unexpected error in weather alert monitor")
        return {
            "status": "error",
            "message": str(e),
        }, 500


@functions_framework.cloud_event
def weather_alert_monitor_pubsub(cloud_event: Any) -> None:
    """Pub/Sub Cloud Function entry point.

    Alternative trigger for Cloud Scheduler via Pub/Sub.

    Args:
        cloud_event: CloudEvent from Pub/Sub
    """
    logger.info("Starting weather alert cycle (Pub/Sub trigger)")

    config = _get_config()

    if not config.subscribers:
        logger.warning("No alert subscribers configured")
        return

    result = Dashboard(config).notify_subscribers()

    logger.info("Completed: %s", result.summary)

    for error in result.errors:
        logger.error("Error: %s", error)
