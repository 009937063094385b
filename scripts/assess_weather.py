#!/usr/bin/env python3
"""Assess weather risk for a location or for hand-entered conditions.

Fetches live weather from Open-Meteo (or takes conditions from the command
line), prints the risk assessment and advisory, and can email the alert.

Usage:
    # Live weather for a location
    python scripts/assess_weather.py --lat 28.61 --lng 77.21

    # Offline: hand-entered conditions
    python scripts/assess_weather.py --code 96 --wind 15 --temp 3 --humidity 50 --upcoming 1 1 1

    # Preview the alert email without sending
    python scripts/assess_weather.py --lat 28.61 --lng 77.21 --send-to me@example.org --dry-run

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    RESEND_API_KEY: Email API key, needed for --send-to
"""

import argparse
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.advisory import compose_advisory, condition_label
from src.core.formatter import format_alert_email
from src.core.geo import Location
from src.core.risk import RiskAssessment, assess_risks
from src.dashboard import Dashboard
from src.shell.config_loader import load_config, load_config_from_env
from src.shell.email_client import EmailClient

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def print_assessment(assessment: RiskAssessment, advisory: str) -> None:
    """Print an assessment in a readable block."""
    print(f"Risk level: {assessment.level.label or 'none'}")
    for factor, recommendation in assessment.factor_pairs():
        print(f"  - {factor}: {recommendation}")
    print()
    print(advisory)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Assess weather risk and optionally send the alert email",
    )
    parser.add_argument("--lat", type=float, help="Latitude for a live forecast")
    parser.add_argument("--lng", type=float, help="Longitude for a live forecast")
    parser.add_argument("--code", type=int, help="Current WMO weather code (offline)")
    parser.add_argument("--wind", type=float, default=0.0, help="Wind speed km/h (offline)")
    parser.add_argument("--temp", type=float, default=20.0, help="Temperature °C (offline)")
    parser.add_argument("--humidity", type=float, default=50.0, help="Humidity %% (offline)")
    parser.add_argument(
        "--upcoming",
        type=int,
        nargs="*",
        default=[],
        help="Upcoming hourly WMO codes (offline)",
    )
    parser.add_argument("--send-to", help="Email the alert to this address")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the alert email instead of sending it",
    )
    args = parser.parse_args()

    config = load_config_from_env(load_config())

    if args.code is not None:
        assessment = assess_risks(
            args.code,
            args.wind,
            args.temp,
            args.humidity,
            args.upcoming,
        )
        advisory = compose_advisory(assessment)
        print(f"Conditions: {condition_label(args.code)}")
    else:
        location = None
        if args.lat is not None and args.lng is not None:
            location = Location(args.lat, args.lng)
        report = Dashboard(config).weather_report(location)
        if not report.available:
            logger.error("Failed to load weather data: %s", report.error)
            return 1
        assessment = report.assessment
        advisory = report.advisory
        print(f"Conditions: {report.condition}")

    print_assessment(assessment, advisory)

    if not args.send_to:
        return 0

    if not assessment.has_risk:
        print("\nNo risk - nothing to send.")
        return 0

    message = format_alert_email(assessment, advisory)

    if args.dry_run:
        print(f"\n[DRY RUN] To: {args.send_to}")
        print(f"Subject: {message.subject}")
        print(message.html)
        return 0

    response = EmailClient(api_key=config.email.api_key).send_email(
        args.send_to,
        message,
        config.email.from_address,
    )
    if not response.success:
        logger.error("Failed to send alert: %s", response.error)
        return 1

    print(f"\nAlert sent to {args.send_to} ({response.message_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
