"""Dashboard - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components. It's the "glue" that
makes the dashboard work: weather panel, center list, map, FAQ and
alert emails.
"""

import logging
import secrets
from dataclasses import dataclass, field

import requests

from src.core.advisory import ConditionIcon, compose_advisory, condition_icon, condition_label
from src.core.centers import (
    Center,
    CenterStats,
    centers_with_distance,
    compute_stats,
    filter_centers,
    sort_by_distance,
)
from src.core.config import Config, Subscriber, is_valid_email
from src.core.faq import FAQReply, respond
from src.core.faq import greeting as faq_greeting
from src.core.formatter import (
    format_alert_email,
    format_minimal_view,
    format_verification_email,
)
from src.core.geo import Location, resolve_location
from src.core.risk import RiskAssessment, assess_observation
from src.core.static_map import create_centers_map_config
from src.core.weather import WeatherObservation, parse_observation
from src.shell.email_client import EmailClient
from src.shell.open_meteo_client import OpenMeteoClient
from src.shell.static_map_client import MapImageResult, StaticMapClient


logger = logging.getLogger(__name__)


VERIFICATION_CODE_DIGITS = 6


@dataclass
class WeatherReport:
    """Everything the weather panel needs for one location.

    When `available` is False the observation could not be obtained and
    the risk fields are None; the assessor was not run.

    Attributes:
        location: Location the report is for
        available: Whether an observation was obtained
        observation: Parsed weather observation
        assessment: Risk assessment
        advisory: Advisory message
        condition: Current condition label
        icon: Current condition icon
        error: Reason the observation is unavailable
    """
    location: Location
    available: bool
    observation: WeatherObservation | None = None
    assessment: RiskAssessment | None = None
    advisory: str | None = None
    condition: str | None = None
    icon: ConditionIcon | None = None
    error: str | None = None


@dataclass
class AlertResult:
    """Result of notifying one subscriber.

    Attributes:
        subscriber: The subscriber notified
        success: Whether the email was sent
        error: Error message if failed
    """
    subscriber: Subscriber
    success: bool
    error: str | None = None


@dataclass
class NotificationResult:
    """Result of a complete alert cycle.

    Attributes:
        alerts_sent: Successfully sent alerts
        alerts_failed: Failed alert attempts
        skipped: Subscribers with no risk at their location
        errors: Any errors that occurred
    """
    alerts_sent: list[AlertResult] = field(default_factory=list)
    alerts_failed: list[AlertResult] = field(default_factory=list)
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the cycle."""
        return (
            f"{len(self.alerts_sent)} alerts sent, "
            f"{len(self.alerts_failed)} failed, "
            f"{self.skipped} skipped"
        )


@dataclass
class SubscriptionResult:
    """Result of a subscription request.

    Attributes:
        success: Whether the verification email was sent
        error: Error message if failed
    """
    success: bool
    error: str | None = None


def generate_verification_code(digits: int = VERIFICATION_CODE_DIGITS) -> str:
    """Random numeric verification code."""
    return "".join(secrets.choice("0123456789") for _ in range(digits))


class Dashboard:
    """Coordinates the disaster response dashboard.

    This class wires together:
    - Open-Meteo client (fetches weather)
    - Core functions (parsing, risk, advisory, centers, FAQ, formatting)
    - Email client (alert and verification emails)
    - Static map client (center map images)
    """

    def __init__(
        self,
        config: Config,
        weather_client: OpenMeteoClient | None = None,
        email_client: EmailClient | None = None,
        map_client: StaticMapClient | None = None,
    ) -> None:
        """Initialize dashboard with configuration.

        Args:
            config: Application configuration
            weather_client: Open-Meteo client (created if not provided)
            email_client: Email client (created if not provided)
            map_client: Static map client (created if not provided)
        """
        self.config = config
        self.weather_client = weather_client or OpenMeteoClient()
        self.email_client = email_client or EmailClient(api_key=config.email.api_key)
        self.map_client = map_client or StaticMapClient()

    def _fetch_observation(self, location: Location) -> WeatherObservation:
        """Fetch and parse the weather for a location.

        Raises:
            requests.RequestException: If the fetch fails
            ValueError: If the payload cannot be parsed
        """
        # Open-Meteo needs at least one hourly step
        hours = max(self.config.forecast_hours, 1)
        payload = self.weather_client.fetch_forecast(
            location.latitude,
            location.longitude,
            forecast_hours=hours,
        )

        # Pure core function
        observation = parse_observation(payload, hours)
        if observation is None:
            raise ValueError("Malformed weather payload")
        return observation

    def weather_report(self, location: Location | None = None) -> WeatherReport:
        """Build the weather panel for a location.

        Falls back to the configured default location. A failed fetch yields
        an unavailable report; the assessor only runs on a full observation.
        """
        target = resolve_location(location, self.config.default_location)

        try:
            observation = self._fetch_observation(target)
        except (requests.RequestException, ValueError) as e:
            logger.error("Weather observation unavailable: %s", str(e))
            return WeatherReport(location=target, available=False, error=str(e))

        assessment = assess_observation(observation)

        logger.info(
            "Weather risk at (%.4f, %.4f): %s %s",
            target.latitude,
            target.longitude,
            assessment.level.name,
            list(assessment.risk_factors),
        )

        return WeatherReport(
            location=target,
            available=True,
            observation=observation,
            assessment=assessment,
            advisory=compose_advisory(assessment),
            condition=condition_label(observation.weather_code),
            icon=condition_icon(observation.weather_code),
        )

    def list_centers(
        self,
        query: str | None = None,
        user_location: Location | None = None,
    ) -> list[tuple[Center, float | None]]:
        """Search centers and rank them by distance from the user."""
        matches = filter_centers(self.config.centers, query)
        return centers_with_distance(matches, user_location)

    def stats(self) -> CenterStats:
        """Capacity statistics over all centers."""
        return compute_stats(self.config.centers)

    def minimal_view(self, user_location: Location | None = None) -> str:
        """Plain-text fallback view for low connectivity, nearest centers first."""
        centers = sort_by_distance(self.config.centers, user_location)
        return format_minimal_view(centers, self.config.emergency_contacts)

    def answer(self, message: str, language: str | None = None) -> FAQReply | None:
        """Answer an FAQ chat message."""
        return respond(message, language)

    def greeting(self, language: str | None = None) -> str:
        """Opening message for the FAQ chat."""
        return faq_greeting(language)

    def render_map(
        self,
        user_location: Location | None = None,
        dark_mode: bool = False,
    ) -> MapImageResult:
        """Render the center map as a PNG."""
        map_config = create_centers_map_config(self.config.centers, user_location)
        return self.map_client.generate_map(map_config, dark_mode=dark_mode)

    def subscribe(self, email: str) -> SubscriptionResult:
        """Email a one-time verification code to a new subscriber.

        The code is not stored and there is no confirmation step: alert
        recipients still come from configuration (see load_config_from_env).
        This only validates the address and sends the code.
        """
        if not is_valid_email(email):
            return SubscriptionResult(success=False, error="Invalid email address")

        message = format_verification_email(generate_verification_code())
        response = self.email_client.send_email(
            email.strip(),
            message,
            self.config.email.from_address,
        )
        return SubscriptionResult(success=response.success, error=response.error)

    def _notify_subscriber(self, subscriber: Subscriber, report: WeatherReport) -> AlertResult:
        """Send an alert email for a report that has a risk."""
        message = format_alert_email(
            report.assessment,
            report.advisory,
            location_name=subscriber.name,
        )
        response = self.email_client.send_email(
            subscriber.email,
            message,
            self.config.email.from_address,
        )
        return AlertResult(
            subscriber=subscriber,
            success=response.success,
            error=response.error,
        )

    def notify_subscribers(self) -> NotificationResult:
        """Run one alert cycle over all subscribers.

        Each subscriber's location is assessed; an email is sent only when
        a risk factor fired.
        """
        result = NotificationResult()

        for subscriber in self.config.subscribers:
            report = self.weather_report(subscriber.location)

            if not report.available:
                result.errors.append(
                    f"Weather unavailable for {subscriber.email}: {report.error}"
                )
                continue

            if not report.assessment.has_risk:
                result.skipped += 1
                continue

            alert = self._notify_subscriber(subscriber, report)
            if alert.success:
                result.alerts_sent.append(alert)
            else:
                result.alerts_failed.append(alert)

        logger.info("Alert cycle complete: %s", result.summary)
        return result
