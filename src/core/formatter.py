"""Message formatting - Pure functions.

This module formats risk assessments into alert emails and renders the
plain-text low-bandwidth view of the center list.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from html import escape

from src.core.advisory import condition_label
from src.core.centers import Center
from src.core.risk import RiskAssessment, RiskLevel
from src.core.weather import WeatherObservation


# (label, phone number)
EMERGENCY_CONTACTS: tuple[tuple[str, str], ...] = (
    ("National Emergency", "112"),
    ("Disaster Management", "011-26701700"),
    ("Medical Emergency", "102"),
)

# (background, heading, body) colours per level
_EMAIL_COLORS: dict[RiskLevel, tuple[str, str, str]] = {
    RiskLevel.HIGH: ("#FEE2E2", "#991B1B", "#B91C1C"),
    RiskLevel.MEDIUM: ("#FEF3C7", "#92400E", "#B45309"),
    RiskLevel.LOW: ("#DBEAFE", "#1E40AF", "#1E3A8A"),
}


@dataclass(frozen=True)
class EmailMessage:
    """A rendered email.

    Attributes:
        subject: Subject line
        html: HTML body
    """
    subject: str
    html: str


def _html_list(items: tuple[str, ...]) -> str:
    return "".join(f"<li>{escape(item)}</li>" for item in items)


def format_alert_email(
    assessment: RiskAssessment,
    advisory: str,
    location_name: str | None = None,
) -> EmailMessage:
    """Format a weather alert email.

    Pure function.

    Args:
        assessment: Risk assessment to report (level must not be NONE)
        advisory: Advisory message from compose_advisory()
        location_name: Optional place name for the heading

    Returns:
        EmailMessage with subject and HTML body

    Raises:
        ValueError: If the assessment has no risk
    """
    if not assessment.has_risk:
        raise ValueError("Cannot format an alert email without a risk level")

    background, heading, body = _EMAIL_COLORS[assessment.level]
    level_text = assessment.level.label.upper()
    title = f"{level_text} Weather Alert"
    if location_name:
        title = f"{title} - {escape(location_name)}"

    html = (
        '<div style="font-family: sans-serif; max-width: 600px; margin: 0 auto;">'
        f'<div style="background-color: {background}; padding: 20px; '
        'border-radius: 8px; margin-bottom: 20px;">'
        f'<h1 style="color: {heading}; margin-top: 0;">{title}</h1>'
        f'<p style="color: {body};">{escape(advisory)}</p>'
        "</div>"
        '<div style="background-color: #F9FAFB; padding: 20px; border-radius: 8px;">'
        '<h2 style="color: #111827; margin-top: 0;">Current Risks:</h2>'
        f'<ul style="color: #374151;">{_html_list(assessment.risk_factors)}</ul>'
        '<h2 style="color: #111827;">Safety Recommendations:</h2>'
        f'<ul style="color: #374151;">{_html_list(assessment.recommendations)}</ul>'
        "</div>"
        '<div style="margin-top: 20px; padding: 20px; background-color: #F3F4F6; '
        'border-radius: 8px;">'
        '<p style="color: #6B7280; font-size: 14px;">'
        "This is an automated weather alert. Please monitor local news and "
        "official channels for the most up-to-date information."
        "</p>"
        "</div>"
        "</div>"
    )

    return EmailMessage(subject=f"{level_text} Weather Alert", html=html)


def format_verification_email(code: str) -> EmailMessage:
    """Format the subscription verification email.

    Pure function.
    """
    html = (
        '<div style="font-family: sans-serif; max-width: 600px; margin: 0 auto;">'
        '<div style="background-color: #EFF6FF; padding: 20px; border-radius: 8px;">'
        '<h1 style="color: #1E40AF; margin-top: 0;">Verify Your Email</h1>'
        '<p style="color: #1E3A8A;">'
        "Thank you for subscribing to Weather Alerts. To complete your "
        "subscription, please enter the following verification code:"
        "</p>"
        '<div style="background-color: #DBEAFE; padding: 20px; border-radius: 8px; '
        'text-align: center; margin: 20px 0;">'
        '<code style="font-size: 24px; color: #1E40AF; letter-spacing: 4px;">'
        f"{escape(code)}"
        "</code>"
        "</div>"
        '<p style="color: #1E3A8A;">'
        "This code will expire in 1 hour. If you didn't request this "
        "verification, please ignore this email."
        "</p>"
        "</div>"
        "</div>"
    )
    return EmailMessage(subject="Verify your email for Weather Alerts", html=html)


def format_weather_summary(
    observation: WeatherObservation,
    assessment: RiskAssessment,
) -> str:
    """Format a one-line summary of current weather and risk.

    Pure function.
    """
    risk = f"{assessment.level.label} risk" if assessment.has_risk else "no risk"
    return (
        f"{condition_label(observation.weather_code)}, "
        f"{round(observation.temperature_c)}°C "
        f"(feels like {round(observation.apparent_temperature_c)}°C), "
        f"humidity {round(observation.relative_humidity_pct)}%, "
        f"wind {round(observation.wind_speed_kmh)} km/h - {risk}"
    )


def format_minimal_view(
    centers: list[Center],
    contacts: tuple[tuple[str, str], ...] = EMERGENCY_CONTACTS,
) -> str:
    """Render the low-bandwidth fallback view as plain text.

    Pure function.

    Args:
        centers: Centers to list
        contacts: (label, phone) pairs for the emergency contact block

    Returns:
        Plain text page
    """
    lines = [
        "EMERGENCY RESPONSE CENTERS",
        "",
        "ACTIVE WEATHER WARNINGS",
        "For your safety, please check local weather updates and follow "
        "official guidance. Switch to full view for detailed weather information.",
        "",
        "Emergency Contacts:",
    ]
    lines.extend(f"  - {label}: {phone}" for label, phone in contacts)
    lines.append("")

    for center in centers:
        lines.append(center.name)
        lines.append(f"  Phone: {center.contact}")
        lines.append(f"  Address: {center.address}")
        lines.append(f"  Available: {center.available_spots} spots")
        lines.append("")

    lines.append(
        "You're viewing the minimal version optimized for low network "
        "connectivity. Some features like maps and real-time updates are disabled."
    )

    return "\n".join(lines)
