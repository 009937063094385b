"""Advisory text and condition display lookups - Pure functions.

This module turns a RiskAssessment into the advisory message shown above
the weather panel, and maps WMO weather codes to a display label and icon.
All functions are pure with no side effects.

The label and icon tables are independent step functions over the same
code domain. Their boundaries differ (the label table splits at 85, the
icon table does not), so they are kept as two tables.
"""

from dataclasses import dataclass

from src.core.risk import RiskAssessment, RiskLevel


STABLE_MESSAGE = (
    "Weather conditions are currently stable. No special precautions needed."
)

HIGH_RISK_MESSAGE = (
    "EMERGENCY ALERT: Dangerous weather conditions detected. Please take "
    "immediate precautions and stay informed about evacuation notices. "
    "Follow all safety recommendations and be prepared to move to the "
    "nearest shelter if advised."
)

MEDIUM_RISK_MESSAGE = (
    "WEATHER ADVISORY: Potentially hazardous conditions observed. Monitor "
    "local updates and review your emergency plans. Consider postponing "
    "non-essential travel and stay prepared for possible weather changes."
)

LOW_RISK_MESSAGE = (
    "WEATHER NOTICE: Minor weather concerns present. Stay aware of changing "
    "conditions and follow basic safety guidelines. Check updates before "
    "planning outdoor activities."
)

_ADVISORY_MESSAGES: dict[RiskLevel, str] = {
    RiskLevel.NONE: STABLE_MESSAGE,
    RiskLevel.LOW: LOW_RISK_MESSAGE,
    RiskLevel.MEDIUM: MEDIUM_RISK_MESSAGE,
    RiskLevel.HIGH: HIGH_RISK_MESSAGE,
}

_LEVEL_THEMES: dict[RiskLevel, str] = {
    RiskLevel.NONE: "gray",
    RiskLevel.LOW: "blue",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}


@dataclass(frozen=True)
class ConditionIcon:
    """Icon selector for a weather condition.

    Attributes:
        glyph: Icon name (e.g., "cloud-rain", "sun")
        tone: Colour tone for the icon
    """
    glyph: str
    tone: str


def compose_advisory(assessment: RiskAssessment) -> str:
    """Compose the advisory message for a risk assessment.

    Pure function.

    Args:
        assessment: Result from assess_risks()

    Returns:
        One of four fixed messages, chosen by risk level
    """
    return _ADVISORY_MESSAGES[assessment.level]


def level_theme(level: RiskLevel) -> str:
    """Get the colour family used to render a risk level.

    Pure function.
    """
    return _LEVEL_THEMES[level]


def condition_label(code: int) -> str:
    """Get a human-readable label for a WMO weather code.

    Pure function.
    """
    if code >= 95:
        return "Thunderstorm"
    elif code >= 85:
        return "Snow showers"
    elif code >= 80:
        return "Rain showers"
    elif code >= 71:
        return "Snow"
    elif code >= 61:
        return "Rain"
    elif code >= 51:
        return "Drizzle"
    elif code >= 45:
        return "Foggy"
    elif code >= 1:
        return "Partly cloudy"
    else:
        return "Clear sky"


def condition_icon(code: int) -> ConditionIcon:
    """Get the icon for a WMO weather code.

    Pure function.
    """
    if code >= 95:
        return ConditionIcon("cloud-lightning", "purple")
    elif code >= 80:
        return ConditionIcon("cloud-rain-wind", "blue")
    elif code >= 71:
        return ConditionIcon("cloud-snow", "light-blue")
    elif code >= 61:
        return ConditionIcon("cloud-rain", "blue")
    elif code >= 51:
        return ConditionIcon("cloud-drizzle", "gray")  # muted
    elif code >= 45:
        return ConditionIcon("cloud-fog", "gray")
    elif code >= 1:
        return ConditionIcon("cloud", "gray")
    else:
        return ConditionIcon("sun", "yellow")
