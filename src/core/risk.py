"""Weather risk assessment - Pure functions.

This module maps a weather snapshot to a qualitative risk level, the
named risk factors that fired, and one safety recommendation per factor.
All functions are pure with no side effects.

Rules are grouped into bands evaluated in a fixed order:
temperature, wind, weather condition, humidity-heat. Within a band only
the first matching rule fires. The overall level is the highest severity
of any fired rule and is never lowered by a later, milder rule.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from src.core.weather import WeatherObservation


class RiskLevel(IntEnum):
    """Ordered risk severity. Comparison follows NONE < LOW < MEDIUM < HIGH."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        """Lowercase label used by the presentation layer ("" for NONE)."""
        if self is RiskLevel.NONE:
            return ""
        return self.name.lower()


@dataclass(frozen=True)
class RiskAssessment:
    """Result of assessing one weather snapshot.

    Attributes:
        level: Highest severity among triggered factors
        risk_factors: Names of triggered conditions, in evaluation order
        recommendations: One recommendation per risk factor, same order
    """
    level: RiskLevel = RiskLevel.NONE
    risk_factors: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    @property
    def has_risk(self) -> bool:
        """Returns True if at least one risk factor fired."""
        return self.level is not RiskLevel.NONE

    def factor_pairs(self) -> list[tuple[str, str]]:
        """Return (risk factor, recommendation) pairs."""
        return list(zip(self.risk_factors, self.recommendations))


@dataclass(frozen=True)
class _Conditions:
    weather_code: int
    wind_speed_kmh: float
    temperature_c: float
    humidity_pct: float
    upcoming_codes: tuple[int, ...]

    def any_code_at_least(self, threshold: int) -> bool:
        """Current code or any look-ahead code reaches the threshold."""
        return self.weather_code >= threshold or any(
            code >= threshold for code in self.upcoming_codes
        )


@dataclass(frozen=True)
class RiskRule:
    """A single row of the rule table.

    Attributes:
        factor: Risk factor name reported when the rule fires
        recommendation: Safety recommendation paired with the factor
        severity: Severity contributed to the overall level
        applies: Predicate over the snapshot
    """
    factor: str
    recommendation: str
    severity: RiskLevel
    applies: Callable[[_Conditions], bool]


TEMPERATURE_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        "Extreme heat",
        "Stay hydrated and avoid outdoor activities",
        RiskLevel.HIGH,
        lambda c: c.temperature_c > 40,
    ),
    RiskRule(
        "High temperature",
        "Limit sun exposure and drink plenty of water",
        RiskLevel.MEDIUM,
        lambda c: c.temperature_c > 35,
    ),
    RiskRule(
        "Freezing conditions",
        "Protect against frost and wear warm clothing",
        RiskLevel.HIGH,
        lambda c: c.temperature_c < 0,
    ),
    RiskRule(
        "Cold conditions",
        "Wear appropriate winter clothing",
        RiskLevel.MEDIUM,
        lambda c: c.temperature_c < 5,
    ),
)

WIND_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        "Strong winds",
        "Secure loose objects and avoid open areas",
        RiskLevel.HIGH,
        lambda c: c.wind_speed_kmh > 20,
    ),
    RiskRule(
        "Moderate winds",
        "Be cautious of flying debris",
        RiskLevel.MEDIUM,
        lambda c: c.wind_speed_kmh > 10,
    ),
)

# Thunderstorm and heavy precipitation also fire on look-ahead codes;
# snow and rain only on the current code.
CONDITION_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        "Thunderstorm",
        "Seek indoor shelter and avoid open areas",
        RiskLevel.HIGH,
        lambda c: c.any_code_at_least(95),
    ),
    RiskRule(
        "Heavy precipitation",
        "Prepare for potential flooding",
        RiskLevel.HIGH,
        lambda c: c.any_code_at_least(85),
    ),
    RiskRule(
        "Snow conditions",
        "Check road conditions before travel",
        RiskLevel.MEDIUM,
        lambda c: c.weather_code >= 71,
    ),
    RiskRule(
        "Rainy conditions",
        "Carry rain protection",
        RiskLevel.LOW,
        lambda c: c.weather_code >= 61,
    ),
)

HUMIDITY_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        "High humidity heat",
        "Avoid strenuous activities",
        RiskLevel.MEDIUM,
        lambda c: c.humidity_pct > 85 and c.temperature_c > 30,
    ),
)

RULE_BANDS: tuple[tuple[RiskRule, ...], ...] = (
    TEMPERATURE_RULES,
    WIND_RULES,
    CONDITION_RULES,
    HUMIDITY_RULES,
)


def first_matching_rule(
    band: Sequence[RiskRule],
    conditions: _Conditions,
) -> RiskRule | None:
    """Return the first rule in a band whose predicate holds.

    Pure function.
    """
    for rule in band:
        if rule.applies(conditions):
            return rule
    return None


def assess_risks(
    weather_code: int,
    wind_speed_kmh: float,
    temperature_c: float,
    humidity_pct: float,
    upcoming_codes: Sequence[int] = (),
) -> RiskAssessment:
    """Assess weather risk for a single snapshot.

    Pure function. Total over numeric input: out-of-range values are
    evaluated as given and simply match whichever rules they satisfy.

    Args:
        weather_code: Current WMO weather code
        wind_speed_kmh: Current wind speed (km/h)
        temperature_c: Current temperature (°C)
        humidity_pct: Current relative humidity (%)
        upcoming_codes: WMO codes for the next forecast hours

    Returns:
        RiskAssessment with level, factors and recommendations
    """
    conditions = _Conditions(
        weather_code=weather_code,
        wind_speed_kmh=wind_speed_kmh,
        temperature_c=temperature_c,
        humidity_pct=humidity_pct,
        upcoming_codes=tuple(upcoming_codes),
    )

    level = RiskLevel.NONE
    factors: list[str] = []
    recommendations: list[str] = []

    for band in RULE_BANDS:
        rule = first_matching_rule(band, conditions)
        if rule is None:
            continue
        factors.append(rule.factor)
        recommendations.append(rule.recommendation)
        level = max(level, rule.severity)

    return RiskAssessment(
        level=level,
        risk_factors=tuple(factors),
        recommendations=tuple(recommendations),
    )


def assess_observation(observation: WeatherObservation) -> RiskAssessment:
    """Assess weather risk for a parsed observation.

    Pure function. Apparent temperature is not used.
    """
    return assess_risks(
        weather_code=observation.weather_code,
        wind_speed_kmh=observation.wind_speed_kmh,
        temperature_c=observation.temperature_c,
        humidity_pct=observation.relative_humidity_pct,
        upcoming_codes=observation.upcoming_codes,
    )
