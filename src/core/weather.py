"""Weather observation model and parsing - Pure functions.

This module handles parsing Open-Meteo forecast JSON into typed
WeatherObservation objects. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Any


# Number of forecast hours checked for incoming severe weather
DEFAULT_LOOK_AHEAD_HOURS = 3


@dataclass(frozen=True)
class WeatherObservation:
    """Immutable snapshot of current weather plus near-term forecast codes.

    Attributes:
        temperature_c: Ambient temperature (°C)
        apparent_temperature_c: Feels-like temperature (°C), display only
        relative_humidity_pct: Relative humidity (%)
        weather_code: Current WMO weather interpretation code
        wind_speed_kmh: Wind speed at 10m (km/h)
        upcoming_codes: WMO codes for the next forecast hours, in order
    """
    temperature_c: float
    apparent_temperature_c: float
    relative_humidity_pct: float
    weather_code: int
    wind_speed_kmh: float
    upcoming_codes: tuple[int, ...] = ()


def _parse_upcoming_codes(hourly: dict[str, Any], hours: int) -> tuple[int, ...]:
    """Take the first `hours` hourly weather codes, skipping gaps.

    A negative `hours` keeps no codes.
    """
    codes = hourly.get("weather_code") or []
    return tuple(int(code) for code in codes[:max(hours, 0)] if code is not None)


def parse_observation(
    payload: dict[str, Any],
    look_ahead_hours: int = DEFAULT_LOOK_AHEAD_HOURS,
) -> WeatherObservation | None:
    """Parse an Open-Meteo forecast response into a WeatherObservation.

    Pure function: takes raw dict, returns typed observation or None if the
    current block is missing or incomplete.

    Args:
        payload: JSON body from the Open-Meteo forecast endpoint
        look_ahead_hours: How many hourly codes to keep for look-ahead

    Returns:
        WeatherObservation or None if parsing fails
    """
    try:
        current = payload.get("current") or {}
        hourly = payload.get("hourly") or {}

        return WeatherObservation(
            temperature_c=float(current["temperature_2m"]),
            apparent_temperature_c=float(current["apparent_temperature"]),
            relative_humidity_pct=float(current["relative_humidity_2m"]),
            weather_code=int(current["weather_code"]),
            wind_speed_kmh=float(current["wind_speed_10m"]),
            upcoming_codes=_parse_upcoming_codes(hourly, look_ahead_hours),
        )
    except (AttributeError, KeyError, OverflowError, TypeError, ValueError):
        return None
