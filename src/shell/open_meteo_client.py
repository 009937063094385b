"""Open-Meteo API Client - Imperative Shell.

This module handles HTTP communication with the Open-Meteo forecast API.
All I/O is contained here; parsing and risk logic are in the core module.
"""

import logging
from typing import Any

import requests


logger = logging.getLogger(__name__)


# Open-Meteo forecast endpoint (no API key required)
OPEN_METEO_API_BASE = "https://api.open-meteo.com/v1/forecast"

# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)

HOURLY_FIELDS = (
    "temperature_2m",
    "weather_code",
    "wind_speed_10m",
)


class OpenMeteoClient:
    """Client for fetching weather forecasts from Open-Meteo.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize Open-Meteo client.

        Args:
            base_url: Forecast API base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def _build_params(
        self,
        latitude: float,
        longitude: float,
        forecast_hours: int,
    ) -> dict[str, str]:
        """Build query parameters for a forecast request."""
        return {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "current": ",".join(CURRENT_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "forecast_hours": str(forecast_hours),
        }

    def fetch_forecast(
        self,
        latitude: float,
        longitude: float,
        forecast_hours: int = 3,
    ) -> dict[str, Any]:
        """Fetch current conditions and a short hourly forecast.

        This method performs HTTP I/O.

        Args:
            latitude: Location latitude
            longitude: Location longitude
            forecast_hours: Number of hourly forecast steps to request

        Returns:
            Raw JSON response from Open-Meteo

        Raises:
            requests.RequestException: If the request fails
        """
        params = self._build_params(latitude, longitude, forecast_hours)

        logger.info(
            "Fetching forecast from Open-Meteo for (%.4f, %.4f)",
            latitude,
            longitude,
        )

        response = requests.get(
            self.base_url,
            params=params,
            timeout=self.timeout,
        )
        response.raise_for_status()

        return response.json()
