"""Geographic calculations - Pure functions.

This module provides great-circle distance for ranking relief centers by
proximity to the user. All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Location:
    """A point on the map.

    Attributes:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
    """
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


# Geographic centre of India, used when the user has not shared a location
DEFAULT_LOCATION = Location(latitude=20.5937, longitude=78.9629)


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_between(a: Location, b: Location) -> float:
    """Distance in kilometers between two locations."""
    return calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def resolve_location(
    user_location: Location | None,
    default: Location = DEFAULT_LOCATION,
) -> Location:
    """Return the user's location, or the default when none was shared.

    Pure function.
    """
    return user_location if user_location is not None else default


def parse_location(
    latitude: str | float | None,
    longitude: str | float | None,
) -> Location | None:
    """Build a Location from loosely typed input (e.g., query params).

    Pure function. Returns None if either coordinate is missing, not
    numeric, or out of range.
    """
    if latitude is None or longitude is None:
        return None

    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        return None

    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return None

    return Location(latitude=lat, longitude=lon)
