"""Static map configuration - Pure functions.

This module provides pure functions for generating static map parameters
for the center map. The actual image generation (I/O) is handled by the
shell layer.
"""

from dataclasses import dataclass, field

from src.core.centers import Center
from src.core.geo import DEFAULT_LOCATION, Location


HEALTH_MARKER_COLOR = "#ef4444"  # red-500
SHELTER_MARKER_COLOR = "#eab308"  # yellow-500
USER_MARKER_COLOR = "#4285f4"

# Country-wide view without a user location, city view with one
DEFAULT_ZOOM = 5
USER_ZOOM = 10


@dataclass(frozen=True)
class MapMarker:
    """A circle marker on the map.

    Attributes:
        latitude: Marker latitude
        longitude: Marker longitude
        color: Hex fill color
        radius: Radius in pixels
    """
    latitude: float
    longitude: float
    color: str
    radius: int = 8


@dataclass(frozen=True)
class MapConfig:
    """Immutable configuration for a static map image.

    Attributes:
        latitude: Center latitude
        longitude: Center longitude
        zoom: Zoom level (1-18)
        width: Image width in pixels
        height: Image height in pixels
        markers: Markers to draw, in drawing order
    """
    latitude: float
    longitude: float
    zoom: int
    width: int
    height: int
    markers: tuple[MapMarker, ...] = field(default_factory=tuple)


def get_center_color(center: Center) -> str:
    """Get marker color for a center.

    Pure function. Health centers are red, everything else yellow.
    """
    if center.is_health:
        return HEALTH_MARKER_COLOR
    return SHELTER_MARKER_COLOR


def create_centers_map_config(
    centers: list[Center],
    user_location: Location | None = None,
    width: int = 800,
    height: int = 600,
) -> MapConfig:
    """Create map configuration showing centers and the user.

    Pure function. Centers the map on the user when a location is known,
    otherwise on the default location at a wider zoom.

    Args:
        centers: Centers to draw
        user_location: User location, if shared
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 600)

    Returns:
        MapConfig with a marker per center (and one for the user)
    """
    focus = user_location if user_location is not None else DEFAULT_LOCATION
    zoom = USER_ZOOM if user_location is not None else DEFAULT_ZOOM

    markers = [
        MapMarker(c.latitude, c.longitude, get_center_color(c))
        for c in centers
    ]

    # User marker last so it draws on top
    if user_location is not None:
        markers.append(MapMarker(
            user_location.latitude,
            user_location.longitude,
            USER_MARKER_COLOR,
            radius=10,
        ))

    return MapConfig(
        latitude=focus.latitude,
        longitude=focus.longitude,
        zoom=zoom,
        width=width,
        height=height,
        markers=tuple(markers),
    )
