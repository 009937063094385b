"""Static Map Client - Imperative Shell.

This module renders the center map as a PNG using OpenStreetMap tiles.
All I/O is contained here; map configuration is in the core module.
"""

import io
import logging
from dataclasses import dataclass

from staticmap import CircleMarker, StaticMap

from src.core.static_map import MapConfig


logger = logging.getLogger(__name__)


DEFAULT_TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
DARK_TILE_URL = "https://a.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}.png"

# Width of the white ring drawn behind each marker
MARKER_OUTLINE_PX = 2


@dataclass
class MapImageResult:
    """Result of map image generation.

    Attributes:
        success: Whether the image was generated successfully
        image_bytes: PNG image data if successful
        error: Error message if failed
    """
    success: bool
    image_bytes: bytes | None = None
    error: str | None = None


class StaticMapClient:
    """Client for generating static map images.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(
        self,
        tile_url: str | None = None,
        dark_tile_url: str = DARK_TILE_URL,
    ) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template for the light basemap
            dark_tile_url: Tile URL template used for dark mode
        """
        self.tile_url = tile_url or DEFAULT_TILE_URL
        self.dark_tile_url = dark_tile_url

    def generate_map(self, config: MapConfig, dark_mode: bool = False) -> MapImageResult:
        """Generate a static map image.

        This method performs I/O (fetches map tiles from tile server).

        Args:
            config: Map configuration from core module
            dark_mode: Render on the dark basemap

        Returns:
            MapImageResult with image bytes or error
        """
        logger.info(
            "Generating map with %d markers around (%.4f, %.4f) at zoom %d",
            len(config.markers),
            config.latitude,
            config.longitude,
            config.zoom,
        )

        try:
            static_map = StaticMap(
                config.width,
                config.height,
                url_template=self.dark_tile_url if dark_mode else self.tile_url,
            )

            for marker in config.markers:
                # staticmap takes (lon, lat)
                position = (marker.longitude, marker.latitude)
                static_map.add_marker(
                    CircleMarker(position, "white", marker.radius + MARKER_OUTLINE_PX)
                )
                static_map.add_marker(CircleMarker(position, marker.color, marker.radius))

            image = static_map.render(
                zoom=config.zoom,
                center=(config.longitude, config.latitude),
            )

            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()

            logger.info("Generated map image: %d bytes", len(image_bytes))

            return MapImageResult(success=True, image_bytes=image_bytes)

        except Exception as e:
            logger.error("Failed to generate map: %s", str(e))
            return MapImageResult(success=False, error=str(e))
