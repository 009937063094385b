"""Tests for static map configuration functions."""

from src.core.centers import Center
from src.core.geo import DEFAULT_LOCATION, Location
from src.core.static_map import (
    DEFAULT_ZOOM,
    HEALTH_MARKER_COLOR,
    SHELTER_MARKER_COLOR,
    USER_MARKER_COLOR,
    USER_ZOOM,
    MapMarker,
    create_centers_map_config,
    get_center_color,
)


def make_center(id: str, center_type: str, lat: float, lng: float) -> Center:
    return Center(
        id=id,
        name=f"Center {id}",
        center_type=center_type,
        status="open",
        contact="",
        website="",
        capacity=10,
        occupancy=0,
        address="",
        latitude=lat,
        longitude=lng,
    )


class TestGetCenterColor:
    """Tests for get_center_color function."""

    def test_health_is_red(self):
        assert get_center_color(make_center("1", "health", 0, 0)) == HEALTH_MARKER_COLOR

    def test_shelter_is_yellow(self):
        assert get_center_color(make_center("1", "shelter", 0, 0)) == SHELTER_MARKER_COLOR

    def test_unknown_type_is_shelter_color(self):
        assert get_center_color(make_center("1", "camp", 0, 0)) == SHELTER_MARKER_COLOR


class TestCreateCentersMapConfig:
    """Tests for create_centers_map_config function."""

    def test_without_user_location(self):
        centers = [
            make_center("1", "health", 28.5, 77.2),
            make_center("2", "shelter", 19.0, 72.8),
        ]

        config = create_centers_map_config(centers)

        assert (config.latitude, config.longitude) == DEFAULT_LOCATION.coordinates
        assert config.zoom == DEFAULT_ZOOM
        assert config.markers == (
            MapMarker(28.5, 77.2, HEALTH_MARKER_COLOR),
            MapMarker(19.0, 72.8, SHELTER_MARKER_COLOR),
        )

    def test_user_location_centers_map(self):
        user = Location(12.97, 77.59)
        config = create_centers_map_config([make_center("1", "shelter", 13.0, 77.6)], user)

        assert (config.latitude, config.longitude) == (12.97, 77.59)
        assert config.zoom == USER_ZOOM

    def test_user_marker_drawn_last(self):
        user = Location(12.97, 77.59)
        config = create_centers_map_config([make_center("1", "shelter", 13.0, 77.6)], user)

        last = config.markers[-1]
        assert last.color == USER_MARKER_COLOR
        assert last.radius == 10
        assert len(config.markers) == 2

    def test_custom_dimensions(self):
        config = create_centers_map_config([], width=400, height=300)

        assert config.width == 400
        assert config.height == 300
        assert config.markers == ()
