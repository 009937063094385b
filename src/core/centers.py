"""Relief and health centers - Pure functions.

This module models disaster response centers and provides search,
proximity ranking and capacity statistics over a list of centers.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Any

from src.core.geo import Location, distance_between


CENTER_TYPE_HEALTH = "health"
CENTER_TYPE_SHELTER = "shelter"


@dataclass(frozen=True)
class Center:
    """Immutable disaster response center.

    Attributes:
        id: Unique center ID
        name: Display name
        center_type: 'health' or 'shelter'
        status: Operating status (e.g., 'open', 'closed')
        contact: Phone number
        website: Website host/path without scheme
        capacity: Total capacity (people)
        occupancy: Current occupancy (people)
        address: Postal address
        latitude: Center latitude
        longitude: Center longitude
    """
    id: str
    name: str
    center_type: str
    status: str
    contact: str
    website: str
    capacity: int
    occupancy: int
    address: str
    latitude: float
    longitude: float

    @property
    def available_spots(self) -> int:
        """Remaining capacity."""
        return self.capacity - self.occupancy

    @property
    def occupancy_rate(self) -> float:
        """Occupancy as a fraction of capacity (0.0 when capacity is 0)."""
        if self.capacity <= 0:
            return 0.0
        return self.occupancy / self.capacity

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)

    @property
    def is_open(self) -> bool:
        return self.status.lower() == "open"

    @property
    def is_health(self) -> bool:
        return self.center_type == CENTER_TYPE_HEALTH

    @property
    def website_url(self) -> str:
        """Website as a full https URL."""
        if not self.website or self.website.startswith(("http://", "https://")):
            return self.website
        return f"https://{self.website}"


@dataclass(frozen=True)
class CenterStats:
    """Aggregate statistics over a list of centers.

    Attributes:
        total_centers: Number of centers
        available_capacity: Sum of remaining capacity
        health_centers: Number of health centers
        shelter_centers: Number of non-health centers
        occupancy_rate: Total occupancy over total capacity
    """
    total_centers: int
    available_capacity: int
    health_centers: int
    shelter_centers: int
    occupancy_rate: float


def parse_center(data: dict[str, Any]) -> Center:
    """Parse a center from a config mapping.

    Pure function.

    Raises:
        KeyError: If a required field is missing
        ValueError: If a numeric field cannot be converted
    """
    return Center(
        id=str(data["id"]),
        name=data["name"],
        center_type=data.get("type", CENTER_TYPE_SHELTER),
        status=data.get("status", "open"),
        contact=str(data.get("contact", "")),
        website=data.get("website", ""),
        capacity=int(data.get("capacity", 0)),
        occupancy=int(data.get("occupancy", 0)),
        address=data.get("address", ""),
        latitude=float(data["lat"]),
        longitude=float(data["lng"]),
    )


def occupancy_band(rate: float) -> str:
    """Classify an occupancy rate for display.

    Pure function.
    """
    if rate > 0.9:
        return "critical"
    elif rate > 0.7:
        return "busy"
    return "available"


def matches_query(center: Center, query: str) -> bool:
    """Case-insensitive substring match on name or address.

    Pure function.
    """
    needle = query.lower()
    return needle in center.name.lower() or needle in center.address.lower()


def filter_centers(centers: list[Center], query: str | None) -> list[Center]:
    """Filter centers by a search query.

    Pure function. A blank query matches every center.

    Args:
        centers: Centers to search
        query: Text typed into the search box

    Returns:
        Centers whose name or address contains the query
    """
    if query is None or not query.strip():
        return list(centers)

    return [c for c in centers if matches_query(c, query.strip())]


def distance_to_center(location: Location, center: Center) -> float:
    """Distance in kilometers from a location to a center.

    Pure function.
    """
    return distance_between(location, center.location)


def sort_by_distance(
    centers: list[Center],
    location: Location | None,
) -> list[Center]:
    """Sort centers nearest first.

    Pure function. Without a location the original order is kept.
    """
    if location is None:
        return list(centers)

    return sorted(centers, key=lambda c: distance_to_center(location, c))


def centers_with_distance(
    centers: list[Center],
    location: Location | None,
) -> list[tuple[Center, float | None]]:
    """Pair each center with its distance from a location.

    Pure function. Centers are sorted nearest first when a location is
    given; distances are None otherwise.
    """
    if location is None:
        return [(c, None) for c in centers]

    pairs = [(c, distance_to_center(location, c)) for c in centers]
    return sorted(pairs, key=lambda x: x[1])


def compute_stats(centers: list[Center]) -> CenterStats:
    """Compute dashboard statistics for a list of centers.

    Pure function.
    """
    total_capacity = sum(c.capacity for c in centers)
    total_occupancy = sum(c.occupancy for c in centers)
    health = sum(1 for c in centers if c.is_health)

    return CenterStats(
        total_centers=len(centers),
        available_capacity=total_capacity - total_occupancy,
        health_centers=health,
        shelter_centers=len(centers) - health,
        occupancy_rate=total_occupancy / total_capacity if total_capacity > 0 else 0.0,
    )
