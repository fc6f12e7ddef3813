"""Coordinate helpers for the nearby locations service."""

from ..models.location import Region

# India's approximate bounding box
INDIA_BOUNDS = {
    "north": 37.6,
    "south": 6.4,
    "east": 97.25,
    "west": 68.7,
}

INDIA_BOUNDS_HINT = (
    "India's approximate bounds: Latitude: 6.4°N to 37.6°N, Longitude: 68.7°E to 97.25°E"
)


def validate_coordinates(latitude: float, longitude: float) -> bool:
    """Check that a coordinate lies inside India's bounding box.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees

    Returns:
        True if the coordinate is inside the box (edges included), False otherwise
    """
    return (
        INDIA_BOUNDS["south"] <= latitude <= INDIA_BOUNDS["north"]
        and INDIA_BOUNDS["west"] <= longitude <= INDIA_BOUNDS["east"]
    )


def get_region(latitude: float, longitude: float) -> Region:
    """Map a coordinate to a region bucket.

    The thresholds are a rough split for picking vocabulary, not state borders.
    """
    if latitude > 26:
        return Region.NORTH
    if latitude < 15:
        return Region.SOUTH
    if longitude < 77:
        return Region.WEST
    return Region.EAST
