"""Great-circle distance and bearing between Maidenhead grid squares."""

import math
from typing import Any

from .locator import grid_to_longlat, longlat_to_grid

EARTH_RADIUS_KM = 6371.0


def calc_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate initial bearing from point 1 to point 2 in degrees.

    Args:
        lat1, lon1: Starting point latitude and longitude
        lat2, lon2: Ending point latitude and longitude

    Returns:
        Bearing in degrees (0-360)
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlon = lon2 - lon1
    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    bearing = math.atan2(x, y)
    return (math.degrees(bearing) + 360) % 360


def calc_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle distance between two points in kilometers.

    Args:
        lat1, lon1: Starting point latitude and longitude
        lat2, lon2: Ending point latitude and longitude

    Returns:
        Distance in kilometers
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
    return EARTH_RADIUS_KM * c


def grid_dist_bearing(from_grid: str, to_grid: str) -> tuple[float, float]:
    """Distance and initial bearing between the centers of two grid squares.

    The grids may be of different lengths. Decoding errors
    (InvalidGrid, InvalidGridLength) propagate unchanged.

    Returns:
        Tuple of (distance_km, bearing_degrees)
    """
    lon1, lat1 = grid_to_longlat(from_grid)
    lon2, lat2 = grid_to_longlat(to_grid)
    return calc_distance_km(lat1, lon1, lat2, lon2), calc_bearing(lat1, lon1, lat2, lon2)


def grid_distance(from_grid: str, to_grid: str) -> float:
    """Great-circle distance in kilometers between two grid squares."""
    return grid_dist_bearing(from_grid, to_grid)[0]


def grid_bearing(from_grid: str, to_grid: str) -> float:
    """Initial bearing in degrees (0-360) from one grid square to another."""
    return grid_dist_bearing(from_grid, to_grid)[1]


def home_dist_bearing(to_grid: str, config: dict[str, Any]) -> tuple[float, float]:
    """Distance and bearing from the configured home grid to another grid.

    Args:
        to_grid: Destination grid square
        config: Config dict from load_config() (only "grid" is read)

    Returns:
        Tuple of (distance_km, bearing_degrees)
    """
    return grid_dist_bearing(config["grid"], to_grid)


def encode_with_config(longitude: float, latitude: float, config: dict[str, Any]) -> str:
    """Encode coordinates using the configured default precision."""
    return longlat_to_grid(longitude, latitude, int(config["precision"]))


def bearing_to_direction(bearing: float) -> str:
    """Convert bearing to compass direction.

    Args:
        bearing: Bearing in degrees (0-360)

    Returns:
        Compass direction (N, NNE, NE, etc.)
    """
    dirs = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
            "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]
    idx = round(bearing / 22.5) % 16
    return dirs[idx]
