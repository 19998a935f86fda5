"""Maidenhead grid square encoding and decoding.

Locators are written FFSSssEEee:
Field / Square / Subsquare / Extended Square / Superextended Square.

Each pair holds one longitude digit then one latitude digit. Counting starts
at the antimeridian and the south pole, so the unsigned sums have to be
shifted by 180 / 90 degrees to get signed longitude / latitude.
"""

import logging
import math
import string

from .errors import InvalidGrid, InvalidGridLength, InvalidLongLat, UnknownGridError

logger = logging.getLogger(__name__)

LONG_OFFSET = 180.0
LAT_OFFSET = 90.0

# (longitude, latitude) width of one cell, in degrees
TIERS = (
    (20.0, 10.0),                   # field
    (2.0, 1.0),                     # square
    (5.0 / 60, 2.5 / 60),           # subsquare: 5' x 2.5'
    (30.0 / 3600, 15.0 / 3600),     # extended square: 30" x 15"
    (1.25 / 3600, 0.625 / 3600),    # superextended square: 1.25" x 0.625"
)

VALID_PRECISIONS = (4, 6, 8, 10)

# Decoding measures offsets from REFERENCE, encoding adds them to BASE
REFERENCE = "AA00AA00AA"
BASE = "AA00aa00AA"

_FIELD = string.ascii_uppercase[:18]       # A-R
_SUBSQUARE = string.ascii_uppercase[:24]   # A-X
ALPHABETS = (
    _FIELD, _FIELD,
    string.digits, string.digits,
    _SUBSQUARE, _SUBSQUARE,
    string.digits, string.digits,
    _SUBSQUARE, _SUBSQUARE,
)


def grid_to_longlat(grid: str) -> tuple[float, float]:
    """Convert a Maidenhead grid square to longitude/latitude (center of grid).

    Args:
        grid: Grid square of 4, 6, 8 or 10 characters, any letter case.
            Surrounding whitespace is ignored, so " FM18 " decodes as "FM18".

    Returns:
        Tuple of (longitude, latitude) in decimal degrees

    Raises:
        InvalidGridLength: If the grid is not 4, 6, 8 or 10 characters long
        InvalidGrid: If a character is outside the alphabet for its position
    """
    grid = grid.strip()
    if len(grid) not in VALID_PRECISIONS:
        raise InvalidGridLength(len(grid))

    for char, alphabet in zip(grid, ALPHABETS):
        if not char.isascii() or char.upper() not in alphabet:
            raise InvalidGrid(grid)

    vals = [ord(c.upper()) - ord(r) for c, r in zip(grid, REFERENCE)]
    lon = sum(v * width for v, (width, _) in zip(vals[0::2], TIERS))
    lat = sum(v * width for v, (_, width) in zip(vals[1::2], TIERS))

    # Move from the south-west corner to the middle of the finest cell
    lon_width, lat_width = TIERS[len(grid) // 2 - 1]
    lon += lon_width / 2
    lat += lat_width / 2

    longitude, latitude = lon - LONG_OFFSET, lat - LAT_OFFSET
    logger.debug("Decoded %s to (%f, %f)", grid, longitude, latitude)
    return longitude, latitude


def _below_edge(value: float, edge: float) -> float:
    """Pull a value lying on the upper edge back into the last cell."""
    if value >= edge:
        return math.nextafter(edge, 0.0)
    return value


def longlat_to_grid(longitude: float, latitude: float, precision: int) -> str:
    """Convert longitude/latitude to a Maidenhead grid square.

    Args:
        longitude: Longitude in decimal degrees, -180 to 180
        latitude: Latitude in decimal degrees, -90 to 90
        precision: Number of characters to produce (4, 6, 8 or 10)

    Returns:
        Grid square in conventional case, e.g. "FM18lv53SL"

    Raises:
        InvalidGridLength: If precision is not 4, 6, 8 or 10
        InvalidLongLat: If the coordinates are out of range
        UnknownGridError: If a digit cannot be mapped back to a character
    """
    # 4.0 == 4, so floats and bools have to be turned away explicitly
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidGridLength(precision)
    if precision not in VALID_PRECISIONS:
        raise InvalidGridLength(precision)

    if not (-180.0 <= longitude <= 180.0 and -90.0 <= latitude <= 90.0):
        raise InvalidLongLat(longitude, latitude)

    lon = _below_edge(longitude + LONG_OFFSET, 2 * LONG_OFFSET)
    lat = _below_edge(latitude + LAT_OFFSET, 2 * LAT_OFFSET)

    vals = []
    for tier, (lon_width, lat_width) in enumerate(TIERS):
        if tier == 0:
            vals.append(int(lon / lon_width))
            vals.append(int(lat / lat_width))
        else:
            prev_lon, prev_lat = TIERS[tier - 1]
            vals.append(int(lon % prev_lon / lon_width))
            vals.append(int(lat % prev_lat / lat_width))
    vals = vals[:precision]

    chars = []
    for digit, base, alphabet in zip(vals, BASE, ALPHABETS):
        try:
            char = chr(ord(base) + digit)
        except (ValueError, OverflowError) as e:
            raise UnknownGridError(f"Failed to generate grid: {e}") from e
        if char.upper() not in alphabet:
            raise UnknownGridError(f"Failed to generate grid: digit {digit} out of range")
        chars.append(char)

    grid = "".join(chars)
    logger.debug("Encoded (%f, %f) to %s", longitude, latitude, grid)
    return grid


def normalize_grid(grid: str) -> str:
    """Return a grid square in conventional case (upper field, lower subsquare)."""
    grid = grid.strip()
    return "".join(c.lower() if b.islower() else c.upper() for c, b in zip(grid, BASE))
