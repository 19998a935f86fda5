#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pytest",
# ]
# ///
"""Test Maidenhead grid square encoding and decoding."""

import math
import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridsquare.errors import GridError, InvalidGrid, InvalidGridLength, InvalidLongLat
from gridsquare.locator import TIERS, grid_to_longlat, longlat_to_grid, normalize_grid

TEST_GRID = "FM18lv53SL"
TEST_LONG = -77.035278
TEST_LAT = 38.889484

ROUND_TRIP_GRIDS = [
    "AA00AA00AA",
    "RR99XX99XX",
    "FM18lv53SL",
    "CM87um12AB",
    "KP04ow90XA",
    "QF22lb05KJ",
    "IO91wl38DE",
    "JN58td77RQ",
]


def test_encode_precision():
    """Test that each precision truncates the full 10-character locator."""
    print("Testing longlat_to_grid() precision:")

    for n in (4, 6, 8, 10):
        grid = longlat_to_grid(TEST_LONG, TEST_LAT, n)
        print(f"  precision {n}: {grid} (expected: {TEST_GRID[:n]})")
        assert grid == TEST_GRID[:n]

    print("✅ All precision tests passed!\n")


def test_decode_known_grid():
    """Test that decoding lands within half a cell of the known point."""
    print("Testing grid_to_longlat() on a known point:")

    for n in (4, 6, 8, 10):
        lon, lat = grid_to_longlat(TEST_GRID[:n])
        lon_width, lat_width = TIERS[n // 2 - 1]
        print(f"  {TEST_GRID[:n]}: ({lon:.6f}, {lat:.6f})")
        assert abs(lon - TEST_LONG) <= lon_width / 2
        assert abs(lat - TEST_LAT) <= lat_width / 2

    print("✅ All decode tests passed!\n")


def test_decode_returns_cell_center():
    """Test that a 4-character grid decodes to the middle of its square."""
    lon, lat = grid_to_longlat("JO01")
    assert lon == pytest.approx(1.0)
    assert lat == pytest.approx(51.5)

    lon, lat = grid_to_longlat("AA00")
    assert lon == pytest.approx(-179.0)
    assert lat == pytest.approx(-89.5)


def test_round_trip():
    """Test encode(decode(grid)) gives back the grid for every length."""
    print("Testing round trip:")

    for full in ROUND_TRIP_GRIDS:
        for n in (4, 6, 8, 10):
            grid = full[:n]
            lon, lat = grid_to_longlat(grid)
            result = longlat_to_grid(lon, lat, n)
            print(f"  {grid} → ({lon:.6f}, {lat:.6f}) → {result}")
            assert result == normalize_grid(grid)

    print("✅ All round trip tests passed!\n")


def test_round_trip_case_insensitive():
    """Test that letter case does not change the decoded position."""
    assert grid_to_longlat("fm18LV53sl") == grid_to_longlat("FM18lv53SL")
    lon, lat = grid_to_longlat("fm18LV53sl")
    assert longlat_to_grid(lon, lat, 10) == "FM18lv53SL"


def test_decode_strips_whitespace():
    """Test that padding around a locator is ignored."""
    assert grid_to_longlat("  FM18lv ") == grid_to_longlat("FM18lv")
    assert grid_to_longlat(" FM18 ") == grid_to_longlat("FM18")

    # Padding does not count toward the length
    with pytest.raises(InvalidGridLength):
        grid_to_longlat(" FM1 ")


def test_encode_edges():
    """Test the corners of the map encode into valid cells."""
    assert longlat_to_grid(-180.0, -90.0, 10) == "AA00aa00AA"
    assert longlat_to_grid(180.0, 90.0, 10) == "RR99xx99XX"
    assert longlat_to_grid(0.0, 0.0, 6) == "JJ00aa"


def test_invalid_precision():
    """Test that unsupported precisions are rejected for any coordinates."""
    for precision in (0, 2, 5, 7, 12):
        with pytest.raises(InvalidGridLength) as excinfo:
            longlat_to_grid(TEST_LONG, TEST_LAT, precision)
        assert excinfo.value.length == precision


def test_non_integer_precision():
    """Test that a float or bool precision is rejected rather than truncated."""
    for precision in (4.0, 6.0, True, "6", None):
        with pytest.raises(InvalidGridLength) as excinfo:
            longlat_to_grid(TEST_LONG, TEST_LAT, precision)
        assert excinfo.value.length is precision


def test_invalid_longlat():
    """Test out-of-range coordinates."""
    cases = [
        (-201.0, 38.9),
        (-77.0, 921.0),
        (180.5, 0.0),
        (0.0, -90.5),
        (0.0, 135.0),  # between the 90 and 180 latitude bounds
        (math.nan, 0.0),
    ]

    for lon, lat in cases:
        with pytest.raises(InvalidLongLat) as excinfo:
            longlat_to_grid(lon, lat, 10)
        assert excinfo.value.longitude is lon
        assert excinfo.value.latitude is lat


def test_invalid_grid_length():
    """Test grids of unsupported length."""
    for grid in ("", "FM", "AI021", "FM18lv5", "AA00AA00AA00"):
        with pytest.raises(InvalidGridLength) as excinfo:
            grid_to_longlat(grid)
        assert excinfo.value.length == len(grid)


def test_invalid_grid_characters():
    """Test characters outside each position's alphabet."""
    bad_grids = [
        "AIA2",        # letter where a digit belongs
        "SA00",        # field beyond R
        "FM18yy",      # subsquare beyond X
        "FM18lvAB",    # letters in the extended square
        "FM18lv53ZZ",  # superextended beyond X
        "FM1８",        # full-width digit
        "ÀA00",        # non-ASCII letter
        "FM18lß",      # uppercases to two letters
    ]

    for grid in bad_grids:
        with pytest.raises(InvalidGrid) as excinfo:
            grid_to_longlat(grid)
        assert excinfo.value.grid == grid


def test_valid_reference_grid():
    lon, lat = grid_to_longlat("AA00AA00AA")
    assert -180.0 < lon < -179.99
    assert -90.0 < lat < -89.99


def test_errors_are_value_errors():
    """Test that callers can catch every failure as GridError or ValueError."""
    with pytest.raises(GridError):
        grid_to_longlat("AIA2")
    with pytest.raises(ValueError):
        longlat_to_grid(0.0, 0.0, 5)


def test_normalize_grid():
    assert normalize_grid("fm18LV53sl") == "FM18lv53SL"
    assert normalize_grid("jo01") == "JO01"


if __name__ == "__main__":
    print("=" * 60)
    print("Testing locator.py")
    print("=" * 60 + "\n")

    test_encode_precision()
    test_decode_known_grid()
    test_round_trip()

    print("=" * 60)
    print("✅ ALL TESTS PASSED!")
    print("=" * 60)
