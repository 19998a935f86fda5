"""gridsquare - Maidenhead grid square conversion, distance and bearing."""

from .errors import GridError, InvalidGrid, InvalidGridLength, InvalidLongLat, UnknownGridError
from .locator import TIERS, VALID_PRECISIONS, grid_to_longlat, longlat_to_grid, normalize_grid
from .geo_utils import (
    calc_bearing,
    calc_distance_km,
    grid_dist_bearing,
    grid_distance,
    grid_bearing,
    home_dist_bearing,
    encode_with_config,
    bearing_to_direction,
)
from .config import DEFAULT_CONFIG, default_config_path, validate_config, load_config, save_config

__all__ = [
    # Errors
    'GridError',
    'InvalidGrid',
    'InvalidGridLength',
    'InvalidLongLat',
    'UnknownGridError',
    # Locator conversion
    'TIERS',
    'VALID_PRECISIONS',
    'grid_to_longlat',
    'longlat_to_grid',
    'normalize_grid',
    # Geo utilities
    'calc_bearing',
    'calc_distance_km',
    'grid_dist_bearing',
    'grid_distance',
    'grid_bearing',
    'home_dist_bearing',
    'encode_with_config',
    'bearing_to_direction',
    # Config
    'DEFAULT_CONFIG',
    'default_config_path',
    'validate_config',
    'load_config',
    'save_config',
]
