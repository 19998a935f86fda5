"""YAML configuration for gridsquare callers.

Holds the station's home grid and the locator precision to encode with.
Nothing in the conversion functions reads this file on its own; callers load
a config and pass it to home_dist_bearing() / encode_with_config().
"""

import logging
import os
import yaml
from pathlib import Path
from typing import Any

from .errors import InvalidGridLength
from .locator import VALID_PRECISIONS, grid_to_longlat

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRIDSQUARE_CONFIG"

DEFAULT_CONFIG = {
    "grid": "CM98",   # Home grid for home_dist_bearing()
    "precision": 6,   # Locator length for encode_with_config()
}


def default_config_path() -> Path:
    """Where the config lives when no path is given.

    $GRIDSQUARE_CONFIG wins, otherwise ~/.config/gridsquare/config.yaml.
    """
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "gridsquare" / "config.yaml"


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    """Check that the home grid decodes and the precision is supported.

    Raises:
        InvalidGrid, InvalidGridLength: For a bad home grid or precision
    """
    grid_to_longlat(config["grid"])
    if config["precision"] not in VALID_PRECISIONS:
        raise InvalidGridLength(config["precision"])
    return config


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file, merged over DEFAULT_CONFIG.

    A missing or unreadable file gives the defaults (unreadable files are
    logged). Values that are readable but invalid raise a GridError, so a
    typo in the home grid is not silently replaced.

    Args:
        config_path: Config file, defaults to default_config_path()

    Returns:
        Dict with configuration values
    """
    config = DEFAULT_CONFIG.copy()
    path = Path(config_path) if config_path else default_config_path()

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return config

    try:
        with open(path) as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not load config from %s: %s", path, e)
        return config

    if user_config:
        if not isinstance(user_config, dict):
            logger.warning("Ignoring config at %s: expected a mapping", path)
            return config
        config.update(user_config)

    return validate_config(config)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> Path:
    """Validate and write configuration as YAML.

    Args:
        config: Configuration dict to save
        config_path: Destination, defaults to default_config_path()

    Returns:
        The path written to
    """
    validate_config({**DEFAULT_CONFIG, **config})
    path = Path(config_path) if config_path else default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    logger.debug("Saved config to %s", path)
    return path
