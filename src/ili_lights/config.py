"""Light rig configuration stored as JSON.

The config file holds a list of lights in their dict form:

    {
        "lights": [
            {"type": "light", "lightid": 1, "state": true, "intensity": 255,
             "min_intensity": 0, "max_intensity": 255},
            {"type": "rgb", "lightid": 2, "state": true, "intensity": 200,
             "min_intensity": 0, "max_intensity": 255, "color": 16711680}
        ]
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from .exceptions import ConfigError
from .light import Light
from .serialization import from_dict, to_dict

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".config/ili-lights/config.json"


def load_config(path: Path | None = None) -> dict:
    """
    Load configuration from file.

    Returns an empty config when the file does not exist.

    Raises:
        ConfigError: File exists but is not a JSON object
    """
    path = path or CONFIG_FILE
    if not path.exists():
        logger.debug("No config at %s", path)
        return {}

    try:
        with open(path) as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return config


def build_lights(config: dict) -> list[Light]:
    """Create the lights described under config["lights"]."""
    entries = config.get("lights", [])
    if not isinstance(entries, list):
        raise ConfigError("'lights' must be a list")

    lights = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ConfigError(f"Light entry must be an object, got {entry!r}")
        lights.append(from_dict(entry))
    return lights


def save_config(lights: Iterable[Light], path: Path | None = None) -> Path:
    """Write lights to the config file, creating its directory. Returns the path."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    config = {"lights": [to_dict(light) for light in lights]}
    with open(path, "w") as f:
        json.dump(config, f, indent=2)
    logger.info("Saved %d light(s) to %s", len(config["lights"]), path)
    return path
