"""
Configuration loader — reads pomprops.yml into a WriterConfig.

It reads YAML, validates against the Pydantic schema, and returns
a typed config. The config file's folder is the base for every
relative path in it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from pomprops.core.models.config import CONFIG_VERSION, WriterConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "pomprops.yml"


class ConfigError(Exception):
    """Raised when the writer configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for pomprops.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to pomprops.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> WriterConfig:
    """Load and validate the writer configuration.

    Args:
        path: Explicit path to pomprops.yml. If None, searches upward.

    Returns:
        Validated WriterConfig.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(f"No {CONFIG_FILE} found. Create one, or specify --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # YAML reads 1.0 as a float; versions are strings. bool is an int, keep it out
    coords = data.get("coordinates")
    version = coords.get("version") if isinstance(coords, dict) else None
    if isinstance(version, (int, float)) and not isinstance(version, bool):
        coords["version"] = str(version)

    try:
        config = WriterConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if config.version != CONFIG_VERSION:
        raise ConfigError(
            f"Unsupported config version {config.version} in {path} (expected {CONFIG_VERSION})"
        )

    logger.info("Loaded config for %s", config.coordinates)
    return config


def config_dir(config_path: Path) -> Path:
    """Get the base directory from a config file path."""
    return config_path.parent.resolve()
