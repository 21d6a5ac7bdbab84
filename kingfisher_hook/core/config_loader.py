"""
kingfisher-hook - Config Loader
Loads installer settings from an optional YAML file.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..config import CONFIG_ENV_VAR
from .models import InstallerConfig

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Config file could not be read or is invalid."""
    pass


def load_config(filepath: Union[str, Path]) -> InstallerConfig:
    """
    Loads an InstallerConfig from a YAML file.

    Args:
        filepath: Path to the YAML file

    Returns:
        Config with file values applied over the defaults

    Raises:
        ConfigLoadError: If the file is missing, unparsable or invalid
    """
    filepath = Path(filepath).expanduser()

    if not filepath.exists():
        raise ConfigLoadError(f"Config file not found: {filepath}")

    if not filepath.is_file():
        raise ConfigLoadError(f"Config path is not a file: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {filepath}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigLoadError(f"Cannot read {filepath}: {e}") from e

    logger.debug("Loaded config from %s", filepath)
    return config_from_dict(data, source_file=str(filepath))


def config_from_dict(data: Any, source_file: str = "unknown") -> InstallerConfig:
    """Validates parsed YAML and builds an InstallerConfig."""
    # An empty file parses to None
    if data is None:
        return InstallerConfig(source_file=source_file)

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{source_file}: top level must be a mapping")

    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigLoadError(
            f"{source_file}: keys must be strings, got {', '.join(map(repr, bad_keys))}"
        )

    allowed = InstallerConfig.field_names()
    unknown = sorted(set(data) - set(allowed))
    if unknown:
        raise ConfigLoadError(
            f"{source_file}: unknown keys {', '.join(map(str, unknown))} "
            f"(allowed: {', '.join(allowed)})"
        )

    values: Dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str) or not value.strip():
            raise ConfigLoadError(f"{source_file}: '{key}' must be a non-empty string")
        values[key] = value.strip()

    return InstallerConfig(source_file=source_file, **values)


def resolve_config(filepath: Optional[Union[str, Path]] = None) -> InstallerConfig:
    """
    Loads the explicit config file, else the one named by the environment,
    else returns the defaults.
    """
    if filepath is None:
        filepath = os.environ.get(CONFIG_ENV_VAR) or None

    if filepath is None:
        return InstallerConfig()

    return load_config(filepath)


__all__ = [
    "ConfigLoadError",
    "config_from_dict",
    "load_config",
    "resolve_config",
]
