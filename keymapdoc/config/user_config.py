"""
Settings loading for keymapdoc.

Configuration is read from the first YAML file found in:
1. A path provided on the command line
2. keymapdoc.yaml / .keymapdoc.yml in the current directory
3. The XDG config directory (keymapdoc/config.yaml)

Environment variables override file values.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from keymapdoc.config.models import KeymapDocSettings
from keymapdoc.core.errors import ConfigError
from keymapdoc.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


def generate_config_paths(cli_config_path: str | Path | None = None) -> list[Path]:
    """Generate a list of config paths to search in order of precedence."""
    config_paths = []

    if cli_config_path:
        config_paths.append(Path(cli_config_path).expanduser().resolve())

    config_paths.extend(
        [Path.cwd() / "keymapdoc.yaml", Path.cwd() / ".keymapdoc.yml"]
    )

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    config_root = (
        Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    )
    config_paths.extend(
        [
            config_root / "keymapdoc" / "config.yaml",
            config_root / "keymapdoc" / "config.yml",
        ]
    )

    return config_paths


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML in config file", path=str(path)) from e
    except OSError as e:
        raise ConfigError("Cannot read config file", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping", path=str(path))
    return data


def load_settings(cli_config_path: str | Path | None = None) -> KeymapDocSettings:
    """Load settings from the first config file found plus the environment.

    Args:
        cli_config_path: Optional explicit config file; it must exist

    Returns:
        Validated settings

    Raises:
        ConfigError: If the explicit file is missing or any file is invalid
    """
    if cli_config_path and not Path(cli_config_path).expanduser().exists():
        raise ConfigError("Config file not found", path=str(cli_config_path))

    config_data: dict[str, Any] = {}
    for path in generate_config_paths(cli_config_path):
        if path.is_file():
            config_data = _read_yaml(path)
            logger.debug("config_file_loaded", path=str(path), keys=list(config_data))
            break
    else:
        logger.debug("no_config_file_found")

    try:
        return KeymapDocSettings(**config_data)
    except ValidationError as e:
        raise ConfigError("Invalid configuration", errors=e.error_count()) from e
