"""Configuration loading utilities."""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..contracts.errors import ConfigError
from .constants import CONFIG_ENV_VAR, CONFIG_FILE_NAME, ENV_PREFIX
from .model import MergeOptions


def default_options() -> MergeOptions:
    """Create default merge options."""
    return MergeOptions()


def load_options(path: Optional[Union[str, Path]] = None) -> MergeOptions:
    """Load merge options from file and environment.

    Args:
        path: Path to a TOML file. If None, looks for:
              - POCAT_CONFIG environment variable
              - pocat.toml in current directory
              - ~/.pocat/config.toml

    Returns:
        Loaded and validated options

    Raises:
        ConfigError: If the configuration file is invalid or not found
    """
    if path is None:
        path = _find_config_file()

    if path is None:
        return _apply_env_overrides(default_options())

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        options = MergeOptions.from_toml_file(path)
    except Exception as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    return _apply_env_overrides(options)


def _find_config_file() -> Optional[Path]:
    """Find configuration file using standard search paths."""

    # 1. Environment variable
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    # 2. Current directory
    cwd_config = Path(CONFIG_FILE_NAME)
    if cwd_config.exists():
        return cwd_config

    # 3. User config directory
    user_config = Path.home() / ".pocat" / "config.toml"
    if user_config.exists():
        return user_config

    return None


def _apply_env_overrides(options: MergeOptions) -> MergeOptions:
    """Apply environment variable overrides to the options.

    Environment variables follow pattern: POCAT_<FIELD>
    Examples:
        POCAT_WIDTH=60
        POCAT_WRAP=false
        POCAT_ORDER=location
        POCAT_REMOVE_HEADER_FIELDS=POT-Creation-Date,X-Generator
    """
    overrides: Dict[str, Any] = {}

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key == CONFIG_ENV_VAR:
            continue

        field = key[len(ENV_PREFIX):].lower()
        if field not in MergeOptions.model_fields:
            continue

        if field == "remove_header_fields":
            overrides[field] = [name for name in value.split(",") if name.strip()]
        else:
            overrides[field] = _convert_env_value(value)

    if not overrides:
        return options

    data = options.model_dump()
    data.update(overrides)
    try:
        return MergeOptions.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid environment override: {e}") from e


def _convert_env_value(value: str) -> Any:
    """Convert string environment variable to appropriate type."""
    # Boolean
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    # Integer
    try:
        return int(value)
    except ValueError:
        pass

    # String (default)
    return value
