"""Configuration file loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigError
from .settings import AppConfig

DEFAULT_CONFIG_PATH = Path("config/railgfx.yaml")
DEFAULT_ENV_PATH = Path(".env")


def _expand_env_vars(obj):
    """Recursively expand ${VAR} patterns in strings."""
    if isinstance(obj, str):
        if obj.startswith("${") and obj.endswith("}"):
            var_name = obj[2:-1]
            return os.environ.get(var_name, "")
        return obj
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


def load_config(
    config_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> AppConfig:
    """Load configuration from YAML file and environment.

    Args:
        config_path: Path to the YAML config (default: config/railgfx.yaml)
        env_path: Path to .env file (default: .env)

    Returns:
        Loaded AppConfig instance

    Raises:
        ConfigError: If the YAML is malformed or a value is invalid.
    """
    if env_path is None:
        env_path = DEFAULT_ENV_PATH
    if env_path.exists():
        load_dotenv(env_path)

    config_data = {}
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(config_path), str(e)) from e

    if not isinstance(config_data, dict):
        raise ConfigError(str(config_path), "top level must be a mapping")

    config_data = _expand_env_vars(config_data)

    try:
        return AppConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(str(config_path), str(e)) from e
