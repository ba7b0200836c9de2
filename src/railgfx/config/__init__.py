"""Configuration management for railgfx."""

from .settings import (
    AppConfig,
    UIConfig,
    StoreConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    "AppConfig",
    "UIConfig",
    "StoreConfig",
    "LoggingConfig",
    "load_config",
]
