"""Configuration utilities for the SDK."""

from .loader import (
    DEFAULT_BASE_URL,
    ConfigError,
    GeniusBridgeConfig,
    config_from_env,
    load_config,
)

__all__ = [
    "ConfigError",
    "DEFAULT_BASE_URL",
    "GeniusBridgeConfig",
    "config_from_env",
    "load_config",
]
