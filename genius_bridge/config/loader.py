"""Config loader for the GeniusBridge SDK."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, MutableMapping, Optional

from dotenv import find_dotenv, load_dotenv

from genius_bridge.core.utils import GeniusBridgeError

DEFAULT_BASE_URL = "https://bridge-api.tradegeniuses.net"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(GeniusBridgeError, ValueError):
    """Raised when configuration data is invalid or missing."""


@dataclass(frozen=True)
class GeniusBridgeConfig:
    """Construction-time options for :class:`~genius_bridge.client.GeniusBridgeSdk`.

    ``debug`` installs a console logger at DEBUG level and wins over
    ``logger`` when both are given.
    """

    genius_bridge_base_url: Optional[str] = None
    debug: bool = False
    logger: Optional[logging.Logger] = None

    @property
    def base_url(self) -> str:
        """Return the configured base URL or the default host."""
        return (self.genius_bridge_base_url or DEFAULT_BASE_URL).rstrip("/")


def _load_json(path: Path) -> MutableMapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file contains invalid JSON: {path}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")
    return data


def load_config(config_path: Optional[Path] = None) -> GeniusBridgeConfig:
    """Load SDK options from a JSON file.

    Recognized keys are ``geniusBridgeBaseUrl`` and ``debug``; both are optional.
    """
    config_path = config_path or Path("genius_bridge.json")
    data = _load_json(config_path)

    base_url = data.get("geniusBridgeBaseUrl")
    if base_url is not None and not isinstance(base_url, str):
        raise ConfigError("geniusBridgeBaseUrl must be a string")

    debug = data.get("debug", False)
    if not isinstance(debug, bool):
        raise ConfigError("debug must be a boolean")

    return GeniusBridgeConfig(genius_bridge_base_url=base_url or None, debug=debug)


def config_from_env() -> GeniusBridgeConfig:
    """Build options from ``GENIUS_BRIDGE_BASE_URL`` and ``DEBUG``, honouring a ``.env`` file."""
    load_dotenv(find_dotenv(usecwd=True))
    base_url = (os.getenv("GENIUS_BRIDGE_BASE_URL") or "").strip() or None
    debug = (os.getenv("DEBUG") or "").strip().lower() in _TRUTHY
    return GeniusBridgeConfig(genius_bridge_base_url=base_url, debug=debug)


__all__ = [
    "ConfigError",
    "DEFAULT_BASE_URL",
    "GeniusBridgeConfig",
    "config_from_env",
    "load_config",
]
