"""Client SDK for the GeniusBridge cross-chain quoting service."""

from importlib import metadata

from .client import GeniusBridgeSdk
from .config import GeniusBridgeConfig
from .core import (
    Authority,
    ChainId,
    FetchError,
    GeniusBridgeError,
    PriceRequest,
    QuoteRequest,
    ValidationError,
)


def __getattr__(name: str) -> str:
    """Expose the package version via ``genius_bridge.__version__``."""
    if name == "__version__":
        try:
            return metadata.version("genius-bridge")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = [
    "Authority",
    "ChainId",
    "FetchError",
    "GeniusBridgeConfig",
    "GeniusBridgeError",
    "GeniusBridgeSdk",
    "PriceRequest",
    "QuoteRequest",
    "ValidationError",
    "__version__",
]
