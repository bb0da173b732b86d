"""Utility helpers shared across the SDK core modules."""

from __future__ import annotations

import logging

import base58
from web3 import Web3

SOLANA_PUBKEY_LENGTH = 32


class GeniusBridgeError(Exception):
    """Base class for every error raised by the SDK."""


def get_logger(name: str = "genius_bridge") -> logging.Logger:
    """Return a configured logger that prints to stderr."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def get_debug_logger(name: str = "genius_bridge") -> logging.Logger:
    """Return a DEBUG-level child of :func:`get_logger`'s logger.

    Records reach the parent's handler through propagation, so the parent's
    own level is left alone.
    """
    logger = get_logger(name).getChild("debug")
    logger.setLevel(logging.DEBUG)
    return logger


def validate_and_checksum_evm_address(address: str) -> str:
    """Return the checksummed form of ``address``; raise ``ValueError`` if malformed."""
    if not isinstance(address, str) or not address.startswith(("0x", "0X")):
        raise ValueError(f"Not a hex address: {address!r}")
    try:
        return Web3.to_checksum_address(address)
    except Exception as exc:  # web3 raises ValueError/TypeError for malformed inputs
        raise ValueError(f"Not a 20-byte hex address: {address!r}") from exc


def validate_solana_address(address: str) -> bytes:
    """Decode a base58 public key; raise ``ValueError`` unless it is 32 bytes."""
    if not isinstance(address, str) or not address:
        raise ValueError(f"Not a base58 string: {address!r}")
    decoded = base58.b58decode(address)
    if len(decoded) != SOLANA_PUBKEY_LENGTH:
        raise ValueError(f"Expected {SOLANA_PUBKEY_LENGTH} bytes, got {len(decoded)}")
    return decoded


__all__ = [
    "GeniusBridgeError",
    "SOLANA_PUBKEY_LENGTH",
    "get_debug_logger",
    "get_logger",
    "validate_and_checksum_evm_address",
    "validate_solana_address",
]
