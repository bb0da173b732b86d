"""Native token sentinels and their resolution."""

from __future__ import annotations

from typing import Any, FrozenSet

from genius_bridge.core.chains import is_evm_network

NATIVE_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"
SOL_NATIVE_ADDRESS = "So11111111111111111111111111111111111111112"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Compared lowercased.
NATIVE_ALIASES: FrozenSet[str] = frozenset(
    {
        "native",
        "eth",
        "bnb",
        "matic",
        "pol",
        "avax",
        "s",
        "sonic",
        ZERO_ADDRESS,
        NATIVE_ADDRESS.lower(),
    }
)


def is_native(token: Any) -> bool:
    """Return ``True`` when ``token`` is one of the EVM native-token aliases."""
    if not isinstance(token, str) or not token:
        return False
    return token.strip().lower() in NATIVE_ALIASES


def resolve_native_token(network: int, token: str) -> str:
    """Rewrite an EVM native alias to :data:`NATIVE_ADDRESS`.

    Tokens on non-EVM networks are returned unchanged; Solana callers pass the
    wrapped SOL mint (:data:`SOL_NATIVE_ADDRESS`) themselves.
    """
    if is_evm_network(network) and is_native(token):
        return NATIVE_ADDRESS
    return token


__all__ = [
    "NATIVE_ADDRESS",
    "NATIVE_ALIASES",
    "SOL_NATIVE_ADDRESS",
    "ZERO_ADDRESS",
    "is_native",
    "resolve_native_token",
]
