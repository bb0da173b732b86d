"""Chain identifiers and virtual-machine family lookup."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional, Tuple


class ChainId(IntEnum):
    """Network identifiers understood by the GeniusBridge quoting service."""

    ETHEREUM = 1
    OPTIMISM = 10
    BSC = 56
    POLYGON = 137
    SONIC = 146
    BASE = 8453
    ARBITRUM = 42161
    AVALANCHE = 43114
    SOLANA = 1399811149


class VmFamily(Enum):
    """Execution model of a chain."""

    EVM = "evm"
    SVM = "svm"


_FAMILIES = {
    ChainId.ETHEREUM: VmFamily.EVM,
    ChainId.ARBITRUM: VmFamily.EVM,
    ChainId.OPTIMISM: VmFamily.EVM,
    ChainId.POLYGON: VmFamily.EVM,
    ChainId.BSC: VmFamily.EVM,
    ChainId.AVALANCHE: VmFamily.EVM,
    ChainId.BASE: VmFamily.EVM,
    # Sonic is an EVM chain but is not part of SUPPORTED_CHAINS.
    ChainId.SONIC: VmFamily.EVM,
    ChainId.SOLANA: VmFamily.SVM,
}

SUPPORTED_CHAINS: Tuple[ChainId, ...] = (
    ChainId.ETHEREUM,
    ChainId.ARBITRUM,
    ChainId.OPTIMISM,
    ChainId.POLYGON,
    ChainId.BSC,
    ChainId.AVALANCHE,
    ChainId.BASE,
    ChainId.SOLANA,
)


def chain_family(network: int) -> Optional[VmFamily]:
    """Return the VM family of ``network`` or ``None`` for unknown ids."""
    try:
        return _FAMILIES.get(ChainId(network))
    except ValueError:
        return None


def is_evm_network(network: int) -> bool:
    return chain_family(network) is VmFamily.EVM


def is_solana_network(network: int) -> bool:
    return chain_family(network) is VmFamily.SVM


__all__ = [
    "ChainId",
    "SUPPORTED_CHAINS",
    "VmFamily",
    "chain_family",
    "is_evm_network",
    "is_solana_network",
]
