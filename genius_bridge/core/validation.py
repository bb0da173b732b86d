"""Validation of price and quote parameters."""

from __future__ import annotations

import logging
from typing import Iterable

from genius_bridge.core.chains import VmFamily, chain_family
from genius_bridge.core.tokens import is_native
from genius_bridge.core.types import PriceRequest, QuoteRequest
from genius_bridge.core.utils import (
    GeniusBridgeError,
    validate_and_checksum_evm_address,
    validate_solana_address,
)


class ValidationError(GeniusBridgeError, ValueError):
    """Raised when request parameters break a bridging rule."""


class ParamsValidator:
    """Checks requests against the configured chain list.

    Every rejection is logged at ERROR with the same text it is raised with.
    """

    def __init__(self, chains: Iterable[int], logger: logging.Logger) -> None:
        self._chains = frozenset(chains)
        self._logger = logger

    def validate_price(self, request: PriceRequest) -> None:
        if request.network_in == request.network_out:
            self._fail("Single chain swaps are not supported by GeniusBridge")

        for network in (request.network_in, request.network_out):
            if network not in self._chains:
                self._fail(f"Network {network} not supported by GeniusBridge")

        # Exact string comparison; "0.0" or "" are not caught here.
        if request.amount_in == "0":
            self._fail("Amount in must be greater than 0")

        self._check_address(request.network_in, request.token_in, role="token", allow_native=True)
        self._check_address(request.network_out, request.token_out, role="token", allow_native=True)

    def validate_quote(self, request: QuoteRequest) -> None:
        self.validate_price(request)

        if not request.from_address:
            self._fail("From address is required for quote")

        if request.to_address:
            self._check_address(request.network_out, request.to_address, role="receiver", allow_native=False)

    def _check_address(self, network: int, address: str, *, role: str, allow_native: bool) -> None:
        family = chain_family(network)
        if family is VmFamily.SVM:
            try:
                validate_solana_address(address)
            except ValueError:
                self._fail(f"Invalid Solana {role} address: {address}")
        elif family is VmFamily.EVM:
            if allow_native and is_native(address):
                return
            try:
                validate_and_checksum_evm_address(address)
            except ValueError:
                self._fail(f"Invalid EVM {role} address: {address}")

    def _fail(self, message: str) -> None:
        self._logger.error(message)
        raise ValidationError(message)


__all__ = ["ParamsValidator", "ValidationError"]
