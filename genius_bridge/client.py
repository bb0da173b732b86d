"""Public entry point for price and quote requests."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple, Union

import requests

from genius_bridge.config import GeniusBridgeConfig
from genius_bridge.core.chains import SUPPORTED_CHAINS, ChainId
from genius_bridge.core.quotes import QuoteDispatcher, normalize_price_params, normalize_quote_params
from genius_bridge.core.types import PriceRequest, PriceResponse, QuoteRequest, QuoteResponse
from genius_bridge.core.utils import get_debug_logger, get_logger
from genius_bridge.core.validation import ParamsValidator

PriceParams = Union[PriceRequest, Mapping[str, Any]]
QuoteParams = Union[QuoteRequest, Mapping[str, Any]]


def _resolve_logger(config: GeniusBridgeConfig) -> logging.Logger:
    if config.debug:
        return get_debug_logger("genius_bridge")
    if config.logger is not None:
        return config.logger
    return get_logger("genius_bridge")


class GeniusBridgeSdk:
    """Validates, normalizes and forwards requests to the GeniusBridge quoting API.

    Each call performs at most one HTTP request and never retries. Validation
    failures raise :class:`~genius_bridge.core.validation.ValidationError` before
    any network traffic; transport failures raise
    :class:`~genius_bridge.core.quotes.FetchError`.
    """

    price_endpoint = "/quoting/price"
    quote_endpoint = "/quoting/quote"

    def __init__(
        self,
        config: Optional[GeniusBridgeConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = config or GeniusBridgeConfig()
        self._chains: Tuple[ChainId, ...] = SUPPORTED_CHAINS
        self._base_url = config.base_url
        self.logger = _resolve_logger(config)
        self._validator = ParamsValidator(self._chains, self.logger)
        self._dispatcher = QuoteDispatcher(self._base_url, logger=self.logger, session=session)

    @property
    def chains(self) -> Tuple[ChainId, ...]:
        return self._chains

    @property
    def base_url(self) -> str:
        return self._base_url

    def is_correct_config(self, _config: Mapping[str, str]) -> bool:
        """GeniusBridge has no required config fields, so any mapping is accepted."""
        return True

    def fetch_price(self, params: PriceParams) -> PriceResponse:
        request = params if isinstance(params, PriceRequest) else PriceRequest.from_dict(params)
        self._validator.validate_price(request)
        normalized = normalize_price_params(request)
        return self._dispatcher.post(self.price_endpoint, normalized.to_payload(), kind="price")

    def fetch_quote(self, params: QuoteParams) -> QuoteResponse:
        request = params if isinstance(params, QuoteRequest) else QuoteRequest.from_dict(params)
        self._validator.validate_quote(request)
        normalized = normalize_quote_params(request)
        return self._dispatcher.post(self.quote_endpoint, normalized.to_payload(), kind="quote")


__all__ = ["GeniusBridgeSdk"]
