"""Normalization and dispatch of GeniusBridge price/quote requests."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Optional

import requests

from genius_bridge.core.tokens import resolve_native_token
from genius_bridge.core.types import Authority, PriceRequest, QuoteRequest
from genius_bridge.core.utils import GeniusBridgeError


class FetchError(GeniusBridgeError, ConnectionError):
    """Raised when the quoting service cannot be reached or answers badly."""


def normalize_price_params(request: PriceRequest) -> PriceRequest:
    """Return ``request`` with EVM native-token aliases resolved."""
    return dataclasses.replace(
        request,
        token_in=resolve_native_token(request.network_in, request.token_in),
        token_out=resolve_native_token(request.network_out, request.token_out),
    )


def normalize_quote_params(request: QuoteRequest) -> QuoteRequest:
    """Normalize token fields and derive the receiver and authority pair."""
    normalized = normalize_price_params(request)
    receiver = request.to_address or request.from_address
    return dataclasses.replace(
        normalized,
        to_address=receiver,
        authority=Authority(
            network_in_address=request.from_address,
            network_out_address=receiver,
        ),
    )


class QuoteDispatcher:
    """Issues a single POST per call against the quoting service."""

    def __init__(
        self,
        base_url: str,
        *,
        logger: logging.Logger,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self._logger = logger
        self._session = session or requests.Session()

    def post(self, endpoint: str, payload: Dict[str, Any], *, kind: str) -> Any:
        """POST ``payload`` to ``endpoint`` and return the decoded JSON body.

        ``kind`` ("price" or "quote") only feeds the error messages.
        """
        url = f"{self.base_url}{endpoint}"
        self._logger.debug("POST %s", url)
        try:
            response = self._session.post(url, json=payload)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            self._logger.error("Failed to fetch %s", kind, exc_info=exc)
            raise FetchError(f"Failed to fetch GeniusBridge {kind}, error: {exc}") from exc


__all__ = [
    "FetchError",
    "QuoteDispatcher",
    "normalize_price_params",
    "normalize_quote_params",
]
