from typing import Any, Dict, List, Optional

import pytest
import requests

from genius_bridge import GeniusBridgeSdk
from genius_bridge.core.chains import ChainId

EVM_ADDRESS = "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6"
POLYGON_USDC = "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359"
WRAPPED_SOL = "So11111111111111111111111111111111111111112"
SOLANA_WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


class FakeResponse:
    def __init__(self, body: Any = None, status_code: int = 200, json_error: Optional[Exception] = None) -> None:
        self._body = body
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._body


class FakeSession:
    """Records ``post`` calls and answers with a canned response or error."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.response: FakeResponse = FakeResponse({})
        self.error: Optional[Exception] = None

    def post(self, url: str, json: Any = None, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "kwargs": kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def sdk(session: FakeSession) -> GeniusBridgeSdk:
    return GeniusBridgeSdk(session=session)


@pytest.fixture
def price_params() -> Dict[str, Any]:
    return {
        "networkIn": ChainId.ETHEREUM,
        "networkOut": ChainId.SOLANA,
        "tokenIn": EVM_ADDRESS,
        "tokenOut": WRAPPED_SOL,
        "amountIn": "1000000000000000000",
        "slippage": 0.5,
        "from": EVM_ADDRESS,
    }


@pytest.fixture
def quote_params(price_params: Dict[str, Any]) -> Dict[str, Any]:
    return {**price_params, "to": SOLANA_WALLET}
