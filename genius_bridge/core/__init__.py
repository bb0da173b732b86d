"""Core domain logic for the SDK."""

from .chains import SUPPORTED_CHAINS, ChainId, VmFamily, chain_family, is_evm_network, is_solana_network
from .quotes import FetchError, QuoteDispatcher, normalize_price_params, normalize_quote_params
from .tokens import NATIVE_ADDRESS, SOL_NATIVE_ADDRESS, is_native, resolve_native_token
from .types import Authority, PriceRequest, PriceResponse, QuoteRequest, QuoteResponse
from .utils import GeniusBridgeError, get_logger
from .validation import ParamsValidator, ValidationError

__all__ = [
    "Authority",
    "ChainId",
    "FetchError",
    "GeniusBridgeError",
    "NATIVE_ADDRESS",
    "ParamsValidator",
    "PriceRequest",
    "PriceResponse",
    "QuoteDispatcher",
    "QuoteRequest",
    "QuoteResponse",
    "SOL_NATIVE_ADDRESS",
    "SUPPORTED_CHAINS",
    "ValidationError",
    "VmFamily",
    "chain_family",
    "get_logger",
    "is_evm_network",
    "is_native",
    "is_solana_network",
    "normalize_price_params",
    "normalize_quote_params",
    "resolve_native_token",
]
