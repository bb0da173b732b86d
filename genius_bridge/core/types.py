"""Request records and response shapes for the quoting API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, TypedDict


@dataclass(frozen=True)
class Authority:
    """Sender/receiver pair attached to a quote."""

    network_in_address: str
    network_out_address: str

    def to_payload(self) -> Dict[str, str]:
        return {
            "networkInAddress": self.network_in_address,
            "networkOutAddress": self.network_out_address,
        }


def _pick(data: Mapping[str, Any], wire_key: str, field_name: str, default: Any = None) -> Any:
    if wire_key in data:
        return data[wire_key]
    return data.get(field_name, default)


@dataclass(frozen=True)
class PriceRequest:
    """Parameters of a ``/quoting/price`` call."""

    network_in: int
    network_out: int
    token_in: str
    token_out: str
    amount_in: str
    slippage: float
    from_address: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PriceRequest":
        """Build a request from wire-form (camelCase) or field-name keys."""
        return cls(
            network_in=_pick(data, "networkIn", "network_in"),
            network_out=_pick(data, "networkOut", "network_out"),
            token_in=_pick(data, "tokenIn", "token_in"),
            token_out=_pick(data, "tokenOut", "token_out"),
            amount_in=_pick(data, "amountIn", "amount_in"),
            slippage=_pick(data, "slippage", "slippage"),
            from_address=_pick(data, "from", "from_address"),
        )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "networkIn": self.network_in,
            "networkOut": self.network_out,
            "tokenIn": self.token_in,
            "tokenOut": self.token_out,
            "amountIn": self.amount_in,
            "slippage": self.slippage,
        }
        if self.from_address is not None:
            payload["from"] = self.from_address
        return payload


@dataclass(frozen=True)
class QuoteRequest(PriceRequest):
    """Parameters of a ``/quoting/quote`` call.

    ``authority`` is derived during normalization and is not meant to be set
    by callers.
    """

    to_address: Optional[str] = None
    authority: Optional[Authority] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuoteRequest":
        price = PriceRequest.from_dict(data)
        return cls(
            network_in=price.network_in,
            network_out=price.network_out,
            token_in=price.token_in,
            token_out=price.token_out,
            amount_in=price.amount_in,
            slippage=price.slippage,
            from_address=price.from_address,
            to_address=_pick(data, "to", "to_address"),
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        if self.to_address is not None:
            payload["to"] = self.to_address
        if self.authority is not None:
            payload["authority"] = self.authority.to_payload()
        return payload


class FeesBreakdown(TypedDict, total=False):
    base: str
    bps: str
    insurance: str
    total: str


class PriceResponse(TypedDict, total=False):
    """Body returned by ``/quoting/price``."""

    tokenIn: str
    tokenOut: str
    networkIn: int
    networkOut: int
    amountIn: str
    amountOut: str
    minAmountOut: str
    slippage: float
    fee: str
    feesDetails: FeesBreakdown


class EvmArbitraryCall(TypedDict, total=False):
    """Execution payload for account-model source chains."""

    to: str
    data: str
    value: str


class SvmInstruction(TypedDict, total=False):
    """One entry of the instruction list for Solana source chains."""

    programId: str
    accounts: List[Dict[str, Any]]
    data: str


class ApprovalRequired(TypedDict, total=False):
    spender: str
    token: str
    amount: str


class PermitDetails(TypedDict, total=False):
    """Allowance entry of a Permit2 message."""

    token: str
    amount: str
    expiration: int
    nonce: int


class PermitSingle(TypedDict, total=False):
    details: PermitDetails
    spender: str
    sigDeadline: str


class PermitBatch(TypedDict, total=False):
    details: List[PermitDetails]
    spender: str
    sigDeadline: str


class PermitSignatureParams(TypedDict, total=False):
    """EIP-712 typed data the sender signs to grant a Permit2 allowance."""

    domain: Dict[str, Any]
    types: Dict[str, List[Dict[str, str]]]
    values: PermitSingle


class Permit(TypedDict, total=False):
    permitSingle: PermitSingle
    permitBatch: PermitBatch
    signature: str


class QuoteResponse(PriceResponse, total=False):
    """Body returned by ``/quoting/quote``."""

    seed: str
    authority: Dict[str, str]
    approvalRequired: ApprovalRequired
    permit: PermitSignatureParams
    evmExecutionPayload: EvmArbitraryCall
    svmExecutionPayload: List[SvmInstruction]


__all__ = [
    "ApprovalRequired",
    "Authority",
    "EvmArbitraryCall",
    "FeesBreakdown",
    "Permit",
    "PermitBatch",
    "PermitDetails",
    "PermitSignatureParams",
    "PermitSingle",
    "PriceRequest",
    "PriceResponse",
    "QuoteRequest",
    "QuoteResponse",
    "SvmInstruction",
]
