from genius_bridge.core.chains import ChainId
from genius_bridge.core.types import (
    Authority,
    Permit,
    PermitBatch,
    PermitDetails,
    PermitSignatureParams,
    PermitSingle,
    PriceRequest,
    QuoteRequest,
    QuoteResponse,
)

from .conftest import EVM_ADDRESS, SOLANA_WALLET, WRAPPED_SOL


def test_price_from_dict_accepts_field_names() -> None:
    request = PriceRequest.from_dict(
        {
            "network_in": ChainId.BASE,
            "network_out": ChainId.SOLANA,
            "token_in": EVM_ADDRESS,
            "token_out": WRAPPED_SOL,
            "amount_in": "10",
            "slippage": 0.1,
        }
    )
    assert request.network_in == ChainId.BASE
    assert request.from_address is None
    assert "from" not in request.to_payload()


def test_quote_from_dict_reads_wire_keys(quote_params) -> None:
    request = QuoteRequest.from_dict(quote_params)
    assert request.from_address == EVM_ADDRESS
    assert request.to_address == SOLANA_WALLET
    assert request.authority is None


def test_quote_payload_omits_unset_receiver_and_authority(price_params) -> None:
    payload = QuoteRequest.from_dict(price_params).to_payload()
    assert "to" not in payload
    assert "authority" not in payload


def test_authority_payload() -> None:
    assert Authority("a", "b").to_payload() == {"networkInAddress": "a", "networkOutAddress": "b"}


def test_quote_response_declares_permit_payload() -> None:
    assert "permit" in QuoteResponse.__optional_keys__
    assert QuoteResponse.__required_keys__ == frozenset()


def test_permit_shapes_are_optional_keyed() -> None:
    expected = {
        PermitDetails: {"token", "amount", "expiration", "nonce"},
        PermitSingle: {"details", "spender", "sigDeadline"},
        PermitBatch: {"details", "spender", "sigDeadline"},
        PermitSignatureParams: {"domain", "types", "values"},
        Permit: {"permitSingle", "permitBatch", "signature"},
    }
    for shape, keys in expected.items():
        assert shape.__optional_keys__ == frozenset(keys)
        assert shape.__required_keys__ == frozenset()


def test_permit_details_builds_as_plain_dict() -> None:
    single = PermitSingle(
        details=PermitDetails(token=EVM_ADDRESS, amount="1000", expiration=1700000000, nonce=0),
        spender=EVM_ADDRESS,
        sigDeadline="1700000600",
    )
    assert single["details"]["amount"] == "1000"
    assert isinstance(single, dict)
