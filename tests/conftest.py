"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from riskscan.models.security import SecurityData

TOKEN = "0x1234567890abcdef1234567890abcdef12345678"

# Verified, fixed-supply, well-held token with no trading restrictions
SAFE_FIELDS: dict[str, Any] = {
    "token_name": "Safe Token",
    "token_symbol": "SAFE",
    "holder_count": 5000,
    "total_supply": "1000000",
    "is_open_source": "1",
    "buy_tax": "0",
    "sell_tax": "0",
    "lp_holder_count": 150,
    "lp_total_supply": "1000",
    "holders": [
        {"address": "0xholder1", "balance": "50000", "percent": "5", "is_contract": 0},
        {"address": "0xholder2", "balance": "30000", "percent": "3", "is_contract": 0},
        {"address": "0xholder3", "balance": "10000", "percent": "1", "is_contract": 0},
    ],
    "creator_percent": "2",
}


@pytest.fixture
def make_security() -> Callable[..., SecurityData]:
    """Factory: safe baseline with keyword overrides (GoPlus field names)."""

    def _make(base: dict[str, Any] | None = None, **overrides: Any) -> SecurityData:
        fields = dict(SAFE_FIELDS if base is None else base)
        fields.update(overrides)
        fields.setdefault("contract_address", TOKEN)
        fields.setdefault("chain_id", "1")
        return SecurityData.model_validate(fields)

    return _make


@pytest.fixture
def bare_security() -> SecurityData:
    """Only address + chain: every other field at its default."""
    return SecurityData(contract_address=TOKEN, chain_id="1")
