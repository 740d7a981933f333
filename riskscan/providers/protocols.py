"""Collaborator interfaces the scanner depends on.

Implementations live outside this package (HTTP clients, caches, fixtures).
Returning ``None`` means "no record"; raising means the call failed.
"""

from typing import Protocol

from riskscan.analysis.history import ContractHistory
from riskscan.models.security import SecurityData
from riskscan.providers.models import DEXData, PriceData


class SecurityDataProvider(Protocol):
    async def get_token_security(self, chain_id: str, address: str) -> SecurityData | None: ...


class PriceProvider(Protocol):
    async def get_token_price(self, chain_id: str, address: str) -> PriceData | None: ...

    async def get_dex_data(self, chain_id: str, address: str) -> DEXData | None: ...


class HistoryProvider(Protocol):
    """Explorer-backed contract history.

    Implementations fetch the contract's first block and timestamp and build the
    result with ``riskscan.analysis.history.analyze_history``, which owns the
    age, trust score and warning rules.
    """

    async def analyze_history(self, chain_id: str, address: str) -> ContractHistory | None: ...
