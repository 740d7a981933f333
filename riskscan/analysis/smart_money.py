"""Smart money tracker: spot known protocol contracts among top holders.

Buy/sell pressure is a coarse proxy from the total holder count, not from
actual transaction flow.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from riskscan.models.security import SecurityData

# lowercase address → label
KNOWN_CONTRACTS: Mapping[str, str] = MappingProxyType({
    "0x7a250d5630b4cf539739df2c5dacb4c659f2488d": "Uniswap V2 Router",
    "0x68b3465833fb72a70ecdf485e0e4c7bd8665fc45": "Uniswap V3 Router",
    "0x1111111254fb6c44bac0bed2854e76f90643097d": "1inch Aggregator",
})

STRONG_DEMAND_HOLDERS = 1000
WEAK_DEMAND_HOLDERS = 100


@dataclass(frozen=True)
class KnownWallet:
    type: str  # DEX / CEX / WHALE / DEVELOPER / UNKNOWN
    address: str
    percentage: float
    label: str | None = None


@dataclass(frozen=True)
class SmartMoneyAnalysis:
    smart_money_presence: bool
    known_wallets: tuple[KnownWallet, ...]
    buy_pressure: str  # STRONG / MODERATE / WEAK
    sell_pressure: str
    insights: tuple[str, ...] = ()


class SmartMoneyTracker:
    """Classifies holders against a static registry of known contracts."""

    def __init__(self, known_contracts: Mapping[str, str] = KNOWN_CONTRACTS) -> None:
        self._known = MappingProxyType({k.lower(): v for k, v in known_contracts.items()})

    def label_for(self, address: str) -> str | None:
        return self._known.get(address.lower())

    def classify_wallet(self, address: str, is_contract: bool) -> str:
        if self.label_for(address) or is_contract:
            return "DEX"
        return "UNKNOWN"

    @staticmethod
    def estimate_pressure(holder_count: int) -> tuple[str, str]:
        """(buy, sell) pressure from holder count alone."""
        if holder_count > STRONG_DEMAND_HOLDERS:
            return "STRONG", "WEAK"
        if holder_count < WEAK_DEMAND_HOLDERS:
            return "WEAK", "STRONG"
        return "MODERATE", "MODERATE"

    def analyze_smart_money(self, data: SecurityData) -> SmartMoneyAnalysis:
        known_wallets = tuple(
            KnownWallet(
                type=self.classify_wallet(h.address, h.is_contract),
                address=h.address,
                percentage=h.percent_value,
                label=self.label_for(h.address),
            )
            for h in data.holders
            if h.is_contract or self.label_for(h.address)
        )

        buy_pressure, sell_pressure = self.estimate_pressure(data.holder_count)

        insights: list[str] = []
        if known_wallets:
            insights.append(f"🔍 Detected {len(known_wallets)} known addresses (DEX/protocols)")
        if buy_pressure == "STRONG":
            insights.append("📈 Strong buying pressure detected - positive sentiment")
        elif buy_pressure == "WEAK":
            insights.append("📉 Weak buying pressure - caution advised")
        if sell_pressure == "STRONG":
            insights.append("⚠️ High selling pressure - potential price decline")

        return SmartMoneyAnalysis(
            smart_money_presence=bool(known_wallets),
            known_wallets=known_wallets,
            buy_pressure=buy_pressure,
            sell_pressure=sell_pressure,
            insights=tuple(insights),
        )
