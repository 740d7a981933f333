"""Whale detection over the provider's top-holder list.

A whale is any holder above 1% of supply. Top-10 concentration sums the first
ten entries as supplied; the provider is expected to list holders by balance.
"""

from dataclasses import dataclass

from riskscan.analysis.banding import WHALE_CONCENTRATION
from riskscan.models.security import SecurityData

WHALE_MIN_PCT = 1.0
TOP_WHALES = 5
EXTREME_CONCENTRATION_PCT = 70.0
MANY_WHALES = 10


@dataclass(frozen=True)
class Whale:
    address: str
    percentage: float
    is_contract: bool
    risk: str  # LOW / MEDIUM / HIGH


@dataclass(frozen=True)
class WhaleAnalysis:
    has_whales: bool
    whale_count: int
    whale_percentage: float  # top-10 holders combined
    top_whales: tuple[Whale, ...]
    concentration: str  # HEALTHY / MODERATE / DANGEROUS
    warnings: tuple[str, ...] = ()


def assess_whale_risk(percentage: float, is_contract: bool) -> str:
    if is_contract:
        return "LOW"  # likely a pool, router or lock contract
    if percentage > 10:
        return "HIGH"
    if percentage > 5:
        return "MEDIUM"
    return "LOW"


def _warnings(top_whales: tuple[Whale, ...], whale_count: int, top10: float) -> list[str]:
    warnings: list[str] = []
    if top10 > EXTREME_CONCENTRATION_PCT:
        warnings.append(f"⚠️ EXTREME concentration: Top 10 holders control {top10:.1f}%")

    high_risk = sum(1 for w in top_whales if w.risk == "HIGH")
    if high_risk > 0:
        warnings.append(f"🐋 {high_risk} high-risk whales detected (>10% each)")

    if whale_count > MANY_WHALES:
        warnings.append(f"📊 {whale_count} whales identified (>1% ownership)")
    return warnings


def analyze_whales(data: SecurityData) -> WhaleAnalysis:
    whales = [h for h in data.holders if h.percent_value > WHALE_MIN_PCT]
    top10 = data.top10_percent

    top_whales = tuple(
        Whale(
            address=h.address,
            percentage=h.percent_value,
            is_contract=h.is_contract,
            risk=assess_whale_risk(h.percent_value, h.is_contract),
        )
        for h in whales[:TOP_WHALES]
    )

    return WhaleAnalysis(
        has_whales=bool(whales),
        whale_count=len(whales),
        whale_percentage=top10,
        top_whales=top_whales,
        concentration=WHALE_CONCENTRATION.below(top10),
        warnings=tuple(_warnings(top_whales, len(whales), top10)),
    )
