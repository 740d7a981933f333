"""LP health check from LP holder count and LP supply.

Concentration is an estimate from the LP holder count bands; per-holder LP
balances are not part of the security snapshot.
"""

from dataclasses import dataclass

from riskscan.analysis.banding import LIQUIDITY_STATUS, Ladder
from riskscan.models.security import SecurityData

# LP holder count → points (max 40)
LP_COUNT_POINTS = ((100, 40), (50, 30), (20, 20), (10, 10))

DIVERSITY = Ladder(bands=((50, "HIGH"), (20, "MEDIUM")), otherwise="LOW")
DIVERSITY_POINTS = {"HIGH": 30, "MEDIUM": 20, "LOW": 10}

SUPPLY_PRESENT_POINTS = 30
SUPPLY_MISSING_POINTS = 15

# estimated share held by the top LP holders
CONCENTRATION_ESTIMATE = ((5, 90), (20, 70), (50, 50))
CONCENTRATION_SPREAD = 30


@dataclass(frozen=True)
class LiquidityMetrics:
    lp_holders: int
    concentration: int  # estimated % held by top LP holders
    diversity: str  # HIGH / MEDIUM / LOW


@dataclass(frozen=True)
class LiquidityHealth:
    health_score: int  # 0-100
    status: str  # EXCELLENT / GOOD / FAIR / POOR / CRITICAL
    metrics: LiquidityMetrics
    risks: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


def _count_points(lp_count: int) -> int:
    for threshold, points in LP_COUNT_POINTS:
        if lp_count >= threshold:
            return points
    return 0


def estimate_concentration(lp_count: int) -> int:
    for threshold, pct in CONCENTRATION_ESTIMATE:
        if lp_count < threshold:
            return pct
    return CONCENTRATION_SPREAD


def _risks(lp_count: int, concentration: int) -> list[str]:
    risks: list[str] = []
    if lp_count < 10:
        risks.append("⚠️ CRITICAL: Very few LP holders - liquidity can be pulled anytime")
    elif lp_count < 20:
        risks.append("⚠️ LOW LP holder count - vulnerable to rug pull")

    if concentration > 70:
        risks.append("🔴 High concentration - few holders control most liquidity")

    if lp_count == 1:
        risks.append("🚨 SINGLE LP PROVIDER - EXTREME RUG PULL RISK!")
    return risks


def _recommendations(status: str) -> list[str]:
    if status in ("CRITICAL", "POOR"):
        return [
            "❌ DO NOT INVEST - Liquidity structure is unsafe",
            "Wait for more LP providers before considering investment",
        ]
    if status == "FAIR":
        return [
            "⚠️ Use extreme caution - only invest small amounts",
            "Set tight stop losses and monitor liquidity changes",
        ]
    if status == "GOOD":
        return ["✅ Acceptable liquidity - proceed with normal caution"]
    return ["✅ Excellent liquidity health - safer for investment"]


def analyze_liquidity(data: SecurityData) -> LiquidityHealth:
    lp_count = data.lp_holder_count
    diversity = DIVERSITY.at_least(lp_count)

    health_score = (
        _count_points(lp_count)
        + DIVERSITY_POINTS[diversity]
        + (SUPPLY_PRESENT_POINTS if data.lp_supply > 0 else SUPPLY_MISSING_POINTS)
    )
    status = LIQUIDITY_STATUS.at_least(health_score)
    concentration = estimate_concentration(lp_count)

    return LiquidityHealth(
        health_score=health_score,
        status=status,
        metrics=LiquidityMetrics(
            lp_holders=lp_count,
            concentration=concentration,
            diversity=diversity,
        ),
        risks=tuple(_risks(lp_count, concentration)),
        recommendations=tuple(_recommendations(status)),
    )
