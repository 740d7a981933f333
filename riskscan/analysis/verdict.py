"""Overall verdict: average of risk, rug pull probability and inverted LP health."""

import math
from dataclasses import dataclass

from riskscan.analysis.banding import VERDICT_RATING

RECOMMENDATIONS = {
    "SAFE": "✅ Low overall risk. Standard due diligence still applies.",
    "MODERATE": "⚠️ Some risk factors present. Invest small amounts with caution.",
    "RISKY": "🚨 High risk. Avoid unless you fully understand the flagged issues.",
    "DANGEROUS": "⛔ Extreme risk. Strong scam characteristics - do not invest.",
}

MAX_CONFIDENCE = 95
BASE_CONFIDENCE = 70


@dataclass(frozen=True)
class Verdict:
    rating: str  # SAFE / MODERATE / RISKY / DANGEROUS
    confidence: int  # percent
    recommendation: str
    average_risk: float


def calculate_overall_verdict(
    risk_score: float,
    rug_pull_probability: float,
    liquidity_health_score: float,
) -> Verdict:
    avg_risk = (risk_score + rug_pull_probability + (100 - liquidity_health_score)) / 3
    rating = VERDICT_RATING.below(avg_risk)
    confidence = min(MAX_CONFIDENCE, math.floor(BASE_CONFIDENCE + liquidity_health_score / 10))

    return Verdict(
        rating=rating,
        confidence=confidence,
        recommendation=RECOMMENDATIONS[rating],
        average_risk=round(avg_risk, 2),
    )
