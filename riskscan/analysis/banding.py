"""Threshold ladders shared by every tiered score.

A ladder is an ordered table of ``(threshold, label)`` rows plus a fallback
label. ``Ladder.below`` returns the label of the first row whose threshold is
strictly greater than the value (``score < threshold``); ``Ladder.at_least``
returns the first row whose threshold the value reaches (``score >= threshold``).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ladder:
    bands: tuple[tuple[float, str], ...]
    otherwise: str

    def below(self, value: float) -> str:
        """Ascending ladder: first label with ``value < threshold``."""
        for threshold, label in self.bands:
            if value < threshold:
                return label
        return self.otherwise

    def at_least(self, value: float) -> str:
        """Descending ladder: first label with ``value >= threshold``."""
        for threshold, label in self.bands:
            if value >= threshold:
                return label
        return self.otherwise


# 0-100 risk score → category (risk engine)
RISK_CATEGORY = Ladder(
    bands=((20, "LOW_RISK"), (50, "MEDIUM_RISK"), (80, "HIGH_RISK")),
    otherwise="CRITICAL_RISK",
)

# rug pull probability → tier
RUG_PULL_TIER = Ladder(
    bands=((20, "MINIMAL"), (40, "LOW"), (60, "MEDIUM"), (80, "HIGH")),
    otherwise="CRITICAL",
)

# liquidity health score → status (higher is better)
LIQUIDITY_STATUS = Ladder(
    bands=((90, "EXCELLENT"), (70, "GOOD"), (50, "FAIR"), (30, "POOR")),
    otherwise="CRITICAL",
)

# top-10 holder percent → concentration
WHALE_CONCENTRATION = Ladder(
    bands=((30, "HEALTHY"), (60, "MODERATE")),
    otherwise="DANGEROUS",
)

# averaged risk → verdict rating
VERDICT_RATING = Ladder(
    bands=((25, "SAFE"), (50, "MODERATE"), (75, "RISKY")),
    otherwise="DANGEROUS",
)


def risk_category(score: float) -> str:
    return RISK_CATEGORY.below(score)
