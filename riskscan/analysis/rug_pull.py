"""Rug pull detector: ten independent indicators weighted by severity.

Probability = sum of severity weights of the *detected* indicators, capped at
100. Liquidity lock and concentration are estimated from the LP holder count
only; no lock contract is inspected.
"""

from dataclasses import dataclass, field

from loguru import logger

from riskscan.analysis.banding import RUG_PULL_TIER
from riskscan.models.security import SecurityData
from riskscan.utils.numbers import fmt_num

SEVERITY_WEIGHTS = {"CRITICAL": 40, "HIGH": 25, "MEDIUM": 15, "LOW": 10}

RECOMMENDATIONS = {
    "MINIMAL": "✅ Low rug pull risk. Token appears relatively safe for investment.",
    "LOW": "⚠️ Some minor concerns. Invest with caution and proper risk management.",
    "MEDIUM": "🔶 Moderate rug pull risk detected. Only invest what you can afford to lose.",
    "HIGH": "🚨 HIGH RUG PULL RISK! Strongly recommend avoiding this token.",
    "CRITICAL": "⛔ CRITICAL DANGER! This token has extreme rug pull characteristics. DO NOT INVEST.",
}


@dataclass(frozen=True)
class RugPullIndicator:
    name: str
    detected: bool
    severity: str  # LOW / MEDIUM / HIGH / CRITICAL
    description: str


@dataclass(frozen=True)
class RugPullScore:
    probability: int  # 0-100
    risk: str  # MINIMAL / LOW / MEDIUM / HIGH / CRITICAL
    indicators: tuple[RugPullIndicator, ...]  # detected only
    recommendation: str
    all_indicators: tuple[RugPullIndicator, ...] = field(default=(), repr=False)


def _liquidity_lock(data: SecurityData) -> RugPullIndicator:
    # Fewer than 5 LP holders is treated as "probably locked" (single lock
    # contract); 5-19 holders means unlocked LP spread over a few wallets.
    lp_count = data.lp_holder_count
    looks_locked = lp_count < 5
    return RugPullIndicator(
        name="Liquidity Lock",
        detected=not looks_locked and lp_count < 20,
        severity="HIGH",
        description=(
            f"Low LP holder count ({lp_count}) - liquidity may not be locked"
            if lp_count < 20
            else "Liquidity appears properly distributed"
        ),
    )


def _owner_privileges(data: SecurityData) -> RugPullIndicator:
    privileged = (
        data.flag("can_take_back_ownership")
        or data.flag("owner_change_balance")
        or data.flag("hidden_owner")
    )
    return RugPullIndicator(
        name="Owner Privileges",
        detected=privileged,
        severity="CRITICAL",
        description=(
            "Owner retains dangerous privileges (can modify balances/ownership)"
            if privileged
            else "Owner privileges appear limited"
        ),
    )


def _mint_function(data: SecurityData) -> RugPullIndicator:
    mintable = data.flag("is_mintable")
    return RugPullIndicator(
        name="Mint Function",
        detected=mintable,
        severity="HIGH",
        description=(
            "Token supply can be increased - potential dilution risk" if mintable else "Supply is fixed"
        ),
    )


def _hidden_functions(data: SecurityData) -> RugPullIndicator:
    hidden = data.flag("hidden_owner") or data.flag("self_destruct")
    return RugPullIndicator(
        name="Hidden Functions",
        detected=hidden,
        severity="CRITICAL",
        description=(
            "Hidden owner or self-destruct detected - EXTREME RUG PULL RISK"
            if hidden
            else "No hidden functions detected"
        ),
    )


def _tax_manipulation(data: SecurityData) -> RugPullIndicator:
    buy_tax, sell_tax = data.buy_tax_pct, data.sell_tax_pct
    suspicious = (buy_tax > 15 or sell_tax > 15) and data.flag("slippage_modifiable")
    return RugPullIndicator(
        name="Tax Manipulation",
        detected=suspicious,
        severity="HIGH",
        description=(
            f"High taxes ({fmt_num(buy_tax)}%/{fmt_num(sell_tax)}%) with modifiable slippage - rug pull vector"
            if suspicious
            else "Tax structure appears reasonable"
        ),
    )


def _liquidity_concentration(data: SecurityData) -> RugPullIndicator:
    lp_count = data.lp_holder_count
    dangerous = lp_count < 10
    return RugPullIndicator(
        name="Liquidity Concentration",
        detected=dangerous,
        severity="CRITICAL",
        description=(
            f"Only {lp_count} LP holders - single entity controls liquidity"
            if dangerous
            else "Liquidity is well distributed"
        ),
    )


def _creator_holdings(data: SecurityData) -> RugPullIndicator:
    creator = data.creator_pct
    suspicious = creator > 30
    return RugPullIndicator(
        name="Creator Holdings",
        detected=suspicious,
        severity="MEDIUM",
        description=(
            f"Creator holds {creator:.1f}% - potential dump risk"
            if suspicious
            else "Creator holdings are reasonable"
        ),
    )


def _contract_verification(data: SecurityData) -> RugPullIndicator:
    unverified = not data.flag("is_open_source")
    return RugPullIndicator(
        name="Contract Verification",
        detected=unverified,
        severity="MEDIUM",
        description=(
            "Contract not verified - impossible to audit code"
            if unverified
            else "Contract is verified and auditable"
        ),
    )


def _proxy_pattern(data: SecurityData) -> RugPullIndicator:
    proxy = data.flag("is_proxy")
    return RugPullIndicator(
        name="Proxy Pattern",
        detected=proxy,
        severity="MEDIUM",
        description=(
            "Proxy contract - logic can be changed post-deployment"
            if proxy
            else "Direct implementation (non-upgradeable)"
        ),
    )


def _blacklist(data: SecurityData) -> RugPullIndicator:
    blacklist = data.flag("is_blacklisted")
    return RugPullIndicator(
        name="Blacklist Capability",
        detected=blacklist,
        severity="HIGH",
        description=(
            "Contract can blacklist addresses - prevents selling"
            if blacklist
            else "No blacklist function detected"
        ),
    )


INDICATOR_CHECKS = (
    _liquidity_lock,
    _owner_privileges,
    _mint_function,
    _hidden_functions,
    _tax_manipulation,
    _liquidity_concentration,
    _creator_holdings,
    _contract_verification,
    _proxy_pattern,
    _blacklist,
)


def probability_from(indicators: list[RugPullIndicator] | tuple[RugPullIndicator, ...]) -> int:
    """Sum severity weights of detected indicators, capped at 100."""
    total = sum(SEVERITY_WEIGHTS[ind.severity] for ind in indicators if ind.detected)
    return min(total, 100)


def recommendation_for(risk: str, indicator_count: int) -> str:
    return f"{RECOMMENDATIONS[risk]} ({indicator_count} risk indicators detected)"


def calculate_rug_pull_risk(data: SecurityData) -> RugPullScore:
    """Evaluate all indicators and aggregate into a probability and tier."""
    evaluated = tuple(check(data) for check in INDICATOR_CHECKS)
    detected = tuple(ind for ind in evaluated if ind.detected)

    probability = probability_from(evaluated)
    risk = RUG_PULL_TIER.below(probability)

    if detected:
        logger.debug(
            f"[RUGPULL] {data.contract_address[:12]}: p={probability} ({risk}) "
            f"indicators={[ind.name for ind in detected]}"
        )

    return RugPullScore(
        probability=probability,
        risk=risk,
        indicators=detected,
        recommendation=recommendation_for(risk, len(detected)),
        all_indicators=evaluated,
    )
