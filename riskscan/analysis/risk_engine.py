"""Risk engine: four weighted factor scores combined into one 0-100 risk score.

Factors (each clamped to 0-100, higher = riskier):
- contract_security: dangerous contract capabilities (mint, proxy, owner powers)
- liquidity_safety: LP holder count bands
- holder_distribution: top-10 concentration, creator stake, holder count
- trading_restrictions: honeypot / sell blocks / taxes

Weights: 30% / 25% / 20% / 25%. Warnings and critical issues come from
independent flag checks, not from the score.
"""

from dataclasses import dataclass

from loguru import logger

from riskscan.analysis.banding import risk_category
from riskscan.models.security import SecurityData
from riskscan.utils.numbers import fmt_num, round_half_up

WEIGHTS = {
    "contract_security": 0.30,
    "liquidity_safety": 0.25,
    "holder_distribution": 0.20,
    "trading_restrictions": 0.25,
}

# flag → penalty
CONTRACT_PENALTIES = (
    ("is_proxy", 10),
    ("is_mintable", 15),
    ("can_take_back_ownership", 25),
    ("owner_change_balance", 30),
    ("hidden_owner", 20),
    ("self_destruct", 40),
    ("external_call", 10),
)
UNVERIFIED_PENALTY = 20

TRADING_PENALTIES = (
    ("cannot_buy", 50),
    ("cannot_sell_all", 50),
    ("transfer_pausable", 30),
    ("is_blacklisted", 40),
    ("slippage_modifiable", 20),
)

CRITICAL_CHECKS = (
    ("is_honeypot", "🚨 HONEYPOT - Cannot sell!"),
    ("cannot_buy", "🚨 Buying disabled"),
    ("cannot_sell_all", "🚨 Cannot sell all tokens"),
    ("self_destruct", "🚨 Self-destruct function exists"),
    ("owner_change_balance", "🚨 Owner can modify balances"),
    ("can_take_back_ownership", "🚨 Ownership can be reclaimed"),
)


@dataclass(frozen=True)
class RiskFactors:
    contract_security: int
    liquidity_safety: int
    holder_distribution: int
    trading_restrictions: int


@dataclass(frozen=True)
class RiskScore:
    """Composite risk for one scan. Never mutated after calculation."""

    overall: int  # 0-100
    category: str  # LOW_RISK / MEDIUM_RISK / HIGH_RISK / CRITICAL_RISK
    factors: RiskFactors
    warnings: tuple[str, ...] = ()
    critical_issues: tuple[str, ...] = ()


def score_contract_security(data: SecurityData) -> int:
    score = 0
    if not data.flag("is_open_source"):
        score += UNVERIFIED_PENALTY
    for flag, penalty in CONTRACT_PENALTIES:
        if data.flag(flag):
            score += penalty
    return min(score, 100)


def score_liquidity_safety(data: SecurityData) -> int:
    lp_count = data.lp_holder_count
    if lp_count < 10:
        return 40
    if lp_count < 50:
        return 20
    if lp_count < 100:
        return 10
    return 0


def score_holder_distribution(data: SecurityData) -> int:
    score = 0

    if data.holders:
        top10 = data.top10_percent
        if top10 > 80:
            score += 40
        elif top10 > 60:
            score += 25
        elif top10 > 40:
            score += 10

    creator = data.creator_pct
    if creator > 50:
        score += 30
    elif creator > 30:
        score += 15
    elif creator > 10:
        score += 5

    if data.holder_count < 100:
        score += 25
    elif data.holder_count < 500:
        score += 10

    return min(score, 100)


def score_trading_restrictions(data: SecurityData) -> int:
    if data.flag("is_honeypot"):
        return 100

    score = 0
    for flag, penalty in TRADING_PENALTIES:
        if data.flag(flag):
            score += penalty

    buy_tax, sell_tax = data.buy_tax_pct, data.sell_tax_pct
    if buy_tax > 20 or sell_tax > 20:
        score += 30
    elif buy_tax > 10 or sell_tax > 10:
        score += 15

    return min(score, 100)


def collect_warnings(data: SecurityData) -> list[str]:
    warnings: list[str] = []
    if not data.flag("is_open_source"):
        warnings.append("Contract not verified")
    if data.flag("is_mintable"):
        warnings.append("Token supply can be increased")
    if data.flag("is_proxy"):
        warnings.append("Proxy contract - can be upgraded")

    buy_tax, sell_tax = data.buy_tax_pct, data.sell_tax_pct
    if buy_tax > 5 or sell_tax > 5:
        warnings.append(f"Tax: {fmt_num(buy_tax)}% buy / {fmt_num(sell_tax)}% sell")

    if data.flag("transfer_pausable"):
        warnings.append("Transfers can be paused")
    if data.lp_holder_count < 50:
        warnings.append(f"Low LP count: {data.lp_holder_count} holders")
    return warnings


def collect_critical_issues(data: SecurityData) -> list[str]:
    return [message for flag, message in CRITICAL_CHECKS if data.flag(flag)]


def calculate_risk_score(data: SecurityData) -> RiskScore:
    """Score a security snapshot. Total: any well-formed SecurityData scores."""
    factors = RiskFactors(
        contract_security=score_contract_security(data),
        liquidity_safety=score_liquidity_safety(data),
        holder_distribution=score_holder_distribution(data),
        trading_restrictions=score_trading_restrictions(data),
    )

    weighted = sum(getattr(factors, name) * weight for name, weight in WEIGHTS.items())
    overall = min(max(round_half_up(weighted), 0), 100)
    category = risk_category(overall)

    critical = collect_critical_issues(data)
    logger.debug(
        f"[RISK] {data.contract_address[:12]} chain={data.chain_id}: "
        f"overall={overall} ({category}) "
        f"cs={factors.contract_security} ls={factors.liquidity_safety} "
        f"hd={factors.holder_distribution} tr={factors.trading_restrictions} "
        f"critical={len(critical)}"
    )

    return RiskScore(
        overall=overall,
        category=category,
        factors=factors,
        warnings=tuple(collect_warnings(data)),
        critical_issues=tuple(critical),
    )
