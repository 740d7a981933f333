"""Contract age trust scoring from the first on-chain transaction."""

from dataclasses import dataclass
from datetime import UTC, datetime

SECONDS_PER_DAY = 86400
NEW_TOKEN_DAYS = 7

# age (days) upper bound → trust
TRUST_BY_AGE = ((30, 40), (90, 60), (180, 75))
NEW_TOKEN_TRUST = 20
ESTABLISHED_TRUST = 90


@dataclass(frozen=True)
class ContractHistory:
    age: int  # days
    first_block: int
    transaction_count: int
    last_activity: datetime
    is_new: bool
    trust_score: int  # 0-100
    warnings: tuple[str, ...] = ()


def trust_score_for(age_days: int) -> int:
    if age_days < NEW_TOKEN_DAYS:
        return NEW_TOKEN_TRUST
    for max_age, trust in TRUST_BY_AGE:
        if age_days < max_age:
            return trust
    return ESTABLISHED_TRUST


def _warnings(age_days: int, is_new: bool) -> list[str]:
    warnings: list[str] = []
    if is_new:
        warnings.append("🆕 VERY NEW TOKEN (less than 7 days old) - EXTREME CAUTION!")
    elif age_days < 30:
        warnings.append("⏱️ Recently deployed (less than 1 month) - higher risk")
    if age_days > 365:
        warnings.append("✅ Established token (over 1 year old) - more reliable")
    return warnings


def analyze_history(
    first_block: int,
    first_timestamp: int,
    now: datetime | None = None,
) -> ContractHistory:
    """Score a contract from its first transaction (unix seconds)."""
    now = now or datetime.now(UTC)
    age_days = max(int((now.timestamp() - first_timestamp) // SECONDS_PER_DAY), 0)
    is_new = age_days < NEW_TOKEN_DAYS

    return ContractHistory(
        age=age_days,
        first_block=first_block,
        transaction_count=0,  # explorer txlist is fetched with offset=1
        last_activity=now,
        is_new=is_new,
        trust_score=trust_score_for(age_days),
        warnings=tuple(_warnings(age_days, is_new)),
    )
