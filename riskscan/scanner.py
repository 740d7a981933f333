"""Token scanner: one scan = security fetch + scoring + optional enrichment.

Pipeline:
1. Validate address / chain (InputError)
2. Fetch security data (mandatory; UpstreamError / NotFoundError abort the scan)
3. Risk score
4. Advanced: price + DEX (+ history) concurrently, each degrading to None;
   whales, rug pull, smart money, liquidity, social from the snapshot
5. Verdict from overall risk, rug pull probability and LP health
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, TypeVar

from loguru import logger

from config.settings import Settings, settings as default_settings
from riskscan.analysis.history import ContractHistory
from riskscan.analysis.liquidity import LiquidityHealth, analyze_liquidity
from riskscan.analysis.risk_engine import RiskScore, calculate_risk_score
from riskscan.analysis.rug_pull import RugPullScore, calculate_rug_pull_risk
from riskscan.analysis.smart_money import SmartMoneyAnalysis, SmartMoneyTracker
from riskscan.analysis.social import SocialAnalyzer, SocialMetrics
from riskscan.analysis.verdict import Verdict, calculate_overall_verdict
from riskscan.analysis.whales import WhaleAnalysis, analyze_whales
from riskscan.exceptions import InputError, NotFoundError, UpstreamError
from riskscan.models.security import SecurityData
from riskscan.providers.models import DEXData, PriceData
from riskscan.providers.protocols import HistoryProvider, PriceProvider, SecurityDataProvider
from riskscan.utils.serialize import to_jsonable

T = TypeVar("T")


@dataclass(frozen=True)
class AdvancedAnalysis:
    price: PriceData | None
    dex: DEXData | None
    whales: WhaleAnalysis
    rug_pull: RugPullScore
    smart_money: SmartMoneyAnalysis
    liquidity: LiquidityHealth
    social: SocialMetrics | None
    history: ContractHistory | None = None


@dataclass(frozen=True)
class ScanResult:
    token_address: str
    chain_id: str
    security_data: SecurityData
    risk_score: RiskScore
    scanned_at: str  # ISO-8601 UTC
    advanced: AdvancedAnalysis | None = None
    verdict: Verdict | None = None

    def to_dict(self) -> dict[str, Any]:
        """camelCase dict; ``advanced`` / ``verdict`` omitted when not computed."""
        body = to_jsonable(self)
        for key in ("advanced", "verdict"):
            if body.get(key) is None:
                body.pop(key, None)
        if "advanced" in body and body["advanced"].get("history") is None:
            body["advanced"].pop("history", None)
        return body


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TokenScanner:
    """Runs full scans against injected data providers."""

    def __init__(
        self,
        security_provider: SecurityDataProvider,
        price_provider: PriceProvider | None = None,
        history_provider: HistoryProvider | None = None,
        *,
        smart_money: SmartMoneyTracker | None = None,
        social: SocialAnalyzer | None = None,
        config: Settings | None = None,
    ) -> None:
        self._security = security_provider
        self._price = price_provider
        self._history = history_provider
        self._smart_money = smart_money or SmartMoneyTracker()
        self._social = social or SocialAnalyzer()
        self._config = config or default_settings

    async def scan(
        self,
        token_address: str | None,
        chain_id: str | None,
        *,
        advanced: bool | None = None,
    ) -> ScanResult:
        token_address = (token_address or "").strip()
        chain_id = str(chain_id or "").strip()
        if not token_address or not chain_id:
            raise InputError("Missing tokenAddress or chainId")

        if advanced is None:
            advanced = self._config.advanced_by_default

        logger.info(f"[SCAN] Scanning {token_address} on chain {chain_id}")
        security = await self._fetch_security(chain_id, token_address)
        risk_score = calculate_risk_score(security)

        if not advanced:
            return ScanResult(
                token_address=token_address,
                chain_id=chain_id,
                security_data=security,
                risk_score=risk_score,
                scanned_at=_utc_timestamp(),
            )

        extras = await self._enrich(security)
        verdict = calculate_overall_verdict(
            risk_score.overall,
            extras.rug_pull.probability,
            extras.liquidity.health_score,
        )

        logger.info(
            f"[SCAN] {token_address[:12]} ({security.token_symbol}): "
            f"risk={risk_score.overall} {risk_score.category}, "
            f"rug={extras.rug_pull.probability}, lp={extras.liquidity.health_score}, "
            f"verdict={verdict.rating}"
        )

        return ScanResult(
            token_address=token_address,
            chain_id=chain_id,
            security_data=security,
            risk_score=risk_score,
            scanned_at=_utc_timestamp(),
            advanced=extras,
            verdict=verdict,
        )

    async def _fetch_security(self, chain_id: str, address: str) -> SecurityData:
        try:
            security = await self._security.get_token_security(chain_id, address)
        except Exception as e:
            logger.error(f"[SCAN] Security provider failed for {address[:12]}: {e}")
            raise UpstreamError("security", str(e) or type(e).__name__) from e

        if security is None:
            raise NotFoundError("Token not found or invalid address")
        return security

    async def _enrich(self, security: SecurityData) -> AdvancedAnalysis:
        chain_id, address = security.chain_id, security.contract_address
        cfg = self._config

        price_task = (
            _optional("price", self._price.get_token_price, chain_id, address)
            if self._price is not None and cfg.enable_price
            else _none()
        )
        dex_task = (
            _optional("dex", self._price.get_dex_data, chain_id, address)
            if self._price is not None and cfg.enable_dex
            else _none()
        )
        history_task = (
            _optional("history", self._history.analyze_history, chain_id, address)
            if self._history is not None and cfg.enable_history
            else _none()
        )

        price, dex, history = await asyncio.gather(price_task, dex_task, history_task)

        return AdvancedAnalysis(
            price=price,
            dex=dex,
            whales=analyze_whales(security),
            rug_pull=calculate_rug_pull_risk(security),
            smart_money=self._smart_money.analyze_smart_money(security),
            liquidity=analyze_liquidity(security),
            social=self._analyze_social(security) if cfg.enable_social else None,
            history=history,
        )

    def _analyze_social(self, security: SecurityData) -> SocialMetrics | None:
        try:
            return self._social.analyze_social(security.token_name, security.token_symbol)
        except Exception as e:
            logger.warning(f"[SCAN] social analysis failed: {e}")
            return None


async def _none() -> None:
    return None


async def _optional(
    name: str,
    fetch: Callable[[str, str], Awaitable[T | None]],
    chain_id: str,
    address: str,
) -> T | None:
    """Await an enrichment call; any failure becomes None."""
    try:
        return await fetch(chain_id, address)
    except Exception as e:
        logger.warning(f"[SCAN] {name} enrichment failed for {address[:12]}: {type(e).__name__}: {e}")
        return None
