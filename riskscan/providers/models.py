"""Market data shapes returned by price / DEX providers."""

from pydantic import BaseModel, ConfigDict, Field


class PriceData(BaseModel):
    """Spot price in CoinGecko ``simple/token_price`` shape."""

    usd: float = 0.0
    usd_24h_change: float | None = None
    usd_market_cap: float | None = None
    usd_24h_vol: float | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class DEXLiquidity(BaseModel):
    usd: float = 0.0

    model_config = ConfigDict(extra="ignore", frozen=True)


class DEXTxns(BaseModel):
    buys: int = 0
    sells: int = 0

    model_config = ConfigDict(extra="ignore", frozen=True)


class DEXData(BaseModel):
    """Main trading pair (highest USD liquidity) for a token."""

    price_usd: str | None = Field(None, alias="priceUsd")
    liquidity: DEXLiquidity = Field(default_factory=DEXLiquidity)
    fdv: float | None = None
    market_cap: float | None = Field(None, alias="marketCap")
    volume_24h: float | None = Field(None, alias="volume24h")
    price_change_24h: float | None = Field(None, alias="priceChange24h")
    txns_24h: DEXTxns = Field(default_factory=DEXTxns, alias="txns24h")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)
