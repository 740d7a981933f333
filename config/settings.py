from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: str = "logs"

    # Feature flags: optional enrichments (each degrades to None on failure)
    enable_price: bool = True  # CoinGecko-style spot price
    enable_dex: bool = True  # main DEX pair (liquidity, volume, txns)
    enable_social: bool = True
    enable_history: bool = False  # explorer lookups are opt-in, not part of the default scan

    # Advanced analysis (whales, rug pull, liquidity, smart money, verdict)
    advanced_by_default: bool = True


settings = Settings()
