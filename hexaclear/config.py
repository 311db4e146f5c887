from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Hand dealing
    max_deal_attempts: int = 30

    # Daily mode: draws skipped per prior hand when the exact draw count is unknown
    daily_hand_block_size: int = 1000

    # Arena CLI
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HEXACLEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
