from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.policy import RoundingPolicy


class AppSettings(BaseSettings):
    currency_rounding: RoundingPolicy = RoundingPolicy.HALF_EVEN

    model_config = SettingsConfigDict(
        env_prefix="DECIMAL_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@cache
def config() -> AppSettings:
    return AppSettings()
