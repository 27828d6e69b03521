"""
Configuration settings for the payroll console.

Uses Pydantic Settings to load environment variables (or a `.env` file) for
logging and the input bounds the console enforces before calling the registry.
"""
from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Input bounds
    max_rate: Decimal = Field(Decimal("100000"), gt=0, alias="PAYROLL_MAX_RATE")
    max_quantity: int = Field(10_000, gt=0, alias="PAYROLL_MAX_QUANTITY")
    max_lookup_id: int = Field(1_000_000, gt=0, alias="PAYROLL_MAX_LOOKUP_ID")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
