"""
config.py
=========
Service settings, read from the environment (prefix ``GHADI_``) and an
optional ``.env`` file via pydantic-settings.

    GHADI_LOG_LEVEL=DEBUG
    GHADI_LOG_JSON=true
    GHADI_CORS_ORIGINS='["https://example.org"]'
    GHADI_VIGHATI_ARITHMETIC=float     # reproduce float division by 0.4
"""

from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GHADI_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    app_name: str = "Ghadi-Pala Calculator API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    log_json: bool = False
    cors_origins: List[str] = ["*"]
    vighati_arithmetic: Literal["exact", "float"] = "exact"


@lru_cache
def get_settings() -> Settings:
    return Settings()
