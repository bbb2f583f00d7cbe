from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUSCODE_",
        case_sensitive=False,
    )

    # Used by encode() when code_length <= 0. ~13.5m at the equator.
    default_code_length: int = 10


@lru_cache
def get_settings() -> Settings:
    return Settings()
