from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (e.g. ``NOTION_SECRET``).
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    notion_secret: str
    notion_trainee_database_id: str
    notion_test_database_id: str
    notion_evaluation_database_id: str
    default_body_weight_kg: float = 70.0
    log_level: str = "INFO"
    log_file: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
