"""Runtime settings for the dashboard data layer."""

from datetime import date
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.models.enums import DataSource


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="VIX_", extra="ignore")

    api_base_url: str = "http://localhost:3000/api"
    request_timeout_seconds: float = Field(default=10.0, gt=0.0)
    history_start: date = date(2020, 1, 1)
    data_source: DataSource = DataSource.YAHOO


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment / .env file."""
    return Settings()
