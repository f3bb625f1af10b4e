"""Application configuration utilities."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized configuration loaded from environment or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BOARDSHORT_",
        populate_by_name=True,
        extra="ignore",
    )

    weather_api_key: Optional[str] = Field(default=None, alias="WEATHER_API_KEY")
    weather_url: str = "https://api.openweathermap.org/data/3.0/onecall/timemachine"
    weather_units: str = "imperial"
    request_timeout: int = 30

    default_lat: float = 32.7157
    default_lng: float = -117.1611
    default_location: str = "San Diego, CA"
    timezone: str = "America/Los_Angeles"

    content_dir: Path = Path("content/days")
    index_path: Path = Path("content/index.json")
    index_source: Optional[str] = None

    total_slots: int = 40
    thumb_h: int = 88
    thumb_h_sm: int = 52
    mobile_breakpoint: int = 600

    @property
    def resolved_index_source(self) -> str:
        return self.index_source or str(self.index_path)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")
