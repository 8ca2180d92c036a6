"""
Configuration settings for tableview.

Uses Pydantic Settings to load environment variables for logging, pagination
defaults, and the display locale used when timestamps are rendered or searched.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List
from zoneinfo import ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tableview.utils.display import resolve_timezone

SUPPORTED_LOCALES = ("en-US", "id-ID", "iso")


class Settings(BaseSettings):
    # Application
    log_level: str = Field("INFO", alias="TABLEVIEW_LOG_LEVEL")
    json_logs: bool = Field(False, alias="TABLEVIEW_JSON_LOGS")

    # Pagination defaults
    default_page_size: int = Field(10, alias="TABLEVIEW_PAGE_SIZE", ge=1)
    page_size_options: List[int] = Field([5, 10, 20, 50], alias="TABLEVIEW_PAGE_SIZE_OPTIONS")

    # Display
    display_locale: str = Field("en-US", alias="TABLEVIEW_DISPLAY_LOCALE")
    display_timezone: str = Field("UTC", alias="TABLEVIEW_DISPLAY_TIMEZONE")

    # Sample data
    sample_rows: int = Field(15, alias="TABLEVIEW_SAMPLE_ROWS", ge=0)
    sample_seed: int = Field(42, alias="TABLEVIEW_SAMPLE_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("display_locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        if value not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unknown display locale '{value}'. Available: {', '.join(SUPPORTED_LOCALES)}"
            )
        return value

    @field_validator("display_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            resolve_timezone(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown display timezone '{value}'") from exc
        return value

    @field_validator("page_size_options")
    @classmethod
    def _positive_options(cls, value: List[int]) -> List[int]:
        if not value or any(n < 1 for n in value):
            raise ValueError("page_size_options must be a non-empty list of positive integers")
        return sorted(set(value))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["SUPPORTED_LOCALES", "Settings", "get_settings"]
