"""
Pytest configuration for tableview.

Provides fixtures for:
- Settings isolated from the developer's environment
- The fixed 15-user sample store and a larger generated store
- Controllers bound to the user and generic listings
"""

from __future__ import annotations

from typing import Generator, List

import pytest

from tableview.config import Settings, get_settings
from tableview.controller import ViewController
from tableview.domain.models import Record, UserRecord
from tableview.domain.schema import RECORD_SCHEMA, USER_SCHEMA
from tableview.sample_data import generate_records, sample_users


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop any TABLEVIEW_* overrides and keep logging quiet for CLI tests.
    """
    for name in (
        "TABLEVIEW_PAGE_SIZE",
        "TABLEVIEW_PAGE_SIZE_OPTIONS",
        "TABLEVIEW_DISPLAY_LOCALE",
        "TABLEVIEW_DISPLAY_TIMEZONE",
        "TABLEVIEW_SAMPLE_ROWS",
        "TABLEVIEW_SAMPLE_SEED",
        "TABLEVIEW_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TABLEVIEW_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific values, independent of `.env`.
    """
    return Settings(
        default_page_size=10,
        display_locale="en-US",
        display_timezone="UTC",
        log_level="DEBUG",
    )


@pytest.fixture
def users() -> List[UserRecord]:
    return sample_users()


@pytest.fixture
def generated_records() -> List[Record]:
    return generate_records(57, seed=7)


@pytest.fixture
def user_view(users: List[UserRecord], test_settings: Settings) -> ViewController:
    return ViewController(users, USER_SCHEMA, settings=test_settings)


@pytest.fixture
def record_view(users: List[UserRecord], test_settings: Settings) -> ViewController:
    """The generic listing over the same 15 rows (searches every field)."""
    return ViewController(users, RECORD_SCHEMA, settings=test_settings)
