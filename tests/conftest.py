"""Shared test fixtures and configuration."""

from __future__ import annotations

import datetime as dt
import os

import pytest

os.environ.setdefault("PUNKTUAL_ENV", "test")
os.environ.setdefault("PUNKTUAL_LOG_LEVEL", "WARNING")
os.environ.setdefault("NEXT_PUBLIC_BASE_URL", "https://punktual.co")

from punktual.config import Settings
from punktual.logging_config import setup_logging
from punktual.modules.calendar.models import ButtonStyleDescription, EventDescription


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    """Apply the test log level and renderer once per session."""
    setup_logging()


@pytest.fixture
def settings() -> Settings:
    """Return test settings."""
    return Settings(
        punktual_env="test",
        punktual_log_level="WARNING",
        next_public_base_url="https://punktual.co",
        _env_file=None,
    )


@pytest.fixture
def now() -> dt.datetime:
    """A frozen clock reading."""
    return dt.datetime(2025, 12, 1, 12, 0, 0, tzinfo=dt.UTC)


@pytest.fixture
def launch_event() -> EventDescription:
    """The 'Launch' event used across link and code tests."""
    return EventDescription(
        title="Launch",
        start_date="2025-12-25",
        start_time="14:30",
        end_date="2025-12-25",
        end_time="16:00",
        location="SF",
    )


@pytest.fixture
def all_day_event() -> EventDescription:
    return EventDescription(title="Independence Day", start_date="2025-07-04", is_all_day=True)


@pytest.fixture
def dropdown_style() -> ButtonStyleDescription:
    return ButtonStyleDescription(selected_platforms={"google": True, "apple": True, "outlook": True})


@pytest.fixture
def individual_style() -> ButtonStyleDescription:
    return ButtonStyleDescription(
        button_layout="individual",
        selected_platforms={"google": True, "apple": True, "yahoo": True},
    )


@pytest.fixture
def empty_style() -> ButtonStyleDescription:
    return ButtonStyleDescription(selected_platforms={"google": False, "apple": False})
