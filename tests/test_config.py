"""Tests for configuration module."""

from __future__ import annotations

import os
from unittest.mock import patch

from punktual.config import DEFAULT_BASE_URL, Settings


class TestSettings:
    """Tests for the Settings configuration class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_values(self) -> None:
        """Settings loads with sane defaults."""
        s = Settings(_env_file=None)
        assert s.punktual_env == "development"
        assert s.punktual_log_level == "INFO"
        assert s.base_url == DEFAULT_BASE_URL == "https://punktual.co"
        assert s.api_port == 8000
        assert s.short_link_timeout == 10.0

    @patch.dict(os.environ, {"NEXT_PUBLIC_BASE_URL": "https://staging.punktual.co"}, clear=True)
    def test_base_url_from_environment(self) -> None:
        """NEXT_PUBLIC_BASE_URL overrides the default."""
        s = Settings(_env_file=None)
        assert s.base_url == "https://staging.punktual.co"

    def test_trailing_slash_stripped(self) -> None:
        """A trailing slash on the base URL is removed."""
        s = Settings(next_public_base_url="https://example.com/", _env_file=None)
        assert s.base_url == "https://example.com"

    def test_blank_base_url_falls_back(self) -> None:
        """An empty base URL falls back to the default instead of failing."""
        s = Settings(next_public_base_url="  ", _env_file=None)
        assert s.base_url == DEFAULT_BASE_URL

    def test_short_link_endpoints_derived(self) -> None:
        """Short-link endpoints default to paths under the base URL."""
        s = Settings(next_public_base_url="https://example.com", _env_file=None)
        assert s.short_link_endpoint == "https://example.com/api/create-short-link"
        assert s.csrf_endpoint == "https://example.com/api/csrf-token"

    def test_short_link_endpoints_explicit(self) -> None:
        """Explicit endpoint URLs win over the derived ones."""
        s = Settings(
            short_link_api_url="https://links.example.com/create",
            csrf_token_url="https://links.example.com/csrf",
            _env_file=None,
        )
        assert s.short_link_endpoint == "https://links.example.com/create"
        assert s.csrf_endpoint == "https://links.example.com/csrf"
