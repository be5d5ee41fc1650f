"""Tests for contrast colour and theme resolution."""

from __future__ import annotations

import pytest

from punktual.modules.calendar.colors import (
    DARK_TEXT,
    LIGHT_TEXT,
    LUMINANCE_THRESHOLD,
    contrast_color,
    relative_luminance,
    resolve_theme_color,
)
from punktual.modules.calendar.models import DEFAULT_COLOR


class TestContrastColor:
    """Tests for contrast_color."""

    def test_white_background_gets_dark_text(self) -> None:
        assert contrast_color("#FFFFFF") == "#374151"

    def test_black_background_gets_white_text(self) -> None:
        assert contrast_color("#000000") == "#FFFFFF"

    def test_threshold_is_not_midpoint(self) -> None:
        """A mid-grey above 0.179 but below 0.5 still gets dark text."""
        grey = "#808080"
        assert LUMINANCE_THRESHOLD < relative_luminance(grey) < 0.5
        assert contrast_color(grey) == DARK_TEXT

    def test_just_below_threshold(self) -> None:
        """#737373 sits just under the threshold and gets white text."""
        assert relative_luminance("#737373") < LUMINANCE_THRESHOLD
        assert contrast_color("#737373") == LIGHT_TEXT

    def test_brand_colour(self) -> None:
        """The default green is light enough for dark text."""
        assert contrast_color(DEFAULT_COLOR) == DARK_TEXT

    def test_accepts_hex_without_hash(self) -> None:
        assert contrast_color("FFFFFF") == DARK_TEXT

    @pytest.mark.parametrize("value", ["", "#zzzzzz", "red", "#12"])
    def test_malformed_input_does_not_raise(self, value: str) -> None:
        """Unvalidated input still returns one of the two text colours."""
        assert contrast_color(value) in (DARK_TEXT, LIGHT_TEXT)


class TestRelativeLuminance:
    """Tests for relative_luminance."""

    def test_extremes(self) -> None:
        assert relative_luminance("#000000") == 0.0
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)


class TestResolveThemeColor:
    """Tests for named theme lookup."""

    def test_named_themes(self) -> None:
        assert resolve_theme_color("dark") == "#18181B"
        assert resolve_theme_color("Light") == "#F4F4F5"

    def test_hex_passes_through(self) -> None:
        assert resolve_theme_color("#123456") == "#123456"

    def test_empty_uses_default(self) -> None:
        assert resolve_theme_color(None) == DEFAULT_COLOR
        assert resolve_theme_color("") == DEFAULT_COLOR
