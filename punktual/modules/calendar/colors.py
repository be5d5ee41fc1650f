"""Colour helpers for generated button markup."""

from __future__ import annotations

import math

from punktual.modules.calendar.models import DEFAULT_COLOR

DARK_TEXT = "#374151"
LIGHT_TEXT = "#FFFFFF"

# Luminance above which dark text is used. Tuned for the button palette.
LUMINANCE_THRESHOLD = 0.179

NAMED_THEMES: dict[str, str] = {
    "light": "#F4F4F5",
    "dark": "#18181B",
    "brand": "#10b981",
    "original": "#4D90FF",
}


def _channel(color: str, offset: int) -> float:
    try:
        return int(color[offset:offset + 2], 16) / 255
    except ValueError:
        return math.nan


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance of a ``#RRGGBB`` colour.

    Unparseable channels give NaN rather than an exception.
    """
    color = hex_color.replace("#", "")
    channels = [_channel(color, offset) for offset in (0, 2, 4)]
    linear = [
        c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4
        for c in channels
    ]
    return 0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2]


def contrast_color(hex_color: str) -> str:
    """Return dark text for light backgrounds and white text for dark ones.

    Input is not validated; anything other than six hex digits gives an
    unspecified (but valid) colour.
    """
    return DARK_TEXT if relative_luminance(hex_color) > LUMINANCE_THRESHOLD else LIGHT_TEXT


def resolve_theme_color(theme: str | None) -> str:
    """Map a named theme to its hex value; hex strings pass through."""
    if not theme:
        return DEFAULT_COLOR
    return NAMED_THEMES.get(theme.lower(), theme)
