"""Embeddable button code: dropdown, individual buttons, React, CSS/JS and link lists."""

from punktual.modules.embed.minify import minify
from punktual.modules.embed.service import (
    INCOMPLETE_EVENT_PLACEHOLDER,
    NO_PLATFORMS_PLACEHOLDER,
    ButtonCodeGenerator,
)

__all__ = [
    "ButtonCodeGenerator",
    "INCOMPLETE_EVENT_PLACEHOLDER",
    "NO_PLATFORMS_PLACEHOLDER",
    "minify",
]
