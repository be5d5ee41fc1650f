"""Calendar links: per-platform deep links and ICS data URIs."""

from punktual.modules.calendar.links import build_links, tracked_url
from punktual.modules.calendar.models import (
    ButtonStyleDescription,
    CalendarPlatform,
    CodeGenerationOptions,
    EventDescription,
    PlatformLinkMap,
)

__all__ = [
    "build_links",
    "tracked_url",
    "ButtonStyleDescription",
    "CalendarPlatform",
    "CodeGenerationOptions",
    "EventDescription",
    "PlatformLinkMap",
]
