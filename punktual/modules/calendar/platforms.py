"""Read-only catalog of the calendar platforms we can link to."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

GENERIC_ICON = "/icons/platforms/icon-calendar.svg"


class PlatformEntry(NamedTuple):
    """Display metadata and deep-link endpoint for one platform."""

    id: str
    name: str
    short_name: str
    emoji: str
    icon: str
    endpoint: Optional[str]


PLATFORMS: Mapping[str, PlatformEntry] = MappingProxyType({
    "google": PlatformEntry(
        "google", "Google Calendar", "Google", "📅",
        "/icons/platforms/icon-google.svg",
        "https://calendar.google.com/calendar/render",
    ),
    "apple": PlatformEntry(
        "apple", "Apple Calendar", "Apple", "🍎",
        "/icons/platforms/icon-apple.svg",
        None,  # served as an ICS data URI
    ),
    "outlook": PlatformEntry(
        "outlook", "Outlook", "Outlook", "📧",
        "/icons/platforms/icon-outlook.svg",
        "https://outlook.live.com/calendar/0/deeplink/compose",
    ),
    "office365": PlatformEntry(
        "office365", "Office 365", "Office 365", "📊",
        "/icons/platforms/icon-office365.svg",
        "https://outlook.office.com/calendar/0/deeplink/compose",
    ),
    "outlookcom": PlatformEntry(
        "outlookcom", "Outlook.com", "Outlook.com", "📧",
        "/icons/platforms/icon-outlook.svg",
        "https://outlook.live.com/calendar/0/deeplink/compose",
    ),
    "yahoo": PlatformEntry(
        "yahoo", "Yahoo Calendar", "Yahoo", "🔵",
        "/icons/platforms/icon-yahoo.svg",
        "https://calendar.yahoo.com/",
    ),
})


def get_platform(platform_id: str) -> PlatformEntry:
    """Look up a platform, synthesising a generic entry for unknown ids."""
    entry = PLATFORMS.get(platform_id)
    if entry is not None:
        return entry
    fallback = platform_id[:1].upper() + platform_id[1:]
    return PlatformEntry(platform_id, fallback, fallback, "📅", GENERIC_ICON, None)


def display_name(platform_id: str) -> str:
    return get_platform(platform_id).name
