"""Per-platform "add to calendar" URL construction."""

from __future__ import annotations

import datetime as dt
from typing import Callable, Optional

from punktual.logging_config import get_logger
from punktual.modules.calendar.formatting import format_basic, format_outlook, format_yahoo
from punktual.modules.calendar.ics import build_ics_data_uri, encode_component
from punktual.modules.calendar.models import EventDescription, PlatformLinkMap
from punktual.modules.calendar.platforms import PLATFORMS

logger = get_logger(__name__)


def _query(endpoint: str, params: list[tuple[str, str]]) -> str:
    """Join pre-encoded parameters onto an endpoint, preserving order."""
    separator = "&" if "?" in endpoint else "?"
    return endpoint + separator + "&".join(f"{key}={value}" for key, value in params)


def google_url(event: EventDescription) -> str:
    start = format_basic(event.start_date, event.effective_start_time, event.is_all_day)
    end = format_basic(event.effective_end_date, event.effective_end_time, event.is_all_day)
    return _query(PLATFORMS["google"].endpoint, [
        ("action", "TEMPLATE"),
        ("text", encode_component(event.title)),
        ("dates", f"{start}/{end}"),
        ("details", encode_component(event.description)),
        ("location", encode_component(event.location)),
    ])


def _outlook_compose_url(endpoint: str, event: EventDescription) -> str:
    return _query(endpoint, [
        ("subject", encode_component(event.title)),
        ("startdt", format_outlook(event.start_date, event.effective_start_time, event.is_all_day)),
        ("enddt", format_outlook(event.effective_end_date, event.effective_end_time, event.is_all_day)),
        ("body", encode_component(event.description)),
        ("location", encode_component(event.location)),
    ])


def outlook_url(event: EventDescription) -> str:
    return _outlook_compose_url(PLATFORMS["outlook"].endpoint, event)


def office365_url(event: EventDescription) -> str:
    return _outlook_compose_url(PLATFORMS["office365"].endpoint, event)


def yahoo_url(event: EventDescription) -> str:
    return _query(PLATFORMS["yahoo"].endpoint, [
        ("v", "60"),
        ("title", encode_component(event.title)),
        ("st", format_yahoo(event.start_date, event.effective_start_time, event.is_all_day)),
        ("et", format_yahoo(event.effective_end_date, event.effective_end_time, event.is_all_day)),
        ("desc", encode_component(event.description)),
        ("in_loc", encode_component(event.location)),
    ])


URL_BUILDERS: dict[str, Callable[[EventDescription], str]] = {
    "google": google_url,
    "outlook": outlook_url,
    "office365": office365_url,
    "yahoo": yahoo_url,
}


def build_links(event: EventDescription, now: Optional[dt.datetime] = None) -> PlatformLinkMap:
    """Build a URL for every known platform.

    Returns an all-empty map when the title or start date is missing so
    callers can tell "not enough information yet" apart from a real event.
    """
    if not event.is_complete:
        return PlatformLinkMap.empty()

    links = {platform: builder(event) for platform, builder in URL_BUILDERS.items()}
    links["apple"] = build_ics_data_uri(event, now)
    # Outlook.com is the same consumer product as Outlook
    links["outlookcom"] = links["outlook"]

    logger.debug("calendar_links_built", title=event.title, all_day=event.is_all_day)
    return PlatformLinkMap(**links)


def tracked_url(base_url: str, share_id: str, platform_id: str) -> str:
    """Redirect URL that records a click before forwarding to the platform."""
    return f"{base_url.rstrip('/')}/e/{share_id}?cal={platform_id}"


def resolve_tracked_platform(links: PlatformLinkMap, cal: Optional[str]) -> Optional[str]:
    """Target of a ``?cal=`` redirect, or None when it cannot be honoured."""
    if not cal:
        return None
    return links.get(cal) or None
