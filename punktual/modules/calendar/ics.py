"""ICS (iCalendar) document builder for calendar clients fed by data URIs."""

from __future__ import annotations

import datetime as dt
import hashlib
from typing import Optional
from urllib.parse import quote

from punktual.modules.calendar.formatting import format_basic
from punktual.modules.calendar.models import EventDescription

PRODID = "-//Punktual//Punktual//EN"
UID_DOMAIN = "punktual.co"
CRLF = "\r\n"

# encodeURIComponent leaves these unescaped
URI_SAFE = "-_.!~*'()"


def encode_component(value: Optional[str]) -> str:
    """Percent-encode a single URL component."""
    return quote(value or "", safe=URI_SAFE)


def escape_text(value: str) -> str:
    """Escape an ICS TEXT value (backslash, semicolon, comma, newline)."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def build_uid(event: EventDescription, now: dt.datetime) -> str:
    """Time-based identifier, stable for a given clock reading and event."""
    millis = int(now.timestamp() * 1000)
    fingerprint = f"{event.title}|{event.start_date}|{event.effective_start_time}|{event.location}"
    digest = hashlib.sha256(fingerprint.encode("utf-8")).hexdigest()[:8]
    return f"{millis}-{digest}@{UID_DOMAIN}"


def build_ics(event: EventDescription, now: Optional[dt.datetime] = None) -> str:
    """Render ``event`` as a single-event VCALENDAR body joined by CRLF.

    Empty description or location produce empty-valued lines; nothing
    here raises for missing optional fields.
    """
    now = now or dt.datetime.now(dt.UTC)
    start = format_basic(event.start_date, event.effective_start_time, event.is_all_day)
    end = format_basic(event.effective_end_date, event.effective_end_time, event.is_all_day)
    stamp = format_basic(now.date().isoformat(), now.strftime("%H:%M"))

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"PRODID:{PRODID}",
        "BEGIN:VEVENT",
        f"UID:{build_uid(event, now)}",
        f"DTSTAMP:{stamp}",
        f"DTSTART:{start}",
        f"DTEND:{end}",
        f"SUMMARY:{escape_text(event.title)}",
        f"DESCRIPTION:{escape_text(event.description)}",
        f"LOCATION:{escape_text(event.location)}",
        "STATUS:CONFIRMED",
        "SEQUENCE:0",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return CRLF.join(lines)


def build_ics_data_uri(event: EventDescription, now: Optional[dt.datetime] = None) -> str:
    """Wrap the ICS body in a ``data:text/calendar`` URI."""
    return f"data:text/calendar;charset=utf8,{encode_component(build_ics(event, now))}"
