"""Date/time encodings for each calendar platform family.

These are textual transforms over the caller's wall-clock values. The
event timezone is never applied here; platforms interpret the times on
their own.
"""

from __future__ import annotations

from typing import Optional

from punktual.modules.calendar.models import DEFAULT_START_TIME


def format_basic(date: str, time: Optional[str] = None, is_all_day: bool = False) -> str:
    """Google / Apple / ICS basic format: ``YYYYMMDDTHHMMSS`` or ``YYYYMMDD``."""
    if not date:
        return ""
    if is_all_day:
        return date.replace("-", "")
    stamp = f"{date}T{time or DEFAULT_START_TIME}:00"
    return stamp.replace("-", "").replace(":", "")


def format_outlook(date: str, time: Optional[str] = None, is_all_day: bool = False) -> str:
    """Outlook / Office 365 deep-link format: ``YYYY-MM-DDTHH:MM:00.000Z``.

    The compose endpoint wants a full timestamp even for all-day events,
    so those are pinned to midnight.
    """
    if not date:
        return ""
    if is_all_day:
        return f"{date}T00:00:00.000Z"
    return f"{date}T{time or DEFAULT_START_TIME}:00.000Z"


def format_yahoo(date: str, time: Optional[str] = None, is_all_day: bool = False) -> str:
    """Yahoo format: compact ``YYYYMMDDTHHMMSS`` assembled from hour and minute."""
    if not date:
        return ""
    compact_date = date.replace("-", "")
    if is_all_day:
        return compact_date
    hours, _, minutes = (time or DEFAULT_START_TIME).partition(":")
    return f"{compact_date}T{hours.zfill(2)}{(minutes or '00').zfill(2)}00"
