"""Tests for the ICS document builder."""

from __future__ import annotations

import datetime as dt
from urllib.parse import unquote

from punktual.modules.calendar.ics import (
    build_ics,
    build_ics_data_uri,
    build_uid,
    encode_component,
    escape_text,
)
from punktual.modules.calendar.models import EventDescription


class TestBuildIcs:
    """Tests for build_ics."""

    def test_lines_in_order(self, launch_event, now) -> None:
        """Required properties appear in the documented order."""
        lines = build_ics(launch_event, now).split("\r\n")
        keys = [line.split(":", 1)[0] for line in lines]
        assert keys == [
            "BEGIN", "VERSION", "CALSCALE", "METHOD", "PRODID",
            "BEGIN", "UID", "DTSTAMP", "DTSTART", "DTEND",
            "SUMMARY", "DESCRIPTION", "LOCATION", "STATUS", "SEQUENCE",
            "END", "END",
        ]
        assert lines[0] == "BEGIN:VCALENDAR"
        assert lines[5] == "BEGIN:VEVENT"
        assert lines[-2] == "END:VEVENT"
        assert lines[-1] == "END:VCALENDAR"

    def test_uses_crlf(self, launch_event, now) -> None:
        body = build_ics(launch_event, now)
        assert "\r\n" in body
        assert "\n" not in body.replace("\r\n", "")

    def test_dates(self, launch_event, now) -> None:
        body = build_ics(launch_event, now)
        assert "DTSTART:20251225T143000" in body
        assert "DTEND:20251225T160000" in body
        assert "DTSTAMP:20251201T120000" in body

    def test_empty_optional_fields(self, now) -> None:
        """Missing description and location serialize as empty lines."""
        body = build_ics(EventDescription(title="Solo", start_date="2025-01-01"), now)
        assert "\r\nDESCRIPTION:\r\n" in body
        assert "\r\nLOCATION:\r\n" in body

    def test_all_day(self, all_day_event, now) -> None:
        body = build_ics(all_day_event, now)
        assert "DTSTART:20250704\r\n" in body
        assert "DTEND:20250704\r\n" in body

    def test_deterministic_for_frozen_clock(self, launch_event, now) -> None:
        assert build_ics(launch_event, now) == build_ics(launch_event, now)

    def test_text_is_escaped(self, now) -> None:
        event = EventDescription(
            title="Lunch; Dinner, Drinks",
            description="line one\nline two",
            start_date="2025-01-01",
        )
        body = build_ics(event, now)
        assert "SUMMARY:Lunch\\; Dinner\\, Drinks" in body
        assert "DESCRIPTION:line one\\nline two" in body


class TestBuildUid:
    """Tests for the UID generator."""

    def test_domain_suffix(self, launch_event, now) -> None:
        assert build_uid(launch_event, now).endswith("@punktual.co")

    def test_changes_with_clock(self, launch_event, now) -> None:
        later = now + dt.timedelta(milliseconds=1)
        assert build_uid(launch_event, now) != build_uid(launch_event, later)

    def test_changes_with_event(self, launch_event, all_day_event, now) -> None:
        assert build_uid(launch_event, now) != build_uid(all_day_event, now)


class TestDataUri:
    """Tests for the data URI wrapper and encoding helpers."""

    def test_data_uri_decodes_to_body(self, launch_event, now) -> None:
        uri = build_ics_data_uri(launch_event, now)
        prefix = "data:text/calendar;charset=utf8,"
        assert uri.startswith(prefix)
        assert unquote(uri[len(prefix):]) == build_ics(launch_event, now)

    def test_encode_component_matches_uri_component_rules(self) -> None:
        assert encode_component("Launch & Party") == "Launch%20%26%20Party"
        assert encode_component("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"
        assert encode_component("a/b?c=d") == "a%2Fb%3Fc%3Dd"
        assert encode_component(None) == ""

    def test_escape_text_backslash(self) -> None:
        assert escape_text("C:\\path") == "C:\\\\path"
