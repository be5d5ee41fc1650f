"""Button code generator: turns an event and a button style into embeddable code.

The generator performs no I/O and never raises for incomplete input.
Pass ``now`` to pin the timestamp used in ICS data URIs. Incomplete
events and empty platform selections produce an HTML comment explaining
what is missing.
"""

from __future__ import annotations

import datetime as dt
import hashlib
from typing import Optional

from punktual.config import get_settings
from punktual.logging_config import get_logger
from punktual.modules.calendar.links import build_links, tracked_url
from punktual.modules.calendar.models import (
    ButtonLayout,
    ButtonStyleDescription,
    CodeFormat,
    CodeGenerationOptions,
    EventDescription,
    PlatformInfo,
    PlatformLinkMap,
)
from punktual.modules.calendar.platforms import display_name
from punktual.modules.embed import templates
from punktual.modules.embed.assets import generate_css, generate_js
from punktual.modules.embed.badge import powered_by_html, powered_by_table_row
from punktual.modules.embed.minify import minify

logger = get_logger(__name__)

NO_PLATFORMS_PLACEHOLDER = "<!-- Please select at least one calendar platform -->"
INCOMPLETE_EVENT_PLACEHOLDER = "<!-- Please fill in the event title and date to generate code -->"


class ButtonCodeGenerator:
    """Renders dropdown, individual-button, React, CSS, JS and link-list code."""

    def __init__(self, base_url: Optional[str] = None) -> None:
        self._base_url = (base_url or get_settings().base_url).rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    # ── Helpers ──────────────────────────────────────────────────────

    def active_platforms(
        self,
        style: ButtonStyleDescription,
        links: PlatformLinkMap,
        share_id: Optional[str] = None,
    ) -> list[PlatformInfo]:
        """Selected platforms with display names and the URL each button should use."""
        return [
            PlatformInfo(
                id=platform,
                name=display_name(platform),
                url=tracked_url(self._base_url, share_id, platform) if share_id else links.get(platform),
            )
            for platform in style.active_platform_ids
        ]

    @staticmethod
    def button_id(event: EventDescription) -> str:
        """Element id derived from the event so output stays deterministic."""
        seed = f"{event.title}|{event.start_date}|{event.effective_start_time}"
        return "punktual-" + hashlib.sha1(seed.encode("utf-8")).hexdigest()[:8]

    def _links(
        self,
        event: EventDescription,
        links: Optional[PlatformLinkMap],
        now: Optional[dt.datetime],
    ) -> PlatformLinkMap:
        return links if links is not None else build_links(event, now)

    # ── Entry points ─────────────────────────────────────────────────

    def generate(
        self,
        event: EventDescription,
        style: ButtonStyleDescription,
        options: Optional[CodeGenerationOptions] = None,
        links: Optional[PlatformLinkMap] = None,
        now: Optional[dt.datetime] = None,
    ) -> str:
        """Produce button code in ``options.format``.

        ``links`` may be the raw platform map or a short-link replacement
        with the same keys; when omitted it is built from ``event``.
        """
        options = options or CodeGenerationOptions()

        if not style.active_platform_ids:
            return NO_PLATFORMS_PLACEHOLDER

        if options.format == CodeFormat.CSS:
            return self._finish(generate_css(style), options.minified, css=True)
        if options.format == CodeFormat.JS:
            return self._finish(generate_js(), options.minified, css=True)

        if not event.is_complete:
            return INCOMPLETE_EVENT_PLACEHOLDER

        platforms = self.active_platforms(style, self._links(event, links, now), options.share_id)
        logger.debug(
            "button_code_generating",
            format=options.format.value,
            layout=style.button_layout.value,
            platforms=len(platforms),
            tracked=bool(options.share_id),
        )

        if options.format == CodeFormat.REACT:
            return self._finish(templates.react_component(platforms, style), options.minified)

        if style.button_layout == ButtonLayout.INDIVIDUAL:
            footer = powered_by_table_row(base_url=self._base_url) if options.show_powered_by else ""
            return self._finish(templates.individual_html(platforms, style, footer), options.minified)

        html = templates.dropdown_html(
            platforms,
            self.button_id(event),
            style,
            include_css=options.include_css,
            include_js=options.include_js,
        )
        return self._finish(html, options.minified, css=options.include_css or options.include_js)

    def generate_direct_links(
        self,
        event: EventDescription,
        style: ButtonStyleDescription,
        options: Optional[CodeGenerationOptions] = None,
        links: Optional[PlatformLinkMap] = None,
        now: Optional[dt.datetime] = None,
    ) -> str:
        """Unordered list with one anchor per selected platform."""
        options = options or CodeGenerationOptions()
        if not style.active_platform_ids:
            return NO_PLATFORMS_PLACEHOLDER
        if not event.is_complete:
            return INCOMPLETE_EVENT_PLACEHOLDER

        platforms = self.active_platforms(style, self._links(event, links, now), options.share_id)
        return self._finish(templates.direct_links_html(event.title, platforms, style), options.minified)

    def generate_email_text(
        self,
        event: EventDescription,
        style: ButtonStyleDescription,
        options: Optional[CodeGenerationOptions] = None,
        links: Optional[PlatformLinkMap] = None,
        now: Optional[dt.datetime] = None,
    ) -> str:
        """Plain-text links for email bodies. Never minified."""
        options = options or CodeGenerationOptions()
        if not style.active_platform_ids:
            return NO_PLATFORMS_PLACEHOLDER
        if not event.is_complete:
            return INCOMPLETE_EVENT_PLACEHOLDER

        platforms = self.active_platforms(style, self._links(event, links, now), options.share_id)
        return templates.email_text(event.title, platforms)

    def generate_embed_script(
        self,
        event: EventDescription,
        style: ButtonStyleDescription,
        options: Optional[CodeGenerationOptions] = None,
        links: Optional[PlatformLinkMap] = None,
        now: Optional[dt.datetime] = None,
        container_id: str = "punktual-calendar-buttons",
    ) -> str:
        """Self-contained inline markup plus a click-tracking script."""
        options = options or CodeGenerationOptions()
        if not style.active_platform_ids:
            return NO_PLATFORMS_PLACEHOLDER
        if not event.is_complete:
            return INCOMPLETE_EVENT_PLACEHOLDER

        platforms = [
            p for p in self.active_platforms(style, self._links(event, links, now), options.share_id)
            if p.url
        ]
        parts = [
            "<!-- Punktual Calendar Button Embed -->",
            '<div id="punktual-calendar-embed">',
            templates.embed_markup(platforms, style, container_id),
            templates.embed_tracking_script(container_id, event.title),
        ]
        if options.show_powered_by:
            parts.append(powered_by_html(base_url=self._base_url))
        parts += ["</div>", "<!-- End Punktual Calendar Button Embed -->"]
        return self._finish("\n".join(parts), options.minified, css=True)

    def generate_calendar_code(
        self,
        event: EventDescription,
        style: ButtonStyleDescription,
        output_type: str = "button",
        options: Optional[CodeGenerationOptions] = None,
        links: Optional[PlatformLinkMap] = None,
        now: Optional[dt.datetime] = None,
    ) -> str:
        """Dispatch on the requested output type; unknown types render a button."""
        if not event.is_complete:
            return INCOMPLETE_EVENT_PLACEHOLDER

        if output_type in ("links", "direct"):
            return self.generate_direct_links(event, style, options, links, now)
        if output_type == "email":
            return self.generate_email_text(event, style, options, links, now)
        if output_type == "embed":
            return self.generate_embed_script(event, style, options, links, now)
        return self.generate(event, style, options, links, now)

    @staticmethod
    def _finish(code: str, minified: bool, css: bool = False) -> str:
        return minify(code, css=css) if minified else code
