"""Short-link client that swaps raw platform URLs for tracked redirect URLs.

This talks to the hosted short-link API; it is the only part of the
package that performs I/O. Code generation never awaits it: callers
resolve short links first and hand the resulting map to the generator.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from punktual.config import Settings, get_settings
from punktual.exceptions import ShortLinkError
from punktual.logging_config import get_logger
from punktual.modules.calendar.models import PlatformLinkMap
from punktual.modules.short_links.models import CreateShortLinkRequest, CreateShortLinkResponse

logger = get_logger(__name__)

_SHORT_ID = re.compile(r"eventid=([A-Z0-9]+)")


class ShortLinkService:
    """Creates short links for calendar URLs through the hosted API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self._settings.short_link_timeout,
        )

    # ── Single link ──────────────────────────────────────────────────

    async def create_short_link(
        self,
        original_url: str,
        event_title: Optional[str] = None,
        user_id: Optional[str] = None,
        access_token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> CreateShortLinkResponse:
        """Shorten one URL.

        Transport failures, error statuses and malformed response bodies
        all surface as ShortLinkError.
        """
        if client is None:
            async with self._client() as own_client:
                return await self.create_short_link(
                    original_url, event_title, user_id, access_token, client=own_client,
                )

        try:
            csrf_token = await self._fetch_csrf_token(client)
            return await self._post_short_link(
                client,
                CreateShortLinkRequest(original_url=original_url, event_title=event_title, user_id=user_id),
                csrf_token,
                access_token,
            )
        except httpx.HTTPError as exc:
            raise ShortLinkError(f"Short link request failed: {type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            # undecodable JSON or a body missing required fields
            raise ShortLinkError(f"Unexpected short link response: {exc}") from exc

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _fetch_csrf_token(self, client: httpx.AsyncClient) -> str:
        resp = await client.get(self._settings.csrf_endpoint)
        if resp.status_code != 200:
            raise ShortLinkError("Failed to get CSRF token", status_code=resp.status_code)
        payload = resp.json()
        token = payload.get("token") if isinstance(payload, dict) else None
        if not token:
            raise ShortLinkError("CSRF token missing from response", status_code=resp.status_code)
        return token

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _post_short_link(
        self,
        client: httpx.AsyncClient,
        payload: CreateShortLinkRequest,
        csrf_token: str,
        access_token: Optional[str],
    ) -> CreateShortLinkResponse:
        headers = {
            "Content-Type": "application/json",
            "x-csrf-token": csrf_token,
        }
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        resp = await client.post(
            self._settings.short_link_endpoint,
            json=payload.model_dump(by_alias=True, exclude_none=True),
            headers=headers,
        )
        if resp.status_code != 200:
            try:
                message = resp.json().get("error") or "Failed to create short link"
            except (ValueError, AttributeError):
                message = "Failed to create short link"
            raise ShortLinkError(message, status_code=resp.status_code)
        return CreateShortLinkResponse.model_validate(resp.json())

    # ── Whole link map ───────────────────────────────────────────────

    async def create_calendar_short_links(
        self,
        links: PlatformLinkMap,
        title: str,
        user_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> PlatformLinkMap:
        """Return a map with the same keys whose URLs go through short links.

        Empty URLs and ``data:`` URIs are kept as they are. A platform whose
        short link cannot be created keeps its original URL.
        """
        shortened: dict[str, str] = {}
        by_url: dict[str, str] = {}

        async with self._client() as client:
            for platform, url in links.items():
                if not url or url.startswith("data:"):
                    shortened[platform] = url
                    continue
                if url in by_url:
                    shortened[platform] = by_url[url]
                    continue
                try:
                    response = await self.create_short_link(
                        url, f"{title} - {platform}", user_id, access_token, client=client,
                    )
                    by_url[url] = shortened[platform] = response.short_url
                except ShortLinkError as exc:
                    logger.warning(
                        "short_link_failed",
                        platform=platform,
                        status_code=exc.status_code,
                        error=str(exc),
                    )
                    shortened[platform] = url

        logger.info("short_links_created", title=title, created=len(by_url))
        return PlatformLinkMap.from_mapping(shortened)

    # ── Helpers ──────────────────────────────────────────────────────

    def is_short_link(self, url: str) -> bool:
        """True for URLs already pointing at our short-link redirect."""
        host = urlparse(self._settings.base_url).netloc or self._settings.base_url
        return f"{host}/eventid=" in url


def extract_short_id(short_url: str) -> Optional[str]:
    """Short id from a ``…/eventid=XXXX`` URL, or None."""
    match = _SHORT_ID.search(short_url)
    return match.group(1) if match else None
