"""Short links: tracked redirect URLs for calendar platforms."""

from punktual.modules.short_links.service import ShortLinkService, extract_short_id

__all__ = ["ShortLinkService", "extract_short_id"]
