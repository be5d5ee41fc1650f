"""Wire models for the short-link API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class CreateShortLinkRequest(_Wire):
    original_url: str
    event_title: Optional[str] = None
    user_id: Optional[str] = None


class CreateShortLinkResponse(_Wire):
    success: bool = True
    short_url: str
    short_id: str = ""
