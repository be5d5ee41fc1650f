"""API route definitions for Punktual."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from punktual import __version__
from punktual.logging_config import get_logger
from punktual.modules.calendar.links import build_links
from punktual.modules.calendar.models import (
    ButtonStyleDescription,
    CodeGenerationOptions,
    EventDescription,
    PlatformLinkMap,
)
from punktual.modules.embed.service import ButtonCodeGenerator

logger = get_logger(__name__)

router = APIRouter()

_generator: Optional[ButtonCodeGenerator] = None


def get_generator() -> ButtonCodeGenerator:
    global _generator
    if _generator is None:
        _generator = ButtonCodeGenerator()
    return _generator


def set_generator(generator: Optional[ButtonCodeGenerator]) -> None:
    """Replace the shared generator (tests, alternate base URLs)."""
    global _generator
    _generator = generator


# ── Request / Response Models ────────────────────────────────────────

class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class LinksRequest(_Request):
    """Calendar link request."""

    event: EventDescription
    now: Optional[dt.datetime] = None


class CodeRequest(_Request):
    """Button code generation request."""

    event: EventDescription
    style: ButtonStyleDescription = Field(default_factory=ButtonStyleDescription)
    options: CodeGenerationOptions = Field(default_factory=CodeGenerationOptions)
    output_type: str = "button"
    links: Optional[PlatformLinkMap] = None
    now: Optional[dt.datetime] = None


class CodeResponse(BaseModel):
    code: str


# ── Routes ───────────────────────────────────────────────────────────

@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "version": __version__}


@router.post("/links")
async def links(request: LinksRequest) -> dict[str, str]:
    """One URL per platform; all empty when the title or start date is missing."""
    return build_links(request.event, request.now).as_dict()


@router.post("/code", response_model=CodeResponse)
async def code(request: CodeRequest) -> CodeResponse:
    generated = get_generator().generate_calendar_code(
        request.event,
        request.style,
        request.output_type,
        request.options,
        links=request.links,
        now=request.now,
    )
    logger.info("code_generated", output_type=request.output_type, format=request.options.format.value)
    return CodeResponse(code=generated)


@router.post("/direct-links", response_model=CodeResponse)
async def direct_links(request: CodeRequest) -> CodeResponse:
    generated = get_generator().generate_direct_links(
        request.event, request.style, request.options, links=request.links, now=request.now,
    )
    return CodeResponse(code=generated)


@router.post("/email-text", response_model=CodeResponse)
async def email_text(request: CodeRequest) -> CodeResponse:
    generated = get_generator().generate_email_text(
        request.event, request.style, request.options, links=request.links, now=request.now,
    )
    return CodeResponse(code=generated)
