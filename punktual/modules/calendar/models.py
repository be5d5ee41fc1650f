"""Data models for events, button styles and generated calendar links."""

from __future__ import annotations

from enum import StrEnum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_START_TIME = "10:00"
DEFAULT_END_TIME = "11:00"
DEFAULT_BUTTON_TEXT = "Add to Calendar"
DEFAULT_COLOR = "#10b981"


class CalendarPlatform(StrEnum):
    """Supported calendar targets. Values are stable identifiers."""

    GOOGLE = "google"
    APPLE = "apple"
    OUTLOOK = "outlook"
    OFFICE365 = "office365"
    OUTLOOKCOM = "outlookcom"
    YAHOO = "yahoo"


PLATFORM_IDS: tuple[str, ...] = tuple(p.value for p in CalendarPlatform)


class ButtonLayout(StrEnum):
    DROPDOWN = "dropdown"
    INDIVIDUAL = "individual"


class ButtonSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ButtonStyle(StrEnum):
    STANDARD = "standard"
    MINIMAL = "minimal"
    PILL = "pill"


class CodeFormat(StrEnum):
    HTML = "html"
    REACT = "react"
    CSS = "css"
    JS = "js"


class _Value(BaseModel):
    """Immutable value object accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class EventDescription(_Value):
    """A user-authored event, as typed into the form."""

    title: str = ""
    description: str = ""
    location: str = ""
    start_date: str = ""
    start_time: str = DEFAULT_START_TIME
    end_date: str = ""
    end_time: str = DEFAULT_END_TIME
    timezone: str = "UTC"
    is_all_day: bool = False

    @property
    def is_complete(self) -> bool:
        """True when there is enough information to build links."""
        return bool(self.title and self.start_date)

    @property
    def effective_start_time(self) -> str:
        return self.start_time or DEFAULT_START_TIME

    @property
    def effective_end_date(self) -> str:
        return self.end_date or self.start_date

    @property
    def effective_end_time(self) -> str:
        return self.end_time or DEFAULT_END_TIME


class ButtonStyleDescription(_Value):
    """How the generated button or link list should look."""

    button_layout: ButtonLayout = ButtonLayout.DROPDOWN
    button_size: ButtonSize = ButtonSize.MEDIUM
    button_style: ButtonStyle = ButtonStyle.STANDARD
    color_theme: str = DEFAULT_COLOR
    text_color: Optional[str] = None
    custom_text: Optional[str] = None
    selected_platforms: dict[str, bool] = Field(default_factory=dict)
    show_icons: bool = True
    open_in_new_tab: bool = True

    @property
    def button_text(self) -> str:
        return self.custom_text or DEFAULT_BUTTON_TEXT

    @property
    def active_platform_ids(self) -> list[str]:
        """Selected platform ids, in the order the caller listed them."""
        return [platform for platform, selected in self.selected_platforms.items() if selected]


class CodeGenerationOptions(_Value):
    """Options controlling which artifact is produced and how."""

    format: CodeFormat = CodeFormat.HTML
    minified: bool = False
    include_css: bool = True
    include_js: bool = True
    share_id: Optional[str] = None
    show_powered_by: bool = False


class PlatformInfo(_Value):
    """One selected platform with its resolved link."""

    id: str
    name: str
    url: str


class PlatformLinkMap(_Value):
    """One ready-to-use URL per known platform; empty strings when unavailable."""

    google: str = ""
    apple: str = ""
    outlook: str = ""
    office365: str = ""
    outlookcom: str = ""
    yahoo: str = ""

    @classmethod
    def empty(cls) -> PlatformLinkMap:
        return cls()

    @classmethod
    def from_mapping(cls, links: dict[str, str]) -> PlatformLinkMap:
        """Build a map from a plain dict, ignoring unknown keys."""
        known = {p.value: links.get(p.value) or "" for p in CalendarPlatform}
        return cls(**known)

    def __getitem__(self, platform: str) -> str:
        if platform not in PLATFORM_IDS:
            raise KeyError(platform)
        return getattr(self, platform)

    def get(self, platform: str, default: str = "") -> str:
        try:
            return self[platform]
        except KeyError:
            return default

    def items(self) -> Iterator[tuple[str, str]]:
        for platform in CalendarPlatform:
            yield platform.value, getattr(self, platform.value)

    def as_dict(self) -> dict[str, str]:
        return dict(self.items())

    @property
    def is_empty(self) -> bool:
        return not any(url for _, url in self.items())
