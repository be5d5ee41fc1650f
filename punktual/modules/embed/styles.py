"""Button appearance rules shared by the CSS, HTML and React generators."""

from __future__ import annotations

from dataclasses import dataclass

from punktual.modules.calendar.colors import contrast_color, resolve_theme_color
from punktual.modules.calendar.models import ButtonSize, ButtonStyle, ButtonStyleDescription

FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"
EMAIL_FONT_STACK = "Arial, Helvetica, sans-serif"


@dataclass(frozen=True)
class SizeSpec:
    padding: str
    font_size: str


SIZE_STYLES: dict[ButtonSize, SizeSpec] = {
    ButtonSize.SMALL: SizeSpec("8px 12px", "14px"),
    ButtonSize.MEDIUM: SizeSpec("10px 16px", "16px"),
    ButtonSize.LARGE: SizeSpec("12px 20px", "18px"),
}


@dataclass(frozen=True)
class ButtonAppearance:
    """Resolved visual properties of a calendar button."""

    padding: str
    font_size: str
    background_color: str
    color: str
    border: str
    border_radius: str

    def css_declarations(self) -> list[tuple[str, str]]:
        return [
            ("padding", self.padding),
            ("font-size", self.font_size),
            ("background-color", self.background_color),
            ("color", self.color),
            ("border", self.border),
            ("border-radius", self.border_radius),
        ]

    def inline_style(self, *extra: tuple[str, str]) -> str:
        """Declarations as a ``style`` attribute value."""
        pairs = list(extra) + self.css_declarations()
        return " ".join(f"{name}: {value};" for name, value in pairs)

    def react_style(self) -> dict[str, str]:
        return {
            "padding": self.padding,
            "fontSize": self.font_size,
            "backgroundColor": self.background_color,
            "color": self.color,
            "border": self.border,
            "borderRadius": self.border_radius,
        }


def resolve_appearance(style: ButtonStyleDescription) -> ButtonAppearance:
    """Combine size, style variant and theme colour into concrete values.

    standard: filled with contrast text. minimal: transparent with a
    coloured border and text. pill: filled and fully rounded.
    """
    size = SIZE_STYLES.get(style.button_size, SIZE_STYLES[ButtonSize.MEDIUM])
    theme = resolve_theme_color(style.color_theme)

    if style.button_style == ButtonStyle.MINIMAL:
        return ButtonAppearance(
            padding=size.padding,
            font_size=size.font_size,
            background_color="transparent",
            color=theme,
            border=f"2px solid {theme}",
            border_radius="6px",
        )

    return ButtonAppearance(
        padding=size.padding,
        font_size=size.font_size,
        background_color=theme,
        color=style.text_color or contrast_color(theme),
        border="none",
        border_radius="9999px" if style.button_style == ButtonStyle.PILL else "6px",
    )
