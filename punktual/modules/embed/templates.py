"""Template functions, one per output format.

HTML layouts are Jinja2 string templates rendered without autoescaping;
text is escaped explicitly with the ``e`` filter and hrefs go through
``href``. Every function here renders readable markup; minification is
applied afterwards by the generator.
"""

from __future__ import annotations

import json

from jinja2 import BaseLoader, Environment

from punktual.modules.calendar.models import ButtonLayout, ButtonStyleDescription, PlatformInfo
from punktual.modules.calendar.platforms import get_platform
from punktual.modules.embed.assets import generate_css, generate_js
from punktual.modules.embed.styles import EMAIL_FONT_STACK, FONT_STACK, resolve_appearance

DROPDOWN_TOGGLE = (
    "var d=this.nextElementSibling;"
    "d.style.display=d.style.display==='block'?'none':'block';"
)


def _href(url: str) -> str:
    # platform URLs are already percent-encoded; only guard the attribute quote
    return (url or "#").replace('"', "%22")


_env = Environment(loader=BaseLoader(), autoescape=False, trim_blocks=True, lstrip_blocks=True)
_env.filters["href"] = _href


def _target(style: ButtonStyleDescription) -> str:
    if style.open_in_new_tab:
        return ' target="_blank" rel="noopener noreferrer"'
    return ""


def _icon(style: ButtonStyleDescription, emoji: str = "📅") -> str:
    return f"{emoji} " if style.show_icons else ""


def platform_label(platform: PlatformInfo, style: ButtonStyleDescription) -> str:
    """Button text for one platform: the custom text, or 'Add to {Platform}'."""
    return style.custom_text or f"Add to {platform.name}"


# ── Dropdown (HTML) ──────────────────────────────────────────────────

DROPDOWN_TEMPLATE = _env.from_string("""<!-- Punktual Calendar Button -->
<div class="punktual-container">
  <button id="{{ button_id }}" type="button" class="punktual-button" onclick="{{ toggle }}">
    {{ icon }}{{ text|e }} ▼
  </button>
  <div id="{{ button_id }}-dropdown" class="punktual-dropdown" style="display: none;">
  {% for p in platforms %}
    <a href="{{ p.url|href }}"{{ target }} class="punktual-dropdown-item" data-platform="{{ p.id|e }}">{{ p.name|e }}</a>
  {% endfor %}
  </div>
</div>""")


def dropdown_html(
    platforms: list[PlatformInfo],
    button_id: str,
    style: ButtonStyleDescription,
    include_css: bool = True,
    include_js: bool = True,
) -> str:
    """Single button toggling a sibling panel with one link per platform."""
    html = DROPDOWN_TEMPLATE.render(
        platforms=platforms,
        button_id=button_id,
        toggle=DROPDOWN_TOGGLE,
        icon=_icon(style),
        text=style.button_text,
        target=_target(style),
    )
    if include_css:
        html += f"\n\n<style>\n{generate_css(style)}\n</style>"
    if include_js:
        html += f"\n\n<script>\n{generate_js()}\n</script>"
    return html


# ── Individual buttons (email-safe HTML) ─────────────────────────────

INDIVIDUAL_TEMPLATE = _env.from_string("""<!-- Punktual Calendar Buttons -->
<table role="presentation" cellpadding="0" cellspacing="0" border="0" align="center" style="border-collapse: collapse; mso-table-lspace: 0pt; mso-table-rspace: 0pt;">
  <tr>
    <td align="center" style="padding: 0;">
      <table role="presentation" cellpadding="0" cellspacing="0" border="0" style="border-collapse: collapse;">
        <tr>
        {% for button in buttons %}
          <td align="center" style="padding: 4px;">
            <a href="{{ button.url|href }}"{{ target }} data-platform="{{ button.id|e }}" style="{{ link_style }}">{{ button.icon }}{{ button.label|e }}</a>
          </td>
        {% endfor %}
        </tr>
      </table>
    </td>
  </tr>
{% if footer_row %}
  {{ footer_row }}
{% endif %}
</table>""")


def individual_html(
    platforms: list[PlatformInfo],
    style: ButtonStyleDescription,
    footer_row: str = "",
) -> str:
    """Nested-table layout with inline styles only, safe for email clients."""
    link_style = resolve_appearance(style).inline_style(
        ("display", "inline-block"),
        ("font-family", EMAIL_FONT_STACK),
        ("font-weight", "600"),
        ("line-height", "1.2"),
        ("text-decoration", "none"),
    )
    buttons = [
        {
            "id": p.id,
            "url": p.url,
            "icon": _icon(style, get_platform(p.id).emoji),
            "label": platform_label(p, style),
        }
        for p in platforms
    ]
    return INDIVIDUAL_TEMPLATE.render(
        buttons=buttons,
        target=_target(style),
        link_style=link_style,
        footer_row=footer_row,
    )


# ── Direct links ─────────────────────────────────────────────────────

DIRECT_LINKS_TEMPLATE = _env.from_string("""<!-- Punktual Direct Links -->
<div>
  <p>Add "{{ title|e }}" to your calendar:</p>
  <ul>
  {% for p in platforms %}
    <li><a href="{{ p.url|href }}"{{ target }}>{{ icon }}{{ label(p)|e }}</a></li>
  {% endfor %}
  </ul>
</div>""")


def direct_links_html(title: str, platforms: list[PlatformInfo], style: ButtonStyleDescription) -> str:
    return DIRECT_LINKS_TEMPLATE.render(
        title=title,
        platforms=platforms,
        target=_target(style),
        icon=_icon(style),
        label=lambda p: platform_label(p, style),
    )


def email_text(title: str, platforms: list[PlatformInfo]) -> str:
    """Plain-text link list for newsletters and email bodies."""
    lines = [f'Add "{title}" to your calendar:', ""]
    lines += [f"📅 {p.name}: {p.url}" for p in platforms if p.url]
    lines += ["", "---", "Powered by Punktual"]
    return "\n".join(lines)


# ── React ────────────────────────────────────────────────────────────

def react_component(platforms: list[PlatformInfo], style: ButtonStyleDescription) -> str:
    """Self-contained functional component, emitted as source text."""
    platform_list = json.dumps([p.model_dump() for p in platforms], indent=2, ensure_ascii=False)
    button_style = {
        "display": "inline-flex",
        "alignItems": "center",
        "gap": "6px",
        "fontWeight": 600,
        "cursor": "pointer",
        "transition": "all 0.2s ease",
        "textDecoration": "none",
        "fontFamily": FONT_STACK,
        **resolve_appearance(style).react_style(),
    }
    target = (
        '\n              target="_blank"\n              rel="noopener noreferrer"'
        if style.open_in_new_tab else ""
    )
    label = json.dumps(f"{_icon(style)}{style.button_text} ▼", ensure_ascii=False)

    return f"""import React, {{ useState }} from 'react';

const platforms = {platform_list};

const buttonStyle = {json.dumps(button_style, indent=2)};

const PunktualButton = () => {{
  const [isOpen, setIsOpen] = useState(false);

  return (
    <div style={{{{ position: 'relative', display: 'inline-block' }}}}>
      <button type="button" style={{buttonStyle}} onClick={{() => setIsOpen(!isOpen)}}>
        {{{label}}}
      </button>
      {{isOpen && (
        <div style={{{{
          position: 'absolute',
          top: '100%',
          left: 0,
          background: 'white',
          border: '1px solid #ddd',
          borderRadius: '6px',
          boxShadow: '0 4px 12px rgba(0,0,0,0.1)',
          minWidth: '200px',
          zIndex: 1000,
          marginTop: '4px'
        }}}}>
          {{platforms.map((platform) => (
            <a
              key={{platform.id}}
              href={{platform.url}}{target}
              style={{{{ display: 'block', padding: '8px 16px', textDecoration: 'none', color: '#333', fontSize: '14px' }}}}
              onClick={{() => setIsOpen(false)}}
            >
              {{platform.name}}
            </a>
          ))}}
        </div>
      )}}
    </div>
  );
}};

export default PunktualButton;"""


# ── Inline embed script ──────────────────────────────────────────────

EMBED_ITEM_STYLE = (
    "display: block; padding: 12px 16px; color: #1f2937; text-decoration: none; "
    f"border-bottom: 1px solid #f3f4f6; font-family: {FONT_STACK};"
)
EMBED_MENU_STYLE = (
    "display: none; position: absolute; background: white; border: 1px solid #e5e7eb; "
    "border-radius: 8px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); margin-top: 4px; "
    "z-index: 1000; min-width: 200px;"
)

EMBED_INDIVIDUAL_TEMPLATE = _env.from_string("""<div id="{{ container_id|e }}" style="display: inline-flex; gap: 12px; flex-wrap: wrap;">
{% for p in platforms %}
  <a href="{{ p.url|href }}"{{ target }} data-platform="{{ p.id|e }}" style="{{ button_style }}">{{ emoji(p) }}{{ p.name|e }}</a>
{% endfor %}
</div>""")

EMBED_DROPDOWN_TEMPLATE = _env.from_string("""<div id="{{ container_id|e }}" style="position: relative; display: inline-block;">
  <button type="button" onclick="{{ toggle }}" style="{{ button_style }}">
    {{ icon }}{{ text|e }}
  </button>
  <div id="{{ container_id|e }}-menu" style="{{ menu_style }}">
  {% for p in platforms %}
    <a href="{{ p.url|href }}"{{ target }} data-platform="{{ p.id|e }}" style="{{ item_style }}">{{ emoji(p) }}{{ p.name|e }}</a>
  {% endfor %}
  </div>
</div>""")


def embed_markup(platforms: list[PlatformInfo], style: ButtonStyleDescription, container_id: str) -> str:
    """Inline-styled buttons for pasting into any page, without external CSS."""
    button_style = resolve_appearance(style).inline_style(
        ("font-family", FONT_STACK),
        ("font-weight", "600"),
        ("cursor", "pointer"),
        ("text-decoration", "none"),
        ("display", "inline-flex"),
        ("align-items", "center"),
        ("gap", "8px"),
    )
    context = {
        "platforms": platforms,
        "container_id": container_id,
        "target": _target(style),
        "button_style": button_style,
        "emoji": lambda p: _icon(style, get_platform(p.id).emoji),
    }

    if style.button_layout == ButtonLayout.INDIVIDUAL:
        return EMBED_INDIVIDUAL_TEMPLATE.render(**context)
    return EMBED_DROPDOWN_TEMPLATE.render(
        toggle=DROPDOWN_TOGGLE,
        icon=_icon(style),
        text=style.button_text,
        item_style=EMBED_ITEM_STYLE,
        menu_style=EMBED_MENU_STYLE,
        **context,
    )


EMBED_TRACKING_TEMPLATE = _env.from_string("""<script>
(function () {
  var container = document.getElementById({{ container_id|tojson }});
  if (!container) {
    return;
  }
  container.querySelectorAll('a').forEach(function (link) {
    link.addEventListener('click', function () {
      if (typeof gtag !== 'undefined') {
        gtag('event', 'calendar_link_click', {
          event_title: {{ title|tojson }},
          platform: this.getAttribute('data-platform') || 'unknown'
        });
      }
    });
  });
})();
</script>""")


def embed_tracking_script(container_id: str, title: str) -> str:
    """Reports link clicks to gtag when the host page has it.

    Values go through ``tojson``, which escapes ``<``, ``>``, ``&`` and
    quotes so a title cannot close the script element.
    """
    return EMBED_TRACKING_TEMPLATE.render(container_id=container_id, title=title or "Event")
