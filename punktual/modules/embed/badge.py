"""'Powered by Punktual' attribution markup."""

from __future__ import annotations

from typing import Optional

from punktual.config import get_settings

BRAND_COLOR = "#10b981"


def badge_url(utm_source: str, base_url: Optional[str] = None) -> str:
    base = (base_url or get_settings().base_url).rstrip("/")
    return f"{base}?utm_source={utm_source}&utm_medium=badge"


def powered_by_html(
    utm_source: str = "embed",
    variant: str = "default",
    base_url: Optional[str] = None,
) -> str:
    """Attribution block for web embeds."""
    url = badge_url(utm_source, base_url)
    link_style = (
        "text-decoration: none; color: #6b7280; font-size: 11px; "
        "display: inline-flex; align-items: center; gap: 4px;"
    )

    if variant == "minimal":
        return f"""
<!-- Powered by Punktual -->
<div style="text-align: center; margin-top: 12px;">
  <a href="{url}" target="_blank" rel="noopener noreferrer" style="{link_style}">
    <span>Powered by</span>
    <span style="font-weight: 600; color: {BRAND_COLOR};">Punktual</span>
  </a>
</div>""".strip()

    return f"""
<!-- Powered by Punktual -->
<div style="text-align: center; padding: 8px 0; margin-top: 12px;">
  <a href="{url}" target="_blank" rel="noopener noreferrer" style="{link_style}">
    <span style="font-size: 14px;">📅</span>
    <span>Powered by</span>
    <span style="font-weight: 600; color: {BRAND_COLOR};">Punktual</span>
  </a>
</div>""".strip()


def powered_by_table_row(utm_source: str = "email_embed", base_url: Optional[str] = None) -> str:
    """Email-safe attribution as a table row for the individual-buttons layout."""
    url = badge_url(utm_source, base_url)
    return f"""
<tr>
  <td align="center" style="padding: 10px 0 15px 0;">
    <a href="{url}" target="_blank" style="text-decoration: none; color: #6b7280; display: inline-block;">
      <table role="presentation" cellpadding="0" cellspacing="0" border="0" style="mso-table-lspace: 0pt; mso-table-rspace: 0pt;">
        <tr>
          <td valign="middle" style="vertical-align: middle; font-size: 11px; line-height: 15px;">Powered by</td>
          <td valign="middle" style="vertical-align: middle; padding-left: 4px; line-height: 0;">
            <span style="font-size: 11px; font-weight: 600; color: {BRAND_COLOR};">Punktual</span>
          </td>
        </tr>
      </table>
    </a>
  </td>
</tr>""".strip()
