"""Standalone stylesheet and script for the dropdown button."""

from __future__ import annotations

from punktual.modules.calendar.models import ButtonStyleDescription
from punktual.modules.embed.styles import FONT_STACK, resolve_appearance


def generate_css(style: ButtonStyleDescription) -> str:
    """Stylesheet for ``.punktual-*`` classes, parameterized by the button style."""
    appearance = resolve_appearance(style)
    button_rules = "\n".join(f"  {name}: {value};" for name, value in appearance.css_declarations())

    return f"""
.punktual-container {{
  position: relative;
  display: inline-block;
  font-family: {FONT_STACK};
}}

.punktual-button {{
  display: inline-flex;
  align-items: center;
  gap: 6px;
  font-weight: 600;
  cursor: pointer;
  transition: all 0.2s ease;
  text-decoration: none;
{button_rules}
}}

.punktual-button:hover {{
  opacity: 0.9;
  transform: translateY(-1px);
}}

.punktual-dropdown {{
  display: none;
  position: absolute;
  top: 100%;
  left: 0;
  background: white;
  border: 1px solid #ddd;
  border-radius: 6px;
  box-shadow: 0 4px 12px rgba(0,0,0,0.1);
  min-width: 200px;
  z-index: 1000;
  margin-top: 4px;
}}

.punktual-dropdown-item {{
  display: block;
  padding: 8px 16px;
  text-decoration: none;
  color: #333;
  font-size: 14px;
  transition: background-color 0.2s ease;
}}

.punktual-dropdown-item:hover {{
  background-color: #f5f5f5;
}}
""".strip()


# Buttons that carry an inline onclick already toggle themselves.
DROPDOWN_JS = """
/* Punktual Button Functionality */
(function () {
  function init() {
    document.querySelectorAll('.punktual-button').forEach(function (button) {
      if (button.hasAttribute('onclick')) {
        return;
      }
      button.addEventListener('click', function (e) {
        e.preventDefault();
        var dropdown = this.parentNode.querySelector('.punktual-dropdown');
        if (dropdown) {
          dropdown.style.display = dropdown.style.display === 'block' ? 'none' : 'block';
        }
      });
    });

    document.addEventListener('click', function (event) {
      if (!event.target.closest('.punktual-container')) {
        document.querySelectorAll('.punktual-dropdown').forEach(function (dropdown) {
          dropdown.style.display = 'none';
        });
      }
    });
  }

  if (document.readyState === 'loading') {
    document.addEventListener('DOMContentLoaded', init);
  } else {
    init();
  }
})();
""".strip()


def generate_js() -> str:
    """Framework-free toggle and close-on-outside-click behaviour."""
    return DROPDOWN_JS
