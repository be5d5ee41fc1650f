"""Whitespace-only compaction shared by every generated artifact."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_BETWEEN_TAGS = re.compile(r">\s+<")
_AROUND_PUNCTUATION = re.compile(r"\s*([{};])\s*")


def minify(text: str, css: bool = False) -> str:
    """Collapse whitespace without changing what the markup or code does.

    With ``css`` set, whitespace around ``{``, ``}`` and ``;`` is removed
    as well. Applying the function twice gives the same result as once.
    Generated scripts therefore avoid ``//`` comments and always end
    statements with semicolons.
    """
    result = _WHITESPACE.sub(" ", text)
    result = _BETWEEN_TAGS.sub("><", result)
    if css:
        result = _AROUND_PUNCTUATION.sub(r"\1", result)
    return result.strip()
