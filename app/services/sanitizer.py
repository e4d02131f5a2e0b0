"""Text sanitizers for values interpolated into generated HTML."""

import re
from typing import Any

# Matches any bracket-delimited tag such as <b>, </p> or <a href="...">
_TAG_RE = re.compile(r"<[^>]*>")

# Ampersand must come first so already-produced entities are not escaped twice
_ENTITY_MAP = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def strip_tags(text: Any) -> str:
    """Remove every ``<...>`` substring from *text* and trim surrounding whitespace.

    This is not an HTML parser: rich-text fields from the editor are simply
    flattened back to plain text.  ``None`` and empty input yield ``""``.
    """
    if not text:
        return ""
    return _TAG_RE.sub("", str(text)).strip()


def escape_html(text: Any) -> str:
    """Escape the HTML-significant characters of *text*.

    Safe for both element text and double-quoted attribute values.
    Non-string values (e.g. a numeric price) are converted with ``str()``.
    """
    if text is None or text == "":
        return ""
    escaped = str(text)
    for char, entity in _ENTITY_MAP:
        escaped = escaped.replace(char, entity)
    return escaped


def clean_text(text: Any) -> str:
    """Strip tags from *text*, then escape what is left."""
    return escape_html(strip_tags(text))
