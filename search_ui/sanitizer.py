"""
Allow-list sanitizer for result `content` HTML.

The search service returns `content` as markup it collected from third-party
pages, so it is cleaned with bleach before the UI renders it as HTML.
Plain text from the service or the user that goes into Markdown is escaped
with `escape_markdown` / `markdown_link`.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote

import bleach

ALLOWED_TAGS = frozenset(
    {
        "a",
        "b",
        "blockquote",
        "br",
        "code",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "i",
        "li",
        "ol",
        "p",
        "pre",
        "span",
        "strong",
        "ul",
    }
)
ALLOWED_ATTRIBUTES = {"a": ["href", "title"]}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

NO_SUMMARY_HTML = "<i>No summary available.</i>"


def sanitize_content(content: Optional[str]) -> str:
    """Return markup safe to render, or the "no summary" placeholder when empty."""
    if not content:
        return NO_SUMMARY_HTML
    cleaned = bleach.clean(
        content,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
    return cleaned if cleaned.strip() else NO_SUMMARY_HTML


_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()<>#+\-.!|~$])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters Markdown would treat as formatting."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def markdown_link(label: str, url: str) -> str:
    """Build a ``[label](url)`` link whose label and target survive any characters."""
    target = quote(url, safe=":/?#@!$&'*+,;=%~")
    return f"[{escape_markdown(label)}]({target})"
