"""
Output sanitization for bookmark records.

Storage keeps whatever the client sent; markup is neutralized only on the
way out. Disallowed tags are escaped rather than dropped so the reader
still sees what was submitted.
"""

from __future__ import annotations

from typing import Any

from bleach.sanitizer import Cleaner

from . import schemas

_ALLOWED_TAGS = {
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "del",
    "div",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "img",
    "li",
    "ol",
    "p",
    "pre",
    "s",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "table",
    "tbody",
    "td",
    "th",
    "thead",
    "tr",
    "u",
    "ul",
}

_ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
    "td": ["colspan", "rowspan"],
    "th": ["colspan", "rowspan"],
}

_CLEANER = Cleaner(
    tags=_ALLOWED_TAGS,
    attributes=_ALLOWED_ATTRIBUTES,
    protocols={"http", "https", "mailto"},
    strip=False,
    strip_comments=True,
)


def clean_html(value: str | None) -> str | None:
    if value is None:
        return None
    value = str(value)
    # No tag delimiters means no markup; keep "&" and quotes as typed.
    if "<" not in value and ">" not in value:
        return value
    return _CLEANER.clean(value)


def sanitize_bookmark(record: dict[str, Any]) -> schemas.BookmarkResponse:
    return schemas.BookmarkResponse(
        id=int(record["id"]),
        title=clean_html(record["title"]) or "",
        url=str(record["url"]),
        description=clean_html(record.get("description")),
        rating=int(record["rating"]),
    )
