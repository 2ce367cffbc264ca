"""
Request payload validation for bookmarks.

`validate_bookmark` turns an arbitrary JSON payload into a `BookmarkFields`
record or raises a `BookmarkValidationError`. Only title, url, rating and
description are ever copied; every other key is dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

REQUIRED_FIELDS = ("title", "url", "rating")
TEXT_FIELDS = ("title", "url", "description")
MIN_RATING = 1
MAX_RATING = 5

_http_url = TypeAdapter(AnyHttpUrl)


class BookmarkValidationError(ValueError):
    pass


class MissingFieldError(BookmarkValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"'{field}' is required")
        self.field = field


class InvalidFieldError(BookmarkValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"'{field}' must be text")
        self.field = field


class InvalidRatingError(BookmarkValidationError):
    def __init__(self) -> None:
        super().__init__(f"Rating must be a number between {MIN_RATING} and {MAX_RATING}")


class InvalidUrlError(BookmarkValidationError):
    def __init__(self) -> None:
        super().__init__("Url must be a valid HTTP/HTTPS link")


class EmptyUpdateError(BookmarkValidationError):
    def __init__(self) -> None:
        super().__init__("Must provide at least one of title, url, rating or description")


@dataclass(frozen=True)
class BookmarkFields:
    title: str | None = None
    url: str | None = None
    rating: int | None = None
    description: str | None = None

    def as_columns(self) -> dict[str, Any]:
        """
        Column -> value for every field that was provided.
        """
        return {k: v for k, v in asdict(self).items() if v is not None}

    def is_empty(self) -> bool:
        return not self.as_columns()


def _is_provided(value: Any) -> bool:
    return value is not None and value != ""


def _parse_rating(value: Any) -> int:
    # bool is an int subclass; JSON true is not a rating.
    if isinstance(value, bool):
        raise InvalidRatingError()
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not (MIN_RATING <= value <= MAX_RATING):
        raise InvalidRatingError()
    return value


def is_web_url(value: str) -> bool:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        return False
    return True


def validate_bookmark(payload: Any, *, require_all: bool = True) -> BookmarkFields:
    """
    Validate a create (`require_all=True`) or partial update payload.
    """
    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
    provided = {k: data.get(k) for k in ("title", "url", "rating", "description") if _is_provided(data.get(k))}

    if require_all:
        for field in REQUIRED_FIELDS:
            if field not in provided:
                raise MissingFieldError(field)

    for field in TEXT_FIELDS:
        if field in provided and not isinstance(provided[field], str):
            raise InvalidFieldError(field)

    if "rating" in provided:
        provided["rating"] = _parse_rating(provided["rating"])

    if "url" in provided and not is_web_url(provided["url"]):
        raise InvalidUrlError()

    fields = BookmarkFields(**provided)
    if not require_all and fields.is_empty():
        raise EmptyUpdateError()
    return fields
