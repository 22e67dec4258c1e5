"""Strict decoding of Pexels JSON bodies into model objects.

Bodies are validated by the pydantic models in strict mode: unknown fields are
ignored, missing or null optional fields decode to None and nothing is coerced.
The first validation failure is raised as DecodeError carrying the path of the
offending field, e.g. ``photos[1].src.original``.
"""
from __future__ import annotations

from typing import Any, Sequence, Type, TypeVar, Union

from pydantic import ValidationError

from pexels_api.errors import DecodeError, snippet
from pexels_api.models import (
    CollectionPage,
    MediaSearchResult,
    PagedResult,
    PexelsModel,
    Photo,
    PhotoPage,
    Video,
    VideoPage,
)

M = TypeVar("M", bound=PexelsModel)
P = TypeVar("P", bound=PagedResult)

Body = Union[bytes, str]

# Variant names pydantic inserts into the location of discriminated union errors.
_UNION_TAGS = {"Photo", "Video"}
_TAG_ERRORS = {"union_tag_invalid", "union_tag_not_found"}


def field_path(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error location as ``media[0].user.name``."""
    path = ""
    previous: Any = None
    for key in loc:
        if isinstance(key, int):
            path = f"{path}[{key}]"
        elif not (isinstance(previous, int) and key in _UNION_TAGS):
            path = f"{path}.{key}" if path else str(key)
        previous = key
    return path or "$"


def to_decode_error(exc: ValidationError, body: Body) -> DecodeError:
    error = exc.errors()[0]
    loc = tuple(error["loc"])
    if error["type"] in _TAG_ERRORS:
        loc += ("type",)
    raw = body if error["type"] == "json_invalid" else error.get("input")
    return DecodeError(field_path(loc), error["msg"], snippet(raw))


def decode_body(body: Body, model: Type[M]) -> M:
    """Validate a raw JSON body against a model."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise to_decode_error(exc, body) from exc


def decode_page(body: Body, model: Type[P]) -> P:
    """Decode a paged body. A page never holds more items than `per_page`."""
    page = decode_body(body, model)
    if len(page.items) > page.per_page:
        items_key = model.model_fields["items"].alias or "items"
        raise DecodeError(items_key, f"{len(page.items)} items exceed per_page={page.per_page}")
    return page


def decode_photo(body: Body) -> Photo:
    return decode_body(body, Photo)


def decode_video(body: Body) -> Video:
    return decode_body(body, Video)


def decode_photo_page(body: Body) -> PhotoPage:
    return decode_page(body, PhotoPage)


def decode_video_page(body: Body) -> VideoPage:
    return decode_page(body, VideoPage)


def decode_collection_page(body: Body) -> CollectionPage:
    return decode_page(body, CollectionPage)


def decode_media_page(body: Body) -> MediaSearchResult:
    return decode_page(body, MediaSearchResult)
