"""Endpoint descriptors, parameter validation and request assembly."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, Union
from urllib.parse import quote

from pexels_api.enums import Color, Locale, MediaSort, MediaType, Orientation, Size
from pexels_api.errors import InvalidParameter

DEFAULT_PER_PAGE = 15
MAX_PER_PAGE = 80

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Endpoint:
    """A remote API path. `{id}` placeholders are filled at build time."""

    name: str
    path: str


SEARCH_PHOTOS = Endpoint("search_photos", "v1/search")
CURATED_PHOTOS = Endpoint("curated_photos", "v1/curated")
GET_PHOTO = Endpoint("get_photo", "v1/photos/{id}")
SEARCH_VIDEOS = Endpoint("search_videos", "videos/search")
POPULAR_VIDEOS = Endpoint("popular_videos", "videos/popular")
GET_VIDEO = Endpoint("get_video", "videos/videos/{id}")
LIST_COLLECTIONS = Endpoint("search_collections", "v1/collections")
FEATURED_COLLECTIONS = Endpoint("featured_collections", "v1/collections/featured")
COLLECTION_MEDIA = Endpoint("search_media", "v1/collections/{id}")


@dataclass(frozen=True)
class PreparedRequest:
    """Fully built request ready to hand to a transport."""

    endpoint: Endpoint
    url: str
    params: Dict[str, str] = field(default_factory=dict)
    method: str = "GET"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_per_page(per_page: Any) -> int:
    if not _is_int(per_page) or not 1 <= per_page <= MAX_PER_PAGE:
        raise InvalidParameter("per_page", f"must be an integer between 1 and {MAX_PER_PAGE}, got {per_page!r}")
    return per_page


def validate_page(page: Any) -> int:
    if not _is_int(page) or page < 1:
        raise InvalidParameter("page", f"must be an integer >= 1, got {page!r}")
    return page


def validate_id(name: str, value: Any) -> int:
    """Photo and video identifiers must be positive integers."""
    if not _is_int(value) or value < 1:
        raise InvalidParameter(name, f"must be a positive integer, got {value!r}")
    return value


def validate_query(query: Any, name: str = "query") -> str:
    """Reject blank queries. Accepted queries are sent exactly as given."""
    if not isinstance(query, str) or not query.strip():
        raise InvalidParameter(name, "must be a non-empty string")
    return query


def _non_negative(name: str, value: Any) -> int:
    if not _is_int(value) or value < 0:
        raise InvalidParameter(name, f"must be a non-negative integer, got {value!r}")
    return value


def serialize_enum(name: str, enum_cls: Type[Any], value: Any) -> str:
    """Return the API token for an enum member or its exact token string."""
    if isinstance(value, enum_cls):
        return value.value
    if isinstance(value, str):
        for member in enum_cls:
            if member.value == value:
                return member.value
    allowed = ", ".join(member.value for member in enum_cls)
    raise InvalidParameter(name, f"expected one of {allowed}, got {value!r}")


def serialize_color(value: Union[Color, str]) -> str:
    """Serialize a named color or a six digit hex code."""
    if isinstance(value, Color):
        return value.value
    if isinstance(value, str):
        match = _HEX_COLOR.match(value.strip())
        if match:
            return f"#{match.group(1).lower()}"
    return serialize_enum("color", Color, value)


@dataclass(frozen=True)
class Pagination:
    """Page selection shared by every listing endpoint."""

    per_page: int = DEFAULT_PER_PAGE
    page: int = 1

    def to_params(self) -> Dict[str, str]:
        return {
            "per_page": str(validate_per_page(self.per_page)),
            "page": str(validate_page(self.page)),
        }


@dataclass(frozen=True)
class SearchQuery:
    """Photo search parameters."""

    query: str
    per_page: int = DEFAULT_PER_PAGE
    page: int = 1
    orientation: Optional[Union[Orientation, str]] = None
    size: Optional[Union[Size, str]] = None
    color: Optional[Union[Color, str]] = None
    locale: Optional[Union[Locale, str]] = None

    def to_params(self) -> Dict[str, str]:
        params = {"query": validate_query(self.query)}
        params.update(Pagination(self.per_page, self.page).to_params())
        if self.orientation is not None:
            params["orientation"] = serialize_enum("orientation", Orientation, self.orientation)
        if self.size is not None:
            params["size"] = serialize_enum("size", Size, self.size)
        if self.color is not None:
            params["color"] = serialize_color(self.color)
        if self.locale is not None:
            params["locale"] = serialize_enum("locale", Locale, self.locale)
        return params


@dataclass(frozen=True)
class VideoSearchQuery:
    """Video search parameters. Videos cannot be filtered by color."""

    query: str
    per_page: int = DEFAULT_PER_PAGE
    page: int = 1
    orientation: Optional[Union[Orientation, str]] = None
    size: Optional[Union[Size, str]] = None
    locale: Optional[Union[Locale, str]] = None

    def to_params(self) -> Dict[str, str]:
        params = {"query": validate_query(self.query)}
        params.update(Pagination(self.per_page, self.page).to_params())
        if self.orientation is not None:
            params["orientation"] = serialize_enum("orientation", Orientation, self.orientation)
        if self.size is not None:
            params["size"] = serialize_enum("size", Size, self.size)
        if self.locale is not None:
            params["locale"] = serialize_enum("locale", Locale, self.locale)
        return params


@dataclass(frozen=True)
class PopularVideosQuery:
    """Filters for the popular videos listing."""

    per_page: int = DEFAULT_PER_PAGE
    page: int = 1
    min_width: Optional[int] = None
    min_height: Optional[int] = None
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params = Pagination(self.per_page, self.page).to_params()
        for name in ("min_width", "min_height", "min_duration", "max_duration"):
            value = getattr(self, name)
            if value is not None:
                params[name] = str(_non_negative(name, value))
        if (
            self.min_duration is not None
            and self.max_duration is not None
            and self.min_duration > self.max_duration
        ):
            raise InvalidParameter("max_duration", "must not be lower than min_duration")
        return params


@dataclass(frozen=True)
class MediaQuery:
    """Listing of the media inside one collection, named by `query`."""

    query: str
    per_page: int = DEFAULT_PER_PAGE
    page: int = 1
    media_type: Optional[Union[MediaType, str]] = None
    sort: Optional[Union[MediaSort, str]] = None

    def to_params(self) -> Dict[str, str]:
        params = Pagination(self.per_page, self.page).to_params()
        if self.media_type is not None:
            params["type"] = serialize_enum("media_type", MediaType, self.media_type)
        if self.sort is not None:
            params["sort"] = serialize_enum("sort", MediaSort, self.sort)
        return params


ParamSet = Union[Pagination, SearchQuery, VideoSearchQuery, PopularVideosQuery, MediaQuery]


def build_request(
    base_url: str,
    endpoint: Endpoint,
    params: Optional[ParamSet] = None,
    resource_id: Optional[str] = None,
) -> PreparedRequest:
    """Join the base URL with the endpoint path and serialize parameters.

    Pure function: validation failures raise InvalidParameter and nothing is sent.
    """
    path = endpoint.path
    if "{id}" in path:
        if resource_id is None:
            raise InvalidParameter("id", f"{endpoint.name} requires an identifier")
        path = path.format(id=quote(resource_id, safe=""))
    query_params = params.to_params() if params is not None else {}
    url = f"{base_url.rstrip('/')}/{path}"
    return PreparedRequest(endpoint=endpoint, url=url, params=query_params)


def search_photos_request(base_url: str, search: SearchQuery) -> PreparedRequest:
    return build_request(base_url, SEARCH_PHOTOS, search)


def curated_photos_request(base_url: str, pagination: Pagination) -> PreparedRequest:
    return build_request(base_url, CURATED_PHOTOS, pagination)


def get_photo_request(base_url: str, photo_id: int) -> PreparedRequest:
    return build_request(base_url, GET_PHOTO, resource_id=str(validate_id("id", photo_id)))


def search_videos_request(base_url: str, search: VideoSearchQuery) -> PreparedRequest:
    return build_request(base_url, SEARCH_VIDEOS, search)


def popular_videos_request(base_url: str, filters: PopularVideosQuery) -> PreparedRequest:
    return build_request(base_url, POPULAR_VIDEOS, filters)


def get_video_request(base_url: str, video_id: int) -> PreparedRequest:
    return build_request(base_url, GET_VIDEO, resource_id=str(validate_id("id", video_id)))


def list_collections_request(base_url: str, pagination: Pagination) -> PreparedRequest:
    return build_request(base_url, LIST_COLLECTIONS, pagination)


def featured_collections_request(base_url: str, pagination: Pagination) -> PreparedRequest:
    return build_request(base_url, FEATURED_COLLECTIONS, pagination)


def collection_media_request(base_url: str, media: MediaQuery) -> PreparedRequest:
    collection_id = validate_query(media.query)
    return build_request(base_url, COLLECTION_MEDIA, media, resource_id=collection_id)
