"""Typed client for the Pexels photo and video API."""
from __future__ import annotations

__version__ = "0.1.0"

from pexels_api.enums import Color, Locale, MediaSort, MediaType, Orientation, Size
from pexels_api.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    InvalidParameter,
    NetworkError,
    PexelsError,
)
from pexels_api.models import (
    Collection,
    CollectionPage,
    MediaSearchResult,
    PagedResult,
    Photo,
    PhotoPage,
    PhotoSource,
    Video,
    VideoFile,
    VideoPage,
    VideoPicture,
    VideoUser,
)
from pexels_api.pexels_client import PexelsClient
from pexels_api.settings import ClientConfig, Credentials

__all__ = [
    "ApiError",
    "ClientConfig",
    "Collection",
    "CollectionPage",
    "Color",
    "ConfigurationError",
    "Credentials",
    "DecodeError",
    "InvalidParameter",
    "Locale",
    "MediaSearchResult",
    "MediaSort",
    "MediaType",
    "NetworkError",
    "Orientation",
    "PagedResult",
    "PexelsClient",
    "PexelsError",
    "Photo",
    "PhotoPage",
    "PhotoSource",
    "Size",
    "Video",
    "VideoFile",
    "VideoPage",
    "VideoPicture",
    "VideoUser",
]
