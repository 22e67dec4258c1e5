"""Pexels API client."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar, Union

from pexels_api import decoder
from pexels_api.enums import Color, Locale, MediaSort, MediaType, Orientation, Size
from pexels_api.errors import DecodeError, NetworkError, classify_status
from pexels_api.interfaces import HttpTransport
from pexels_api.models import CollectionPage, MediaSearchResult, Photo, PhotoPage, Video, VideoPage
from pexels_api.request_builder import (
    DEFAULT_PER_PAGE,
    MediaQuery,
    Pagination,
    PopularVideosQuery,
    PreparedRequest,
    SearchQuery,
    VideoSearchQuery,
    collection_media_request,
    curated_photos_request,
    featured_collections_request,
    get_photo_request,
    get_video_request,
    list_collections_request,
    popular_videos_request,
    search_photos_request,
    search_videos_request,
)
from pexels_api.settings import ClientConfig, Credentials
from pexels_api.transport import HttpxTransport, send

T = TypeVar("T")


class PexelsClient:
    """Client for the Pexels photo, video and collection endpoints.

    Every method is one build -> send -> decode pass. The client only holds its
    immutable configuration and transport, so one instance can be shared between
    threads. Failures surface as InvalidParameter, NetworkError, ApiError or
    DecodeError; nothing is retried.
    """

    def __init__(self, config: ClientConfig, transport: Optional[HttpTransport] = None) -> None:
        """Initialize the client with its configuration and an optional transport."""
        self._config = config
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport(timeout=config.timeout)

    @classmethod
    def from_api_key(cls, api_key: str, transport: Optional[HttpTransport] = None, **options: Any) -> "PexelsClient":
        """Build a client from a bare API key."""
        return cls(ClientConfig(credentials=Credentials(api_key=api_key), **options), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _execute(self, request: PreparedRequest, decode: Callable[[bytes], T]) -> T:
        name = request.endpoint.name
        try:
            raw = send(self._transport, self._config, request)
        except NetworkError as exc:
            logging.warning("[PEXELS] %s failed: %s", name, exc)
            raise
        except OSError as exc:
            logging.warning("[PEXELS] %s failed: %s", name, exc)
            raise NetworkError(f"Request to {request.url} failed: {exc}") from exc

        error = classify_status(raw.status_code, raw.body)
        if error is not None:
            logging.warning("[PEXELS] %s failed (status=%s): %s", name, error.status, error.message)
            raise error

        try:
            return decode(raw.body)
        except DecodeError as exc:
            logging.warning("[PEXELS] %s returned an unexpected body: %s", name, exc)
            raise

    def search_photos(
        self,
        query: str,
        per_page: int = DEFAULT_PER_PAGE,
        page: int = 1,
        orientation: Optional[Union[Orientation, str]] = None,
        size: Optional[Union[Size, str]] = None,
        color: Optional[Union[Color, str]] = None,
        locale: Optional[Union[Locale, str]] = None,
    ) -> PhotoPage:
        """Search photos matching a text query."""
        search = SearchQuery(
            query=query,
            per_page=per_page,
            page=page,
            orientation=orientation,
            size=size,
            color=color,
            locale=locale,
        )
        request = search_photos_request(self._config.base_url, search)
        logging.info("[PEXELS] Searching photos: query=%s per_page=%s page=%s", query, per_page, page)
        return self._execute(request, decoder.decode_photo_page)

    def curated_photos(self, per_page: int = DEFAULT_PER_PAGE, page: int = 1) -> PhotoPage:
        """Photos hand-picked by the Pexels team."""
        request = curated_photos_request(self._config.base_url, Pagination(per_page=per_page, page=page))
        return self._execute(request, decoder.decode_photo_page)

    def get_photo(self, id: int) -> Photo:
        """Fetch one photo by its identifier."""
        request = get_photo_request(self._config.base_url, id)
        logging.info("[PEXELS] Fetching photo: id=%s", id)
        return self._execute(request, decoder.decode_photo)

    def search_videos(
        self,
        query: str,
        per_page: int = DEFAULT_PER_PAGE,
        page: int = 1,
        orientation: Optional[Union[Orientation, str]] = None,
        size: Optional[Union[Size, str]] = None,
        locale: Optional[Union[Locale, str]] = None,
    ) -> VideoPage:
        """Search videos matching a text query."""
        search = VideoSearchQuery(
            query=query,
            per_page=per_page,
            page=page,
            orientation=orientation,
            size=size,
            locale=locale,
        )
        request = search_videos_request(self._config.base_url, search)
        logging.info("[PEXELS] Searching videos: query=%s per_page=%s page=%s", query, per_page, page)
        return self._execute(request, decoder.decode_video_page)

    def popular_videos(
        self,
        per_page: int = DEFAULT_PER_PAGE,
        page: int = 1,
        min_width: Optional[int] = None,
        min_height: Optional[int] = None,
        min_duration: Optional[int] = None,
        max_duration: Optional[int] = None,
    ) -> VideoPage:
        """Currently popular videos, optionally filtered by size and duration."""
        filters = PopularVideosQuery(
            per_page=per_page,
            page=page,
            min_width=min_width,
            min_height=min_height,
            min_duration=min_duration,
            max_duration=max_duration,
        )
        request = popular_videos_request(self._config.base_url, filters)
        return self._execute(request, decoder.decode_video_page)

    def get_video(self, id: int) -> Video:
        """Fetch one video by its identifier."""
        request = get_video_request(self._config.base_url, id)
        logging.info("[PEXELS] Fetching video: id=%s", id)
        return self._execute(request, decoder.decode_video)

    def search_collections(self, per_page: int = DEFAULT_PER_PAGE, page: int = 1) -> CollectionPage:
        """List the collections of the account owning the API key."""
        request = list_collections_request(self._config.base_url, Pagination(per_page=per_page, page=page))
        return self._execute(request, decoder.decode_collection_page)

    def featured_collections(self, per_page: int = DEFAULT_PER_PAGE, page: int = 1) -> CollectionPage:
        request = featured_collections_request(self._config.base_url, Pagination(per_page=per_page, page=page))
        return self._execute(request, decoder.decode_collection_page)

    def search_media(
        self,
        query: str,
        per_page: int = DEFAULT_PER_PAGE,
        page: int = 1,
        media_type: Optional[Union[MediaType, str]] = None,
        sort: Optional[Union[MediaSort, str]] = None,
    ) -> MediaSearchResult:
        """List the photos and videos of the collection identified by `query`.

        Items keep the API order; each one is a Photo or a Video.
        """
        media = MediaQuery(query=query, per_page=per_page, page=page, media_type=media_type, sort=sort)
        request = collection_media_request(self._config.base_url, media)
        logging.info("[PEXELS] Listing collection media: collection=%s per_page=%s page=%s", query, per_page, page)
        return self._execute(request, decoder.decode_media_page)

    def close(self) -> None:
        """Release the transport when the client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    def __enter__(self) -> "PexelsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
