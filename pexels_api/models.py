"""Immutable value objects decoded from Pexels responses."""
from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PexelsModel(BaseModel):
    """Strict, frozen base. Unknown response fields are ignored."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class PhotoSource(PexelsModel):
    """Image URLs of a photo, one per size. Only `original` is always present."""

    original: str
    large2x: Optional[str] = None
    large: Optional[str] = None
    medium: Optional[str] = None
    small: Optional[str] = None
    portrait: Optional[str] = None
    landscape: Optional[str] = None
    tiny: Optional[str] = None


class Photo(PexelsModel):
    type: Literal["Photo"] = "Photo"
    id: int
    width: int
    height: int
    url: str
    photographer: str
    photographer_url: str
    photographer_id: int
    src: PhotoSource
    avg_color: Optional[str] = None
    liked: Optional[bool] = None
    alt: Optional[str] = None


class VideoUser(PexelsModel):
    """Author of a video."""

    id: int
    name: str
    url: str


class VideoFile(PexelsModel):
    """One rendition of a video. Streaming renditions carry no quality or size."""

    id: int
    file_type: str
    link: str
    quality: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    fps: Optional[float] = None


class VideoPicture(PexelsModel):
    """Preview frame of a video, `nr` being its position."""

    id: int
    picture: str
    nr: int


class Video(PexelsModel):
    type: Literal["Video"] = "Video"
    id: int
    width: int
    height: int
    url: str
    duration: int
    user: VideoUser
    tags: Tuple[str, ...]
    video_files: Tuple[VideoFile, ...]
    video_pictures: Tuple[VideoPicture, ...]
    full_res: Optional[str] = None
    image: Optional[str] = None
    avg_color: Optional[str] = None


class Collection(PexelsModel):
    id: str
    title: str
    is_private: bool = Field(alias="private")
    media_count: int
    photos_count: int
    videos_count: int
    description: Optional[str] = None


MediaItem = Annotated[Union[Photo, Video], Field(discriminator="type")]


class PagedResult(PexelsModel, Generic[T]):
    """One page of items plus pagination metadata.

    Concrete pages name the JSON key holding the items through the `items` alias.
    """

    items: Tuple[T, ...]
    page: int
    per_page: int
    total_results: int
    next_page: Optional[str] = None
    prev_page: Optional[str] = None

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def has_prev(self) -> bool:
        return self.prev_page is not None

    def __len__(self) -> int:
        return len(self.items)


class PhotoPage(PagedResult[Photo]):
    items: Tuple[Photo, ...] = Field(alias="photos")


class VideoPage(PagedResult[Video]):
    items: Tuple[Video, ...] = Field(alias="videos")


class CollectionPage(PagedResult[Collection]):
    items: Tuple[Collection, ...] = Field(alias="collections")


class MediaSearchResult(PagedResult[MediaItem]):
    """Mixed photos and videos of one collection, in API order."""

    items: Tuple[MediaItem, ...] = Field(alias="media")
    collection_id: Optional[str] = Field(default=None, alias="id")

    @property
    def photos(self) -> Tuple[Photo, ...]:
        return tuple(item for item in self.items if isinstance(item, Photo))

    @property
    def videos(self) -> Tuple[Video, ...]:
        return tuple(item for item in self.items if isinstance(item, Video))


def to_dict(value: Any) -> Any:
    """Convert models to plain JSON-ready structures. Media items carry their `type`."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_dict(item) for item in value]
    return value
