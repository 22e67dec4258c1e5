"""Entry point for the Pexels command-line client."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from pexels_api.enums import Color, Locale, MediaSort, MediaType, Orientation, Size
from pexels_api.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    InvalidParameter,
    NetworkError,
    PexelsError,
)
from pexels_api.models import to_dict
from pexels_api.pexels_client import PexelsClient
from pexels_api.request_builder import DEFAULT_PER_PAGE
from pexels_api.settings import (
    build_client_config,
    credentials_from_env,
    default_per_page,
    load_settings,
    settings_section,
)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "config" / "settings.yaml"

EXIT_CODES = {
    InvalidParameter: 2,
    NetworkError: 3,
    ApiError: 4,
    DecodeError: 5,
    ConfigurationError: 6,
}


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _choices(enum_cls: Any) -> List[str]:
    return [member.value for member in enum_cls]


def _add_paging(parser: argparse.ArgumentParser, per_page_default: int) -> None:
    parser.add_argument("--per-page", type=int, default=per_page_default, help="Results per page (1-80)")
    parser.add_argument("--page", type=int, default=1, help="Page number, starting at 1")


def build_parser(per_page_default: int = DEFAULT_PER_PAGE) -> argparse.ArgumentParser:
    """Build the argument parser, one subcommand per client method."""
    parser = argparse.ArgumentParser(prog="pexels-cli", description="A CLI for interacting with the Pexels API")
    parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH, help="Path to settings.yaml")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    search_photos = commands.add_parser("search-photos", help="Search for photos")
    search_photos.add_argument("--query", required=True)
    _add_paging(search_photos, per_page_default)
    search_photos.add_argument("--orientation", choices=_choices(Orientation))
    search_photos.add_argument("--size", choices=_choices(Size))
    search_photos.add_argument("--color", help=f"One of {', '.join(_choices(Color))} or a hex code like #ffffff")
    search_photos.add_argument("--locale", choices=_choices(Locale))

    curated = commands.add_parser("curated-photos", help="List curated photos")
    _add_paging(curated, per_page_default)

    get_photo = commands.add_parser("get-photo", help="Get a specific photo by ID")
    get_photo.add_argument("--id", type=int, required=True)

    search_videos = commands.add_parser("search-videos", help="Search for videos")
    search_videos.add_argument("--query", required=True)
    _add_paging(search_videos, per_page_default)
    search_videos.add_argument("--orientation", choices=_choices(Orientation))
    search_videos.add_argument("--size", choices=_choices(Size))
    search_videos.add_argument("--locale", choices=_choices(Locale))

    popular = commands.add_parser("popular-videos", help="List popular videos")
    _add_paging(popular, per_page_default)
    popular.add_argument("--min-width", type=int)
    popular.add_argument("--min-height", type=int)
    popular.add_argument("--min-duration", type=int)
    popular.add_argument("--max-duration", type=int)

    get_video = commands.add_parser("get-video", help="Get a specific video by ID")
    get_video.add_argument("--id", type=int, required=True)

    collections = commands.add_parser("search-collections", help="List your collections")
    _add_paging(collections, per_page_default)

    featured = commands.add_parser("featured-collections", help="List featured collections")
    _add_paging(featured, per_page_default)

    media = commands.add_parser("search-media", help="List the media of a collection")
    media.add_argument("--query", required=True, help="Collection ID")
    _add_paging(media, per_page_default)
    media.add_argument("--type", dest="media_type", choices=_choices(MediaType))
    media.add_argument("--sort", choices=_choices(MediaSort))
    return parser


COMMANDS: Dict[str, Callable[[PexelsClient, argparse.Namespace], Any]] = {
    "search-photos": lambda client, args: client.search_photos(
        query=args.query,
        per_page=args.per_page,
        page=args.page,
        orientation=args.orientation,
        size=args.size,
        color=args.color,
        locale=args.locale,
    ),
    "curated-photos": lambda client, args: client.curated_photos(per_page=args.per_page, page=args.page),
    "get-photo": lambda client, args: client.get_photo(id=args.id),
    "search-videos": lambda client, args: client.search_videos(
        query=args.query,
        per_page=args.per_page,
        page=args.page,
        orientation=args.orientation,
        size=args.size,
        locale=args.locale,
    ),
    "popular-videos": lambda client, args: client.popular_videos(
        per_page=args.per_page,
        page=args.page,
        min_width=args.min_width,
        min_height=args.min_height,
        min_duration=args.min_duration,
        max_duration=args.max_duration,
    ),
    "get-video": lambda client, args: client.get_video(id=args.id),
    "search-collections": lambda client, args: client.search_collections(per_page=args.per_page, page=args.page),
    "featured-collections": lambda client, args: client.featured_collections(per_page=args.per_page, page=args.page),
    "search-media": lambda client, args: client.search_media(
        query=args.query,
        per_page=args.per_page,
        page=args.page,
        media_type=args.media_type,
        sort=args.sort,
    ),
}


def _settings_path(argv: Optional[List[str]]) -> Path:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH)
    known, _ = pre_parser.parse_known_args(argv)
    return known.settings


def exit_code_for(error: PexelsError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


def build_client(settings: Dict[str, Any]) -> PexelsClient:
    """Create a client from settings and the PEXELS_API_KEY credential."""
    return PexelsClient(build_client_config(settings, credentials_from_env()))


def run(argv: Optional[List[str]] = None) -> int:
    """Run one CLI command and return the process exit code."""
    try:
        settings = load_settings(_settings_path(argv))
        per_page = default_per_page(settings)
        log_level = settings_section(settings, "logging").get("level", "INFO")
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exit_code_for(exc)

    args = build_parser(per_page).parse_args(argv)
    setup_logging("DEBUG" if args.verbose else log_level)

    try:
        with build_client(settings) as client:
            result = COMMANDS[args.command](client, args)
    except PexelsError as exc:
        logging.error("[CLI] %s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return exit_code_for(exc)

    print(json.dumps(to_dict(result), indent=2, ensure_ascii=False))
    return 0


def cli() -> None:
    sys.exit(run())


if __name__ == "__main__":
    cli()
