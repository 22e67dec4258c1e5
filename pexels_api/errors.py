"""Error taxonomy for the Pexels client."""
from __future__ import annotations

import json
from typing import Any, Optional

import httpx

SNIPPET_LENGTH = 200


def snippet(value: Any) -> str:
    """Return a short printable excerpt of a raw value."""
    if isinstance(value, bytes):
        text = value.decode("utf-8", errors="replace")
    elif isinstance(value, str):
        text = value
    else:
        try:
            text = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            text = repr(value)
    if len(text) > SNIPPET_LENGTH:
        return text[:SNIPPET_LENGTH] + "..."
    return text


class PexelsError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(PexelsError, ValueError):
    """Raised when credentials or settings are missing or malformed."""


class InvalidParameter(PexelsError, ValueError):
    """A caller-supplied argument failed validation before any network call."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Invalid parameter '{name}': {message}")
        self.name = name


class NetworkError(PexelsError):
    """The request never produced a response (connection, DNS, TLS, timeout)."""


class ApiError(PexelsError):
    """The remote API answered with a non-2xx status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"Pexels API error {status}: {message}")
        self.status = status
        self.message = message

    @property
    def is_auth_error(self) -> bool:
        return self.status in (401, 403)

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status == 429


class DecodeError(PexelsError):
    """The response body did not match the expected schema."""

    def __init__(self, field_path: str, detail: str, raw: Optional[str] = None) -> None:
        message = f"Cannot decode '{field_path}': {detail}"
        if raw is not None:
            message = f"{message} (got {raw})"
        super().__init__(message)
        self.field_path = field_path
        self.detail = detail
        self.raw = raw


def _extract_message(body: bytes) -> Optional[str]:
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    for key in ("error", "code", "message"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def classify_status(status_code: int, body: bytes) -> Optional[ApiError]:
    """Return an ApiError for non-2xx statuses, None for success."""
    if 200 <= status_code < 300:
        return None
    message = _extract_message(body)
    if not message:
        message = httpx.codes.get_reason_phrase(status_code) or "Unexpected response status"
    return ApiError(status=status_code, message=message)
