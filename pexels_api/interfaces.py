"""Interfaces for pluggable services."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of an HTTP response."""

    status_code: int
    body: bytes


class HttpTransport(Protocol):
    """Interface for the HTTP capability used by the client."""

    def get(self, url: str, params: Mapping[str, str], headers: Mapping[str, str]) -> RawResponse:
        """Send a GET request and return the raw response.

        Implementations raise NetworkError when no response was received.
        """
        raise NotImplementedError
