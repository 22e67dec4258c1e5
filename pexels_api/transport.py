"""HTTP transport backed by httpx."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from pexels_api.errors import NetworkError
from pexels_api.interfaces import HttpTransport, RawResponse
from pexels_api.request_builder import PreparedRequest
from pexels_api.settings import ClientConfig


class HttpxTransport:
    """Send requests with an httpx.Client.

    A client passed in by the caller stays open after `close()`; connection pooling,
    proxies and timeouts are configured on it. Without one, a client with no timeout
    is created and owned by the transport.
    """

    def __init__(self, client: Optional[httpx.Client] = None, timeout: Optional[float] = None) -> None:
        """Initialize the transport with an optional httpx client."""
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def get(self, url: str, params: Mapping[str, str], headers: Mapping[str, str]) -> RawResponse:
        """Send a GET request. Any httpx request failure is raised as NetworkError."""
        try:
            response = self._client.get(url, params=dict(params), headers=dict(headers))
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Request to {url} timed out: {exc}") from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise NetworkError(f"Request to {url} failed: {exc}") from exc
        return RawResponse(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def build_headers(config: ClientConfig) -> Dict[str, str]:
    """Headers attached to every request. The API key is sent without a scheme prefix."""
    return {
        "Authorization": config.credentials.api_key,
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }


def send(transport: HttpTransport, config: ClientConfig, request: PreparedRequest) -> RawResponse:
    """Send a prepared request once. No retries."""
    logging.debug("[PEXELS] %s %s params=%s", request.method, request.url, request.params)
    raw = transport.get(request.url, request.params, build_headers(config))
    logging.debug("[PEXELS] %s -> status=%s bytes=%d", request.endpoint.name, raw.status_code, len(raw.body))
    return raw
