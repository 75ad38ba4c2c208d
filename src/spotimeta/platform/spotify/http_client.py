"""Where: src/spotimeta/platform/spotify/http_client.py
What: ``requests``-backed transport bound to one Spotify Metadata endpoint.
Why: Decouple network concerns from request building and status handling.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, cast

import requests

from .models import DEFAULT_TIMEOUT, QueryParams, Timeout


@dataclass(slots=True)
class HTTPResponse:
    """Represent the parts of an HTTP response the client interprets."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)


class HTTPTransport(Protocol):
    """Protocol for transports bound to a single endpoint URL."""

    url: str

    def reset(self) -> None:
        ...

    def set_headers(self, headers: Mapping[str, str]) -> None:
        ...

    def get(self, params: QueryParams) -> HTTPResponse:
        ...

    def close(self) -> None:
        ...


class TransportFactory(Protocol):
    def __call__(self, url: str, timeout: Timeout) -> HTTPTransport:
        ...


class RequestsTransport:
    """Issue GET requests to ``url`` through a reusable ``requests.Session``."""

    def __init__(
        self,
        url: str,
        timeout: Timeout = DEFAULT_TIMEOUT,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.url: str = url
        self.timeout: Timeout = timeout
        self._session: requests.Session = session or requests.Session()

    def reset(self) -> None:
        """Drop headers and query parameters accumulated by earlier calls."""

        self._session.headers.clear()
        self._session.params = {}

    def set_headers(self, headers: Mapping[str, str]) -> None:
        self._session.headers.update(headers)

    def get(self, params: QueryParams) -> HTTPResponse:
        response = self._session.get(self.url, params=params, timeout=self.timeout)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}
        return HTTPResponse(
            status=int(response.status_code),
            body=response.text,
            headers=response_headers,
        )

    def close(self) -> None:
        self._session.close()


def create_requests_transport(url: str, timeout: Timeout) -> HTTPTransport:
    """Default ``TransportFactory`` used by ``SpotifyMetadataClient``."""

    return RequestsTransport(url, timeout)


__all__ = [
    "HTTPResponse",
    "HTTPTransport",
    "RequestsTransport",
    "TransportFactory",
    "create_requests_transport",
]
