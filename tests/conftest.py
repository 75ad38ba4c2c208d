"""Shared pytest fixtures for the Spotify Metadata client tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import pytest

from spotimeta.platform.spotify.http_client import HTTPResponse
from spotimeta.platform.spotify.models import QueryParams, Timeout


@dataclass
class FakeTransport:
    """In-memory transport recording every interaction."""

    url: str
    timeout: Timeout
    responses: list[HTTPResponse]
    headers: dict[str, str] = field(default_factory=dict)
    calls: list[tuple[str, QueryParams, dict[str, str]]] = field(default_factory=list)
    resets: int = 0
    closed: bool = False

    def reset(self) -> None:
        self.resets += 1
        self.headers.clear()

    def set_headers(self, headers: Mapping[str, str]) -> None:
        self.headers.update(headers)

    def get(self, params: QueryParams) -> HTTPResponse:
        self.calls.append((self.url, dict(params), dict(self.headers)))
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def close(self) -> None:
        self.closed = True


class FakeTransportFactory:
    """Transport factory handing out ``FakeTransport`` instances with queued responses."""

    def __init__(self) -> None:
        self.responses: list[HTTPResponse] = [HTTPResponse(status=200, body="{}")]
        self.created: list[FakeTransport] = []

    def queue(self, *responses: HTTPResponse) -> None:
        self.responses = list(responses)

    def __call__(self, url: str, timeout: Timeout) -> FakeTransport:
        transport = FakeTransport(url=url, timeout=timeout, responses=self.responses)
        self.created.append(transport)
        return transport

    @property
    def calls(self) -> list[tuple[str, QueryParams, dict[str, str]]]:
        return [call for transport in self.created for call in transport.calls]


@pytest.fixture
def transport_factory() -> FakeTransportFactory:
    """Provide a fresh fake transport factory per test."""

    return FakeTransportFactory()
