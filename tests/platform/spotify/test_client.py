"""Tests for ``SpotifyMetadataClient`` request building and status handling."""

from __future__ import annotations

import json
import threading
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element

import pytest

from spotimeta.platform.spotify.client import SpotifyMetadataClient, build_lookup_params
from spotimeta.platform.spotify.errors import (
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RateLimitError,
    RequestError,
)
from spotimeta.platform.spotify.http_client import HTTPResponse
from spotimeta.platform.spotify.models import NOT_FOUND, LookupKind, SearchKind

if TYPE_CHECKING:
    from conftest import FakeTransportFactory


def _client(factory: FakeTransportFactory, response_format: str = "JSON") -> SpotifyMetadataClient:
    return SpotifyMetadataClient(response_format, transport_factory=factory)


def test_default_format_is_xml(transport_factory: FakeTransportFactory) -> None:
    client = SpotifyMetadataClient(transport_factory=transport_factory)
    assert client.response_format == "XML"


def test_constructor_rejects_unknown_format(transport_factory: FakeTransportFactory) -> None:
    with pytest.raises(ConfigurationError, match="JSON, XML"):
        _ = SpotifyMetadataClient("yaml", transport_factory=transport_factory)


def test_set_response_format_is_case_insensitive(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory, "xml")
    client.set_response_format("json")
    assert client.response_format == "JSON"


def test_set_response_format_failure_keeps_previous_format(
    transport_factory: FakeTransportFactory,
) -> None:
    client = _client(transport_factory, "JSON")
    previous = client.config

    with pytest.raises(ConfigurationError):
        client.set_response_format("bogus")

    assert client.response_format == "JSON"
    assert client.config is previous


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("search_by_artist", "/search/1/artist"),
        ("search_by_album", "/search/1/album"),
        ("search_by_track", "/search/1/track"),
    ],
)
def test_search_builds_path_and_params(
    transport_factory: FakeTransportFactory, method: str, path: str
) -> None:
    client = _client(transport_factory)

    _ = getattr(client, method)("Daft Punk", page=2)

    url, params, headers = transport_factory.calls[0]
    assert url == f"http://ws.spotify.com{path}"
    assert params == {"q": "Daft Punk", "page": 2}
    assert headers == {"Accept": "application/json"}


def test_search_defaults_to_first_page(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)
    _ = client.search_by_track("Around the World")
    assert transport_factory.calls[0][1] == {"q": "Around the World", "page": 1}


@pytest.mark.parametrize("page", [0, -1, -100])
@pytest.mark.parametrize("kind", list(SearchKind))
def test_search_rejects_non_positive_pages_without_network(
    transport_factory: FakeTransportFactory, kind: SearchKind, page: int
) -> None:
    client = _client(transport_factory)

    with pytest.raises(InvalidArgumentError, match="page must be an integer of 1 or higher"):
        _ = client.search(kind, "anything", page)

    assert transport_factory.calls == []


@pytest.mark.parametrize("page", [1.5, "2", True, None])
def test_search_rejects_non_integer_pages(
    transport_factory: FakeTransportFactory, page: object
) -> None:
    client = _client(transport_factory)

    with pytest.raises(InvalidArgumentError):
        _ = client.search_by_album("Discovery", page)  # pyright: ignore[reportArgumentType]

    assert transport_factory.created == []


def test_lookup_artist_basic_params(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)

    _ = client.lookup_artist("abc123xyz", "basic")

    url, params, _headers = transport_factory.calls[0]
    assert url == "http://ws.spotify.com/lookup/1/"
    assert params == {"uri": "spotify:artist:abc123xyz", "extras": ""}


def test_lookup_album_trackdetail_params(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)

    _ = client.lookup_album("abc123xyz", "trackdetail")

    assert transport_factory.calls[0][1] == {
        "uri": "spotify:album:abc123xyz",
        "extras": "trackdetail",
    }


def test_lookup_detail_is_case_insensitive(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)

    _ = client.lookup_artist("4tZwfgrHOc3mvqYlEYSvVi", "AlbumDetail")

    assert transport_factory.calls[0][1]["extras"] == "albumdetail"


def test_lookup_track_sends_uri_only(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)

    _ = client.lookup_track("6JEK0CvvjDjjMUBFoXShNZ")

    assert transport_factory.calls[0][1] == {"uri": "spotify:track:6JEK0CvvjDjjMUBFoXShNZ"}


@pytest.mark.parametrize(
    ("kind", "detail"),
    [
        (LookupKind.ARTIST, "track"),
        (LookupKind.ARTIST, "full"),
        (LookupKind.ALBUM, "album"),
        (LookupKind.ALBUM, "albumdetail"),
        (LookupKind.ALBUM, ""),
        (LookupKind.TRACK, "trackdetail"),
    ],
)
def test_lookup_rejects_unknown_detail_without_network(
    transport_factory: FakeTransportFactory, kind: LookupKind, detail: str
) -> None:
    client = _client(transport_factory)

    with pytest.raises(InvalidArgumentError) as excinfo:
        _ = client.lookup(kind, "abc123xyz", detail)

    for level in kind.detail_levels:
        assert f'"{level}"' in str(excinfo.value)
    assert transport_factory.calls == []


def test_build_lookup_params_maps_basic_to_empty_extras() -> None:
    assert build_lookup_params(LookupKind.ALBUM, "x", "BASIC") == {
        "uri": "spotify:album:x",
        "extras": "",
    }


def test_json_body_is_decoded(transport_factory: FakeTransportFactory) -> None:
    payload = {"info": {"num_results": 1, "page": 1}, "artists": [{"name": "Daft Punk"}]}
    transport_factory.queue(HTTPResponse(status=200, body=json.dumps(payload)))
    client = _client(transport_factory)

    assert client.search_by_artist("Daft Punk") == payload


def test_not_modified_body_is_decoded(transport_factory: FakeTransportFactory) -> None:
    transport_factory.queue(HTTPResponse(status=304, body='{"cached": true}'))
    client = _client(transport_factory)

    assert client.lookup_album("abc") == {"cached": True}


def test_xml_body_is_decoded(transport_factory: FakeTransportFactory) -> None:
    body = (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<artists xmlns="http://www.spotify.com/ns/music/1">'
        "<artist><name>Daft Punk</name></artist></artists>"
    )
    transport_factory.queue(HTTPResponse(status=200, body=body))
    client = _client(transport_factory, "XML")

    result = client.search_by_artist("Daft Punk")

    assert isinstance(result, Element)
    assert result.tag == "{http://www.spotify.com/ns/music/1}artists"
    assert transport_factory.calls[0][2] == {"Accept": "application/xml, text/xml"}


def test_not_found_returns_sentinel(transport_factory: FakeTransportFactory) -> None:
    transport_factory.queue(HTTPResponse(status=404, body=""))
    client = _client(transport_factory)

    result = client.lookup_artist("missing")

    assert result is NOT_FOUND
    assert not result


def test_forbidden_raises_rate_limit_error(transport_factory: FakeTransportFactory) -> None:
    transport_factory.queue(HTTPResponse(status=403, body=""))
    client = _client(transport_factory)

    with pytest.raises(RateLimitError, match="rate limiting has kicked in") as excinfo:
        _ = client.search_by_album("Homework")

    assert excinfo.value.status_code == 403


@pytest.mark.parametrize("status", [400, 500, 503])
def test_unexpected_status_raises_request_error(
    transport_factory: FakeTransportFactory, status: int
) -> None:
    transport_factory.queue(HTTPResponse(status=status, body="oops"))
    client = _client(transport_factory)

    with pytest.raises(RequestError) as excinfo:
        _ = client.search_by_track("One More Time")

    assert excinfo.value.status_code == status
    assert not isinstance(excinfo.value, RateLimitError)
    assert str(status) in str(excinfo.value)


@pytest.mark.parametrize(("response_format", "body"), [("JSON", "{not json"), ("XML", "<open>")])
def test_malformed_body_raises_decode_error(
    transport_factory: FakeTransportFactory, response_format: str, body: str
) -> None:
    transport_factory.queue(HTTPResponse(status=200, body=body))
    client = _client(transport_factory, response_format)

    with pytest.raises(DecodeError) as excinfo:
        _ = client.search_by_artist("x")

    assert excinfo.value.response_format == response_format
    assert excinfo.value.__cause__ is not None


def test_missing_format_raises_configuration_error(
    transport_factory: FakeTransportFactory,
) -> None:
    client = _client(transport_factory)
    client._config = None  # pyright: ignore[reportPrivateUsage] - simulate unconfigured state

    with pytest.raises(ConfigurationError, match="response format is not set"):
        _ = client.search_by_artist("x")

    assert transport_factory.calls == []


def test_switching_format_changes_only_accept_and_decoder(
    transport_factory: FakeTransportFactory,
) -> None:
    transport_factory.queue(
        HTTPResponse(status=200, body='{"name": "Daft Punk"}'),
        HTTPResponse(status=200, body="<artist><name>Daft Punk</name></artist>"),
    )
    client = _client(transport_factory, "JSON")

    first = client.search_by_artist("Daft Punk")
    client.set_response_format("XML")
    second = client.search_by_artist("Daft Punk")

    assert first == {"name": "Daft Punk"}
    assert isinstance(second, Element)
    (url_a, params_a, headers_a), (url_b, params_b, headers_b) = transport_factory.calls
    assert (url_a, params_a) == (url_b, params_b)
    assert headers_a == {"Accept": "application/json"}
    assert headers_b == {"Accept": "application/xml, text/xml"}


def test_transport_reused_for_same_path_and_rebound_on_change(
    transport_factory: FakeTransportFactory,
) -> None:
    client = _client(transport_factory)

    _ = client.search_by_artist("a")
    _ = client.search_by_artist("b")
    assert len(transport_factory.created) == 1
    assert transport_factory.created[0].resets == 2

    _ = client.lookup_artist("c")
    assert len(transport_factory.created) == 2
    assert transport_factory.created[0].closed
    assert transport_factory.created[1].url == "http://ws.spotify.com/lookup/1/"


def test_reused_transport_does_not_leak_headers(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)

    _ = client.search_by_artist("a")
    transport_factory.created[0].headers["X-Stale"] = "1"
    _ = client.search_by_artist("b")

    assert transport_factory.calls[1][2] == {"Accept": "application/json"}


def test_base_uri_and_timeout_forwarded_to_transport(
    transport_factory: FakeTransportFactory,
) -> None:
    client = SpotifyMetadataClient(
        "JSON",
        base_uri="http://localhost:8080/",
        timeout=3.0,
        transport_factory=transport_factory,
    )

    _ = client.search_by_album("x")

    transport = transport_factory.created[0]
    assert transport.url == "http://localhost:8080/search/1/album"
    assert transport.timeout == 3.0


def test_context_manager_closes_transport(transport_factory: FakeTransportFactory) -> None:
    with _client(transport_factory) as client:
        _ = client.search_by_artist("x")

    assert transport_factory.created[0].closed


def test_concurrent_calls_share_one_transport(transport_factory: FakeTransportFactory) -> None:
    client = _client(transport_factory)
    errors: list[BaseException] = []

    def worker() -> None:
        try:
            for _ in range(20):
                _ = client.search_by_artist("x")
        except BaseException as exc:  # pragma: no cover - surfaced by the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(transport_factory.created) == 1
    assert len(transport_factory.calls) == 80
