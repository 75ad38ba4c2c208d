"""Where: src/spotimeta/platform/spotify/client.py
What: Facade over the Spotify Metadata search and lookup endpoints.
Why: Build requests, interpret status codes and decode bodies in one place.

Collaborators:
- ``http_client`` provides the endpoint-bound transport
- ``decoders`` turns bodies into JSON value trees or XML element trees
- ``models`` validates response formats and detail levels

Every public call issues exactly one GET. HTTP 404 yields ``NOT_FOUND``;
other failures raise a ``SpotimetaError`` subclass.
"""

from __future__ import annotations

import threading
import time
from types import TracebackType
from typing import Final

from spotimeta.platform.logging import logger

from .decoders import decode
from .errors import (
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RateLimitError,
    RequestError,
)
from .http_client import HTTPTransport, TransportFactory, create_requests_transport
from .models import (
    DEFAULT_TIMEOUT,
    LOOKUP_PATH,
    NOT_FOUND,
    URI_BASE,
    ClientConfig,
    LookupKind,
    NotFound,
    ParsedResult,
    QueryParams,
    ResponseFormat,
    SearchKind,
    Timeout,
)

_DECODABLE_STATUSES: Final[frozenset[int]] = frozenset({200, 304})
_NOT_FOUND_STATUS: Final[int] = 404
_RATE_LIMIT_STATUS: Final[int] = 403


class SpotifyMetadataClient:
    """Synchronous client for ``ws.spotify.com`` search and lookup calls.

    The transport bound to the last queried path is kept and reused while
    consecutive calls target the same endpoint. A per-instance lock serialises
    access to it, so one client may be shared between threads.
    """

    def __init__(
        self,
        response_format: str | ResponseFormat = "XML",
        *,
        base_uri: str = URI_BASE,
        timeout: Timeout = DEFAULT_TIMEOUT,
        transport_factory: TransportFactory = create_requests_transport,
    ) -> None:
        self._config: ClientConfig | None = ClientConfig.create(
            response_format, base_uri=base_uri, timeout=timeout
        )
        self._transport_factory: TransportFactory = transport_factory
        self._transport: HTTPTransport | None = None
        self._current_path: str | None = None
        self._lock: Final[threading.Lock] = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport_factory: TransportFactory = create_requests_transport,
    ) -> SpotifyMetadataClient:
        return cls(
            config.response_format,
            base_uri=config.base_uri,
            timeout=config.timeout,
            transport_factory=transport_factory,
        )

    @property
    def config(self) -> ClientConfig | None:
        return self._config

    @property
    def response_format(self) -> str | None:
        """Canonical upper-case name of the configured format."""
        if self._config is None:
            return None
        return self._config.response_format.value

    def set_response_format(self, response_format: str | ResponseFormat) -> None:
        """Switch the format used by subsequent queries.

        Raises:
            ConfigurationError: If the format is not JSON or XML. The previous
                format stays in effect.
        """
        if self._config is None:
            self._config = ClientConfig.create(response_format)
            return
        self._config = self._config.with_response_format(response_format)

    # Search -----------------------------------------------------------------

    def search(self, kind: SearchKind, name: str, page: int = 1) -> ParsedResult | NotFound:
        """Query the search endpoint for ``kind``.

        Args:
            kind: Entity kind to search for.
            name: Free-text query.
            page: 1-based result page.

        Raises:
            InvalidArgumentError: If ``page`` is not an integer of 1 or higher.
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise InvalidArgumentError("page must be an integer of 1 or higher")
        return self._execute(kind.path, {"q": name, "page": page})

    def search_by_artist(self, name: str, page: int = 1) -> ParsedResult | NotFound:
        return self.search(SearchKind.ARTIST, name, page)

    def search_by_album(self, name: str, page: int = 1) -> ParsedResult | NotFound:
        return self.search(SearchKind.ALBUM, name, page)

    def search_by_track(self, name: str, page: int = 1) -> ParsedResult | NotFound:
        return self.search(SearchKind.TRACK, name, page)

    # Lookup -----------------------------------------------------------------

    def lookup(self, kind: LookupKind, uri: str, detail: str = "basic") -> ParsedResult | NotFound:
        """Query the lookup endpoint for ``spotify:<kind>:<uri>``.

        Raises:
            InvalidArgumentError: If ``detail`` is not a level supported by ``kind``.
        """
        return self._execute(LOOKUP_PATH, build_lookup_params(kind, uri, detail))

    def lookup_artist(self, uri: str, detail: str = "basic") -> ParsedResult | NotFound:
        """Look up an artist; ``detail`` is one of basic, album, albumdetail."""
        return self.lookup(LookupKind.ARTIST, uri, detail)

    def lookup_album(self, uri: str, detail: str = "basic") -> ParsedResult | NotFound:
        """Look up an album; ``detail`` is one of basic, track, trackdetail."""
        return self.lookup(LookupKind.ALBUM, uri, detail)

    def lookup_track(self, uri: str) -> ParsedResult | NotFound:
        return self.lookup(LookupKind.TRACK, uri)

    # Lifecycle --------------------------------------------------------------

    def close(self) -> None:
        with self._lock:
            if self._transport is not None:
                self._transport.close()
            self._transport = None
            self._current_path = None

    def __enter__(self) -> SpotifyMetadataClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # Internals --------------------------------------------------------------

    def _transport_for(self, path: str, config: ClientConfig) -> HTTPTransport:
        if self._transport is None or self._current_path != path:
            if self._transport is not None:
                self._transport.close()
            self._transport = self._transport_factory(f"{config.base_uri}{path}", config.timeout)
            self._current_path = path
        return self._transport

    def _execute(self, path: str, params: QueryParams) -> ParsedResult | NotFound:
        config = self._config
        if config is None:
            raise ConfigurationError("response format is not set")
        response_format = config.response_format

        with self._lock:
            transport = self._transport_for(path, config)
            transport.reset()
            transport.set_headers({"Accept": response_format.accept_header})

            logger.debug(
                "GET %s params=%s",
                transport.url,
                params,
                extra={
                    "request_event": "request.start",
                    "method": "GET",
                    "url": transport.url,
                    "params": dict(params),
                },
            )
            started = time.perf_counter()
            response = transport.get(params)
            duration_ms = (time.perf_counter() - started) * 1000.0

        status = response.status
        if status in _DECODABLE_STATUSES:
            logger.debug(
                "Spotify responded %s in %.2f ms",
                status,
                duration_ms,
                extra={
                    "request_event": "request.complete",
                    "url": transport.url,
                    "status": status,
                    "duration_ms": duration_ms,
                },
            )
            try:
                return decode(response.body, response_format)
            except DecodeError as exc:
                logger.warning("Spotify %s decode error: %s", response_format.value, exc)
                raise

        if status == _NOT_FOUND_STATUS:
            logger.info(
                "Spotify resource not found: %s",
                transport.url,
                extra={"request_event": "request.not_found", "url": transport.url, "status": status},
            )
            return NOT_FOUND

        if status == _RATE_LIMIT_STATUS:
            error: RequestError = RateLimitError()
        else:
            error = RequestError(f"Invalid request. Response code: {status}", status_code=status)
        logger.warning(
            "Spotify request failed (status=%s): %s",
            status,
            error,
            extra={
                "request_event": "request.error",
                "url": transport.url,
                "status": status,
                "error_message": str(error),
            },
        )
        raise error


def build_lookup_params(kind: LookupKind, uri: str, detail: str = "basic") -> QueryParams:
    """Return the lookup query parameters for ``kind``.

    ``basic`` maps to an empty ``extras`` value; tracks accept no detail level
    and send ``uri`` only.

    Raises:
        InvalidArgumentError: If ``detail`` is not supported by ``kind``.
    """
    extras = str(detail).strip().lower()
    levels = kind.detail_levels
    if extras not in levels:
        options = ", ".join(f'"{level}"' for level in levels)
        raise InvalidArgumentError(
            f"Invalid detail level '{detail}' for {kind.value} lookup. Supported: {options}."
        )

    params: QueryParams = {"uri": kind.qualify(uri)}
    if kind is LookupKind.TRACK:
        return params
    params["extras"] = "" if extras == levels[0] else extras
    return params


__all__ = ["SpotifyMetadataClient", "build_lookup_params"]
