"""Where: src/spotimeta/platform/spotify/models.py
What: Value objects describing client configuration and endpoint kinds.
Why: Keep validation of formats and detail levels out of the request flow.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, final
from xml.etree.ElementTree import Element

from .errors import ConfigurationError

URI_BASE: Final[str] = "http://ws.spotify.com"
LOOKUP_PATH: Final[str] = "/lookup/1/"

Timeout = float | tuple[float, float]
DEFAULT_TIMEOUT: Final[tuple[float, float]] = (5.0, 15.0)

QueryParams = dict[str, str | int]
JSONValue = dict[str, object] | list[object] | str | int | float | bool | None
ParsedResult = JSONValue | Element


class ResponseFormat(Enum):
    """Response formats understood by the service."""

    JSON = "JSON"
    XML = "XML"

    @property
    def accept_header(self) -> str:
        if self is ResponseFormat.JSON:
            return "application/json"
        return "application/xml, text/xml"

    @classmethod
    def parse(cls, value: str | ResponseFormat) -> ResponseFormat:
        """Return the member matching ``value`` case-insensitively.

        Raises:
            ConfigurationError: If ``value`` is neither JSON nor XML.
        """
        if isinstance(value, ResponseFormat):
            return value
        normalized = str(value).strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Invalid response format '{value}'. Supported formats: {supported}."
            ) from None


class SearchKind(Enum):
    """Entity kinds served by the search endpoints."""

    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"

    @property
    def path(self) -> str:
        return f"/search/1/{self.value}"


class LookupKind(Enum):
    """Entity kinds served by the lookup endpoint, with their detail levels."""

    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"

    @property
    def uri_prefix(self) -> str:
        return f"spotify:{self.value}:"

    @property
    def detail_levels(self) -> tuple[str, ...]:
        """Accepted ``detail`` values; the first one maps to an empty ``extras``."""
        return _DETAIL_LEVELS[self]

    def qualify(self, uri: str) -> str:
        return f"{self.uri_prefix}{uri}"


_DETAIL_LEVELS: Final[dict[LookupKind, tuple[str, ...]]] = {
    LookupKind.ARTIST: ("basic", "album", "albumdetail"),
    LookupKind.ALBUM: ("basic", "track", "trackdetail"),
    LookupKind.TRACK: ("basic",),
}


@final
@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable settings shared by every request a client issues."""

    response_format: ResponseFormat
    base_uri: str = URI_BASE
    timeout: Timeout = DEFAULT_TIMEOUT

    @classmethod
    def create(
        cls,
        response_format: str | ResponseFormat = "XML",
        *,
        base_uri: str = URI_BASE,
        timeout: Timeout = DEFAULT_TIMEOUT,
    ) -> ClientConfig:
        return cls(
            response_format=ResponseFormat.parse(response_format),
            base_uri=base_uri.rstrip("/"),
            timeout=timeout,
        )

    def with_response_format(self, response_format: str | ResponseFormat) -> ClientConfig:
        """Return a copy using ``response_format``; ``self`` is left untouched."""
        return replace(self, response_format=ResponseFormat.parse(response_format))


@final
class _NotFound:
    """Falsy marker returned when the service answers 404."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final[_NotFound] = _NotFound()
NotFound = _NotFound


__all__ = [
    "ClientConfig",
    "DEFAULT_TIMEOUT",
    "JSONValue",
    "LOOKUP_PATH",
    "LookupKind",
    "NOT_FOUND",
    "NotFound",
    "ParsedResult",
    "QueryParams",
    "ResponseFormat",
    "SearchKind",
    "Timeout",
    "URI_BASE",
]
