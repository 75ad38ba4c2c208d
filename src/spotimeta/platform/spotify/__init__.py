"""Spotify Metadata API infrastructure package.

This package provides a minimal client for the unauthenticated Spotify
Metadata web service (``ws.spotify.com``): artist/album/track search and
URI lookups returning JSON value trees or XML element trees.
"""

from .client import SpotifyMetadataClient, build_lookup_params
from .decoders import decode, decode_json, decode_xml
from .errors import (
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RateLimitError,
    RequestError,
    SpotimetaError,
)
from .http_client import HTTPResponse, HTTPTransport, RequestsTransport
from .models import (
    NOT_FOUND,
    ClientConfig,
    LookupKind,
    NotFound,
    ParsedResult,
    ResponseFormat,
    SearchKind,
)

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "HTTPResponse",
    "HTTPTransport",
    "InvalidArgumentError",
    "LookupKind",
    "NOT_FOUND",
    "NotFound",
    "ParsedResult",
    "RateLimitError",
    "RequestError",
    "RequestsTransport",
    "ResponseFormat",
    "SearchKind",
    "SpotifyMetadataClient",
    "SpotimetaError",
    "build_lookup_params",
    "decode",
    "decode_json",
    "decode_xml",
]
