"""spotimeta - client for the Spotify Metadata search and lookup API."""

from spotimeta.platform.spotify import (
    NOT_FOUND,
    ClientConfig,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    LookupKind,
    RateLimitError,
    RequestError,
    ResponseFormat,
    SearchKind,
    SpotifyMetadataClient,
    SpotimetaError,
)

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "InvalidArgumentError",
    "LookupKind",
    "NOT_FOUND",
    "RateLimitError",
    "RequestError",
    "ResponseFormat",
    "SearchKind",
    "SpotifyMetadataClient",
    "SpotimetaError",
    "__version__",
]
