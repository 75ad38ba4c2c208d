"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from spotimeta.config.config import Config
from spotimeta.platform.spotify.models import LookupKind, ResponseFormat, SearchKind


@final
@dataclass(frozen=True, slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    kind: SearchKind
    query: str
    page: int
    response_format: ResponseFormat | None
    verbose: bool
    quiet: bool
    config: Config


@final
@dataclass(frozen=True, slots=True)
class LookupArgs:
    """Command line arguments for the ``lookup`` subcommand."""

    command: Literal["lookup"]
    kind: LookupKind
    uri: str
    detail: str
    response_format: ResponseFormat | None
    verbose: bool
    quiet: bool
    config: Config


CLIArgs = SearchArgs | LookupArgs

__all__ = ["CLIArgs", "LookupArgs", "SearchArgs"]
