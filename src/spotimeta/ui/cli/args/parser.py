"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from spotimeta.config.config import Config
from spotimeta.platform.logging import logger, setup_logger
from spotimeta.platform.spotify.models import LookupKind, ResponseFormat, SearchKind
from spotimeta.ui.cli.args.options import CLIArgs, LookupArgs, SearchArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="spotimeta",
            description="Query the Spotify Metadata API for artists, albums and tracks.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--format",
            dest="response_format",
            type=str.upper,
            choices=[member.value for member in ResponseFormat],
            help="Response format to request (defaults to the configured format)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show request and response details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and results",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser(
            "search",
            help="Search artists, albums or tracks by name",
        )
        _ = search_parser.add_argument(
            "kind",
            choices=[kind.value for kind in SearchKind],
            help="Entity kind to search for",
        )
        _ = search_parser.add_argument(
            "query",
            type=str,
            help="Free-text search query",
            metavar="QUERY",
        )
        _ = search_parser.add_argument(
            "--page",
            type=int,
            default=1,
            help="Result page to request (1 or higher)",
        )

        lookup_parser = subparsers.add_parser(
            "lookup",
            help="Look up an artist, album or track by Spotify ID",
        )
        _ = lookup_parser.add_argument(
            "kind",
            choices=[kind.value for kind in LookupKind],
            help="Entity kind to look up",
        )
        _ = lookup_parser.add_argument(
            "uri",
            type=str,
            help="Spotify ID, without the spotify:<kind>: prefix",
            metavar="ID",
        )
        _ = lookup_parser.add_argument(
            "--detail",
            type=str,
            default="basic",
            help="Detail level: basic, album or albumdetail for artists; "
            "basic, track or trackdetail for albums",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        response_format = (
            ResponseFormat.parse(parsed_args.response_format)
            if parsed_args.response_format
            else None
        )
        command: str = parsed_args.command

        if command == "search":
            return SearchArgs(
                command="search",
                kind=SearchKind(parsed_args.kind),
                query=parsed_args.query,
                page=parsed_args.page,
                response_format=response_format,
                verbose=is_verbose,
                quiet=is_quiet,
                config=configuration,
            )

        if command == "lookup":
            return LookupArgs(
                command="lookup",
                kind=LookupKind(parsed_args.kind),
                uri=parsed_args.uri,
                detail=parsed_args.detail,
                response_format=response_format,
                verbose=is_verbose,
                quiet=is_quiet,
                config=configuration,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
