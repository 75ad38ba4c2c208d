"""Command line interface for spotimeta."""

import sys
from typing import final

import requests

from spotimeta.platform.logging import logger
from spotimeta.platform.spotify.client import SpotifyMetadataClient
from spotimeta.platform.spotify.errors import SpotimetaError
from spotimeta.platform.spotify.models import NOT_FOUND, NotFound, ParsedResult
from spotimeta.ui.cli.args import ArgumentParser
from spotimeta.ui.cli.args.options import CLIArgs, SearchArgs
from spotimeta.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            client = CommandProcessor._build_client(args)
            with client:
                result = CommandProcessor._run(client, args)

            display = ResultDisplay()
            if result is NOT_FOUND:
                display.show_not_found(CommandProcessor._describe(args))
                sys.exit(1)
            display.show_result(result)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except SpotimetaError as e:
            logger.error("%s", e)
            sys.exit(1)
        except requests.RequestException as e:
            logger.error("Network error while contacting Spotify: %s", e)
            sys.exit(1)

    @staticmethod
    def _build_client(args: CLIArgs) -> SpotifyMetadataClient:
        client_config = args.config.client_config()
        if args.response_format is not None:
            client_config = client_config.with_response_format(args.response_format)
        return SpotifyMetadataClient.from_config(client_config)

    @staticmethod
    def _run(client: SpotifyMetadataClient, args: CLIArgs) -> ParsedResult | NotFound:
        if isinstance(args, SearchArgs):
            return client.search(args.kind, args.query, args.page)
        return client.lookup(args.kind, args.uri, args.detail)

    @staticmethod
    def _describe(args: CLIArgs) -> str:
        if isinstance(args, SearchArgs):
            return f"{args.kind.value} search '{args.query}' (page {args.page})"
        return f"spotify:{args.kind.value}:{args.uri}"


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
