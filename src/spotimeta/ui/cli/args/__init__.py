"""Command line argument handling package."""

from spotimeta.ui.cli.args.options import CLIArgs, LookupArgs, SearchArgs
from spotimeta.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "LookupArgs", "SearchArgs"]
