"""Command line interface package."""

from spotimeta.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
