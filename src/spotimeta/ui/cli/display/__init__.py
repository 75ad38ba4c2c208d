"""Display helpers for the command line interface."""

from spotimeta.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
