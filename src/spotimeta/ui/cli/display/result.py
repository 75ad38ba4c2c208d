"""src/spotimeta/ui/cli/display/result.py
What: Render decoded Spotify responses on the console.
Why: Keep console output formatting consistent across search and lookup.
"""

from __future__ import annotations

import copy
from typing import final
from xml.etree import ElementTree

from rich.console import Console
from rich.json import JSON
from rich.syntax import Syntax
from rich.text import Text

from spotimeta.platform.spotify.models import ParsedResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_result(self, result: ParsedResult) -> None:
        """Pretty-print a JSON value tree or an XML element tree."""

        if isinstance(result, ElementTree.Element):
            self.console.print(Syntax(self.render_xml(result), "xml", word_wrap=True))
            return
        self.console.print(JSON.from_data(result, ensure_ascii=False))

    def show_not_found(self, description: str) -> None:
        self.console.print(Text(f"No results for {description}", style="yellow"))

    @staticmethod
    def render_xml(element: ElementTree.Element) -> str:
        """Serialise ``element`` with indentation, leaving the original untouched."""

        pretty = copy.deepcopy(element)
        ElementTree.indent(pretty)
        return ElementTree.tostring(pretty, encoding="unicode")


__all__ = ["ResultDisplay"]
