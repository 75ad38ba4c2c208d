"""Where: src/spotimeta/platform/logging/handlers.py
What: Rich console handler that styles structured request events.
Why: Keep request/response traces readable when the CLI runs verbosely.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RequestEventRichHandler(RichHandler):
    """Custom Rich handler rendering ``request_event`` records compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "request.start": ("🌐", "cyan"),
        "request.complete": ("✅", "green"),
        "request.not_found": ("🔍", "yellow"),
        "request.error": ("❌", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "request.start": "GET ",
        "request.complete": "Response ",
        "request.not_found": "Not found ",
        "request.error": "Failed ",
    }
    _VALUE_LIMIT: ClassVar[int] = 40

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _format_params(cls, params: Mapping[str, object]) -> str:
        """Render query parameters as ``k=v`` pairs, clipping long values."""

        parts: list[str] = []
        for key, value in params.items():
            rendered = str(value)
            if len(rendered) > cls._VALUE_LIMIT:
                rendered = rendered[: cls._VALUE_LIMIT - 1] + "…"
            parts.append(f"{key}={rendered!r}" if rendered == "" else f"{key}={rendered}")
        return ", ".join(parts)

    def _render_request_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured request events with dedicated styling."""

        event = getattr(record, "request_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        url = getattr(record, "url", None)
        if url:
            _ = body.append(str(url), style=Style(color="white"))

        details: list[str] = []
        params = getattr(record, "params", None)
        if event == "request.start" and isinstance(params, Mapping) and params:
            details.append(self._format_params(params))

        status = getattr(record, "status", None)
        if isinstance(status, int) and event != "request.start":
            details.append(f"status={status}")

        duration_ms = getattr(record, "duration_ms", None)
        if event == "request.complete" and isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")

        error_message = getattr(record, "error_message", None)
        if event == "request.error" and error_message:
            details.append(str(error_message))

        if details:
            _ = body.append(" (" + "; ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for request events."""

        request_text = self._render_request_message(record)
        if request_text is not None:
            return request_text

        return super().render_message(record, message)


__all__ = ["RequestEventRichHandler"]
