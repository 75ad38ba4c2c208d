"""Where: src/spotimeta/platform/spotify/decoders.py
What: Turn raw response bodies into JSON value trees or XML element trees.
Why: Surface malformed payloads as ``DecodeError`` instead of parser internals.
"""

from __future__ import annotations

import json
from xml.etree import ElementTree

from .errors import DecodeError
from .models import JSONValue, ParsedResult, ResponseFormat


def decode_json(body: str) -> JSONValue:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Malformed JSON response: {exc}", ResponseFormat.JSON.value) from exc


def decode_xml(body: str) -> ElementTree.Element:
    try:
        return ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise DecodeError(f"Malformed XML response: {exc}", ResponseFormat.XML.value) from exc


def decode(body: str, response_format: ResponseFormat) -> ParsedResult:
    """Decode ``body`` with the parser matching ``response_format``."""

    if response_format is ResponseFormat.JSON:
        return decode_json(body)
    return decode_xml(body)


__all__ = ["decode", "decode_json", "decode_xml"]
