"""
JSON encoding for the |json filter.

Wraps the standard json module with the four switches the filter exposes:
pretty printing, ASCII-only output, HTML-safe escaping and forcing empty
sequences into objects.
"""

import dataclasses
import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import EncodingError

_log = logging.getLogger(__name__)

# Option name -> (EncodingMode field, value it sets)
OPTIONS = {
    "pretty": ("pretty", True),
    "ascii": ("ascii_safe", True),
    "html": ("html_safe", True),
    "!html": ("html_safe", False),
    "forceobjects": ("force_objects", True),
}

# A complete JSON string literal as emitted by json.dumps
_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"')

# Inside a string literal: either an escape sequence or a character HTML cares about
_HTML_SENSITIVE = re.compile(r"\\.|[<>&']")

# JavaScript treats these as line breaks even inside string literals
_LINE_TERMINATORS = {
    chr(0x2028): "\\u2028",
    chr(0x2029): "\\u2029",
}


@dataclass(frozen=True)
class EncodingMode:
    """Encoder switches resolved from the filter's option strings."""

    pretty: bool = False
    ascii_safe: bool = False
    html_safe: bool = True
    force_objects: bool = False

    @classmethod
    def from_options(cls, options: Iterable[str]) -> "EncodingMode":
        """
        Resolve option strings into an EncodingMode.

        Options are matched case-insensitively after trimming whitespace.
        When the same flag is given more than once, the last occurrence wins.

        Args:
            options: Option strings as passed to the filter, e.g. ("pretty", "!html")

        Returns:
            The resolved EncodingMode
        """
        flags = {}
        for option in options:
            name = str(option).strip().lower()
            if name not in OPTIONS:
                # Ignore unknown options for forward compatibility
                _log.debug(f"Ignoring unknown json option {option!r}")
                continue
            field, value = OPTIONS[name]
            flags[field] = value
        return cls(**flags)


def _hex_escape(char: str) -> str:
    return "\\u%04X" % ord(char)


def _replace_html_sensitive(match: re.Match) -> str:
    token = match.group()
    if token == '\\"':
        return _hex_escape('"')
    if len(token) == 2:
        # Any other escape sequence is already safe
        return token
    return _hex_escape(token)


def _escape_html(output: str) -> str:
    return _STRING_LITERAL.sub(
        lambda literal: _HTML_SENSITIVE.sub(_replace_html_sensitive, literal.group()),
        output,
    )


def _prepare(value: Any, force_objects: bool, active: set[int]) -> Any:
    """
    Turn value into something json.dumps understands.

    Dataclass instances become dicts of their fields and, with force_objects,
    empty lists and tuples become empty dicts. Containers currently being
    walked are tracked in `active` so self-references fail early.
    """
    is_dataclass = dataclasses.is_dataclass(value) and not isinstance(value, type)
    if not (is_dataclass or isinstance(value, (Mapping, list, tuple))):
        return value

    if force_objects and isinstance(value, (list, tuple)) and not value:
        return {}

    marker = id(value)
    if marker in active:
        raise EncodingError("Circular reference detected")
    active.add(marker)
    try:
        if is_dataclass:
            value = {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
        if isinstance(value, Mapping):
            return {key: _prepare(item, force_objects, active) for key, item in value.items()}
        return [_prepare(item, force_objects, active) for item in value]
    finally:
        active.discard(marker)


def encode(value: Any, mode: EncodingMode) -> str:
    """
    Encode a value to JSON according to mode.

    Args:
        value: Any JSON-serializable value (dicts, lists, tuples, scalars, dataclasses)
        mode: Resolved encoder switches

    Returns:
        The JSON document as a string

    Raises:
        EncodingError: If the value cannot be represented as JSON
    """
    try:
        prepared = _prepare(value, mode.force_objects, set())
        output = json.dumps(
            prepared,
            ensure_ascii=mode.ascii_safe,
            allow_nan=False,
            indent=4 if mode.pretty else None,
            separators=(",", ": ") if mode.pretty else (",", ":"),
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingError(str(e)) from e

    if not mode.ascii_safe:
        for char, escaped in _LINE_TERMINATORS.items():
            output = output.replace(char, escaped)

    if mode.html_safe:
        output = _escape_html(output)

    return output
