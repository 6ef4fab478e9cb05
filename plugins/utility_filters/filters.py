"""Custom Jinja2 filters: json, md5 and sha1."""

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from markupsafe import Markup

from .encoder import EncodingMode, encode
from .errors import IncompatibleContextError


class ContentType(str, Enum):
    """Output format of the place a filter's result ends up in."""

    TEXT = "text"
    HTML = "html"
    XML = "xml"
    JAVASCRIPT = "js"
    CSS = "css"
    ICAL = "ical"


# None means the value carries no declared content type of its own
JSON_CONTENT_TYPES = {None, ContentType.TEXT, ContentType.JAVASCRIPT}


@dataclass
class FilterInfo:
    """What a filter knows about its call site. Filters may update it."""

    content_type: Optional[ContentType] = None

    def __post_init__(self):
        if self.content_type is not None:
            self.content_type = ContentType(self.content_type)

    @classmethod
    def for_value(cls, value: Any) -> "FilterInfo":
        """Markup values are HTML content; everything else has no declared type."""
        if isinstance(value, Markup):
            return cls(content_type=ContentType.HTML)
        return cls()


def json_filter(value: Any, *options: str, info: Optional[FilterInfo] = None) -> Union[Markup, str]:
    """
    JSON-encode a value with per-call options.

    Returns Markup when HTML-safe mode is on (the default), so an autoescaping
    environment won't escape it a second time. Returns a plain string with
    '!html'.

    Options (case-insensitive, surrounding whitespace ignored, last one wins):
        pretty        Indent with 4 spaces, one key/element per line
        ascii         Escape all non-ASCII characters as \\uXXXX
        html          Escape <, >, &, ' and " inside strings (default)
        !html         Don't escape HTML characters; returns a plain string
        forceObjects  Encode empty lists as {} instead of []

    Unknown options are ignored.

    Markup input counts as HTML content and is rejected, so piping through
    |safe first ({{ x|safe|json }}) or encoding a {% set %} block capture in
    an autoescaping environment raises IncompatibleContextError. Encode the
    underlying data, or pass info=FilterInfo() when calling from Python.

    Args:
        value: Value to encode
        *options: Option strings
        info: Call-site information. Derived from the value when not given.

    Returns:
        Markup in HTML-safe mode, otherwise str

    Raises:
        IncompatibleContextError: If used on content that is neither text nor script
        EncodingError: If the value cannot be encoded

    Example:
        {{ data | json('pretty', 'ascii') }}
    """
    if info is None:
        info = FilterInfo.for_value(value)

    if info.content_type not in JSON_CONTENT_TYPES:
        raise IncompatibleContextError(
            f"Filter |json used in incompatible content type {info.content_type.value}. Expected text or null."
        )

    mode = EncodingMode.from_options(options)
    output = encode(value, mode)

    if not mode.html_safe:
        info.content_type = ContentType.JAVASCRIPT
        return output

    return Markup(output)


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    return str(value).encode("utf-8")


def md5_hex(value: Any) -> str:
    """
    Lower-case hex MD5 digest of a value.

    Example:
        {{ "test" | md5 }}
        Output: 098f6bcd4621d373cade4e832627b4f6
    """
    return hashlib.md5(_to_bytes(value)).hexdigest()


def sha1_hex(value: Any) -> str:
    """
    Lower-case hex SHA-1 digest of a value.

    Example:
        {{ "test" | sha1 }}
        Output: a94a8fe5ccb19ba61c4c0873d391e987982fbbd3
    """
    return hashlib.sha1(_to_bytes(value)).hexdigest()


def get_filters() -> Dict[str, Callable[..., Any]]:
    """All filters provided by this plugin, keyed by template name."""
    return {
        "json": json_filter,
        "md5": md5_hex,
        "sha1": sha1_hex,
    }


def get_functions() -> Dict[str, Callable[..., Any]]:
    """Template globals provided by this plugin. None yet."""
    return {}
