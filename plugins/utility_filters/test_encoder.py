"""Tests for the JSON encoder behind the |json filter."""

import logging
from dataclasses import dataclass

import pytest

from .encoder import EncodingMode, encode
from .errors import EncodingError

COMPACT = EncodingMode()
RAW = EncodingMode(html_safe=False)


@dataclass
class Point:
    x: int
    y: int


@pytest.mark.parametrize(
    "options,expected",
    [
        ([], EncodingMode()),
        (["pretty"], EncodingMode(pretty=True)),
        (["ascii"], EncodingMode(ascii_safe=True)),
        (["!html"], EncodingMode(html_safe=False)),
        (["forceObjects"], EncodingMode(force_objects=True)),
        (["PRETTY", "  Ascii  "], EncodingMode(pretty=True, ascii_safe=True)),
        (["!html", "html"], EncodingMode()),
        (["html", "!html"], EncodingMode(html_safe=False)),
        (["bogus", "pretty", ""], EncodingMode(pretty=True)),
    ],
)
def test_mode_from_options(options, expected):
    """Options map onto flags regardless of case and padding; the last one wins."""
    assert EncodingMode.from_options(options) == expected


def test_mode_logs_ignored_options(caplog):
    caplog.set_level(logging.DEBUG, logger="utility_filters")

    EncodingMode.from_options(["unknownOption", "pretty"])

    assert "Ignoring unknown json option 'unknownOption'" in caplog.text
    assert "pretty" not in caplog.text


def test_encode_compact():
    assert encode({"foo": "bar", "n": [1, 2]}, COMPACT) == '{"foo":"bar","n":[1,2]}'


def test_encode_pretty():
    data = {"foo": "bar", "nested": {"key": "value"}, "list": [1, 2]}
    expected = (
        "{\n"
        '    "foo": "bar",\n'
        '    "nested": {\n'
        '        "key": "value"\n'
        "    },\n"
        '    "list": [\n'
        "        1,\n"
        "        2\n"
        "    ]\n"
        "}"
    )
    assert encode(data, EncodingMode(pretty=True)) == expected


def test_encode_scalars():
    assert encode(None, COMPACT) == "null"
    assert encode(True, COMPACT) == "true"
    assert encode(1.0, COMPACT) == "1.0"
    assert encode("a/b", COMPACT) == '"a/b"'
    assert encode((1, "two"), COMPACT) == '[1,"two"]'


def test_encode_html_safe_escapes_inside_strings():
    data = {"html": '<script>alert("XSS")</script>'}
    assert encode(data, COMPACT) == (
        '{"html":"\\u003Cscript\\u003Ealert(\\u0022XSS\\u0022)\\u003C/script\\u003E"}'
    )


def test_encode_html_safe_escapes_ampersand_apostrophe_and_keys():
    assert encode({"<k>": "Tom & Jerry's"}, COMPACT) == '{"\\u003Ck\\u003E":"Tom \\u0026 Jerry\\u0027s"}'


def test_encode_html_safe_keeps_other_escapes():
    # A trailing backslash must not be mistaken for an escaped quote
    assert encode({"path": "C:\\", "tab": "\t"}, COMPACT) == '{"path":"C:\\\\","tab":"\\t"}'


def test_encode_html_unsafe():
    data = {"html": '<script>alert("XSS")</script>'}
    assert encode(data, RAW) == '{"html":"<script>alert(\\"XSS\\")</script>"}'


def test_encode_unicode_literal_by_default():
    assert encode({"text": "Příliš žluťoučký kůň"}, COMPACT) == '{"text":"Příliš žluťoučký kůň"}'


def test_encode_ascii_safe():
    assert encode({"text": "Příliš"}, EncodingMode(ascii_safe=True)) == '{"text":"P\\u0159\\u00edli\\u0161"}'


def test_encode_ascii_safe_uses_surrogate_pairs():
    assert encode("😀", EncodingMode(ascii_safe=True)) == '"\\ud83d\\ude00"'


def test_encode_ascii_and_html_compose():
    result = encode({"text": "<ř>"}, EncodingMode(ascii_safe=True))
    assert result == '{"text":"\\u003C\\u0159\\u003E"}'


@pytest.mark.parametrize("mode", [COMPACT, RAW, EncodingMode(ascii_safe=True)])
def test_encode_escapes_line_terminators(mode):
    result = encode(chr(0x2028) + chr(0x2029), mode).lower()
    assert result == '"\\u2028\\u2029"'


def test_encode_force_objects():
    data = {"empty": [], "items": [1, 2], "nested": {"inner": ()}, "map": {}}
    result = encode(data, EncodingMode(force_objects=True))
    assert result == '{"empty":{},"items":[1,2],"nested":{"inner":{}},"map":{}}'


def test_encode_force_objects_top_level():
    assert encode([], EncodingMode(force_objects=True)) == "{}"
    assert encode([], COMPACT) == "[]"


def test_encode_dataclass():
    assert encode({"point": Point(1, 2)}, COMPACT) == '{"point":{"x":1,"y":2}}'


def test_encode_dataclass_force_objects():
    @dataclass
    class Bag:
        items: list

    assert encode(Bag(items=[]), EncodingMode(force_objects=True)) == '{"items":{}}'


@pytest.mark.parametrize(
    "value,message",
    [
        (float("nan"), "Out of range float"),
        ({"inf": float("inf")}, "Out of range float"),
        ({1, 2}, "not JSON serializable"),
        (object(), "not JSON serializable"),
        ({(1, 2): "tuple key"}, "keys must be"),
    ],
)
def test_encode_unserializable(value, message):
    with pytest.raises(EncodingError, match=message) as excinfo:
        encode(value, COMPACT)

    assert isinstance(excinfo.value.__cause__, (TypeError, ValueError))


def test_encode_circular_reference():
    looped = {"self": None}
    looped["self"] = [looped]

    with pytest.raises(EncodingError, match="Circular reference detected"):
        encode(looped, COMPACT)


def test_encode_shared_reference_is_not_circular():
    shared = [1]
    assert encode({"a": shared, "b": shared}, COMPACT) == '{"a":[1],"b":[1]}'
