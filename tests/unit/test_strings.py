import pytest
import json_parser as jp
from json_result import Ok
from json_value import String


def test_newline_escape_decoded():
    assert jp.parse('"a\\nb"') == Ok(String("a\nb"))


@pytest.mark.parametrize("escape, decoded", [
    ('\\"', '"'),
    ("\\\\", "\\"),
    ("\\/", "/"),
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
])
def test_supported_escapes(escape, decoded):
    assert jp.parse('"' + escape + '"') == Ok(String(decoded))


@pytest.mark.parametrize("escape", ["\\u0041", "\\b", "\\f", "\\q"])
def test_unsupported_escapes_rejected(escape):
    assert jp.parse('"a' + escape + 'b"').is_err()


def test_raw_control_character_rejected():
    assert jp.parse('"a\nb"').is_err()
    assert jp.parse('"a\x00b"').is_err()


def test_unterminated_string():
    assert jp.parse('"abc').is_err()
    assert jp.parse('"abc\\"').is_err()


def test_non_ascii_passes_through():
    assert jp.parse('"café ☃"') == Ok(String("café ☃"))
