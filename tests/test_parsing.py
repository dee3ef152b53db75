import pytest

from brandgen.core.errors import ParseError
from brandgen.llm.parsing import extract_json_object, find_json_object, require_string_fields


def test_extracts_object_wrapped_in_prose():
    text = 'Here you go!\n{"name": "PawPath", "tagline": "Walk happy."}\nEnjoy.'
    assert extract_json_object(text) == {"name": "PawPath", "tagline": "Walk happy."}


def test_extracts_object_inside_code_fence():
    text = '```json\n{\n  "name": "Brewly",\n  "tagline": "Sip smarter."\n}\n```'
    assert extract_json_object(text)["name"] == "Brewly"


def test_stops_at_matching_brace_instead_of_last_brace():
    text = '{"name": "A", "tagline": "B"} and also {not json}'
    assert find_json_object(text) == '{"name": "A", "tagline": "B"}'
    assert extract_json_object(text) == {"name": "A", "tagline": "B"}


def test_nested_objects_are_kept_whole():
    text = 'x {"a": {"b": 1}, "c": 2} y'
    assert extract_json_object(text) == {"a": {"b": 1}, "c": 2}


def test_braces_and_escaped_quotes_inside_strings_are_ignored():
    text = '{"name": "Curly } Co", "tagline": "Say \\"hi\\" {now}"}'
    assert extract_json_object(text) == {"name": "Curly } Co", "tagline": 'Say "hi" {now}'}


@pytest.mark.parametrize("text", ["", "no json here", "{unterminated", '{"name": }'])
def test_missing_or_invalid_object_raises_parse_error(text):
    with pytest.raises(ParseError) as excinfo:
        extract_json_object(text, "Could not parse brand data")
    assert str(excinfo.value) == "Could not parse brand data"


def test_required_fields_must_be_strings():
    with pytest.raises(ParseError):
        require_string_fields({"name": "X", "tagline": 3}, ("name", "tagline"), "bad")
    with pytest.raises(ParseError):
        require_string_fields({"name": "X"}, ("name", "tagline"), "bad")


def test_required_fields_are_returned_unchanged():
    data = {"name": " Spaced ", "tagline": "T", "extra": 1}
    assert require_string_fields(data, ("name", "tagline"), "bad") == {"name": " Spaced ", "tagline": "T"}
