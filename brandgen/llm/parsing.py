"""JSON object extraction from free-form model output.

Models asked to "respond in JSON" often wrap the object in prose or code
fences. `extract_json_object` locates the first `{`, walks forward counting
brace depth until the matching `}`, and parses exactly that span. Braces that
appear inside JSON string literals (including escaped quotes) do not count.

Unlike a greedy `{...}` match, trailing text that happens to contain braces is
never captured.
"""

import json

from brandgen.core.errors import ParseError


def find_json_object(text: str):
    """Return the first balanced `{...}` substring of `text`, or `None`."""
    if not text:
        return None

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]

        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    return None


def extract_json_object(text: str, message: str = "Could not parse response data") -> dict:
    """Parse the first balanced JSON object embedded in `text`.

    Raises:
        ParseError: no object found, or the span is not valid JSON.
    """
    candidate = find_json_object(text)
    if candidate is None:
        raise ParseError(message, raw_output=text or "")

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as err:
        raise ParseError(message, raw_output=text) from err

    if not isinstance(parsed, dict):
        raise ParseError(message, raw_output=text)
    return parsed


def require_string_fields(data: dict, fields, message: str, raw_output: str = "") -> dict:
    """Return `{field: data[field]}` for `fields`, all of which must be strings."""
    result = {}
    for field in fields:
        value = data.get(field)
        if not isinstance(value, str):
            raise ParseError(message, raw_output=raw_output)
        result[field] = value
    return result
