"""Prompt-to-payload adapter for text generation.

Architectural role:
    Provides the canonical text-generation entrypoints used by orchestration.
    This module bridges prompt construction (`brandgen.prompting`) to transport
    (`brandgen.llm.client`) and JSON extraction (`brandgen.llm.parsing`).

Model call flow:
    prompt -> payload construction -> `client.send_request(...)` -> text
    -> (`generate_json` only) first balanced JSON object -> required fields.

Token behavior:
    Output is bounded by `TEXT_MAX_TOKENS`; prompts are not budgeted here.
"""

from brandgen.llm.client import send_request
from brandgen.llm.parsing import extract_json_object, require_string_fields
from brandgen.llm.provider_config import TEXT_MAX_TOKENS, TEXT_MODEL


def generate_answer(prompt: str, api_key: str, default_error: str = "Failed to generate text") -> str:
    """Invoke the configured model with a single user message.

    Args:
        prompt: Fully constructed prompt from the prompting layer.
        api_key: Text-service secret.
        default_error: Fallback message when the provider gives no detail.

    Returns:
        Response text.
    """
    payload = {
        "model": TEXT_MODEL,
        "max_tokens": TEXT_MAX_TOKENS,
        "messages": [
            {"role": "user", "content": prompt},
        ],
    }

    return send_request(payload, api_key, default_error=default_error)


def generate_json(
    prompt: str,
    api_key: str,
    fields,
    label: str = "response",
    default_error: str = "Failed to generate text",
) -> dict:
    """Invoke the model and return the requested string fields of its JSON reply.

    Args:
        prompt: Prompt that asks for a JSON object.
        api_key: Text-service secret.
        fields: Keys that must be present with string values.
        label: Noun used in the parse failure message ("brand", "product").
        default_error: Fallback message for transport/provider failures.

    Raises:
        TextGenerationError: provider or transport failure.
        ParseError: no parseable object, or a required field is missing.
    """
    text = generate_answer(prompt, api_key, default_error=default_error)
    message = f"Could not parse {label} data"
    data = extract_json_object(text, message)
    return require_string_fields(data, fields, message, raw_output=text)
