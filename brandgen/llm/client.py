"""Anthropic Messages transport client for text generation.

Architectural role:
    Executes the HTTP request against the text provider and normalizes the
    response body to plain text.

Model invocation flow:
    `service.generate_answer` -> `send_request(payload, api_key)` -> POST
    `ANTHROPIC_URL` -> concatenated `content[*].text` blocks.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted exactly once.

Failure handling model:
    Non-2xx responses, transport exceptions, and bodies without text content all
    raise `TextGenerationError`. The message is taken from the provider error
    payload when present, otherwise from `default_error`.
"""

import logging

import requests

from brandgen.core.errors import TextGenerationError, provider_error_message
from brandgen.llm.provider_config import (
    ANTHROPIC_URL,
    ANTHROPIC_VERSION,
    REQUEST_TIMEOUT,
)


logger = logging.getLogger(__name__)


def _extract_text(data) -> str:
    """Join the text blocks of a Messages API response body."""
    if not isinstance(data, dict):
        return ""

    parts = []
    for block in data.get("content") or []:
        if isinstance(block, dict) and block.get("type", "text") == "text":
            text = block.get("text")
            if isinstance(text, str):
                parts.append(text)
    return "".join(parts)


def send_request(
    payload: dict,
    api_key: str,
    default_error: str = "Failed to generate text",
) -> str:
    """Send one Messages request and return the response text.

    Args:
        payload: Anthropic request body (`model`, `max_tokens`, `messages`).
        api_key: Caller-supplied secret for the `x-api-key` header.
        default_error: Message used when the provider gives no error detail.

    Returns:
        Response text with surrounding whitespace stripped.

    Failure scenarios:
        - `requests` transport exceptions -> `TextGenerationError`.
        - Non-2xx status -> `TextGenerationError` with provider message.
        - 2xx body without any text block -> `TextGenerationError`.
    """
    headers = {
        "x-api-key": api_key,
        "anthropic-version": ANTHROPIC_VERSION,
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            ANTHROPIC_URL,
            headers=headers,
            json=payload,
            timeout=REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as err:
        logger.warning("Text request failed in transit: %s", err.__class__.__name__)
        raise TextGenerationError(default_error) from err

    if not response.ok:
        message = provider_error_message(response, default_error)
        logger.warning("Text request failed with status %s", response.status_code)
        raise TextGenerationError(message)

    try:
        data = response.json()
    except ValueError as err:
        raise TextGenerationError(default_error) from err

    text = _extract_text(data)
    if not text.strip():
        raise TextGenerationError(default_error)

    logger.debug("Text response received (%d chars)", len(text))
    return text.strip()
