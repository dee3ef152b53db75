"""OpenAI Images HTTP client.

Processing flow:
    1. Attach the caller-supplied key as a bearer token.
    2. Submit the JSON payload to `OPENAI_IMAGES_URL`.
    3. Return the parsed JSON response or raise on non-2xx status.

Image handling:
    - Only URLs are returned upstream; image bytes are never downloaded.
    - No Base64 decoding, no temporary files.

Error handling strategy:
    - Transport exceptions and non-2xx responses raise `ImageGenerationError`.
    - The provider's `error.message` is used when present.

Security considerations:
    - The key only ever travels in the `Authorization` header; it is not logged.
"""

import logging

import requests

from brandgen.core.errors import ImageGenerationError, provider_error_message
from brandgen.llm.provider_config import OPENAI_IMAGES_URL, REQUEST_TIMEOUT


logger = logging.getLogger(__name__)


def send_image_request(
    payload: dict,
    api_key: str,
    default_error: str = "Failed to generate image",
) -> dict:
    """Send an image-generation request to the images endpoint.

    Args:
        payload: Provider JSON payload (model/prompt/n/size/quality).
        api_key: Image-service secret.
        default_error: Message used when the provider gives no error detail.

    Returns:
        Parsed JSON response from provider.

    Error handling:
        - Transport failure -> `ImageGenerationError`
        - Non-2xx HTTP response -> `ImageGenerationError`
        - Non-JSON success body -> `ImageGenerationError`
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            OPENAI_IMAGES_URL,
            json=payload,
            headers=headers,
            timeout=REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as err:
        logger.warning("Image request failed in transit: %s", err.__class__.__name__)
        raise ImageGenerationError(default_error) from err

    if not response.ok:
        logger.warning("Image request failed with status %s", response.status_code)
        raise ImageGenerationError(provider_error_message(response, default_error))

    try:
        return response.json()
    except ValueError as err:
        raise ImageGenerationError(default_error) from err
