"""Image service used by the brand and product orchestrators.

Role in pipeline:
    - Receives a finished prompt from orchestration.
    - Builds the fixed single-image payload (`IMAGE_MODEL`, `IMAGE_SIZE`,
      `IMAGE_QUALITY`, `n=1`).
    - Returns the URL of the first generated image.

Error handling strategy:
    - Exceptions from the client are propagated unchanged.
    - A success body without `data[0].url` raises `ImageGenerationError`.
"""

from brandgen.core.errors import ImageGenerationError
from brandgen.image.client import send_image_request
from brandgen.llm.provider_config import (
    IMAGE_COUNT,
    IMAGE_MODEL,
    IMAGE_QUALITY,
    IMAGE_SIZE,
)


def generate_image(prompt: str, api_key: str, default_error: str = "Failed to generate image") -> str:
    """Generate one image and return its URL.

    Args:
        prompt: Text prompt for generation.
        api_key: Image-service secret.
        default_error: Fallback message when the provider gives no detail.

    Returns:
        URL of the generated image, used directly for display.
    """
    payload = {
        "model": IMAGE_MODEL,
        "prompt": prompt,
        "n": IMAGE_COUNT,
        "size": IMAGE_SIZE,
        "quality": IMAGE_QUALITY,
    }

    data = send_image_request(payload, api_key, default_error=default_error)

    images = data.get("data") if isinstance(data, dict) else None
    if not images or not isinstance(images[0], dict) or not images[0].get("url"):
        raise ImageGenerationError(default_error)

    return images[0]["url"]
