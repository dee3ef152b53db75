"""Provider/runtime configuration for the text and image layers.

Architectural role:
    Centralizes endpoint, model, and credential-storage settings for
    `brandgen.llm`, `brandgen.image`, and `brandgen.credentials`.

Model call flow integration:
    - `llm.service.generate_answer` consumes `TEXT_MODEL` and `TEXT_MAX_TOKENS`.
    - `llm.client.send_request` consumes `ANTHROPIC_URL` and `ANTHROPIC_VERSION`.
    - `image.service.generate_image` consumes the `IMAGE_*` settings.

Determinism:
    Deterministic for a fixed process environment. Values are resolved once at
    import time after `.env` has been loaded.

Failure behavior:
    Malformed numeric settings fall back to their defaults instead of failing
    at import time.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch such as `DEBUG=true` from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str):
    """Read an optional positive float; unset, empty, or invalid -> `None`."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


# Diagnostic logging switch consumed by the API/CLI adapters.
DEBUG = _env_flag("DEBUG")

# No timeout unless explicitly configured; calls run to completion or failure.
REQUEST_TIMEOUT = _env_float("BRANDGEN_REQUEST_TIMEOUT")

# Text generation (Anthropic Messages API).
ANTHROPIC_URL = os.getenv("ANTHROPIC_URL", "https://api.anthropic.com/v1/messages")
ANTHROPIC_VERSION = os.getenv("ANTHROPIC_VERSION", "2023-06-01")
TEXT_MODEL = os.getenv("TEXT_MODEL", "claude-sonnet-4-20250514")
TEXT_MAX_TOKENS = _env_int("TEXT_MAX_TOKENS", 300)


# Image generation provider settings consumed by `brandgen.image` modules.
OPENAI_IMAGES_URL = os.getenv(
    "OPENAI_IMAGES_URL",
    "https://api.openai.com/v1/images/generations",
)
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "dall-e-3")
IMAGE_SIZE = os.getenv("IMAGE_SIZE", "1024x1024")
IMAGE_QUALITY = os.getenv("IMAGE_QUALITY", "standard")
IMAGE_COUNT = 1


# Credential storage consumed by `brandgen.credentials.build_default_store`.
KEY_DIR = os.getenv("BRANDGEN_KEY_DIR", "config")
KEYS_FROM_ENV = _env_flag("BRANDGEN_KEYS_FROM_ENV")
