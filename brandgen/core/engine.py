"""Brand and flagship-product orchestration.

Architectural role:
    Provides the two pipelines used by the session layer. Each is a strictly
    sequential pair of external calls whose combined success yields one record.

Control-flow model:
    generate_brand:   guards -> text call `{name, tagline}` -> logo image call
                      -> `Brand`
    generate_product: guards -> text call `{description, pitch}` -> product
                      image call -> `Product`

Error handling strategy:
    Guards (`InvalidDescription`, `MissingCredentials`, `BrandRequired`) fire
    before any network call. Transport and parse errors propagate unchanged;
    the image call is never attempted after a failed text call, and no partial
    record is returned or cached.

Concurrency:
    Blocking HTTP calls run through `asyncio.to_thread`, so the event loop is
    only suspended at the two network boundaries. No cancellation or retry.

Side effects:
    None besides the outbound HTTP requests and log lines. Secrets are never
    logged.
"""

import asyncio
import logging

from brandgen.core.errors import BrandRequired, InvalidDescription, MissingCredentials
from brandgen.core.models import Brand, Product
from brandgen.credentials.store import CredentialKind, normalize_secret
from brandgen.image.service import generate_image
from brandgen.llm.service import generate_json
from brandgen.prompting.prompt_builder import (
    build_brand_prompt,
    build_logo_prompt,
    build_product_image_prompt,
    build_product_prompt,
)


logger = logging.getLogger(__name__)

EMPTY_DESCRIPTION_MESSAGE = "Tell us about your business idea first! Don't be shy."

BRAND_FIELDS = ("name", "tagline")
PRODUCT_FIELDS = ("description", "pitch")


def require_credentials(text_key, image_key) -> tuple:
    """Return both keys trimmed, or raise `MissingCredentials` naming the absent ones."""
    text_key = normalize_secret(text_key)
    image_key = normalize_secret(image_key)

    missing = []
    if not text_key:
        missing.append(CredentialKind.TEXT.value)
    if not image_key:
        missing.append(CredentialKind.IMAGE.value)
    if missing:
        raise MissingCredentials(missing)

    return text_key, image_key


async def generate_brand(description: str, text_key, image_key) -> Brand:
    """Generate a brand name, tagline, and logo for a business description.

    Args:
        description: Non-empty business description.
        text_key: Text-service secret.
        image_key: Image-service secret.

    Returns:
        A new `Brand` whose name/tagline are exactly the parsed JSON values.

    Raises:
        InvalidDescription: description empty after trimming.
        MissingCredentials: either key absent.
        TextGenerationError / ParseError: step 1 failed; step 2 not attempted.
        ImageGenerationError: step 2 failed; step 1 results are discarded.
    """
    description = (description or "").strip()
    if not description:
        raise InvalidDescription(EMPTY_DESCRIPTION_MESSAGE)
    text_key, image_key = require_credentials(text_key, image_key)

    logger.info("Generating brand text")
    brand_text = await asyncio.to_thread(
        generate_json,
        build_brand_prompt(description),
        text_key,
        BRAND_FIELDS,
        "brand",
        "Failed to generate brand text",
    )

    logger.info("Generating logo for %r", brand_text["name"])
    logo_url = await asyncio.to_thread(
        generate_image,
        build_logo_prompt(brand_text["name"], description),
        image_key,
        "Failed to generate logo",
    )

    return Brand(
        name=brand_text["name"],
        tagline=brand_text["tagline"],
        description=description,
        logo_url=logo_url,
    )


async def generate_product(brand: Brand, text_key, image_key) -> Product:
    """Invent and render a flagship product for an existing brand.

    Raises:
        BrandRequired: no brand, or the brand has an empty description.
        MissingCredentials: either key absent.
        TextGenerationError / ParseError / ImageGenerationError: as for
            `generate_brand`.
    """
    if brand is None or not (brand.description or "").strip():
        raise BrandRequired("Generate a brand before asking for its flagship product")
    text_key, image_key = require_credentials(text_key, image_key)

    logger.info("Generating flagship product for %r", brand.name)
    concept = await asyncio.to_thread(
        generate_json,
        build_product_prompt(brand.name, brand.tagline, brand.description),
        text_key,
        PRODUCT_FIELDS,
        "product",
        "Failed to generate product idea",
    )

    image_url = await asyncio.to_thread(
        generate_image,
        build_product_image_prompt(concept["description"]),
        image_key,
        "Failed to generate product image",
    )

    return Product(
        description=concept["description"],
        pitch=concept["pitch"],
        image_url=image_url,
    )
