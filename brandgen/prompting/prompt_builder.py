"""Prompt assembly helpers used by core orchestration.

This module only builds prompt strings from already validated inputs. Credential
checks, model invocation, and response parsing happen outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - User text is interpolated as a raw string.
    - The JSON reply contract is instruction-led; `brandgen.llm.parsing`
      enforces it on the way back.
"""


# =========================================================
# BRAND TEXT PROMPT
# =========================================================
# Asks for `{name, tagline}` as a bare JSON object.

def build_brand_prompt(description: str) -> str:
    """Build the name/tagline prompt for a business description."""
    return (
        "You're a creative branding expert with a playful spirit. "
        "Based on this business idea, generate a brand name and tagline.\n\n"
        f'Business idea: "{description.strip()}"\n\n'
        "Create something memorable, catchy, and fitting for the business. "
        "Match the energy and playfulness of how they described their idea. "
        "If they're serious, be polished. If they're fun, be fun!\n\n"
        "Respond in JSON format only:\n"
        "{\n"
        '  "name": "The Brand Name",\n'
        '  "tagline": "A catchy tagline that captures the essence"\n'
        "}"
    )


# =========================================================
# LOGO IMAGE PROMPT
# =========================================================

def build_logo_prompt(name: str, description: str) -> str:
    """Build the logo-mark prompt from brand name and business description."""
    return (
        f'A modern, professional logo design for a brand called "{name}". '
        f"The brand is about: {description.strip()}. "
        "Style: Clean, memorable, suitable for a startup. "
        "The logo should be iconic and work well at any size. "
        "White or transparent background. "
        "No text in the image, just the logo mark/symbol."
    )


# =========================================================
# FLAGSHIP PRODUCT PROMPTS
# =========================================================
# Text prompt asks for `{description, pitch}`; `description` is then fed to
# `build_product_image_prompt` as the image subject.

def build_product_prompt(name: str, tagline: str, description: str) -> str:
    """Build the flagship-product concept prompt for an existing brand.

    Args:
        name: Brand name.
        tagline: Brand tagline.
        description: Original business description.

    Returns:
        Prompt requesting a visual product description and a one-sentence pitch.
    """
    return (
        "You're creating a flagship product for this brand:\n\n"
        f"Brand Name: {name}\n"
        f"Brand Tagline: {tagline}\n"
        f"Business: {description.strip()}\n\n"
        "Create a flagship product that would be the hero of this brand's lineup.\n\n"
        "Respond in JSON format:\n"
        "{\n"
        '  "description": "A detailed visual description for generating an image '
        'of the product (be specific about colors, materials, style)",\n'
        '  "pitch": "A one-sentence exciting pitch for this product"\n'
        "}"
    )


def build_product_image_prompt(product_description: str) -> str:
    """Build the studio product-photo prompt."""
    return (
        f"Professional product photography of: {product_description.strip()}. "
        "Shot on white background, studio lighting, high-end commercial "
        "photography style. The product should look premium and desirable."
    )
