"""Image generation adapter package.

Scope:
    Provides the OpenAI Images client and the single-image service used by the
    brand (logo) and product (product photo) orchestrations.

Non-goals:
    - No download, caching, or persistence of generated images.
    - No Base64 decoding/encoding pipeline.
"""
