"""Text-generation access package.

Architectural role:
    Provides provider configuration, request-payload construction, transport,
    and JSON extraction used by orchestration to invoke the text backend.

Module split:
    - `provider_config`: environment-driven endpoint/model configuration.
    - `service`: canonical prompt-to-payload adapter.
    - `client`: Anthropic Messages HTTP transport and response parsing.
    - `parsing`: balanced JSON object extraction from model text.
"""
