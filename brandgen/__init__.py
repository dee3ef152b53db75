"""brandgen: brand name, tagline, logo, and flagship product from a business idea.

Subpackages:
    - `core`: orchestration pipelines, session state machine, records, errors.
    - `llm`: text-generation configuration, transport, JSON extraction.
    - `image`: image-generation transport and service.
    - `prompting`: fixed prompt templates.
    - `credentials`: pluggable secret storage for the two service keys.
    - `api`: HTTP (FastAPI) and terminal adapters.
"""

__version__ = "0.1.0"
