"""Error taxonomy shared by orchestration, transport, and adapter layers.

Architectural role:
    Every failure an orchestration can surface is a `BrandGenError` subclass.
    Adapters catch the base class and render `str(err)` as the single
    user-visible message; `status_code` is the HTTP status the API adapter
    answers with.

Failure handling model:
    Transport clients raise the generation errors; orchestrators let them
    propagate unchanged so that no partial result escapes.
"""


class BrandGenError(Exception):
    """Base class for all user-visible orchestration failures."""

    status_code = 500


class InvalidDescription(BrandGenError, ValueError):
    """The business description was empty or whitespace only."""

    status_code = 400


class MissingCredentials(BrandGenError):
    """One or both service keys are absent; no network call was made."""

    status_code = 428

    def __init__(self, missing=()):
        self.missing = tuple(missing)
        names = ", ".join(self.missing) or "text, image"
        super().__init__(f"API keys required: {names}")


class TextGenerationError(BrandGenError):
    """The text endpoint answered with a non-success status or failed in transit."""

    status_code = 502


class ImageGenerationError(BrandGenError):
    """The image endpoint answered with a non-success status or returned no URL."""

    status_code = 502


class ParseError(BrandGenError):
    """The text endpoint returned no extractable or parseable JSON object."""

    status_code = 502

    def __init__(self, message: str, raw_output: str = ""):
        self.raw_output = raw_output
        super().__init__(message)


class BrandRequired(BrandGenError):
    """A flagship product was requested without a generated brand."""

    status_code = 409


class InvalidTransition(BrandGenError):
    """The requested action is not available from the current view."""

    status_code = 409


class OrchestrationInProgress(BrandGenError):
    """Another orchestration is still running for this session."""

    status_code = 409


def provider_error_message(response, default: str) -> str:
    """Extract `error.message` from a provider error body.

    Both providers answer failures with `{"error": {"message": ...}}`. Bodies
    that are not JSON or lack the field yield `default`.
    """
    try:
        body = response.json()
    except ValueError:
        return default

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message.strip():
                return message.strip()
    return default
