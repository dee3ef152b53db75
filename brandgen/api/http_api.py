"""
HTTP API adapter for the brand generator.

Architectural role:
- Expose the session state machine as JSON endpoints a browser page can drive.
- Enforce adapter-level input validation through pydantic request models.
- Delegate every transition to `brandgen.core.session.BrandSession`.
- Normalize failures to `{"error": ..., "session": ...}` JSON responses.

Endpoint responsibilities:
- `GET /v1/session`: current view state, brand, product, loading message.
- `GET|PUT /v1/credentials`, `DELETE /v1/credentials/{kind}`: key management.
- `POST /v1/brand`: submit a business description.
- `POST /v1/brand/regenerate`: new brand for the held description.
- `POST /v1/brand/flagship`: generate or regenerate the flagship product.
- `POST /v1/brand/reset`: start over.

Error handling strategy:
- `BrandGenError` subclasses map to their `status_code` (400, 409, 428, 502).
- Unexpected exceptions follow FastAPI default handling.

Side effects:
- Key management writes through the configured `SecretStore`.
- Emits debug logs only when `DEBUG == "true"`; secrets are never logged.

Concurrency:
- One session per application instance. Orchestrations await blocking HTTP
  calls in worker threads, so `GET /v1/session` stays responsive and reports
  the `loading` view while a request is in flight.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from brandgen.core.errors import BrandGenError
from brandgen.core.session import BrandSession
from brandgen.credentials import CredentialKind, build_default_store
from brandgen.llm.provider_config import DEBUG


logger = logging.getLogger(__name__)


# ============================================================
# Request Schemas
# ============================================================

class BrandRequest(BaseModel):
    description: str


class CredentialsRequest(BaseModel):
    """Keys to store; an empty string clears, an omitted field is left untouched."""

    text_key: Optional[str] = None
    image_key: Optional[str] = None


# ============================================================
# Application Factory
# ============================================================

def create_app(session: Optional[BrandSession] = None) -> FastAPI:
    """Build the FastAPI application around one `BrandSession`.

    Args:
        session: Session to serve; defaults to one backed by the configured
            key-file store.
    """
    if DEBUG:
        logging.basicConfig(level=logging.DEBUG)

    app = FastAPI(title="brandgen")
    app.state.session = session or BrandSession(build_default_store())

    def get_session(request: Request) -> BrandSession:
        return request.app.state.session

    @app.exception_handler(BrandGenError)
    async def brandgen_error_handler(request: Request, exc: BrandGenError):
        current = get_session(request)
        if DEBUG:
            logger.debug("Request %s failed: %r", request.url.path, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc), "session": current.snapshot()},
        )

    # ============================================================
    # Session
    # ============================================================

    @app.get("/v1/session")
    def read_session(request: Request):
        return get_session(request).snapshot()

    # ============================================================
    # Credentials
    # ============================================================

    @app.get("/v1/credentials")
    def read_credentials(request: Request):
        return get_session(request).credential_status()

    @app.put("/v1/credentials")
    def save_credentials(body: CredentialsRequest, request: Request):
        current = get_session(request)
        current.save_credentials(text_key=body.text_key, image_key=body.image_key)
        return current.credential_status()

    @app.delete("/v1/credentials/{kind}")
    def clear_credential(kind: str, request: Request):
        try:
            credential = CredentialKind(kind)
        except ValueError:
            return JSONResponse(status_code=404, content={"error": f"Unknown credential: {kind}"})

        current = get_session(request)
        current.clear_credential(credential)
        return current.credential_status()

    # ============================================================
    # Brand / Flagship
    # ============================================================

    @app.post("/v1/brand")
    async def submit_brand(body: BrandRequest, request: Request):
        current = get_session(request)
        await current.submit(body.description)
        return current.snapshot()

    @app.post("/v1/brand/regenerate")
    async def regenerate_brand(request: Request):
        current = get_session(request)
        await current.regenerate()
        return current.snapshot()

    @app.post("/v1/brand/flagship")
    async def flagship_product(request: Request):
        current = get_session(request)
        await current.request_flagship()
        return current.snapshot()

    @app.post("/v1/brand/reset")
    def start_over(request: Request):
        current = get_session(request)
        current.start_over()
        return current.snapshot()

    return app


app = create_app()
