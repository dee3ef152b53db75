"""Presentation state machine shared by the HTTP and CLI adapters.

Views:
    `input` -> `loading` -> `results`, exactly one active at a time. `results`
    carries the independent `flagship_visible` flag.

Transitions:
    - input   --submit (valid, keys present)--> loading
    - input   --submit (keys missing)--> input, `credentials_required` raised
    - loading --success--> results (flagship hidden)
    - loading --failure--> input (error surfaced)
    - results --regenerate--> loading (same description, fresh calls)
    - results --request_flagship success--> results (flagship visible)
    - any     --start_over--> input (brand reset)

Concurrency:
    One orchestration at a time per session. A second action while one is in
    flight raises `OrchestrationInProgress`; there is no cancellation.

State ownership:
    The session is the only holder of the current `Brand`. Orchestrators receive
    it as an argument and return new immutable records.
"""

import logging
import time
from enum import Enum

from brandgen.core.engine import (
    EMPTY_DESCRIPTION_MESSAGE,
    generate_brand,
    generate_product,
)
from brandgen.core.errors import (
    BrandRequired,
    InvalidDescription,
    InvalidTransition,
    MissingCredentials,
    OrchestrationInProgress,
)
from brandgen.credentials.store import CredentialKind, missing_credentials


logger = logging.getLogger(__name__)


LOADING_MESSAGES = (
    "Brewing up something special...",
    "Consulting the brand wizards...",
    "Mixing creativity with strategy...",
    "Crafting your brand identity...",
    "Sprinkling some magic dust...",
    "Aligning the stars for your brand...",
    "Channeling entrepreneurial energy...",
    "Making it memorable...",
    "Adding that special sauce...",
    "Almost there, making it perfect...",
)
LOADING_MESSAGE_INTERVAL = 2.0

BRAND_ERROR_PREFIX = "Oops! Something went wrong: "
PRODUCT_ERROR_PREFIX = "Couldn't create the product: "


class View(str, Enum):
    INPUT = "input"
    LOADING = "loading"
    RESULTS = "results"


def loading_message_at(elapsed: float) -> str:
    """Return the rotating status line for `elapsed` seconds of loading."""
    index = int(max(elapsed, 0) // LOADING_MESSAGE_INTERVAL) % len(LOADING_MESSAGES)
    return LOADING_MESSAGES[index]


class BrandSession:
    """Single-user view state plus the held brand and product."""

    def __init__(self, store, clock=time.monotonic):
        self.store = store
        self._clock = clock

        self.view = View.INPUT
        self.description = ""
        self.brand = None
        self.product = None
        self.flagship_visible = False
        self.flagship_pending = False
        self.credentials_required = False
        self.last_error = None

        self._busy = False
        self._loading_started = None

    # =========================================================
    # CREDENTIALS
    # =========================================================

    def save_credentials(self, text_key=None, image_key=None) -> None:
        """Store provided keys; empty values clear. `None` leaves a key untouched."""
        if text_key is not None:
            self.store.set(CredentialKind.TEXT, text_key)
        if image_key is not None:
            self.store.set(CredentialKind.IMAGE, image_key)
        self.credentials_required = False

    def clear_credential(self, kind: CredentialKind) -> None:
        self.store.clear(CredentialKind(kind))

    def credential_status(self) -> dict:
        return {kind.value: bool(self.store.get(kind)) for kind in CredentialKind}

    def _keys_or_prompt(self) -> tuple:
        missing = missing_credentials(self.store)
        if missing:
            self.credentials_required = True
            logger.info("Credentials missing: %s", ", ".join(k.value for k in missing))
            raise MissingCredentials([k.value for k in missing])
        return self.store.get(CredentialKind.TEXT), self.store.get(CredentialKind.IMAGE)

    # =========================================================
    # GUARDS
    # =========================================================

    def _ensure_idle(self) -> None:
        if self._busy:
            raise OrchestrationInProgress("Hang tight, still working on the last request")

    def _ensure_view(self, *views) -> None:
        if self.view not in views:
            allowed = ", ".join(v.value for v in views)
            raise InvalidTransition(f"Not available from the {self.view.value} view (needs {allowed})")

    # =========================================================
    # BRAND FLOW
    # =========================================================

    async def submit(self, description: str):
        """Run the brand orchestration for a new description from the input view."""
        self.last_error = None
        self._ensure_idle()
        self._ensure_view(View.INPUT)

        description = (description or "").strip()
        if not description:
            raise InvalidDescription(EMPTY_DESCRIPTION_MESSAGE)

        keys = self._keys_or_prompt()
        return await self._run_brand(description, *keys)

    async def regenerate(self):
        """Re-run the brand orchestration with the held description."""
        self.last_error = None
        self._ensure_idle()
        self._ensure_view(View.RESULTS)
        if self.brand is None:
            raise BrandRequired("Nothing to regenerate yet")

        keys = self._keys_or_prompt()
        return await self._run_brand(self.brand.description, *keys)

    async def _run_brand(self, description, text_key, image_key):
        self.description = description
        self.view = View.LOADING
        self._loading_started = self._clock()
        self._busy = True

        try:
            brand = await generate_brand(description, text_key, image_key)
        except Exception as err:
            self.view = View.INPUT
            self.last_error = BRAND_ERROR_PREFIX + str(err)
            logger.warning("Brand generation failed: %s", err)
            raise
        finally:
            self._busy = False
            self._loading_started = None

        self.brand = brand
        self.product = None
        self.flagship_visible = False
        self.view = View.RESULTS
        logger.info("Brand ready: %s", brand.name)
        return brand

    # =========================================================
    # FLAGSHIP FLOW
    # =========================================================

    async def request_flagship(self):
        """Generate (or regenerate) the flagship product for the held brand."""
        self.last_error = None
        self._ensure_idle()
        self._ensure_view(View.RESULTS)

        keys = self._keys_or_prompt()

        self.flagship_pending = True
        self._busy = True

        try:
            product = await generate_product(self.brand, *keys)
        except Exception as err:
            self.last_error = PRODUCT_ERROR_PREFIX + str(err)
            logger.warning("Flagship generation failed: %s", err)
            raise
        finally:
            self.flagship_pending = False
            self._busy = False

        self.product = product
        self.flagship_visible = True
        return product

    regenerate_product = request_flagship

    # =========================================================
    # RESET / OBSERVATION
    # =========================================================

    def start_over(self) -> None:
        self._ensure_idle()
        self.view = View.INPUT
        self.description = ""
        self.brand = None
        self.product = None
        self.flagship_visible = False
        self.last_error = None

    @property
    def busy(self) -> bool:
        return self._busy

    def loading_message(self):
        if self.view is not View.LOADING or self._loading_started is None:
            return None
        return loading_message_at(self._clock() - self._loading_started)

    def snapshot(self) -> dict:
        """Plain-data view of the session for adapters."""
        return {
            "view": self.view.value,
            "description": self.description,
            "brand": self.brand.to_dict() if self.brand else None,
            "product": self.product.to_dict() if self.product and self.flagship_visible else None,
            "flagship_visible": self.flagship_visible,
            "flagship_pending": self.flagship_pending,
            "busy": self._busy,
            "loading_message": self.loading_message(),
            "credentials": self.credential_status(),
            "credentials_required": self.credentials_required,
            "error": self.last_error,
        }
