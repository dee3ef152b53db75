"""Secret storage for the two service credentials.

Architectural role:
    Orchestration never touches storage directly; adapters read keys through a
    `SecretStore` and pass them into `brandgen.core.engine`. Any object with
    `get`/`set`/`clear` can replace the stores below.

Storage layout (`KeyFileSecretStore`):
    One plain-text file per credential, `<directory>/anthropic.key` and
    `<directory>/openai.key`. With `env_fallback`, a missing file resolves to
    the environment variable derived from the file stem (`ANTHROPIC_API_KEY`,
    `OPENAI_API_KEY`).

Security considerations:
    Secrets are stored unencrypted, readable by the owning user only. There is
    no expiry.
"""

import logging
import os
from enum import Enum
from typing import Protocol


logger = logging.getLogger(__name__)


class CredentialKind(str, Enum):
    """The two credentials, valued by their storage name."""

    TEXT = "anthropic"
    IMAGE = "openai"

    @property
    def env_var(self) -> str:
        return self.value.upper() + "_API_KEY"


def normalize_secret(value):
    """Trim a secret; empty or whitespace-only values become `None`."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class SecretStore(Protocol):
    """Minimal capability required by the session layer."""

    def get(self, kind: CredentialKind):
        ...

    def set(self, kind: CredentialKind, secret) -> None:
        ...

    def clear(self, kind: CredentialKind) -> None:
        ...


class MemorySecretStore:
    """Process-local store; contents are lost on exit."""

    def __init__(self, initial=None):
        self._values = {}
        for kind, secret in (initial or {}).items():
            self.set(CredentialKind(kind), secret)

    def get(self, kind: CredentialKind):
        return self._values.get(CredentialKind(kind))

    def set(self, kind: CredentialKind, secret) -> None:
        secret = normalize_secret(secret)
        if secret is None:
            self.clear(kind)
            return
        self._values[CredentialKind(kind)] = secret

    def clear(self, kind: CredentialKind) -> None:
        self._values.pop(CredentialKind(kind), None)


class KeyFileSecretStore:
    """Key-file store, one `<name>.key` file per credential."""

    def __init__(self, directory: str = "config", env_fallback: bool = False):
        self.directory = directory
        self.env_fallback = env_fallback

    def path_for(self, kind: CredentialKind) -> str:
        return os.path.join(self.directory, f"{CredentialKind(kind).value}.key")

    def get(self, kind: CredentialKind):
        """Return the stored secret, or `None` when absent.

        Resolution order:
            1. Contents of the key file.
            2. `<NAME>_API_KEY` from the environment, only with `env_fallback`.
        """
        kind = CredentialKind(kind)
        path = self.path_for(kind)

        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                secret = normalize_secret(f.read())
            if secret:
                return secret

        if self.env_fallback:
            return normalize_secret(os.getenv(kind.env_var))
        return None

    def set(self, kind: CredentialKind, secret) -> None:
        secret = normalize_secret(secret)
        if secret is None:
            self.clear(kind)
            return

        os.makedirs(self.directory, exist_ok=True)
        path = self.path_for(kind)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(secret)
        # O_CREAT's mode is ignored for files that already exist.
        os.chmod(path, 0o600)
        logger.info("Stored %s credential", CredentialKind(kind).value)

    def clear(self, kind: CredentialKind) -> None:
        path = self.path_for(kind)
        if os.path.exists(path):
            os.remove(path)
            logger.info("Cleared %s credential", CredentialKind(kind).value)


def missing_credentials(store) -> list:
    """Return the kinds that `store` currently has no secret for."""
    return [kind for kind in CredentialKind if not store.get(kind)]
