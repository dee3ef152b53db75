"""Credential storage package.

Exposes the `SecretStore` capability, its key-file and in-memory
implementations, and `build_default_store` which wires the configured store.
"""

from brandgen.credentials.store import (
    CredentialKind,
    KeyFileSecretStore,
    MemorySecretStore,
    SecretStore,
    missing_credentials,
    normalize_secret,
)
from brandgen.llm.provider_config import KEY_DIR, KEYS_FROM_ENV


def build_default_store() -> KeyFileSecretStore:
    """Return the key-file store configured by `BRANDGEN_KEY_DIR`."""
    return KeyFileSecretStore(KEY_DIR, env_fallback=KEYS_FROM_ENV)


__all__ = [
    "CredentialKind",
    "KeyFileSecretStore",
    "MemorySecretStore",
    "SecretStore",
    "build_default_store",
    "missing_credentials",
    "normalize_secret",
]
