import os
import stat

import pytest

from brandgen.credentials import CredentialKind, KeyFileSecretStore, MemorySecretStore, missing_credentials


@pytest.fixture(params=["memory", "keyfile"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemorySecretStore()
    return KeyFileSecretStore(str(tmp_path / "keys"))


def test_get_set_clear(store):
    assert store.get(CredentialKind.TEXT) is None

    store.set(CredentialKind.TEXT, "  sk-ant-123  ")
    assert store.get(CredentialKind.TEXT) == "sk-ant-123"
    assert store.get(CredentialKind.IMAGE) is None

    store.clear(CredentialKind.TEXT)
    assert store.get(CredentialKind.TEXT) is None


def test_blank_value_is_equivalent_to_clear(store):
    store.set(CredentialKind.IMAGE, "sk-openai")
    store.set(CredentialKind.IMAGE, "   ")
    assert store.get(CredentialKind.IMAGE) is None


def test_clear_absent_key_is_a_no_op(store):
    store.clear(CredentialKind.IMAGE)
    assert store.get(CredentialKind.IMAGE) is None


def test_missing_credentials_lists_absent_kinds(store):
    assert missing_credentials(store) == [CredentialKind.TEXT, CredentialKind.IMAGE]
    store.set(CredentialKind.TEXT, "t")
    assert missing_credentials(store) == [CredentialKind.IMAGE]


def test_key_files_are_named_per_credential_and_private(tmp_path):
    store = KeyFileSecretStore(str(tmp_path))
    store.set(CredentialKind.TEXT, "sk-ant")

    path = tmp_path / "anthropic.key"
    assert path.read_text(encoding="utf-8") == "sk-ant"
    if os.name == "posix":
        assert stat.S_IMODE(path.stat().st_mode) == 0o600


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_overwriting_key_file_restores_private_mode(tmp_path):
    path = tmp_path / "openai.key"
    path.write_text("old", encoding="utf-8")
    path.chmod(0o644)

    KeyFileSecretStore(str(tmp_path)).set(CredentialKind.IMAGE, "sk-new")

    assert path.read_text(encoding="utf-8") == "sk-new"
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_env_fallback_only_when_enabled(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")

    assert KeyFileSecretStore(str(tmp_path)).get(CredentialKind.IMAGE) is None
    assert KeyFileSecretStore(str(tmp_path), env_fallback=True).get(CredentialKind.IMAGE) == "sk-from-env"


def test_key_file_takes_precedence_over_env(tmp_path, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-from-env")
    store = KeyFileSecretStore(str(tmp_path), env_fallback=True)
    store.set(CredentialKind.TEXT, "sk-from-file")

    assert store.get(CredentialKind.TEXT) == "sk-from-file"


def test_credential_kind_env_names():
    assert CredentialKind.TEXT.env_var == "ANTHROPIC_API_KEY"
    assert CredentialKind.IMAGE.env_var == "OPENAI_API_KEY"
