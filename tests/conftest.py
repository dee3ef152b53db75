import os
from unittest.mock import MagicMock

# Keep tests independent of any developer `.env` / key files.
os.environ["BRANDGEN_KEYS_FROM_ENV"] = "false"
os.environ.pop("BRANDGEN_REQUEST_TIMEOUT", None)

import pytest

from brandgen.core.session import BrandSession
from brandgen.credentials import CredentialKind, MemorySecretStore


def make_response(status_code=200, payload=None, text=None):
    """Build a stand-in for `requests.Response`."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if payload is None:
        response.json.side_effect = ValueError("not json")
        response.text = text or ""
    else:
        response.json.return_value = payload
        response.text = text or str(payload)
    return response


def text_payload(text):
    return {"content": [{"type": "text", "text": text}]}


def image_payload(url):
    return {"data": [{"url": url}]}


@pytest.fixture
def keyed_store():
    return MemorySecretStore({
        CredentialKind.TEXT: "sk-ant-test",
        CredentialKind.IMAGE: "sk-openai-test",
    })


@pytest.fixture
def session(keyed_store):
    return BrandSession(keyed_store)
