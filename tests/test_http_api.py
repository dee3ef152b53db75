from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from brandgen.api.http_api import create_app
from brandgen.core.errors import ImageGenerationError
from brandgen.core.models import Brand, Product
from brandgen.core.session import BrandSession
from brandgen.credentials import MemorySecretStore
from brandgen.llm.provider_config import ANTHROPIC_URL
from conftest import image_payload, make_response, text_payload


PAWPATH = Brand("PawPath", "Walk happy.", "A mobile app for dog walkers", "https://img/x.png")


@pytest.fixture
def client(session):
    return TestClient(create_app(session))


def test_session_starts_in_input_view(client):
    response = client.get("/v1/session")

    assert response.status_code == 200
    data = response.json()
    assert data["view"] == "input"
    assert data["brand"] is None
    assert data["credentials"] == {"anthropic": True, "openai": True}


def test_submit_brand_end_to_end(client):
    def fake_post(url, **kwargs):
        if url == ANTHROPIC_URL:
            return make_response(200, text_payload('{"name":"PawPath","tagline":"Walk happy."}'))
        return make_response(200, image_payload("https://img/x.png"))

    with patch("requests.post", side_effect=fake_post):
        response = client.post("/v1/brand", json={"description": "A mobile app for dog walkers"})

    assert response.status_code == 200
    data = response.json()
    assert data["view"] == "results"
    assert data["flagship_visible"] is False
    assert data["brand"] == {
        "name": "PawPath",
        "tagline": "Walk happy.",
        "description": "A mobile app for dog walkers",
        "logo_url": "https://img/x.png",
    }


def test_blank_description_is_400(client):
    response = client.post("/v1/brand", json={"description": "  "})

    assert response.status_code == 400
    assert response.json()["error"] == "Tell us about your business idea first! Don't be shy."


def test_missing_credentials_is_428_and_no_requests():
    client = TestClient(create_app(BrandSession(MemorySecretStore())))

    with patch("requests.post") as mock_post:
        response = client.post("/v1/brand", json={"description": "Coffee for night owls"})

    mock_post.assert_not_called()
    assert response.status_code == 428
    body = response.json()
    assert body["session"]["view"] == "input"
    assert body["session"]["credentials_required"] is True


def test_provider_failure_is_502_and_reverts_to_input(client):
    with patch(
        "brandgen.core.session.generate_brand",
        new_callable=AsyncMock,
        side_effect=ImageGenerationError("Failed to generate logo"),
    ):
        response = client.post("/v1/brand", json={"description": "Coffee for night owls"})

    assert response.status_code == 502
    body = response.json()
    assert body["error"] == "Failed to generate logo"
    assert body["session"]["view"] == "input"
    assert body["session"]["brand"] is None
    assert body["session"]["error"] == "Oops! Something went wrong: Failed to generate logo"


def test_flagship_before_brand_is_409(client):
    assert client.post("/v1/brand/flagship").status_code == 409
    assert client.post("/v1/brand/regenerate").status_code == 409


def test_flagship_regenerate_and_reset(client):
    product = Product("A teal leash", "Walks, upgraded.", "https://img/leash.png")

    with patch("brandgen.core.session.generate_brand", new_callable=AsyncMock, return_value=PAWPATH) as mock_brand, \
            patch("brandgen.core.session.generate_product", new_callable=AsyncMock, return_value=product):
        client.post("/v1/brand", json={"description": "A mobile app for dog walkers"})

        flagship = client.post("/v1/brand/flagship").json()
        assert flagship["flagship_visible"] is True
        assert flagship["product"]["image_url"] == "https://img/leash.png"

        regenerated = client.post("/v1/brand/regenerate").json()
        assert regenerated["view"] == "results"
        assert regenerated["flagship_visible"] is False
        assert mock_brand.await_count == 2
        assert mock_brand.await_args_list[1].args[0] == "A mobile app for dog walkers"

    reset = client.post("/v1/brand/reset").json()
    assert reset["view"] == "input"
    assert reset["brand"] is None


def test_credentials_management():
    client = TestClient(create_app(BrandSession(MemorySecretStore())))

    assert client.get("/v1/credentials").json() == {"anthropic": False, "openai": False}

    response = client.put("/v1/credentials", json={"text_key": "sk-ant", "image_key": "sk-openai"})
    assert response.json() == {"anthropic": True, "openai": True}

    response = client.put("/v1/credentials", json={"image_key": ""})
    assert response.json() == {"anthropic": True, "openai": False}

    response = client.delete("/v1/credentials/anthropic")
    assert response.json() == {"anthropic": False, "openai": False}

    assert client.delete("/v1/credentials/gemini").status_code == 404


def test_secrets_are_never_echoed(client):
    body = client.get("/v1/session").text
    assert "sk-ant-test" not in body
    assert "sk-openai-test" not in body
