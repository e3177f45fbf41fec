"""Shared fixtures: a fresh SQLite database per test and a stubbed Gemini endpoint."""
import json
from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from unova.config import Settings
from unova.db import PersistenceGateway
from unova.main import create_app
from unova.services.completion_client import CompletionClient


class GeminiStub:
    """Fake generateContent endpoint that records every request body."""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.reply = "Honourable delegates, here is my answer."
        self.status_code = 200
        self.payload = None  # overrides the normal candidate payload when set

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "quota exceeded"}})
        if self.payload is not None:
            return httpx.Response(200, json=self.payload)
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"role": "model", "parts": [{"text": self.reply}]}}]},
        )

    @property
    def last_body(self) -> Dict[str, Any]:
        return self.requests[-1]


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'unova-test.db'}",
        gemini_api_key="test-key",
        auth_secret="test-secret",
    )


@pytest.fixture
def gemini():
    return GeminiStub()


@pytest.fixture
def completion_client(settings, gemini):
    return CompletionClient(settings, transport=httpx.MockTransport(gemini.handler))


@pytest.fixture
def client(settings, completion_client):
    app = create_app(settings, completion_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def gateway(settings):
    gw = PersistenceGateway(settings.database_url).open()
    yield gw
    gw.close()


def sign_up(client: TestClient, username: str) -> Dict[str, str]:
    """Register a user and return bearer headers for them."""
    response = client.post(
        "/auth/sign-up",
        json={"username": username, "email": f"{username}@example.com", "password": "secret123"},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def alice(client):
    return sign_up(client, "alice")


@pytest.fixture
def bob(client):
    return sign_up(client, "bob")
