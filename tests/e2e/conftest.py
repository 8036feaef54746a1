"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from devforum.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over an app wired to in-memory persistence."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def signup(client):
    """Register a user and return (auth headers, user_id)."""

    def _signup(username: str) -> tuple[dict[str, str], str]:
        response = client.post(
            "/auth/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": "s3cret-pass",
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user_id"]

    return _signup


@pytest.fixture
def ask(client):
    """Post a question as the given user and return its ID."""

    def _ask(headers: dict[str, str], tags: list[str] | None = None) -> str:
        response = client.post(
            "/questions",
            json={
                "title": "How do I reverse a list?",
                "body": "Looking for the idiomatic way.",
                "tags": tags or ["python"],
            },
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["question_id"]

    return _ask
