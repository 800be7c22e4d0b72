"""Helpers for driving the API as different signed-in accounts."""

from uuid import uuid4

from fastapi import FastAPI
from fastapi.testclient import TestClient

from atelier.config import Settings
from atelier.domain.service import JWTService


def signed_in_client(app: FastAPI, account_id: str | None = None) -> TestClient:
    """Create a test client carrying an auth cookie for ``account_id``.

    A fresh account ID is generated when none is given.
    """
    jwt_service = JWTService(Settings().auth)
    token = jwt_service.create_token(account_id or str(uuid4()))
    return TestClient(app, cookies={"auth_token": token})


def create_account(client: TestClient, name: str) -> dict:
    """Initialize the client's account and return the response body."""
    response = client.post("/accounts", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


def register_artwork(client: TestClient, title: str = "Untitled") -> dict:
    """Register an artwork owned by the client's account."""
    response = client.post(
        "/content",
        json={
            "content_type": "artwork",
            "title": title,
            "media_url": f"https://media.example/{uuid4()}.png",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()
