"""End-to-end tests for following accounts."""

from uuid import uuid4

import pytest

from atelier.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.client import create_account, signed_in_client


@pytest.fixture
def app():
    """Create an app with its own in-memory persistence."""
    return create_app(container=build_test_container())


class TestFollowFlow:
    """Follow, unfollow and connection listings."""

    def test_follow_notifies_and_lists(self, app):
        # Arrange
        fan = signed_in_client(app)
        artist = signed_in_client(app)
        fan_account = create_account(fan, "Fan")
        artist_account = create_account(artist, "Artist")
        follow_url = f"/accounts/{artist_account['account_id']}/follow"

        # Act
        response = fan.post(follow_url, json={"currently_following": False})

        # Assert
        assert response.status_code == 200
        assert response.json()["following"] is True
        assert response.json()["outcome"] == "followed"

        followers = artist.get(
            f"/accounts/{artist_account['account_id']}/followers"
        ).json()
        assert [i["account_id"] for i in followers["items"]] == [
            fan_account["account_id"]
        ]

        inbox = artist.get("/notifications").json()
        assert inbox["items"][0]["kind"] == "follow"
        assert inbox["items"][0]["content_id"] is None

        stats = fan.get(f"/accounts/{artist_account['account_id']}/stats").json()
        assert stats["followers"] == 1

    def test_unfollow(self, app):
        fan = signed_in_client(app)
        artist = signed_in_client(app)
        fan_account = create_account(fan, "Fan")
        artist_account = create_account(artist, "Artist")
        follow_url = f"/accounts/{artist_account['account_id']}/follow"
        fan.post(follow_url, json={"currently_following": False})

        response = fan.post(follow_url, json={"currently_following": True})

        assert response.json()["following"] is False
        assert response.json()["outcome"] == "unfollowed"
        following = fan.get(f"/accounts/{fan_account['account_id']}/following")
        assert following.json()["items"] == []

    def test_self_follow_is_advisory(self, app):
        """Following yourself is answered with 200 and a message."""
        artist = signed_in_client(app)
        account = create_account(artist, "Artist")

        response = artist.post(
            f"/accounts/{account['account_id']}/follow",
            json={"currently_following": False},
        )

        assert response.status_code == 200
        assert response.json()["following"] is False
        assert response.json()["outcome"] is None
        assert response.json()["message"] == "Cannot follow yourself"

    def test_follow_unknown_account_is_404(self, app):
        fan = signed_in_client(app)
        create_account(fan, "Fan")

        response = fan.post(
            f"/accounts/{uuid4()}/follow", json={"currently_following": False}
        )

        assert response.status_code == 404


class TestAccounts:
    """Account initialization and lookup."""

    def test_create_account_twice_is_conflict(self, app):
        client = signed_in_client(app)
        create_account(client, "Artist")

        response = client.post("/accounts", json={"name": "Artist again"})

        assert response.status_code == 409

    def test_unknown_account_is_404(self, app):
        client = signed_in_client(app)

        response = client.get(f"/accounts/{uuid4()}")

        assert response.status_code == 404
