"""Unit tests for follow use cases."""

import pytest

from atelier.application.usecase.follow import (
    ConnectionDirection,
    ListConnectionsRequest,
    ListConnectionsUseCase,
    ToggleFollowRequest,
    ToggleFollowUseCase,
)
from atelier.domain.repository import AccountRepository, NotificationRepository
from atelier.domain.value import FollowOutcome
from tests.conftest import make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleFollow:
    """Tests for the toggle follow use case."""

    @pytest.mark.asyncio
    async def test_follow(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ToggleFollowUseCase)
        account_repo = await unit_env.get(AccountRepository)
        fan = await make_account(account_repo, "Fan")
        artist = await make_account(account_repo, "Artist")

        # Act
        response = await use_case.execute(
            ToggleFollowRequest(
                follower_id=str(fan.id),
                followed_id=str(artist.id),
                currently_following=False,
            )
        )

        # Assert
        assert response.following is True
        assert response.outcome == FollowOutcome.FOLLOWED
        assert response.message is None

    @pytest.mark.asyncio
    async def test_self_follow_is_advisory(self, unit_env):
        """Following yourself returns the unchanged state with a message."""
        use_case = await unit_env.get(ToggleFollowUseCase)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        artist = await make_account(account_repo, "Artist")

        response = await use_case.execute(
            ToggleFollowRequest(
                follower_id=str(artist.id),
                followed_id=str(artist.id),
                currently_following=False,
            )
        )

        assert response.following is False
        assert response.outcome is None
        assert response.message == "Cannot follow yourself"
        assert await notification_repo.find_by_recipient(artist.id) == []


class TestListConnections:
    """Tests for the list connections use case."""

    @pytest.mark.asyncio
    async def test_followers_include_viewer_state(self, unit_env):
        """Each follower is decorated with whether the viewer follows them."""
        toggle = await unit_env.get(ToggleFollowUseCase)
        use_case = await unit_env.get(ListConnectionsUseCase)
        account_repo = await unit_env.get(AccountRepository)

        artist = await make_account(account_repo, "Artist")
        fan = await make_account(account_repo, "Fan")
        viewer = await make_account(account_repo, "Viewer")
        for follower, followed in [(fan, artist), (viewer, fan)]:
            await toggle.execute(
                ToggleFollowRequest(
                    follower_id=str(follower.id),
                    followed_id=str(followed.id),
                    currently_following=False,
                )
            )

        response = await use_case.execute(
            ListConnectionsRequest(
                account_id=str(artist.id),
                direction=ConnectionDirection.FOLLOWERS,
                viewer_id=str(viewer.id),
            )
        )

        assert len(response.items) == 1
        item = response.items[0]
        assert item.account_id == str(fan.id)
        assert item.name == "Fan"
        assert item.is_followed_by_viewer is True

    @pytest.mark.asyncio
    async def test_following_without_viewer(self, unit_env):
        toggle = await unit_env.get(ToggleFollowUseCase)
        use_case = await unit_env.get(ListConnectionsUseCase)
        account_repo = await unit_env.get(AccountRepository)

        fan = await make_account(account_repo, "Fan")
        artist = await make_account(account_repo, "Artist")
        await toggle.execute(
            ToggleFollowRequest(
                follower_id=str(fan.id),
                followed_id=str(artist.id),
                currently_following=False,
            )
        )

        response = await use_case.execute(
            ListConnectionsRequest(
                account_id=str(fan.id), direction=ConnectionDirection.FOLLOWING
            )
        )

        assert [i.account_id for i in response.items] == [str(artist.id)]
        assert response.items[0].is_followed_by_viewer is False
