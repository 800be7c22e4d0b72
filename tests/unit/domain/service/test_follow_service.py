"""Unit tests for FollowService."""

from uuid import uuid4

import pytest

from atelier.domain.error import AccountNotFoundError, SelfFollowRejectedError
from atelier.domain.repository import AccountRepository, NotificationRepository
from atelier.domain.service import FollowService
from atelier.domain.value import AccountId, FollowOutcome, NotificationKind
from tests.conftest import make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleFollow:
    """Tests for FollowService.toggle_follow."""

    @pytest.mark.asyncio
    async def test_follow_creates_edge_and_notifies(self, unit_env):
        """Following stores one edge and one follow notification."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        fan = await make_account(account_repo, "Fan")
        artist = await make_account(account_repo, "Artist")

        # Act
        result = await follow_service.toggle_follow(fan.id, artist.id, False)

        # Assert
        assert result.following is True
        assert result.outcome == FollowOutcome.FOLLOWED
        followers = await follow_service.list_followers(artist.id)
        assert [f.follower_id for f in followers] == [fan.id]

        notifications = await notification_repo.find_by_recipient(artist.id)
        assert len(notifications) == 1
        assert notifications[0].kind == NotificationKind.FOLLOW
        assert notifications[0].actor_id == fan.id
        assert notifications[0].content_id is None
        assert notifications[0].content_type is None

    @pytest.mark.asyncio
    async def test_duplicate_follow_is_noop(self, unit_env):
        """Following twice keeps one edge and sends one notification."""
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        fan = await make_account(account_repo, "Fan")
        artist = await make_account(account_repo, "Artist")
        await follow_service.toggle_follow(fan.id, artist.id, False)

        result = await follow_service.toggle_follow(fan.id, artist.id, False)

        assert result.following is True
        assert result.outcome == FollowOutcome.ALREADY_FOLLOWING
        assert len(await follow_service.list_followers(artist.id)) == 1
        assert len(await notification_repo.find_by_recipient(artist.id)) == 1

    @pytest.mark.asyncio
    async def test_unfollow_removes_edge(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)

        fan = await make_account(account_repo, "Fan")
        artist = await make_account(account_repo, "Artist")
        await follow_service.toggle_follow(fan.id, artist.id, False)

        result = await follow_service.toggle_follow(fan.id, artist.id, True)

        assert result.following is False
        assert result.outcome == FollowOutcome.UNFOLLOWED
        assert await follow_service.list_following(fan.id) == []

    @pytest.mark.asyncio
    async def test_unfollow_without_edge(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)

        fan = await make_account(account_repo, "Fan")
        artist = await make_account(account_repo, "Artist")

        result = await follow_service.toggle_follow(fan.id, artist.id, True)

        assert result.following is False
        assert result.outcome == FollowOutcome.NOT_FOLLOWING

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, unit_env):
        """An account cannot follow itself and nothing is recorded."""
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        artist = await make_account(account_repo, "Artist")

        with pytest.raises(SelfFollowRejectedError):
            await follow_service.toggle_follow(artist.id, artist.id, False)

        assert await follow_service.list_following(artist.id) == []
        assert await notification_repo.find_by_recipient(artist.id) == []

    @pytest.mark.asyncio
    async def test_follow_unknown_target(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)
        fan = await make_account(account_repo, "Fan")

        with pytest.raises(AccountNotFoundError):
            await follow_service.toggle_follow(fan.id, AccountId(uuid4()), False)

        assert await follow_service.list_following(fan.id) == []


class TestGetFollowingStates:
    """Tests for FollowService.get_following_states."""

    @pytest.mark.asyncio
    async def test_states_cover_every_requested_account(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)

        viewer = await make_account(account_repo, "Viewer")
        followed = await make_account(account_repo, "Followed")
        stranger = await make_account(account_repo, "Stranger")
        await follow_service.toggle_follow(viewer.id, followed.id, False)

        states = await follow_service.get_following_states(
            viewer.id, [followed.id, stranger.id]
        )

        assert states == {followed.id: True, stranger.id: False}
