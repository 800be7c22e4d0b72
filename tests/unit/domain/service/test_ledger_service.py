"""Unit tests for LedgerService."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from atelier.domain.error import AccountNotFoundError, StorageFailureError
from atelier.domain.model import Notification
from atelier.domain.repository import (
    AccountRepository,
    ContentRepository,
    LikeRepository,
    NotificationRepository,
)
from atelier.domain.service import LedgerService, NotificationService
from atelier.domain.value import (
    AccountId,
    ContentId,
    ContentRef,
    ContentType,
    LikeOutcome,
    NotificationKind,
)
from atelier.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryContentRepository,
    InMemoryLikeRepository,
    InMemoryNotificationRepository,
)
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class FailingNotificationRepository(InMemoryNotificationRepository):
    """Notification store whose inserts always fail."""

    async def save(self, notification: Notification) -> Notification:
        raise RuntimeError("notification store unavailable")


class FailingPointsAccountRepository(InMemoryAccountRepository):
    """Account store that fails when awarding points."""

    async def increment_like_points(self, account_id: AccountId) -> None:
        raise OperationalError("UPDATE accounts", {}, Exception("connection lost"))


async def _notifications_for(notification_repo: NotificationRepository, recipient):
    return await notification_repo.find_by_recipient(recipient.id, limit=100)


class TestLike:
    """Tests for the like direction of toggle_like."""

    @pytest.mark.asyncio
    async def test_like_moves_one_credit_to_one_point(self, unit_env):
        """Liking spends one credit from the liker and awards one point to the owner."""
        # Arrange
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker", like_credit=5)
        owner = await make_account(account_repo, "Owner", like_points=0)
        content = await make_content(content_repo, owner)

        # Act
        result = await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        # Assert
        assert result.liked is True
        assert result.outcome == LikeOutcome.LIKED
        assert (await account_repo.find_by_id(liker.id)).like_credit == 4
        assert (await account_repo.find_by_id(owner.id)).like_points == 1

    @pytest.mark.asyncio
    async def test_like_records_exactly_one_like(self, unit_env):
        """A successful like leaves one like record for (liker, content)."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        like_repo = await unit_env.get(LikeRepository)

        liker = await make_account(account_repo, "Liker")
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        assert await like_repo.exists(liker.id, content.id)
        assert await like_repo.count_by_contents([content.id]) == 1

    @pytest.mark.asyncio
    async def test_like_notifies_owner_exactly_once(self, unit_env):
        """One like produces one like notification addressed to the owner."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        liker = await make_account(account_repo, "Liker")
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner, ContentType.MUSIC)

        await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        notifications = await _notifications_for(notification_repo, owner)
        assert len(notifications) == 1
        notification = notifications[0]
        assert notification.kind == NotificationKind.LIKE
        assert notification.recipient_id == owner.id
        assert notification.actor_id == liker.id
        assert notification.content_id == content.id
        assert notification.content_type == ContentType.MUSIC
        assert notification.read is False

    @pytest.mark.asyncio
    async def test_like_with_zero_credit_is_rejected(self, unit_env):
        """With no credit left, nothing changes and no like is recorded."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        like_repo = await unit_env.get(LikeRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        liker = await make_account(account_repo, "Broke", like_credit=0)
        owner = await make_account(account_repo, "Owner", like_points=3)
        content = await make_content(content_repo, owner)

        result = await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        assert result.liked is False
        assert result.outcome == LikeOutcome.INSUFFICIENT_CREDIT
        assert not await like_repo.exists(liker.id, content.id)
        assert (await account_repo.find_by_id(liker.id)).like_credit == 0
        assert (await account_repo.find_by_id(owner.id)).like_points == 3
        assert await _notifications_for(notification_repo, owner) == []

    @pytest.mark.asyncio
    async def test_like_when_already_liked_moves_nothing(self, unit_env):
        """A stale currently_liked=False on liked content does not double-spend."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        liker = await make_account(account_repo, "Liker", like_credit=5)
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)
        await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        result = await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        assert result.liked is True
        assert result.outcome == LikeOutcome.ALREADY_LIKED
        assert (await account_repo.find_by_id(liker.id)).like_credit == 4
        assert (await account_repo.find_by_id(owner.id)).like_points == 1
        assert len(await _notifications_for(notification_repo, owner)) == 1

    @pytest.mark.asyncio
    async def test_self_like_costs_credit_but_is_silent(self, unit_env):
        """Liking your own work converts credit to points with no notification."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        artist = await make_account(account_repo, "Artist", like_credit=5)
        content = await make_content(content_repo, artist)

        result = await ledger.toggle_like(artist.id, content.ref, currently_liked=False)

        assert result.liked is True
        updated = await account_repo.find_by_id(artist.id)
        assert updated.like_credit == 4
        assert updated.like_points == 1
        assert await _notifications_for(notification_repo, artist) == []

    @pytest.mark.asyncio
    async def test_like_with_unknown_liker_raises_without_side_effects(self, unit_env):
        """A missing liker aborts before anything is written."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        like_repo = await unit_env.get(LikeRepository)

        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)
        ghost = AccountId(uuid4())

        with pytest.raises(AccountNotFoundError):
            await ledger.toggle_like(ghost, content.ref, currently_liked=False)

        assert not await like_repo.exists(ghost, content.id)
        assert (await account_repo.find_by_id(owner.id)).like_points == 0

    @pytest.mark.asyncio
    async def test_like_with_unknown_owner_raises(self, unit_env):
        """A content reference whose owner has no account is rejected."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)

        liker = await make_account(account_repo, "Liker")
        orphan = ContentRef(
            id=ContentId(uuid4()),
            owner_id=AccountId(uuid4()),
            content_type=ContentType.ARTWORK,
        )

        with pytest.raises(AccountNotFoundError):
            await ledger.toggle_like(liker.id, orphan, currently_liked=False)

        assert (await account_repo.find_by_id(liker.id)).like_credit == 5


class TestUnlike:
    """Tests for the unlike direction of toggle_like."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_restores_balances(self, unit_env):
        """Scenario: A likes then unlikes B's work; both balances return to start."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        a = await make_account(account_repo, "A", like_credit=5)
        b = await make_account(account_repo, "B", like_points=0)
        x = await make_content(content_repo, b)

        await ledger.toggle_like(a.id, x.ref, currently_liked=False)
        assert (await account_repo.find_by_id(a.id)).like_credit == 4
        assert (await account_repo.find_by_id(b.id)).like_points == 1

        result = await ledger.toggle_like(a.id, x.ref, currently_liked=True)

        assert result.liked is False
        assert result.outcome == LikeOutcome.UNLIKED
        assert (await account_repo.find_by_id(a.id)).like_credit == 5
        assert (await account_repo.find_by_id(b.id)).like_points == 0
        # Unlike adds no notification
        assert len(await _notifications_for(notification_repo, b)) == 1

    @pytest.mark.asyncio
    async def test_unlike_twice_refunds_once(self, unit_env):
        """The second unlike finds no like and leaves balances alone."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker", like_credit=5)
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)
        await ledger.toggle_like(liker.id, content.ref, currently_liked=False)
        await ledger.toggle_like(liker.id, content.ref, currently_liked=True)

        result = await ledger.toggle_like(liker.id, content.ref, currently_liked=True)

        assert result.liked is False
        assert result.outcome == LikeOutcome.NOT_LIKED
        assert (await account_repo.find_by_id(liker.id)).like_credit == 5
        assert (await account_repo.find_by_id(owner.id)).like_points == 0

    @pytest.mark.asyncio
    async def test_unlike_without_like_does_not_mint_credit(self, unit_env):
        """A stale currently_liked=True cannot be used to farm credit."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker", like_credit=2)
        owner = await make_account(account_repo, "Owner", like_points=0)
        content = await make_content(content_repo, owner)

        for _ in range(3):
            await ledger.toggle_like(liker.id, content.ref, currently_liked=True)

        assert (await account_repo.find_by_id(liker.id)).like_credit == 2
        assert (await account_repo.find_by_id(owner.id)).like_points == 0

    @pytest.mark.asyncio
    async def test_points_never_drop_below_zero(self, unit_env):
        """Unliking when the owner already has zero points floors at zero."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        like_repo = await unit_env.get(LikeRepository)

        liker = await make_account(account_repo, "Liker", like_credit=5)
        owner = await make_account(account_repo, "Owner", like_points=0)
        content = await make_content(content_repo, owner)
        await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        # Points were reset elsewhere while the like still exists
        current = await account_repo.find_by_id(owner.id)
        await account_repo.decrement_like_points(owner.id)
        assert (await account_repo.find_by_id(owner.id)).like_points == (
            current.like_points - 1
        )

        await ledger.toggle_like(liker.id, content.ref, currently_liked=True)

        assert (await account_repo.find_by_id(owner.id)).like_points == 0
        assert not await like_repo.exists(liker.id, content.id)


class TestConcurrency:
    """Concurrent toggles against shared storage."""

    @pytest.mark.asyncio
    async def test_double_tap_like_spends_once(self, unit_env):
        """Two simultaneous likes on the same content spend one credit."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        like_repo = await unit_env.get(LikeRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        liker = await make_account(account_repo, "Liker", like_credit=5)
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        results = await asyncio.gather(
            ledger.toggle_like(liker.id, content.ref, currently_liked=False),
            ledger.toggle_like(liker.id, content.ref, currently_liked=False),
        )

        outcomes = sorted(r.outcome.value for r in results)
        assert outcomes == [LikeOutcome.ALREADY_LIKED.value, LikeOutcome.LIKED.value]
        assert (await account_repo.find_by_id(liker.id)).like_credit == 4
        assert (await account_repo.find_by_id(owner.id)).like_points == 1
        assert await like_repo.count_by_contents([content.id]) == 1
        assert len(await _notifications_for(notification_repo, owner)) == 1

    @pytest.mark.asyncio
    async def test_last_credit_cannot_be_spent_twice(self, unit_env):
        """With one credit left, only one of two concurrent likes succeeds."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        like_repo = await unit_env.get(LikeRepository)

        liker = await make_account(account_repo, "Liker", like_credit=1)
        owner = await make_account(account_repo, "Owner")
        first = await make_content(content_repo, owner, title="First")
        second = await make_content(content_repo, owner, title="Second")

        results = await asyncio.gather(
            ledger.toggle_like(liker.id, first.ref, currently_liked=False),
            ledger.toggle_like(liker.id, second.ref, currently_liked=False),
        )

        assert sorted(r.liked for r in results) == [False, True]
        assert (await account_repo.find_by_id(liker.id)).like_credit == 0
        assert (await account_repo.find_by_id(owner.id)).like_points == 1
        assert await like_repo.count_by_contents([first.id, second.id]) == 1


class TestFailures:
    """Failure handling around the ledger."""

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_undo_like(self):
        """A like persists even when its notification cannot be stored."""
        account_repo = InMemoryAccountRepository()
        content_repo = InMemoryContentRepository()
        like_repo = InMemoryLikeRepository()
        ledger = LedgerService(
            account_repository=account_repo,
            like_repository=like_repo,
            notification_service=NotificationService(FailingNotificationRepository()),
        )

        liker = await make_account(account_repo, "Liker", like_credit=5)
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        result = await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        assert result.outcome == LikeOutcome.LIKED
        assert await like_repo.exists(liker.id, content.id)
        assert (await account_repo.find_by_id(liker.id)).like_credit == 4
        assert (await account_repo.find_by_id(owner.id)).like_points == 1

    @pytest.mark.asyncio
    async def test_storage_error_becomes_storage_failure(self):
        """Database errors surface as StorageFailureError."""
        account_repo = FailingPointsAccountRepository()
        content_repo = InMemoryContentRepository()
        ledger = LedgerService(
            account_repository=account_repo,
            like_repository=InMemoryLikeRepository(),
            notification_service=NotificationService(
                InMemoryNotificationRepository()
            ),
        )

        liker = await make_account(account_repo, "Liker")
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        with pytest.raises(StorageFailureError) as exc_info:
            await ledger.toggle_like(liker.id, content.ref, currently_liked=False)

        assert exc_info.value.operation == "toggle_like"


class TestGetLikeStates:
    """Tests for get_like_states."""

    @pytest.mark.asyncio
    async def test_reports_each_requested_content(self, unit_env):
        """Every requested ID is present, True only where liked."""
        ledger = await unit_env.get(LedgerService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker")
        owner = await make_account(account_repo, "Owner")
        liked = await make_content(content_repo, owner, title="Liked")
        not_liked = await make_content(content_repo, owner, title="Not liked")
        await ledger.toggle_like(liker.id, liked.ref, currently_liked=False)

        states = await ledger.get_like_states(liker.id, [liked.id, not_liked.id])

        assert states == {liked.id: True, not_liked.id: False}

    @pytest.mark.asyncio
    async def test_empty_request_returns_empty_mapping(self, unit_env):
        """No content IDs means no lookup."""
        ledger = await unit_env.get(LedgerService)
        assert await ledger.get_like_states(AccountId(uuid4()), []) == {}
