"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from atelier.domain.error import StorageFailureError, ValidationError
from atelier.domain.model import Comment
from atelier.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    NotificationRepository,
)
from atelier.domain.service import CommentService, NotificationService
from atelier.domain.value import CommentId, ContentId, ContentType, NotificationKind
from atelier.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryCommentRepository,
    InMemoryContentRepository,
    InMemoryNotificationRepository,
)
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class UnreachableCommentRepository(InMemoryCommentRepository):
    """Comment store whose connection has dropped."""

    async def save(self, comment: Comment) -> Comment:
        raise OperationalError("INSERT INTO comments", {}, Exception("connection lost"))

    async def find_by_content(self, content_id, limit=100, offset=0):
        raise OperationalError("SELECT comments", {}, Exception("connection lost"))


class TestAddComment:
    """Tests for CommentService.add_comment."""

    @pytest.mark.asyncio
    async def test_add_comment_trims_text(self, unit_env):
        """Surrounding whitespace is stripped before storing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        author = await make_account(account_repo, "Author")
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner, ContentType.MUSIC)

        # Act
        comment = await comment_service.add_comment(
            author.id, content, "   lovely bassline  \n"
        )

        # Assert
        assert comment.text == "lovely bassline"
        assert comment.author_id == author.id
        assert comment.content_id == content.id
        assert comment.content_type == ContentType.MUSIC

    @pytest.mark.asyncio
    async def test_add_comment_rejects_blank_text(self, unit_env):
        """Whitespace-only comments are rejected."""
        comment_service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        author = await make_account(account_repo, "Author")
        content = await make_content(content_repo, author)

        with pytest.raises(ValidationError):
            await comment_service.add_comment(author.id, content, "   ")

        assert await comment_service.list_comments(content.id) == []

    @pytest.mark.asyncio
    async def test_add_comment_notifies_owner(self, unit_env):
        """Commenting on someone else's work sends them a comment notification."""
        comment_service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author = await make_account(account_repo, "Author")
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        await comment_service.add_comment(author.id, content, "Great colours")

        notifications = await notification_repo.find_by_recipient(owner.id)
        assert len(notifications) == 1
        assert notifications[0].kind == NotificationKind.COMMENT
        assert notifications[0].actor_id == author.id
        assert notifications[0].content_id == content.id

    @pytest.mark.asyncio
    async def test_comment_on_own_work_is_silent(self, unit_env):
        """Owners commenting on their own content get no notification."""
        comment_service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        await comment_service.add_comment(owner.id, content, "Work in progress")

        assert await notification_repo.find_by_recipient(owner.id) == []


class TestListComments:
    """Tests for CommentService.list_comments."""

    @pytest.mark.asyncio
    async def test_list_comments_newest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        author = await make_account(account_repo, "Author")
        content = await make_content(content_repo, author)
        base = datetime(2024, 5, 1, 12, 0)
        for minutes, text in [(0, "first"), (5, "second")]:
            await comment_repo.save(
                Comment(
                    id=CommentId(uuid4()),
                    author_id=author.id,
                    content_id=content.id,
                    content_type=content.content_type,
                    text=text,
                    created_at=base + timedelta(minutes=minutes),
                )
            )

        comments = await comment_service.list_comments(content.id)

        assert [c.text for c in comments] == ["second", "first"]


class TestStorageFailures:
    """A failing comment store surfaces as StorageFailureError."""

    @pytest.mark.asyncio
    async def test_failed_save_raises_and_sends_nothing(self):
        account_repo = InMemoryAccountRepository()
        notification_repo = InMemoryNotificationRepository()
        comment_service = CommentService(
            UnreachableCommentRepository(), NotificationService(notification_repo)
        )
        author = await make_account(account_repo, "Author")
        owner = await make_account(account_repo, "Owner")
        content = await make_content(InMemoryContentRepository(), owner)

        with pytest.raises(StorageFailureError) as exc_info:
            await comment_service.add_comment(author.id, content, "great work")

        assert exc_info.value.operation == "add_comment"
        assert await notification_repo.count_unread(owner.id) == 0

    @pytest.mark.asyncio
    async def test_failed_listing(self):
        comment_service = CommentService(
            UnreachableCommentRepository(),
            NotificationService(InMemoryNotificationRepository()),
        )

        with pytest.raises(StorageFailureError) as exc_info:
            await comment_service.list_comments(ContentId(uuid4()))

        assert exc_info.value.operation == "list_comments"
