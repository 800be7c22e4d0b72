"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from atelier.domain.error import StorageFailureError, ValidationError
from atelier.domain.model import Comment, Content
from atelier.domain.repository import CommentRepository
from atelier.domain.value import AccountId, CommentId, ContentId, NotificationKind

from .notification_service import NotificationService


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            notification_service: Dispatcher for comment notifications
        """
        self.comment_repository = comment_repository
        self.notification_service = notification_service

    async def add_comment(
        self, author_id: AccountId, content: Content, text: str
    ) -> Comment:
        """Comment on a content item and notify its owner.

        Args:
            author_id: Commenting account
            content: Content being commented on
            text: Comment text (surrounding whitespace is trimmed)

        Returns:
            Created comment

        Raises:
            ValidationError: If the trimmed text is empty
            StorageFailureError: If the comment cannot be stored
        """
        with logfire.span(
            "comment_service.add_comment",
            author_id=str(author_id),
            content_id=str(content.id),
        ):
            text = text.strip()
            if not text:
                raise ValidationError("Comment text must not be empty")

            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content_id=content.id,
                content_type=content.content_type,
                text=text,
                created_at=datetime.now(),
            )
            try:
                saved = await self.comment_repository.save(comment)
            except SQLAlchemyError as e:
                logfire.error(
                    "Comment storage failure",
                    content_id=str(content.id),
                    error=str(e),
                )
                raise StorageFailureError("add_comment") from e

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                content_id=str(content.id),
            )

            if author_id != content.owner_id:
                await self.notification_service.notify(
                    recipient_id=content.owner_id,
                    actor_id=author_id,
                    kind=NotificationKind.COMMENT,
                    content_id=content.id,
                    content_type=content.content_type,
                )

            return saved

    async def list_comments(
        self, content_id: ContentId, limit: int = 100, offset: int = 0
    ) -> list[Comment]:
        """List comments on a content item, newest first."""
        with logfire.span("comment_service.list_comments", content_id=str(content_id)):
            try:
                return await self.comment_repository.find_by_content(
                    content_id, limit=limit, offset=offset
                )
            except SQLAlchemyError as e:
                logfire.error(
                    "Comment storage failure",
                    content_id=str(content_id),
                    error=str(e),
                )
                raise StorageFailureError("list_comments") from e
