"""Notification dispatcher domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from atelier.domain.error import (
    NotAuthorizedError,
    NotificationNotFoundError,
    StorageFailureError,
)
from atelier.domain.model import Notification
from atelier.domain.repository import NotificationRepository
from atelier.domain.value import (
    AccountId,
    ContentId,
    ContentType,
    NotificationId,
    NotificationKind,
)


class NotificationService:
    """Domain service that records and serves notifications.

    Dispatch is best-effort: a notification that cannot be stored is logged
    and dropped, and never fails the like, follow or comment that caused it.

    Callers exclude self-directed actions before calling ``notify``; the
    dispatcher does not re-check recipient != actor.
    """

    def __init__(
        self, notification_repository: NotificationRepository, page_size: int = 50
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            page_size: Maximum notifications returned by one listing
        """
        self.notification_repository = notification_repository
        self.page_size = page_size

    async def notify(
        self,
        recipient_id: AccountId,
        actor_id: AccountId,
        kind: NotificationKind,
        content_id: ContentId | None = None,
        content_type: ContentType | None = None,
    ) -> bool:
        """Append an unread notification to the recipient's inbox.

        Args:
            recipient_id: Account receiving the notification
            actor_id: Account that performed the action
            kind: Like, comment or follow
            content_id: Content acted on (None for follows)
            content_type: Type of that content (None for follows)

        Returns:
            True if stored, False if dispatch failed
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            actor_id=str(actor_id),
            kind=kind.value,
        ):
            try:
                notification = Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient_id,
                    actor_id=actor_id,
                    kind=kind,
                    content_id=content_id,
                    content_type=content_type,
                    read=False,
                    created_at=datetime.now(),
                )
                await self.notification_repository.save(notification)
            except Exception as e:
                # Best-effort side channel: log and drop
                logfire.error(
                    "Notification dispatch failed",
                    recipient_id=str(recipient_id),
                    actor_id=str(actor_id),
                    kind=kind.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return False

            logfire.info(
                "Notification dispatched",
                notification_id=str(notification.id),
                recipient_id=str(recipient_id),
                kind=kind.value,
            )
            return True

    async def mark_read(
        self,
        notification_id: NotificationId,
        recipient_id: AccountId | None = None,
    ) -> bool:
        """Mark a notification as read.

        Idempotent: marking an already-read notification is a no-op.

        Args:
            notification_id: Notification to mark
            recipient_id: If given, only this account may mark it

        Returns:
            True if the notification changed from unread to read

        Raises:
            NotificationNotFoundError: If notification does not exist
            NotAuthorizedError: If recipient_id is not the notification's recipient
            StorageFailureError: If the notification store fails
        """
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            try:
                notification = await self.notification_repository.find_by_id(
                    notification_id
                )
            except SQLAlchemyError as e:
                raise self._storage_failure("mark_read", e) from e
            if not notification:
                logfire.warn(
                    "Notification not found", notification_id=str(notification_id)
                )
                raise NotificationNotFoundError(str(notification_id))

            if recipient_id is not None and notification.recipient_id != recipient_id:
                logfire.warn(
                    "Mark read on someone else's notification",
                    notification_id=str(notification_id),
                    account_id=str(recipient_id),
                )
                raise NotAuthorizedError(
                    "notification", str(notification_id), str(recipient_id)
                )

            if notification.read:
                return False

            try:
                changed = await self.notification_repository.mark_read(notification_id)
            except SQLAlchemyError as e:
                raise self._storage_failure("mark_read", e) from e
            logfire.info(
                "Notification marked read",
                notification_id=str(notification_id),
                changed=changed,
            )
            return changed

    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications for a badge.

        Args:
            recipient_id: Inbox owner

        Returns:
            Number of unread notifications

        Raises:
            StorageFailureError: If the notification store fails
        """
        try:
            return await self.notification_repository.count_unread(recipient_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("count_unread", e) from e

    async def list_for_recipient(
        self, recipient_id: AccountId, offset: int = 0
    ) -> list[Notification]:
        """List one page of notifications, newest first.

        Args:
            recipient_id: Inbox owner
            offset: Number of notifications to skip

        Returns:
            Up to ``page_size`` notifications

        Raises:
            StorageFailureError: If the notification store fails
        """
        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            offset=offset,
        ):
            try:
                notifications = await self.notification_repository.find_by_recipient(
                    recipient_id, limit=self.page_size, offset=offset
                )
            except SQLAlchemyError as e:
                raise self._storage_failure("list_notifications", e) from e

            logfire.info(
                "Notifications fetched",
                recipient_id=str(recipient_id),
                count=len(notifications),
            )
            return notifications

    @staticmethod
    def _storage_failure(operation: str, error: SQLAlchemyError) -> StorageFailureError:
        logfire.error(
            "Notification storage failure",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        return StorageFailureError(operation)
