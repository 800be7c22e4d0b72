"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from atelier.domain.model.notification import Notification
from atelier.domain.value import AccountId, NotificationId


class NotificationRepository(ABC):
    """Repository for the append-only notification inbox.

    Notifications are never deleted and only ever move from unread to read.
    """

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Append a notification.

        A failed insert must leave any surrounding transaction usable.

        Args:
            notification: The notification to store

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Set read=True on a notification.

        Args:
            notification_id: The notification to mark

        Returns:
            True if the flag changed, False if it was already read or missing
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications without loading rows.

        Args:
            recipient_id: Inbox owner

        Returns:
            Number of unread notifications
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Inbox owner
            limit: Maximum number of notifications
            offset: Number of notifications to skip

        Returns:
            Notifications
        """
        pass
