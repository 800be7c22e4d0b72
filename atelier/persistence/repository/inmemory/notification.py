"""In-memory notification repository for testing."""

from typing import Optional

from atelier.domain.model.notification import Notification
from atelier.domain.repository.notification import NotificationRepository
from atelier.domain.value import AccountId, NotificationId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Append a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Set read=True if currently unread."""
        notification = self._notifications.get(notification_id)
        if not notification or notification.read:
            return False
        self._notifications[notification_id] = notification.evolve(read=True)
        return True

    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.read
        )

    async def find_by_recipient(
        self, recipient_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]
