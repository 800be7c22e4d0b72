"""PostgreSQL implementation of Notification repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.domain.error import NotificationDispatchError
from atelier.domain.model import Notification
from atelier.domain.repository import NotificationRepository
from atelier.domain.value import AccountId, NotificationId
from atelier.persistence.mappers import notification_to_dict, row_to_notification
from atelier.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Append a notification inside a savepoint.

        A failed insert rolls back only the savepoint, leaving the rest of
        the request's transaction usable.

        Args:
            notification: Notification to store

        Returns:
            Stored notification

        Raises:
            NotificationDispatchError: If the insert fails
        """
        stmt = insert(notifications_table).values(
            **notification_to_dict(notification)
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise NotificationDispatchError(
                f"Could not store notification {notification.id}"
            ) from e
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Set read=True if currently unread."""
        stmt = (
            notifications_table.update()
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.read.is_(False),
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_unread(self, recipient_id: AccountId) -> int:
        """Count unread notifications without loading rows."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_recipient(
        self, recipient_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]
