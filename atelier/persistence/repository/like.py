"""PostgreSQL implementation of Like repository."""

from typing import Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.domain.model import Like
from atelier.domain.repository import LikeRepository
from atelier.domain.value import AccountId, ContentId
from atelier.persistence.mappers import like_to_dict, row_to_like
from atelier.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert_if_absent(self, like: Like) -> bool:
        """Insert a like, relying on the unique constraint to detect duplicates.

        Args:
            like: Like to insert

        Returns:
            True if a row was inserted
        """
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(index_elements=["user_id", "content_id"])
            .returning(likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted

    async def delete_by_user_and_content(
        self, user_id: AccountId, content_id: ContentId
    ) -> bool:
        """Delete a user's like on a content item."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.content_id == content_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def exists(self, user_id: AccountId, content_id: ContentId) -> bool:
        """Check whether a user currently likes a content item."""
        stmt = select(likes_table.c.id).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.content_id == content_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_user_and_contents(
        self, user_id: AccountId, content_ids: Sequence[ContentId]
    ) -> list[Like]:
        """Find a user's likes on multiple content items (batch query).

        Args:
            user_id: User ID
            content_ids: Content IDs to check

        Returns:
            Likes by the user on the given content
        """
        if not content_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.content_id.in_(content_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def count_by_contents(self, content_ids: Sequence[ContentId]) -> int:
        """Count likes across a set of content items."""
        if not content_ids:
            return 0

        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.content_id.in_(content_ids))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
