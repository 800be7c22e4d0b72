"""PostgreSQL implementation of Follow repository."""

from typing import Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.domain.model import Follow
from atelier.domain.repository import FollowRepository
from atelier.domain.value import AccountId
from atelier.persistence.mappers import follow_to_dict, row_to_follow
from atelier.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert_if_absent(self, follow: Follow) -> bool:
        """Insert a follow edge unless it already exists."""
        stmt = (
            insert(follows_table)
            .values(**follow_to_dict(follow))
            .on_conflict_do_nothing(index_elements=["follower_id", "followed_id"])
            .returning(follows_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted

    async def delete(self, follower_id: AccountId, followed_id: AccountId) -> bool:
        """Delete a follow edge."""
        stmt = delete(follows_table).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followed_id == followed_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_followed_among(
        self, follower_id: AccountId, account_ids: Sequence[AccountId]
    ) -> list[AccountId]:
        """Return which of the given accounts the follower follows."""
        if not account_ids:
            return []

        stmt = select(follows_table.c.followed_id).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followed_id.in_(account_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [AccountId(row.followed_id) for row in result.fetchall()]

    async def find_followers(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges pointing at an account, newest first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.followed_id == account_id)
            .order_by(follows_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def find_following(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges originating from an account, newest first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.follower_id == account_id)
            .order_by(follows_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def count_followers(self, account_id: AccountId) -> int:
        """Count accounts following this account."""
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.followed_id == account_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_following(self, account_id: AccountId) -> int:
        """Count accounts this account follows."""
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.follower_id == account_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
