"""PostgreSQL implementation of Comment repository."""

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.domain.model import Comment
from atelier.domain.repository import CommentRepository
from atelier.domain.value import ContentId
from atelier.persistence.mappers import comment_to_dict, row_to_comment
from atelier.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def find_by_content(
        self, content_id: ContentId, limit: int = 100, offset: int = 0
    ) -> list[Comment]:
        """List comments on a content item, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.content_id == content_id)
            .order_by(comments_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_content(self, content_id: ContentId) -> int:
        """Count comments on a content item."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.content_id == content_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
