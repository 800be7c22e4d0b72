"""PostgreSQL implementation of Content repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.domain.model import Content
from atelier.domain.repository import ContentRepository
from atelier.domain.value import AccountId, ContentId
from atelier.persistence.mappers import content_to_dict, row_to_content
from atelier.persistence.tables import content_table


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID."""
        stmt = select(content_table).where(content_table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_content(row._asdict()) if row else None

    async def find_ids_by_owner(self, owner_id: AccountId) -> list[ContentId]:
        """List the IDs of all content owned by an account."""
        stmt = select(content_table.c.id).where(content_table.c.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return [ContentId(row.id) for row in result.fetchall()]

    async def save(self, content: Content) -> Content:
        """Save a content item (create)."""
        stmt = insert(content_table).values(**content_to_dict(content))
        await self.session.execute(stmt)
        await self.session.flush()
        return content
