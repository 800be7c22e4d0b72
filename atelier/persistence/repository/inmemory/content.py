"""In-memory content repository for testing."""

from typing import Optional

from atelier.domain.model.content import Content
from atelier.domain.repository.content import ContentRepository
from atelier.domain.value import AccountId, ContentId


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self) -> None:
        self._content: dict[ContentId, Content] = {}

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID."""
        return self._content.get(content_id)

    async def find_ids_by_owner(self, owner_id: AccountId) -> list[ContentId]:
        """List the IDs of all content owned by an account."""
        return [c.id for c in self._content.values() if c.owner_id == owner_id]

    async def save(self, content: Content) -> Content:
        """Save a content item."""
        self._content[content.id] = content
        return content
