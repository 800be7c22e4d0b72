"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from atelier.domain.model.content import Content
from atelier.domain.value import AccountId, ContentId


class ContentRepository(ABC):
    """Repository for the content catalog."""

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID.

        Args:
            content_id: The content's unique identifier

        Returns:
            The content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_ids_by_owner(self, owner_id: AccountId) -> list[ContentId]:
        """List the IDs of all content owned by an account.

        Args:
            owner_id: The owner's account ID

        Returns:
            Content IDs (artwork and music)
        """
        pass

    @abstractmethod
    async def save(self, content: Content) -> Content:
        """Save a content item.

        Args:
            content: The content to save

        Returns:
            The saved content
        """
        pass
