"""Comment repository interface."""

from abc import ABC, abstractmethod

from atelier.domain.model.comment import Comment
from atelier.domain.value import ContentId


class CommentRepository(ABC):
    """Repository for comments on content."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def find_by_content(
        self, content_id: ContentId, limit: int = 100, offset: int = 0
    ) -> list[Comment]:
        """List comments on a content item, newest first.

        Args:
            content_id: The content ID
            limit: Maximum number of comments
            offset: Number of comments to skip

        Returns:
            Comments on the content
        """
        pass

    @abstractmethod
    async def count_by_content(self, content_id: ContentId) -> int:
        """Count comments on a content item."""
        pass
