"""In-memory comment repository for testing."""

from atelier.domain.model.comment import Comment
from atelier.domain.repository.comment import CommentRepository
from atelier.domain.value import ContentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        self._comments.append(comment)
        return comment

    async def find_by_content(
        self, content_id: ContentId, limit: int = 100, offset: int = 0
    ) -> list[Comment]:
        """List comments on a content item, newest first."""
        comments = [c for c in self._comments if c.content_id == content_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_content(self, content_id: ContentId) -> int:
        """Count comments on a content item."""
        return sum(1 for c in self._comments if c.content_id == content_id)
