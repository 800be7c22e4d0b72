"""In-memory like repository for testing."""

from typing import Sequence

from atelier.domain.model.like import Like
from atelier.domain.repository.like import LikeRepository
from atelier.domain.value import AccountId, ContentId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: dict[tuple[AccountId, ContentId], Like] = {}

    async def insert_if_absent(self, like: Like) -> bool:
        """Insert a like unless (user, content) is already present."""
        key = (like.user_id, like.content_id)
        if key in self._likes:
            return False
        self._likes[key] = like
        return True

    async def delete_by_user_and_content(
        self, user_id: AccountId, content_id: ContentId
    ) -> bool:
        """Delete a user's like on a content item."""
        return self._likes.pop((user_id, content_id), None) is not None

    async def exists(self, user_id: AccountId, content_id: ContentId) -> bool:
        """Check whether a user currently likes a content item."""
        return (user_id, content_id) in self._likes

    async def find_by_user_and_contents(
        self, user_id: AccountId, content_ids: Sequence[ContentId]
    ) -> list[Like]:
        """Find a user's likes on multiple content items."""
        return [
            self._likes[(user_id, content_id)]
            for content_id in set(content_ids)
            if (user_id, content_id) in self._likes
        ]

    async def count_by_contents(self, content_ids: Sequence[ContentId]) -> int:
        """Count likes across a set of content items."""
        wanted = set(content_ids)
        return sum(1 for like in self._likes.values() if like.content_id in wanted)
