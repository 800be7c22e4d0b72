"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from atelier.domain.model.like import Like
from atelier.domain.value import AccountId, ContentId


class LikeRepository(ABC):
    """Repository for Like records.

    The store enforces a unique constraint on (user_id, content_id).
    """

    @abstractmethod
    async def insert_if_absent(self, like: Like) -> bool:
        """Insert a like unless the user already likes the content.

        This is a single atomic operation against the uniqueness constraint.

        Args:
            like: The like to insert

        Returns:
            True if the like was inserted, False if one already existed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_content(
        self, user_id: AccountId, content_id: ContentId
    ) -> bool:
        """Delete a user's like on a content item.

        Args:
            user_id: The liker's account ID
            content_id: The liked content ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, user_id: AccountId, content_id: ContentId) -> bool:
        """Check whether a user currently likes a content item.

        Args:
            user_id: The account ID
            content_id: The content ID

        Returns:
            True if a like exists
        """
        pass

    @abstractmethod
    async def find_by_user_and_contents(
        self, user_id: AccountId, content_ids: Sequence[ContentId]
    ) -> list[Like]:
        """Find a user's likes on multiple content items (batch query).

        Args:
            user_id: The account ID
            content_ids: Content IDs to check

        Returns:
            Likes by the user on the given content
        """
        pass

    @abstractmethod
    async def count_by_contents(self, content_ids: Sequence[ContentId]) -> int:
        """Count likes across a set of content items.

        Args:
            content_ids: Content IDs to count likes on

        Returns:
            Total number of likes
        """
        pass
