"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from atelier.domain.model.follow import Follow
from atelier.domain.value import AccountId


class FollowRepository(ABC):
    """Repository for follow edges.

    The store enforces a unique constraint on (follower_id, followed_id) and
    rejects edges where both ends are the same account.
    """

    @abstractmethod
    async def insert_if_absent(self, follow: Follow) -> bool:
        """Insert a follow edge unless it already exists.

        Args:
            follow: The edge to insert

        Returns:
            True if inserted, False if the edge already existed
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: AccountId, followed_id: AccountId) -> bool:
        """Delete a follow edge.

        Args:
            follower_id: The following account
            followed_id: The followed account

        Returns:
            True if an edge was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_followed_among(
        self, follower_id: AccountId, account_ids: Sequence[AccountId]
    ) -> list[AccountId]:
        """Return which of the given accounts the follower follows (batch query).

        Args:
            follower_id: The following account
            account_ids: Candidate followed accounts

        Returns:
            Subset of account_ids that are followed
        """
        pass

    @abstractmethod
    async def find_followers(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges pointing at an account, newest first.

        Args:
            account_id: The followed account
            limit: Maximum number of edges
            offset: Number of edges to skip

        Returns:
            Follow edges
        """
        pass

    @abstractmethod
    async def find_following(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges originating from an account, newest first.

        Args:
            account_id: The following account
            limit: Maximum number of edges
            offset: Number of edges to skip

        Returns:
            Follow edges
        """
        pass

    @abstractmethod
    async def count_followers(self, account_id: AccountId) -> int:
        """Count accounts following this account."""
        pass

    @abstractmethod
    async def count_following(self, account_id: AccountId) -> int:
        """Count accounts this account follows."""
        pass
