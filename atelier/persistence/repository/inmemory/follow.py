"""In-memory follow repository for testing."""

from typing import Sequence

from atelier.domain.model.follow import Follow
from atelier.domain.repository.follow import FollowRepository
from atelier.domain.value import AccountId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: dict[tuple[AccountId, AccountId], Follow] = {}

    async def insert_if_absent(self, follow: Follow) -> bool:
        """Insert a follow edge unless it already exists."""
        key = (follow.follower_id, follow.followed_id)
        if key in self._follows:
            return False
        self._follows[key] = follow
        return True

    async def delete(self, follower_id: AccountId, followed_id: AccountId) -> bool:
        """Delete a follow edge."""
        return self._follows.pop((follower_id, followed_id), None) is not None

    async def find_followed_among(
        self, follower_id: AccountId, account_ids: Sequence[AccountId]
    ) -> list[AccountId]:
        """Return which of the given accounts the follower follows."""
        return [
            account_id
            for account_id in set(account_ids)
            if (follower_id, account_id) in self._follows
        ]

    async def find_followers(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges pointing at an account, newest first."""
        edges = [f for f in self._follows.values() if f.followed_id == account_id]
        edges.sort(key=lambda f: f.created_at, reverse=True)
        return edges[offset : offset + limit]

    async def find_following(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges originating from an account, newest first."""
        edges = [f for f in self._follows.values() if f.follower_id == account_id]
        edges.sort(key=lambda f: f.created_at, reverse=True)
        return edges[offset : offset + limit]

    async def count_followers(self, account_id: AccountId) -> int:
        """Count accounts following this account."""
        return sum(1 for f in self._follows.values() if f.followed_id == account_id)

    async def count_following(self, account_id: AccountId) -> int:
        """Count accounts this account follows."""
        return sum(1 for f in self._follows.values() if f.follower_id == account_id)
