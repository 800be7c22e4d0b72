"""List followers / following use case."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService, FollowService
from atelier.domain.value import AccountId


class ConnectionDirection(str, Enum):
    """Which side of the follow graph to list."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


class ConnectionItem(BaseModel):
    """One account in a followers/following list."""

    account_id: str
    name: str
    artist_type: str
    avatar_url: str | None
    followed_at: datetime
    is_followed_by_viewer: bool


class ListConnectionsRequest(BaseModel):
    """List connections request."""

    account_id: str
    direction: ConnectionDirection
    viewer_id: str | None = None  # Authenticated user, if any
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListConnectionsResponse(BaseModel):
    """List connections response."""

    account_id: str
    direction: ConnectionDirection
    items: list[ConnectionItem]


class ListConnectionsUseCase(
    BaseUseCase[ListConnectionsRequest, ListConnectionsResponse]
):
    """Use case for listing an account's followers or followed accounts."""

    def __init__(
        self, follow_service: FollowService, account_service: AccountService
    ) -> None:
        """Initialize list connections use case.

        Args:
            follow_service: Follow domain service
            account_service: Account service for profile lookup
        """
        self.follow_service = follow_service
        self.account_service = account_service

    async def execute(self, request: ListConnectionsRequest) -> ListConnectionsResponse:
        """Execute list connections flow.

        Profiles and the viewer's follow states are each fetched with one
        batch query.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        account_id = AccountId(UUID(request.account_id))
        await self.account_service.get_by_id(account_id)

        if request.direction == ConnectionDirection.FOLLOWERS:
            edges = await self.follow_service.list_followers(
                account_id, limit=request.limit, offset=request.offset
            )
            other_ids = [edge.follower_id for edge in edges]
        else:
            edges = await self.follow_service.list_following(
                account_id, limit=request.limit, offset=request.offset
            )
            other_ids = [edge.followed_id for edge in edges]

        profiles = await self.account_service.get_profiles(other_ids)

        viewer_states: dict[AccountId, bool] = {}
        if request.viewer_id:
            viewer_states = await self.follow_service.get_following_states(
                AccountId(UUID(request.viewer_id)), other_ids
            )

        items = []
        for edge, other_id in zip(edges, other_ids):
            profile = profiles.get(other_id)
            if not profile:
                continue
            items.append(
                ConnectionItem(
                    account_id=str(other_id),
                    name=profile.name.root,
                    artist_type=profile.artist_type,
                    avatar_url=profile.avatar_url,
                    followed_at=edge.created_at,
                    is_followed_by_viewer=viewer_states.get(other_id, False),
                )
            )

        return ListConnectionsResponse(
            account_id=request.account_id,
            direction=request.direction,
            items=items,
        )
