"""Toggle follow use case."""

from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.error import SelfFollowRejectedError
from atelier.domain.service import FollowService
from atelier.domain.value import AccountId, FollowOutcome


class ToggleFollowRequest(BaseModel):
    """Toggle follow request."""

    follower_id: str  # From authenticated user
    followed_id: str
    currently_following: bool


class ToggleFollowResponse(BaseModel):
    """Toggle follow response.

    ``outcome`` is None and ``message`` is set when the follow was refused.
    """

    followed_id: str
    following: bool
    outcome: FollowOutcome | None
    message: str | None = None


class ToggleFollowUseCase(BaseUseCase[ToggleFollowRequest, ToggleFollowResponse]):
    """Use case for following or unfollowing an account."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize toggle follow use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: ToggleFollowRequest) -> ToggleFollowResponse:
        """Execute toggle follow flow.

        Self-follow is answered with the unchanged state and an advisory
        message rather than an error.

        Raises:
            AccountNotFoundError: If the followed account does not exist
            StorageFailureError: If storage fails
        """
        try:
            result = await self.follow_service.toggle_follow(
                follower_id=AccountId(UUID(request.follower_id)),
                followed_id=AccountId(UUID(request.followed_id)),
                currently_following=request.currently_following,
            )
        except SelfFollowRejectedError as e:
            return ToggleFollowResponse(
                followed_id=request.followed_id,
                following=False,
                outcome=None,
                message=str(e),
            )

        return ToggleFollowResponse(
            followed_id=request.followed_id,
            following=result.following,
            outcome=result.outcome,
        )
