"""Get account stats use case."""

from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService
from atelier.domain.value import AccountId


class GetAccountStatsRequest(BaseModel):
    """Get account stats request."""

    account_id: str


class GetAccountStatsResponse(BaseModel):
    """Engagement totals for an account."""

    account_id: str
    total_likes: int
    followers: int
    following: int


class GetAccountStatsUseCase(
    BaseUseCase[GetAccountStatsRequest, GetAccountStatsResponse]
):
    """Use case for an account's like and follow totals."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get account stats use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetAccountStatsRequest) -> GetAccountStatsResponse:
        """Execute get account stats flow."""
        stats = await self.account_service.get_stats(
            AccountId(UUID(request.account_id))
        )
        return GetAccountStatsResponse(
            account_id=request.account_id,
            total_likes=stats.total_likes,
            followers=stats.followers,
            following=stats.following,
        )
