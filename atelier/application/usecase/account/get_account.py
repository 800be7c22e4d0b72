"""Get account use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService
from atelier.domain.value import AccountId


class GetAccountRequest(BaseModel):
    """Get account request."""

    account_id: str


class GetAccountResponse(BaseModel):
    """Account profile with like-economy balances."""

    account_id: str
    name: str
    artist_type: str
    avatar_url: str | None
    bio: str | None
    website: str | None
    like_credit: int
    like_points: int
    created_at: datetime


class GetAccountUseCase(BaseUseCase[GetAccountRequest, GetAccountResponse]):
    """Use case for reading an account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetAccountRequest) -> GetAccountResponse:
        """Execute get account flow.

        Raises:
            AccountNotFoundError: If account not found
        """
        account = await self.account_service.get_by_id(
            AccountId(UUID(request.account_id))
        )
        return GetAccountResponse(
            account_id=str(account.id),
            name=account.name.root,
            artist_type=account.artist_type,
            avatar_url=account.avatar_url,
            bio=account.bio,
            website=account.website,
            like_credit=account.like_credit,
            like_points=account.like_points,
            created_at=account.created_at,
        )
