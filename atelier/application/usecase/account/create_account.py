"""Create account use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService
from atelier.domain.value import AccountId, DisplayName


class CreateAccountRequest(BaseModel):
    """Create account request."""

    account_id: str  # Issued by the auth provider
    name: str = Field(min_length=1, max_length=100)
    artist_type: str = "artist"
    avatar_url: str | None = None
    bio: str | None = None
    website: str | None = None


class CreateAccountResponse(BaseModel):
    """Create account response."""

    account_id: str
    name: str
    like_credit: int
    like_points: int
    created_at: datetime


class CreateAccountUseCase(BaseUseCase[CreateAccountRequest, CreateAccountResponse]):
    """Use case for initializing an account and its like-credit balance."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize create account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: CreateAccountRequest) -> CreateAccountResponse:
        """Execute create account flow.

        Args:
            request: Create account request

        Returns:
            Created account with its starting balances

        Raises:
            BusinessRuleViolationError: If the account already exists
            ValueError: If the account ID or name is invalid
        """
        account = await self.account_service.create_account(
            account_id=AccountId(UUID(request.account_id)),
            name=DisplayName(request.name),
            artist_type=request.artist_type,
            avatar_url=request.avatar_url,
            bio=request.bio,
            website=request.website,
        )

        return CreateAccountResponse(
            account_id=str(account.id),
            name=account.name.root,
            like_credit=account.like_credit,
            like_points=account.like_points,
            created_at=account.created_at,
        )
