"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService, ContentService, LedgerService
from atelier.domain.value import AccountId, ContentId, ContentType, LikeOutcome

INSUFFICIENT_CREDIT_MESSAGE = (
    "You have no like credit left. Unlike something to get one back."
)


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    content_type: ContentType
    content_id: str  # UUID string
    user_id: str  # From authenticated user
    currently_liked: bool


class ToggleLikeResponse(BaseModel):
    """Toggle like response.

    ``message`` is set when the like was refused without an error.
    """

    content_id: str
    liked: bool
    outcome: LikeOutcome
    like_credit: int
    message: str | None = None


class ToggleLikeUseCase(BaseUseCase[ToggleLikeRequest, ToggleLikeResponse]):
    """Use case for liking or unliking a content item."""

    def __init__(
        self,
        ledger_service: LedgerService,
        content_service: ContentService,
        account_service: AccountService,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            ledger_service: Like ledger domain service
            content_service: Content service for resolving the owner
            account_service: Account service for the remaining balance
        """
        self.ledger_service = ledger_service
        self.content_service = content_service
        self.account_service = account_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            New like state, outcome and the liker's remaining credit

        Raises:
            ContentNotFoundError: If content not found
            AccountNotFoundError: If liker or owner has no account
            StorageFailureError: If storage fails mid-toggle
        """
        user_id = AccountId(UUID(request.user_id))
        content = await self.content_service.get_content(
            request.content_type, ContentId(UUID(request.content_id))
        )

        result = await self.ledger_service.toggle_like(
            liker_id=user_id,
            content=content.ref,
            currently_liked=request.currently_liked,
        )
        liker = await self.account_service.get_by_id(user_id)

        return ToggleLikeResponse(
            content_id=request.content_id,
            liked=result.liked,
            outcome=result.outcome,
            like_credit=liker.like_credit,
            message=(
                INSUFFICIENT_CREDIT_MESSAGE
                if result.outcome == LikeOutcome.INSUFFICIENT_CREDIT
                else None
            ),
        )
