"""Register content use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService, ContentService
from atelier.domain.value import AccountId, ContentType


class RegisterContentRequest(BaseModel):
    """Register content request."""

    owner_id: str  # From authenticated user
    content_type: ContentType
    title: str = Field(min_length=1, max_length=200)
    media_url: str = Field(min_length=1)
    genre: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)


class RegisterContentResponse(BaseModel):
    """Register content response."""

    content_id: str
    owner_id: str
    content_type: ContentType
    title: str
    media_url: str
    tags: list[str]
    created_at: datetime


class RegisterContentUseCase(
    BaseUseCase[RegisterContentRequest, RegisterContentResponse]
):
    """Use case for adding an uploaded artwork or track to the catalog."""

    def __init__(
        self, content_service: ContentService, account_service: AccountService
    ) -> None:
        """Initialize register content use case.

        Args:
            content_service: Content domain service
            account_service: Account service for verifying the owner
        """
        self.content_service = content_service
        self.account_service = account_service

    async def execute(self, request: RegisterContentRequest) -> RegisterContentResponse:
        """Execute register content flow.

        Raises:
            AccountNotFoundError: If the owner has no account
        """
        owner_id = AccountId(UUID(request.owner_id))
        await self.account_service.get_by_id(owner_id)

        content = await self.content_service.register_content(
            owner_id=owner_id,
            content_type=request.content_type,
            title=request.title,
            media_url=request.media_url,
            genre=request.genre,
            description=request.description,
            tags=request.tags,
        )

        return RegisterContentResponse(
            content_id=str(content.id),
            owner_id=str(content.owner_id),
            content_type=content.content_type,
            title=content.title,
            media_url=content.media_url,
            tags=content.tags,
            created_at=content.created_at,
        )
