"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService, CommentService, ContentService
from atelier.domain.value import ContentId, ContentType


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    author_id: str
    author_name: str | None  # None if the author's account is gone
    author_avatar_url: str | None
    text: str
    created_at: datetime


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    content_type: ContentType
    content_id: str  # UUID string
    limit: int = Field(default=100, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    content_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for listing comments on a content item, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        content_service: ContentService,
        account_service: AccountService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            content_service: Content service for checking the content exists
            account_service: Account service for author profile lookup
        """
        self.comment_service = comment_service
        self.content_service = content_service
        self.account_service = account_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            ContentNotFoundError: If content not found
        """
        content = await self.content_service.get_content(
            request.content_type, ContentId(UUID(request.content_id))
        )
        comments = await self.comment_service.list_comments(
            content.id, limit=request.limit, offset=request.offset
        )

        # Batch query for author profiles (avoid N+1)
        profiles = await self.account_service.get_profiles(
            [comment.author_id for comment in comments]
        )

        comment_items = []
        for comment in comments:
            profile = profiles.get(comment.author_id)
            comment_items.append(
                CommentItem(
                    comment_id=str(comment.id),
                    author_id=str(comment.author_id),
                    author_name=profile.name.root if profile else None,
                    author_avatar_url=profile.avatar_url if profile else None,
                    text=comment.text,
                    created_at=comment.created_at,
                )
            )

        return GetCommentsResponse(
            content_id=request.content_id,
            comments=comment_items,
            total=len(comment_items),
        )
