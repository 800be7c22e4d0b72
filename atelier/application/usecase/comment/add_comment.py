"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService, CommentService, ContentService
from atelier.domain.value import AccountId, ContentId, ContentType


class AddCommentRequest(BaseModel):
    """Add comment request."""

    content_type: ContentType
    content_id: str  # UUID string
    author_id: str  # From authenticated user
    text: str = Field(min_length=1, max_length=5000)


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment_id: str
    content_id: str
    author_id: str
    text: str
    created_at: datetime


class AddCommentUseCase(BaseUseCase[AddCommentRequest, AddCommentResponse]):
    """Use case for commenting on an artwork or track."""

    def __init__(
        self,
        comment_service: CommentService,
        content_service: ContentService,
        account_service: AccountService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            content_service: Content service for resolving the content
            account_service: Account service for verifying the author
        """
        self.comment_service = comment_service
        self.content_service = content_service
        self.account_service = account_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            ContentNotFoundError: If content not found
            AccountNotFoundError: If the author has no account
            ValidationError: If the text is blank after trimming
        """
        author_id = AccountId(UUID(request.author_id))
        await self.account_service.get_by_id(author_id)

        content = await self.content_service.get_content(
            request.content_type, ContentId(UUID(request.content_id))
        )
        comment = await self.comment_service.add_comment(
            author_id=author_id, content=content, text=request.text
        )

        return AddCommentResponse(
            comment_id=str(comment.id),
            content_id=str(comment.content_id),
            author_id=str(comment.author_id),
            text=comment.text,
            created_at=comment.created_at,
        )
