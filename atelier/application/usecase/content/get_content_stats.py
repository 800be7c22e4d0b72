"""Get content stats use case."""

from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import ContentService
from atelier.domain.value import ContentId, ContentType


class GetContentStatsRequest(BaseModel):
    """Get content stats request."""

    content_type: ContentType
    content_id: str


class GetContentStatsResponse(BaseModel):
    """Like and comment counts for a content item."""

    content_id: str
    content_type: ContentType
    likes: int
    comments: int


class GetContentStatsUseCase(
    BaseUseCase[GetContentStatsRequest, GetContentStatsResponse]
):
    """Use case for counting likes and comments on a content item."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize get content stats use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: GetContentStatsRequest) -> GetContentStatsResponse:
        """Execute get content stats flow."""
        stats = await self.content_service.get_stats(
            request.content_type, ContentId(UUID(request.content_id))
        )
        return GetContentStatsResponse(
            content_id=request.content_id,
            content_type=request.content_type,
            likes=stats.likes,
            comments=stats.comments,
        )
