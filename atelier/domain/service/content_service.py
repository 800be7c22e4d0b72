"""Content catalog domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from atelier.domain.error import ContentNotFoundError
from atelier.domain.model import Content
from atelier.domain.repository import (
    CommentRepository,
    ContentRepository,
    LikeRepository,
)
from atelier.domain.value import AccountId, ContentId, ContentType



@dataclass
class ContentStats:
    """Engagement counts for one content item."""

    likes: int
    comments: int


class ContentService:
    """Domain service for the content catalog."""

    def __init__(
        self,
        content_repository: ContentRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
            like_repository: Like repository (for stats)
            comment_repository: Comment repository (for stats)
        """
        self.content_repository = content_repository
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def register_content(
        self,
        owner_id: AccountId,
        content_type: ContentType,
        title: str,
        media_url: str,
        genre: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Content:
        """Add an uploaded artwork or music track to the catalog.

        Args:
            owner_id: Uploading account
            content_type: Artwork or music
            title: Title
            media_url: URL of the already-uploaded media
            genre: Optional genre
            description: Optional description
            tags: Optional tags (lowercased, de-duplicated)

        Returns:
            Stored content
        """
        with logfire.span(
            "content_service.register_content",
            owner_id=str(owner_id),
            content_type=content_type.value,
        ):
            normalized_tags = list(
                dict.fromkeys(t.strip().lower() for t in (tags or []) if t.strip())
            )
            content = Content(
                id=ContentId(uuid4()),
                owner_id=owner_id,
                content_type=content_type,
                title=title.strip(),
                media_url=media_url,
                genre=genre,
                description=description,
                tags=normalized_tags,
                created_at=datetime.now(),
            )
            saved = await self.content_repository.save(content)
            logfire.info(
                "Content registered",
                content_id=str(saved.id),
                owner_id=str(owner_id),
            )
            return saved

    async def get_content(
        self, content_type: ContentType, content_id: ContentId
    ) -> Content:
        """Get a content item, checking it has the expected type.

        Args:
            content_type: Expected content type
            content_id: Content ID

        Returns:
            Content entity

        Raises:
            ContentNotFoundError: If missing or of a different type
        """
        content = await self.content_repository.find_by_id(content_id)
        if not content or content.content_type != content_type:
            logfire.warn(
                "Content not found",
                content_id=str(content_id),
                content_type=content_type.value,
            )
            raise ContentNotFoundError(str(content_id))
        return content

    async def get_stats(
        self, content_type: ContentType, content_id: ContentId
    ) -> ContentStats:
        """Count likes and comments on a content item.

        Raises:
            ContentNotFoundError: If content not found
        """
        with logfire.span("content_service.get_stats", content_id=str(content_id)):
            await self.get_content(content_type, content_id)
            likes = await self.like_repository.count_by_contents([content_id])
            comments = await self.comment_repository.count_by_content(content_id)
            return ContentStats(likes=likes, comments=comments)
