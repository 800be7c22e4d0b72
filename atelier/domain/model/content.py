"""Content entity.

Artwork and music uploads owned by an account. The catalog stores the
metadata; the media itself lives in external object storage.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from atelier.domain.model.common import DomainModel
from atelier.domain.value import AccountId, ContentId, ContentRef, ContentType


class Content(DomainModel):
    """Content entity (artwork or music track)."""

    id: ContentId
    owner_id: AccountId
    content_type: ContentType
    title: str = Field(min_length=1, max_length=200)
    media_url: str
    genre: Optional[str] = None
    description: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> ContentRef:
        """Reference consumed by the like ledger."""
        return ContentRef(
            id=self.id, owner_id=self.owner_id, content_type=self.content_type
        )
