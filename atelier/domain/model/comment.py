"""Comment entity."""

from datetime import datetime

from pydantic import Field

from atelier.domain.model.common import DomainModel
from atelier.domain.value import AccountId, CommentId, ContentId, ContentType


class Comment(DomainModel):
    """Flat comment on a content item."""

    id: CommentId
    author_id: AccountId
    content_id: ContentId
    content_type: ContentType
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
