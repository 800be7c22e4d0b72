"""Like entity.

One account's like on one content item. At most one like exists per
(user, content) pair, enforced by a unique constraint.
"""

from datetime import datetime

from pydantic import Field

from atelier.domain.model.common import DomainModel
from atelier.domain.value import AccountId, ContentId, ContentType, LikeId


class Like(DomainModel):
    """Like record."""

    id: LikeId
    user_id: AccountId
    content_id: ContentId
    content_type: ContentType
    created_at: datetime = Field(default_factory=datetime.now)
