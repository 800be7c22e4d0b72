"""Follow edge between two accounts."""

from datetime import datetime

from pydantic import Field, model_validator

from atelier.domain.model.common import DomainModel
from atelier.domain.value import AccountId, FollowId


class Follow(DomainModel):
    """Directed follow edge.

    At most one edge per ordered (follower, followed) pair; an account never
    follows itself.
    """

    id: FollowId
    follower_id: AccountId
    followed_id: AccountId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def reject_self_follow(self) -> "Follow":
        if self.follower_id == self.followed_id:
            raise ValueError("follower_id and followed_id must differ")
        return self
