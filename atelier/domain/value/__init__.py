"""Domain value objects for Atelier."""

from atelier.domain.value.identifiers import (
    AccountId,
    CommentId,
    ContentId,
    FollowId,
    LikeId,
    NotificationId,
)
from atelier.domain.value.types import (
    ContentRef,
    ContentType,
    DisplayName,
    FollowOutcome,
    LikeOutcome,
    NotificationKind,
)

__all__ = [
    # Identifiers
    "AccountId",
    "ContentId",
    "LikeId",
    "FollowId",
    "CommentId",
    "NotificationId",
    # Types
    "ContentRef",
    "ContentType",
    "DisplayName",
    "FollowOutcome",
    "LikeOutcome",
    "NotificationKind",
]
