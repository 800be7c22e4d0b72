"""Domain value objects for Atelier.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

from atelier.domain.value.identifiers import AccountId, ContentId


class ContentType(str, Enum):
    """Kind of content that can be liked and commented on."""

    ARTWORK = "artwork"
    MUSIC = "music"


class NotificationKind(str, Enum):
    """Social action that produced a notification."""

    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"


class LikeOutcome(str, Enum):
    """What a like toggle actually did to storage."""

    LIKED = "liked"
    ALREADY_LIKED = "already_liked"
    INSUFFICIENT_CREDIT = "insufficient_credit"
    UNLIKED = "unliked"
    NOT_LIKED = "not_liked"


class FollowOutcome(str, Enum):
    """What a follow toggle actually did to storage."""

    FOLLOWED = "followed"
    ALREADY_FOLLOWING = "already_following"
    UNFOLLOWED = "unfollowed"
    NOT_FOLLOWING = "not_following"


class DisplayName(RootModel[str]):
    """Public name shown next to an account's work.

    Serializes to the bare string; ``str(name)`` gives the trimmed value.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Name must be 1-100 characters")
        return v


class ContentRef(BaseModel):
    """Minimal view of a content item needed by the like ledger.

    The ledger only reads ``owner_id`` to know whose points to adjust.
    """

    model_config = ConfigDict(frozen=True)

    id: ContentId
    owner_id: AccountId
    content_type: ContentType
