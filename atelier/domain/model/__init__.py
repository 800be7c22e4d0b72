"""Domain model entities for Atelier."""

from atelier.domain.model.account import Account, AccountProfile
from atelier.domain.model.comment import Comment
from atelier.domain.model.content import Content
from atelier.domain.model.follow import Follow
from atelier.domain.model.like import Like
from atelier.domain.model.notification import Notification

__all__ = [
    "Account",
    "AccountProfile",
    "Comment",
    "Content",
    "Follow",
    "Like",
    "Notification",
]
