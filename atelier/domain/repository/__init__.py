"""Repository interfaces for Atelier domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from atelier.domain.repository.account import AccountRepository
from atelier.domain.repository.comment import CommentRepository
from atelier.domain.repository.content import ContentRepository
from atelier.domain.repository.follow import FollowRepository
from atelier.domain.repository.like import LikeRepository
from atelier.domain.repository.notification import NotificationRepository

__all__ = [
    "AccountRepository",
    "CommentRepository",
    "ContentRepository",
    "FollowRepository",
    "LikeRepository",
    "NotificationRepository",
]
