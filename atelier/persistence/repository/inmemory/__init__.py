"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .comment import InMemoryCommentRepository
from .content import InMemoryContentRepository
from .follow import InMemoryFollowRepository
from .like import InMemoryLikeRepository
from .notification import InMemoryNotificationRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCommentRepository",
    "InMemoryContentRepository",
    "InMemoryFollowRepository",
    "InMemoryLikeRepository",
    "InMemoryNotificationRepository",
]
