"""PostgreSQL repository implementations."""

from atelier.persistence.repository.account import PostgresAccountRepository
from atelier.persistence.repository.comment import PostgresCommentRepository
from atelier.persistence.repository.content import PostgresContentRepository
from atelier.persistence.repository.follow import PostgresFollowRepository
from atelier.persistence.repository.like import PostgresLikeRepository
from atelier.persistence.repository.notification import (
    PostgresNotificationRepository,
)

__all__ = [
    "PostgresAccountRepository",
    "PostgresContentRepository",
    "PostgresLikeRepository",
    "PostgresFollowRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
]
