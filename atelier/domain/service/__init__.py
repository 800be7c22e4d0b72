"""Domain services."""

from .account_service import AccountService, AccountStats
from .comment_service import CommentService
from .content_service import ContentService, ContentStats
from .follow_service import FollowResult, FollowService
from .jwt_service import JWTService
from .ledger_service import LedgerService, LikeResult
from .notification_service import NotificationService

__all__ = [
    "AccountService",
    "AccountStats",
    "CommentService",
    "ContentService",
    "ContentStats",
    "FollowResult",
    "FollowService",
    "JWTService",
    "LedgerService",
    "LikeResult",
    "NotificationService",
]
