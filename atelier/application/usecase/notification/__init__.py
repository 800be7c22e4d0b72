"""Notification use cases."""

from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
)
from .list_notifications import (
    ActorProfile,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase
from .notify import NotifyRequest, NotifyResponse, NotifyUseCase

__all__ = [
    "ActorProfile",
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "NotificationItem",
    "NotifyRequest",
    "NotifyResponse",
    "NotifyUseCase",
]
