"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from atelier.application.usecase.notification import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
    NotifyRequest,
    NotifyResponse,
    NotifyUseCase,
)
from atelier.domain.service import JWTService
from atelier.domain.value import ContentType, NotificationKind
from atelier.interface.api.auth import require_account_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class NotifyAPIRequest(BaseModel):
    """API request for sending a notification as the caller."""

    recipient_id: str
    kind: NotificationKind
    content_id: str | None = None
    content_type: ContentType | None = None


@router.post("", response_model=NotifyResponse)
async def notify(
    request: NotifyAPIRequest,
    notify_use_case: FromDishka[NotifyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotifyResponse:
    """Record a notification with the caller as actor.

    ``dispatched: false`` means the notification could not be stored; the
    request still succeeds.
    """
    actor_id = require_account_id(jwt_service, auth_token, "send notifications")
    if request.recipient_id == actor_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot notify yourself",
        )

    return await notify_use_case.execute(
        NotifyRequest(
            recipient_id=request.recipient_id,
            actor_id=actor_id,
            kind=request.kind,
            content_id=request.content_id,
            content_type=request.content_type,
        )
    )


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    offset: int = Query(0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first, one page at a time."""
    recipient_id = require_account_id(jwt_service, auth_token, "view notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(recipient_id=recipient_id, offset=offset)
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Count the caller's unread notifications.

    Clients poll this endpoint; the response says how often.
    """
    recipient_id = require_account_id(jwt_service, auth_token, "view notifications")
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(recipient_id=recipient_id)
    )


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkReadResponse:
    """Mark one of the caller's notifications as read (idempotent)."""
    recipient_id = require_account_id(jwt_service, auth_token, "mark notifications")
    return await mark_read_use_case.execute(
        MarkReadRequest(notification_id=notification_id, recipient_id=recipient_id)
    )
