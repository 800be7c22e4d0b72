"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import AccountService, NotificationService
from atelier.domain.value import AccountId, ContentType, NotificationKind


class ActorProfile(BaseModel):
    """Display info for the account that triggered a notification."""

    account_id: str
    name: str
    avatar_url: str | None


class NotificationItem(BaseModel):
    """Notification item in response."""

    notification_id: str
    kind: NotificationKind
    actor: ActorProfile | None  # None if the actor's account is gone
    content_id: str | None
    content_type: ContentType | None
    read: bool
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    recipient_id: str  # From authenticated user
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    items: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase(
    BaseUseCase[ListNotificationsRequest, ListNotificationsResponse]
):
    """Use case for a recipient's inbox, newest first."""

    def __init__(
        self,
        notification_service: NotificationService,
        account_service: AccountService,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification dispatcher
            account_service: Account service for actor profile lookup
        """
        self.notification_service = notification_service
        self.account_service = account_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Actor profiles are resolved with a single batch lookup over the
        distinct actor IDs on the page.
        """
        recipient_id = AccountId(UUID(request.recipient_id))

        notifications = await self.notification_service.list_for_recipient(
            recipient_id, offset=request.offset
        )
        profiles = await self.account_service.get_profiles(
            [n.actor_id for n in notifications]
        )
        unread_count = await self.notification_service.count_unread(recipient_id)

        items = []
        for notification in notifications:
            profile = profiles.get(notification.actor_id)
            items.append(
                NotificationItem(
                    notification_id=str(notification.id),
                    kind=notification.kind,
                    actor=(
                        ActorProfile(
                            account_id=str(profile.id),
                            name=profile.name.root,
                            avatar_url=profile.avatar_url,
                        )
                        if profile
                        else None
                    ),
                    content_id=(
                        str(notification.content_id)
                        if notification.content_id
                        else None
                    ),
                    content_type=notification.content_type,
                    read=notification.read,
                    created_at=notification.created_at,
                )
            )

        return ListNotificationsResponse(items=items, unread_count=unread_count)
