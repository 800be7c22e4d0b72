"""Get unread notification count use case."""

from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.config import NotificationSettings
from atelier.domain.service import NotificationService
from atelier.domain.value import AccountId


class GetUnreadCountRequest(BaseModel):
    """Get unread count request."""

    recipient_id: str


class GetUnreadCountResponse(BaseModel):
    """Unread badge count plus the interval clients should poll at."""

    unread_count: int
    poll_interval_seconds: int


class GetUnreadCountUseCase(BaseUseCase[GetUnreadCountRequest, GetUnreadCountResponse]):
    """Use case for the notification badge."""

    def __init__(
        self,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize get unread count use case.

        Args:
            notification_service: Notification dispatcher
            notification_settings: Notification settings (poll interval)
        """
        self.notification_service = notification_service
        self.notification_settings = notification_settings

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        """Execute get unread count flow."""
        count = await self.notification_service.count_unread(
            AccountId(UUID(request.recipient_id))
        )
        return GetUnreadCountResponse(
            unread_count=count,
            poll_interval_seconds=(
                self.notification_settings.unread_poll_interval_seconds
            ),
        )
