"""Mark notification read use case."""

from uuid import UUID

from pydantic import BaseModel

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import NotificationService
from atelier.domain.value import AccountId, NotificationId


class MarkReadRequest(BaseModel):
    """Mark read request."""

    notification_id: str
    recipient_id: str  # From authenticated user


class MarkReadResponse(BaseModel):
    """Mark read response.

    ``changed`` is False when the notification was already read.
    """

    notification_id: str
    read: bool
    changed: bool


class MarkReadUseCase(BaseUseCase[MarkReadRequest, MarkReadResponse]):
    """Use case for marking one of the caller's notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        Raises:
            NotificationNotFoundError: If notification does not exist
            NotAuthorizedError: If it belongs to someone else
        """
        changed = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            recipient_id=AccountId(UUID(request.recipient_id)),
        )
        return MarkReadResponse(
            notification_id=request.notification_id, read=True, changed=changed
        )
