"""Notify use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import NotificationService
from atelier.domain.value import AccountId, ContentId, ContentType, NotificationKind


class NotifyRequest(BaseModel):
    """Notify request.

    Callers must not address a notification to themselves; the dispatcher
    stores whatever it is given.
    """

    recipient_id: str
    actor_id: str  # From authenticated user
    kind: NotificationKind
    content_id: str | None = None
    content_type: ContentType | None = None

    @model_validator(mode="after")
    def check_content_reference(self) -> "NotifyRequest":
        """Follow notifications carry no content; likes and comments need one."""
        has_content = self.content_id is not None and self.content_type is not None
        if self.kind == NotificationKind.FOLLOW:
            if self.content_id is not None or self.content_type is not None:
                raise ValueError("Follow notifications take no content reference")
        elif not has_content:
            raise ValueError(
                f"{self.kind.value} notifications need content_id and content_type"
            )
        return self


class NotifyResponse(BaseModel):
    """Notify response."""

    dispatched: bool


class NotifyUseCase(BaseUseCase[NotifyRequest, NotifyResponse]):
    """Use case for recording a notification directly."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize notify use case.

        Args:
            notification_service: Notification dispatcher
        """
        self.notification_service = notification_service

    async def execute(self, request: NotifyRequest) -> NotifyResponse:
        """Execute notify flow.

        Returns:
            Whether the notification was stored. A failed dispatch is not
            an error.
        """
        dispatched = await self.notification_service.notify(
            recipient_id=AccountId(UUID(request.recipient_id)),
            actor_id=AccountId(UUID(request.actor_id)),
            kind=request.kind,
            content_id=(
                ContentId(UUID(request.content_id)) if request.content_id else None
            ),
            content_type=request.content_type,
        )
        return NotifyResponse(dispatched=dispatched)
