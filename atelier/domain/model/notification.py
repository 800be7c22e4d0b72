"""Notification entity.

Notifications are append-only. The only permitted change is flipping
``read`` from False to True.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from atelier.domain.model.common import DomainModel
from atelier.domain.value import (
    AccountId,
    ContentId,
    ContentType,
    NotificationId,
    NotificationKind,
)


class Notification(DomainModel):
    """Notification addressed to a recipient's inbox.

    Follow notifications carry no content reference.
    """

    id: NotificationId
    recipient_id: AccountId
    actor_id: AccountId
    kind: NotificationKind
    content_id: Optional[ContentId] = None
    content_type: Optional[ContentType] = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
