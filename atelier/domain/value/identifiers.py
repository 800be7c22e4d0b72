"""Strongly typed identifiers for Atelier domain entities.

Using NewType prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
ContentId = NewType("ContentId", UUID)
LikeId = NewType("LikeId", UUID)
FollowId = NewType("FollowId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
