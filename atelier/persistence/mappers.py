"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict
from uuid import UUID

from atelier.domain.model import Account, Comment, Content, Follow, Like, Notification
from atelier.domain.value import (
    AccountId,
    CommentId,
    ContentId,
    ContentType,
    DisplayName,
    FollowId,
    LikeId,
    NotificationId,
    NotificationKind,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column that may come back as str."""
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        name=DisplayName(row["name"]),
        artist_type=row["artist_type"],
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        website=row.get("website"),
        like_credit=row["like_credit"],
        like_points=row["like_points"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return {
        "id": account.id,
        "name": account.name.root,
        "artist_type": account.artist_type,
        "avatar_url": account.avatar_url,
        "bio": account.bio,
        "website": account.website,
        "like_credit": account.like_credit,
        "like_points": account.like_points,
        "created_at": account.created_at,
        "updated_at": account.updated_at,
    }


def row_to_content(row: Dict[str, Any]) -> Content:
    """Convert database row to Content domain model."""
    return Content(
        id=ContentId(_uuid(row["id"])),
        owner_id=AccountId(_uuid(row["owner_id"])),
        content_type=ContentType(row["content_type"]),
        title=row["title"],
        media_url=row["media_url"],
        genre=row.get("genre"),
        description=row.get("description"),
        tags=list(row.get("tags") or []),
        created_at=row["created_at"],
    )


def content_to_dict(content: Content) -> Dict[str, Any]:
    """Convert Content domain model to database dict."""
    return {
        "id": content.id,
        "owner_id": content.owner_id,
        "content_type": content.content_type.value,
        "title": content.title,
        "media_url": content.media_url,
        "genre": content.genre,
        "description": content.description,
        "tags": content.tags,
        "created_at": content.created_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=AccountId(_uuid(row["user_id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        content_type=ContentType(row["content_type"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return {
        "id": like.id,
        "user_id": like.user_id,
        "content_id": like.content_id,
        "content_type": like.content_type.value,
        "created_at": like.created_at,
    }


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(_uuid(row["id"])),
        follower_id=AccountId(_uuid(row["follower_id"])),
        followed_id=AccountId(_uuid(row["followed_id"])),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return {
        "id": follow.id,
        "follower_id": follow.follower_id,
        "followed_id": follow.followed_id,
        "created_at": follow.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=AccountId(_uuid(row["author_id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        content_type=ContentType(row["content_type"]),
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "author_id": comment.author_id,
        "content_id": comment.content_id,
        "content_type": comment.content_type.value,
        "text": comment.text,
        "created_at": comment.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    content_id = row.get("content_id")
    content_type = row.get("content_type")
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=AccountId(_uuid(row["recipient_id"])),
        actor_id=AccountId(_uuid(row["actor_id"])),
        kind=NotificationKind(row["kind"]),
        content_id=ContentId(_uuid(content_id)) if content_id else None,
        content_type=ContentType(content_type) if content_type else None,
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "actor_id": notification.actor_id,
        "kind": notification.kind.value,
        "content_id": notification.content_id,
        "content_type": (
            notification.content_type.value if notification.content_type else None
        ),
        "read": notification.read,
        "created_at": notification.created_at,
    }
