"""Like ledger domain service.

Liking spends one of the liker's like credits and awards one like point to
the content owner; unliking reverses both. Every transition is decided by an
atomic storage operation, so a stale ``currently_liked`` flag from a client
or two concurrent taps can never double-spend or double-refund.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from atelier.domain.error import AccountNotFoundError, StorageFailureError
from atelier.domain.model import Like
from atelier.domain.repository import AccountRepository, LikeRepository
from atelier.domain.value import (
    AccountId,
    ContentId,
    ContentRef,
    LikeId,
    LikeOutcome,
    NotificationKind,
)

from .notification_service import NotificationService


@dataclass
class LikeResult:
    """Result of a like toggle.

    ``liked`` is the state after the call; ``outcome`` says what happened.
    """

    liked: bool
    outcome: LikeOutcome


class LedgerService:
    """Domain service for the like-credit economy."""

    def __init__(
        self,
        account_repository: AccountRepository,
        like_repository: LikeRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize ledger service.

        Args:
            account_repository: Account repository (balances)
            like_repository: Like repository
            notification_service: Dispatcher for like notifications
        """
        self.account_repository = account_repository
        self.like_repository = like_repository
        self.notification_service = notification_service

    async def toggle_like(
        self, liker_id: AccountId, content: ContentRef, currently_liked: bool
    ) -> LikeResult:
        """Like or unlike a content item.

        ``currently_liked`` selects the direction: True unlikes, False likes.
        Whether anything changes is decided by storage, not by the flag.

        Like:
        1. Insert the like if absent (unique on user + content)
        2. Spend one credit if the balance is positive, else undo step 1
        3. Award one point to the owner
        4. Notify the owner unless they liked their own work

        Unlike:
        1. Delete the like
        2. Only if a like was deleted: refund the credit and take the point
           back from the owner (floored at zero)

        Args:
            liker_id: Account performing the action
            content: Content being (un)liked
            currently_liked: Caller's belief about the prior state

        Returns:
            Resulting like state and outcome

        Raises:
            AccountNotFoundError: If liker or owner account does not exist
            StorageFailureError: If a store operation fails
        """
        with logfire.span(
            "ledger_service.toggle_like",
            liker_id=str(liker_id),
            content_id=str(content.id),
            owner_id=str(content.owner_id),
            currently_liked=currently_liked,
        ):
            try:
                await self._require_accounts(liker_id, content.owner_id)

                if currently_liked:
                    return await self._unlike(liker_id, content)
                return await self._like(liker_id, content)
            except SQLAlchemyError as e:
                logfire.error(
                    "Like toggle storage failure",
                    liker_id=str(liker_id),
                    content_id=str(content.id),
                    error=str(e),
                )
                raise StorageFailureError("toggle_like") from e

    async def get_like_states(
        self, user_id: AccountId, content_ids: Sequence[ContentId]
    ) -> dict[ContentId, bool]:
        """Check which content items a user currently likes.

        Args:
            user_id: Account ID
            content_ids: Content IDs to check

        Returns:
            Mapping of content ID to whether the user likes it
        """
        if not content_ids:
            return {}

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.like_repository.find_by_user_and_contents(
            user_id=user_id, content_ids=content_ids
        )
        liked_ids = {like.content_id for like in likes}
        return {cid: cid in liked_ids for cid in content_ids}

    async def _require_accounts(self, *account_ids: AccountId) -> None:
        """Abort before any mutation if a referenced account is missing."""
        accounts = await self.account_repository.find_by_ids(list(set(account_ids)))
        found = {account.id for account in accounts}
        for account_id in account_ids:
            if account_id not in found:
                logfire.warn("Account not found", account_id=str(account_id))
                raise AccountNotFoundError(str(account_id))

    async def _like(self, liker_id: AccountId, content: ContentRef) -> LikeResult:
        like = Like(
            id=LikeId(uuid4()),
            user_id=liker_id,
            content_id=content.id,
            content_type=content.content_type,
            created_at=datetime.now(),
        )

        inserted = await self.like_repository.insert_if_absent(like)
        if not inserted:
            logfire.info(
                "Like already recorded",
                liker_id=str(liker_id),
                content_id=str(content.id),
            )
            return LikeResult(liked=True, outcome=LikeOutcome.ALREADY_LIKED)

        spent = await self.account_repository.spend_like_credit(liker_id)
        if not spent:
            await self.like_repository.delete_by_user_and_content(liker_id, content.id)
            logfire.info(
                "Like rejected - no like credit",
                liker_id=str(liker_id),
                content_id=str(content.id),
            )
            return LikeResult(liked=False, outcome=LikeOutcome.INSUFFICIENT_CREDIT)

        await self.account_repository.increment_like_points(content.owner_id)

        logfire.info(
            "Content liked",
            liker_id=str(liker_id),
            content_id=str(content.id),
            owner_id=str(content.owner_id),
        )

        # Self-likes cost credit but stay silent
        if liker_id != content.owner_id:
            await self.notification_service.notify(
                recipient_id=content.owner_id,
                actor_id=liker_id,
                kind=NotificationKind.LIKE,
                content_id=content.id,
                content_type=content.content_type,
            )

        return LikeResult(liked=True, outcome=LikeOutcome.LIKED)

    async def _unlike(self, liker_id: AccountId, content: ContentRef) -> LikeResult:
        deleted = await self.like_repository.delete_by_user_and_content(
            liker_id, content.id
        )
        if not deleted:
            logfire.info(
                "No like to remove",
                liker_id=str(liker_id),
                content_id=str(content.id),
            )
            return LikeResult(liked=False, outcome=LikeOutcome.NOT_LIKED)

        await self.account_repository.refund_like_credit(liker_id)
        await self.account_repository.decrement_like_points(content.owner_id)

        logfire.info(
            "Content unliked",
            liker_id=str(liker_id),
            content_id=str(content.id),
            owner_id=str(content.owner_id),
        )
        return LikeResult(liked=False, outcome=LikeOutcome.UNLIKED)
