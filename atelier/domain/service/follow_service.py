"""Follow domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from atelier.domain.error import (
    AccountNotFoundError,
    SelfFollowRejectedError,
    StorageFailureError,
)
from atelier.domain.model import Follow
from atelier.domain.repository import AccountRepository, FollowRepository
from atelier.domain.value import AccountId, FollowId, FollowOutcome, NotificationKind

from .notification_service import NotificationService


@dataclass
class FollowResult:
    """Result of a follow toggle."""

    following: bool
    outcome: FollowOutcome


class FollowService:
    """Domain service for follow relationships."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            account_repository: Account repository
            notification_service: Dispatcher for follow notifications
        """
        self.follow_repository = follow_repository
        self.account_repository = account_repository
        self.notification_service = notification_service

    async def toggle_follow(
        self,
        follower_id: AccountId,
        followed_id: AccountId,
        currently_following: bool,
    ) -> FollowResult:
        """Follow or unfollow an account.

        Args:
            follower_id: Account performing the action
            followed_id: Target account
            currently_following: True unfollows, False follows

        Returns:
            Resulting follow state and outcome

        Raises:
            SelfFollowRejectedError: If follower and target are the same account
            AccountNotFoundError: If the target account does not exist
            StorageFailureError: If a store operation fails
        """
        if follower_id == followed_id:
            logfire.info("Self-follow rejected", account_id=str(follower_id))
            raise SelfFollowRejectedError(str(follower_id))

        with logfire.span(
            "follow_service.toggle_follow",
            follower_id=str(follower_id),
            followed_id=str(followed_id),
            currently_following=currently_following,
        ):
            try:
                if currently_following:
                    deleted = await self.follow_repository.delete(
                        follower_id, followed_id
                    )
                    logfire.info(
                        "Unfollowed" if deleted else "No follow to remove",
                        follower_id=str(follower_id),
                        followed_id=str(followed_id),
                    )
                    return FollowResult(
                        following=False,
                        outcome=(
                            FollowOutcome.UNFOLLOWED
                            if deleted
                            else FollowOutcome.NOT_FOLLOWING
                        ),
                    )

                target = await self.account_repository.find_by_id(followed_id)
                if not target:
                    logfire.warn(
                        "Follow target not found", followed_id=str(followed_id)
                    )
                    raise AccountNotFoundError(str(followed_id))

                follow = Follow(
                    id=FollowId(uuid4()),
                    follower_id=follower_id,
                    followed_id=followed_id,
                    created_at=datetime.now(),
                )
                inserted = await self.follow_repository.insert_if_absent(follow)
            except SQLAlchemyError as e:
                logfire.error(
                    "Follow toggle storage failure",
                    follower_id=str(follower_id),
                    followed_id=str(followed_id),
                    error=str(e),
                )
                raise StorageFailureError("toggle_follow") from e

            if not inserted:
                logfire.info(
                    "Already following",
                    follower_id=str(follower_id),
                    followed_id=str(followed_id),
                )
                return FollowResult(
                    following=True, outcome=FollowOutcome.ALREADY_FOLLOWING
                )

            logfire.info(
                "Followed", follower_id=str(follower_id), followed_id=str(followed_id)
            )
            await self.notification_service.notify(
                recipient_id=followed_id,
                actor_id=follower_id,
                kind=NotificationKind.FOLLOW,
            )
            return FollowResult(following=True, outcome=FollowOutcome.FOLLOWED)

    async def get_following_states(
        self, follower_id: AccountId, account_ids: Sequence[AccountId]
    ) -> dict[AccountId, bool]:
        """Check which accounts the follower follows.

        Args:
            follower_id: Following account
            account_ids: Accounts to check

        Returns:
            Mapping of account ID to whether it is followed
        """
        if not account_ids:
            return {}

        followed = set(
            await self.follow_repository.find_followed_among(follower_id, account_ids)
        )
        return {aid: aid in followed for aid in account_ids}

    async def list_followers(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges pointing at an account, newest first."""
        with logfire.span("follow_service.list_followers", account_id=str(account_id)):
            return await self.follow_repository.find_followers(
                account_id, limit=limit, offset=offset
            )

    async def list_following(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[Follow]:
        """List edges originating from an account, newest first."""
        with logfire.span("follow_service.list_following", account_id=str(account_id)):
            return await self.follow_repository.find_following(
                account_id, limit=limit, offset=offset
            )
