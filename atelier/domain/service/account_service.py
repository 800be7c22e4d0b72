"""Account domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from atelier.domain.error import (
    AccountNotFoundError,
    BusinessRuleViolationError,
    StorageFailureError,
)
from atelier.domain.model import Account, AccountProfile
from atelier.domain.repository import (
    AccountRepository,
    ContentRepository,
    FollowRepository,
    LikeRepository,
)
from atelier.domain.value import AccountId, DisplayName


@dataclass
class AccountStats:
    """Engagement totals for an account's public profile."""

    total_likes: int
    followers: int
    following: int


class AccountService:
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        content_repository: ContentRepository,
        like_repository: LikeRepository,
        follow_repository: FollowRepository,
        initial_like_credit: int = 5,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            content_repository: Content repository (for stats)
            like_repository: Like repository (for stats)
            follow_repository: Follow repository (for stats)
            initial_like_credit: Credit granted to new accounts
        """
        self.account_repository = account_repository
        self.content_repository = content_repository
        self.like_repository = like_repository
        self.follow_repository = follow_repository
        self.initial_like_credit = initial_like_credit

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity

        Raises:
            AccountNotFoundError: If account not found
            StorageFailureError: If the account store fails
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            try:
                account = await self.account_repository.find_by_id(account_id)
            except SQLAlchemyError as e:
                raise self._storage_failure("get_account", account_id, e) from e
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise AccountNotFoundError(str(account_id))
            return account

    async def create_account(
        self,
        account_id: AccountId,
        name: DisplayName,
        artist_type: str = "artist",
        avatar_url: Optional[str] = None,
        bio: Optional[str] = None,
        website: Optional[str] = None,
    ) -> Account:
        """Initialize an account with a full like-credit balance.

        The ID comes from the external auth collaborator.

        Args:
            account_id: Account ID issued at sign-up
            name: Display name
            artist_type: Free-form artist category
            avatar_url: Avatar image URL
            bio: Short biography
            website: Personal website

        Returns:
            Created account

        Raises:
            BusinessRuleViolationError: If the account already exists
            StorageFailureError: If the account store fails
        """
        with logfire.span("account_service.create_account", account_id=str(account_id)):
            try:
                existing = await self.account_repository.find_by_id(account_id)
            except SQLAlchemyError as e:
                raise self._storage_failure("create_account", account_id, e) from e
            if existing:
                logfire.warn("Account already exists", account_id=str(account_id))
                raise BusinessRuleViolationError("Account already exists")

            now = datetime.now()
            account = Account(
                id=account_id,
                name=name,
                artist_type=artist_type,
                avatar_url=avatar_url,
                bio=bio,
                website=website,
                like_credit=self.initial_like_credit,
                like_points=0,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.account_repository.save(account)
            except IntegrityError as e:
                # A concurrent create for the same ID won the insert
                logfire.warn("Account already exists", account_id=str(account_id))
                raise BusinessRuleViolationError("Account already exists") from e
            except SQLAlchemyError as e:
                raise self._storage_failure("create_account", account_id, e) from e

            logfire.info(
                "Account created",
                account_id=str(saved.id),
                like_credit=saved.like_credit,
            )
            return saved

    async def get_profiles(
        self, account_ids: Sequence[AccountId]
    ) -> dict[AccountId, AccountProfile]:
        """Resolve display profiles for many accounts in one query.

        Args:
            account_ids: Account IDs (duplicates are collapsed)

        Returns:
            Mapping of account ID to profile; unknown IDs are absent
        """
        distinct_ids = list(dict.fromkeys(account_ids))
        if not distinct_ids:
            return {}

        with logfire.span("account_service.get_profiles", count=len(distinct_ids)):
            accounts = await self.account_repository.find_by_ids(distinct_ids)
            return {
                account.id: AccountProfile.from_account(account) for account in accounts
            }

    async def get_stats(self, account_id: AccountId) -> AccountStats:
        """Compute engagement totals for an account.

        ``total_likes`` counts current likes on every piece of content the
        account owns.

        Args:
            account_id: Account ID

        Returns:
            Account stats

        Raises:
            AccountNotFoundError: If account not found
        """
        with logfire.span("account_service.get_stats", account_id=str(account_id)):
            await self.get_by_id(account_id)

            content_ids = await self.content_repository.find_ids_by_owner(account_id)
            total_likes = (
                await self.like_repository.count_by_contents(content_ids)
                if content_ids
                else 0
            )
            followers = await self.follow_repository.count_followers(account_id)
            following = await self.follow_repository.count_following(account_id)

            return AccountStats(
                total_likes=total_likes, followers=followers, following=following
            )

    @staticmethod
    def _storage_failure(
        operation: str, account_id: AccountId, error: SQLAlchemyError
    ) -> StorageFailureError:
        logfire.error(
            "Account storage failure",
            operation=operation,
            account_id=str(account_id),
            error=str(error),
        )
        return StorageFailureError(operation)
