"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from atelier.domain.model.account import Account
from atelier.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Balance mutations are single atomic statements on the account row,
    never read-modify-write from application code.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts in one query.

        Args:
            account_ids: Account IDs to fetch (duplicates allowed)

        Returns:
            Accounts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update profile fields).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass

    @abstractmethod
    async def spend_like_credit(self, account_id: AccountId) -> bool:
        """Atomically take one like credit if the balance is positive.

        Args:
            account_id: The liker's account ID

        Returns:
            True if a credit was spent, False if the balance was zero
        """
        pass

    @abstractmethod
    async def refund_like_credit(self, account_id: AccountId) -> None:
        """Atomically give back one like credit.

        Args:
            account_id: The liker's account ID
        """
        pass

    @abstractmethod
    async def increment_like_points(self, account_id: AccountId) -> None:
        """Atomically increment like points by 1.

        Args:
            account_id: The content owner's account ID
        """
        pass

    @abstractmethod
    async def decrement_like_points(self, account_id: AccountId) -> None:
        """Atomically decrement like points by 1 (minimum 0).

        Args:
            account_id: The content owner's account ID
        """
        pass
