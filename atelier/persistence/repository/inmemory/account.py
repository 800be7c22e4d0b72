"""In-memory account repository for testing."""

from typing import Optional, Sequence

from atelier.domain.model.account import Account
from atelier.domain.repository.account import AccountRepository
from atelier.domain.value import AccountId


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Each method checks and mutates without awaiting in between, so
    concurrent coroutines see the same atomicity as the SQL statements.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts."""
        return [
            self._accounts[account_id]
            for account_id in set(account_ids)
            if account_id in self._accounts
        ]

    async def save(self, account: Account) -> Account:
        """Save or update an account, keeping stored balances on update."""
        existing = self._accounts.get(account.id)
        if existing:
            account = account.evolve(
                like_credit=existing.like_credit,
                like_points=existing.like_points,
                created_at=existing.created_at,
            )
        self._accounts[account.id] = account
        return account

    async def spend_like_credit(self, account_id: AccountId) -> bool:
        """Take one like credit if the balance is positive."""
        account = self._accounts.get(account_id)
        if not account or account.like_credit <= 0:
            return False
        self._accounts[account_id] = account.evolve(
            like_credit=account.like_credit - 1
        )
        return True

    async def refund_like_credit(self, account_id: AccountId) -> None:
        """Give back one like credit."""
        account = self._accounts.get(account_id)
        if account:
            self._accounts[account_id] = account.evolve(
                like_credit=account.like_credit + 1
            )

    async def increment_like_points(self, account_id: AccountId) -> None:
        """Increment like points by 1."""
        account = self._accounts.get(account_id)
        if account:
            self._accounts[account_id] = account.evolve(
                like_points=account.like_points + 1
            )

    async def decrement_like_points(self, account_id: AccountId) -> None:
        """Decrement like points by 1 (minimum 0)."""
        account = self._accounts.get(account_id)
        if account:
            self._accounts[account_id] = account.evolve(
                like_points=max(0, account.like_points - 1)
            )
