"""PostgreSQL implementation of Account repository."""

from typing import Optional, Sequence

from sqlalchemy import case, select
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.domain.model import Account
from atelier.domain.repository import AccountRepository
from atelier.domain.value import AccountId
from atelier.persistence.mappers import account_to_dict, row_to_account
from atelier.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            Account if found, None otherwise
        """
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts in one query."""
        if not account_ids:
            return []

        stmt = select(accounts_table).where(
            accounts_table.c.id.in_(list(set(account_ids)))
        )
        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings().all()]

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Balances are only written on insert. Updates touch profile fields,
        leaving like_credit and like_points to the atomic counter methods.

        Args:
            account: Account to save

        Returns:
            Saved account
        """
        existing = await self.find_by_id(account.id)

        account_dict = account_to_dict(account)

        if existing:
            profile = {
                key: value
                for key, value in account_dict.items()
                if key not in ("id", "like_credit", "like_points", "created_at")
            }
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**profile)
            )
            await self.session.execute(stmt)
        else:
            stmt = accounts_table.insert().values(**account_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return account

    async def spend_like_credit(self, account_id: AccountId) -> bool:
        """Atomically take one like credit if the balance is positive.

        The balance guard lives in the WHERE clause so two concurrent spends
        against a balance of one cannot both succeed.

        Args:
            account_id: Liker's account ID

        Returns:
            True if a row was updated
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .where(accounts_table.c.like_credit > 0)
            .values(like_credit=accounts_table.c.like_credit - 1)
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        spent = result.first() is not None
        await self.session.flush()
        return spent

    async def refund_like_credit(self, account_id: AccountId) -> None:
        """Atomically give back one like credit."""
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(like_credit=accounts_table.c.like_credit + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_like_points(self, account_id: AccountId) -> None:
        """Atomically increment like points by 1.

        Args:
            account_id: Account ID to update
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(like_points=accounts_table.c.like_points + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_like_points(self, account_id: AccountId) -> None:
        """Atomically decrement like points by 1 (minimum 0).

        Args:
            account_id: Account ID to update
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(
                like_points=case(
                    (
                        accounts_table.c.like_points > 0,
                        accounts_table.c.like_points - 1,
                    ),
                    else_=0,
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
