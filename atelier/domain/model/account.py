"""Account aggregate root.

Every user has one account holding their public profile and the two
counters of the like economy.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from atelier.domain.model.common import DomainModel
from atelier.domain.value import AccountId, DisplayName


class Account(DomainModel):
    """Account aggregate root.

    Balances:
    - like_credit: spendable balance, drawn down by one per like and
      refunded on unlike. Never negative; a like that needs more credit
      than available is rejected, not clamped.
    - like_points: reputation accrued when others like this account's
      content. Floored at zero on decrement.
    """

    id: AccountId
    name: DisplayName
    artist_type: str = "artist"
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    like_credit: int = Field(default=5, ge=0)
    like_points: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class AccountProfile(DomainModel):
    """Display information for an account, used to decorate feeds."""

    id: AccountId
    name: DisplayName
    artist_type: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountProfile":
        """Project an account onto its public profile fields."""
        return cls(
            id=account.id,
            name=account.name,
            artist_type=account.artist_type,
            avatar_url=account.avatar_url,
            bio=account.bio,
            website=account.website,
        )
