"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from atelier.domain.model import Account, Content
from atelier.domain.repository import AccountRepository, ContentRepository
from atelier.domain.value import AccountId, ContentId, ContentType, DisplayName

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


async def make_account(
    account_repo: AccountRepository,
    name: str = "Test Artist",
    like_credit: int = 5,
    like_points: int = 0,
) -> Account:
    """Helper to store an account with the given balances.

    Args:
        account_repo: Repository to save into
        name: Display name
        like_credit: Starting like credit
        like_points: Starting like points

    Returns:
        Saved account
    """
    now = datetime.now()
    account = Account(
        id=AccountId(uuid4()),
        name=DisplayName(name),
        like_credit=like_credit,
        like_points=like_points,
        created_at=now,
        updated_at=now,
    )
    return await account_repo.save(account)


async def make_content(
    content_repo: ContentRepository,
    owner: Account,
    content_type: ContentType = ContentType.ARTWORK,
    title: str = "Untitled",
) -> Content:
    """Helper to store a content item owned by an account."""
    content = Content(
        id=ContentId(uuid4()),
        owner_id=owner.id,
        content_type=content_type,
        title=title,
        media_url=f"https://media.example/{uuid4()}.png",
        created_at=datetime.now(),
    )
    return await content_repo.save(content)
