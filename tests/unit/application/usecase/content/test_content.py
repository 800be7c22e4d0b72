"""Unit tests for content use cases."""

from uuid import uuid4

import pytest

from atelier.application.usecase.content import (
    GetContentStatsRequest,
    GetContentStatsUseCase,
    RegisterContentRequest,
    RegisterContentUseCase,
)
from atelier.domain.error import AccountNotFoundError
from atelier.domain.repository import AccountRepository
from atelier.domain.value import ContentType
from tests.conftest import make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterContent:
    """Tests for the register content use case."""

    @pytest.mark.asyncio
    async def test_register_and_read_stats(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterContentUseCase)
        stats = await unit_env.get(GetContentStatsUseCase)
        account_repo = await unit_env.get(AccountRepository)
        owner = await make_account(account_repo, "Owner")

        # Act
        response = await register.execute(
            RegisterContentRequest(
                owner_id=str(owner.id),
                content_type=ContentType.ARTWORK,
                title="Tidal Study",
                media_url="https://media.example/tidal.png",
                tags=["Ink", "sea"],
            )
        )
        counts = await stats.execute(
            GetContentStatsRequest(
                content_type=ContentType.ARTWORK, content_id=response.content_id
            )
        )

        # Assert
        assert response.owner_id == str(owner.id)
        assert response.tags == ["ink", "sea"]
        assert counts.likes == 0
        assert counts.comments == 0

    @pytest.mark.asyncio
    async def test_register_for_unknown_owner(self, unit_env):
        register = await unit_env.get(RegisterContentUseCase)

        with pytest.raises(AccountNotFoundError):
            await register.execute(
                RegisterContentRequest(
                    owner_id=str(uuid4()),
                    content_type=ContentType.MUSIC,
                    title="Demo",
                    media_url="https://media.example/demo.mp3",
                )
            )
