"""Unit tests for ToggleLikeUseCase."""

from uuid import uuid4

import pytest

from atelier.application.usecase.like import (
    GetLikeStatesRequest,
    GetLikeStatesUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from atelier.domain.error import ContentNotFoundError
from atelier.domain.repository import AccountRepository, ContentRepository
from atelier.domain.value import ContentType, LikeOutcome
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleLike:
    """Tests for the toggle like use case."""

    @pytest.mark.asyncio
    async def test_like_reports_remaining_credit(self, unit_env):
        """The response carries the liker's balance after the like."""
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker", like_credit=3)
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        # Act
        response = await use_case.execute(
            ToggleLikeRequest(
                content_type=ContentType.ARTWORK,
                content_id=str(content.id),
                user_id=str(liker.id),
                currently_liked=False,
            )
        )

        # Assert
        assert response.liked is True
        assert response.outcome == LikeOutcome.LIKED
        assert response.like_credit == 2
        assert response.message is None

    @pytest.mark.asyncio
    async def test_out_of_credit_returns_message(self, unit_env):
        """Running out of credit is an advisory response, not an error."""
        use_case = await unit_env.get(ToggleLikeUseCase)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker", like_credit=0)
        owner = await make_account(account_repo, "Owner")
        content = await make_content(content_repo, owner)

        response = await use_case.execute(
            ToggleLikeRequest(
                content_type=ContentType.ARTWORK,
                content_id=str(content.id),
                user_id=str(liker.id),
                currently_liked=False,
            )
        )

        assert response.liked is False
        assert response.outcome == LikeOutcome.INSUFFICIENT_CREDIT
        assert response.like_credit == 0
        assert response.message is not None
        assert "like credit" in response.message

    @pytest.mark.asyncio
    async def test_wrong_content_type_is_not_found(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker")
        owner = await make_account(account_repo, "Owner")
        artwork = await make_content(content_repo, owner, ContentType.ARTWORK)

        with pytest.raises(ContentNotFoundError):
            await use_case.execute(
                ToggleLikeRequest(
                    content_type=ContentType.MUSIC,
                    content_id=str(artwork.id),
                    user_id=str(liker.id),
                    currently_liked=False,
                )
            )

        assert (await account_repo.find_by_id(liker.id)).like_credit == 5


class TestGetLikeStates:
    """Tests for the get like states use case."""

    @pytest.mark.asyncio
    async def test_states_keyed_by_content_id(self, unit_env):
        toggle = await unit_env.get(ToggleLikeUseCase)
        use_case = await unit_env.get(GetLikeStatesUseCase)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)

        liker = await make_account(account_repo, "Liker")
        owner = await make_account(account_repo, "Owner")
        liked = await make_content(content_repo, owner, ContentType.MUSIC)
        other_id = str(uuid4())
        await toggle.execute(
            ToggleLikeRequest(
                content_type=ContentType.MUSIC,
                content_id=str(liked.id),
                user_id=str(liker.id),
                currently_liked=False,
            )
        )

        response = await use_case.execute(
            GetLikeStatesRequest(
                user_id=str(liker.id), content_ids=[str(liked.id), other_id]
            )
        )

        assert response.states == {str(liked.id): True, other_id: False}
