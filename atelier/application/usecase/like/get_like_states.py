"""Get like states use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from atelier.application.usecase.base import BaseUseCase
from atelier.domain.service import LedgerService
from atelier.domain.value import AccountId, ContentId


class GetLikeStatesRequest(BaseModel):
    """Get like states request."""

    user_id: str
    content_ids: list[str] = Field(max_length=200)


class GetLikeStatesResponse(BaseModel):
    """Mapping of content ID to whether the user likes it."""

    states: dict[str, bool]


class GetLikeStatesUseCase(BaseUseCase[GetLikeStatesRequest, GetLikeStatesResponse]):
    """Use case for checking a user's likes across a page of content."""

    def __init__(self, ledger_service: LedgerService) -> None:
        self.ledger_service = ledger_service

    async def execute(self, request: GetLikeStatesRequest) -> GetLikeStatesResponse:
        """Execute get like states flow (one batch query)."""
        states = await self.ledger_service.get_like_states(
            user_id=AccountId(UUID(request.user_id)),
            content_ids=[ContentId(UUID(cid)) for cid in request.content_ids],
        )
        return GetLikeStatesResponse(
            states={str(cid): liked for cid, liked in states.items()}
        )
