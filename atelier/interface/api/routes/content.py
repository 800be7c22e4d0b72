"""Content catalog, like and comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from atelier.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from atelier.application.usecase.content import (
    GetContentStatsRequest,
    GetContentStatsResponse,
    GetContentStatsUseCase,
    RegisterContentRequest,
    RegisterContentResponse,
    RegisterContentUseCase,
)
from atelier.application.usecase.like import (
    GetLikeStatesRequest,
    GetLikeStatesResponse,
    GetLikeStatesUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from atelier.domain.service import JWTService
from atelier.domain.value import ContentType
from atelier.interface.api.auth import require_account_id

router = APIRouter(prefix="/content", tags=["content"], route_class=DishkaRoute)


class RegisterContentAPIRequest(BaseModel):
    """API request for registering uploaded content."""

    content_type: ContentType
    title: str = Field(min_length=1, max_length=200)
    media_url: str = Field(min_length=1)
    genre: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list, max_length=20)


class ToggleLikeAPIRequest(BaseModel):
    """API request for liking or unliking."""

    currently_liked: bool


class LikeStatesAPIRequest(BaseModel):
    """API request for batch like states."""

    content_ids: list[str] = Field(max_length=200)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    text: str = Field(min_length=1, max_length=5000)


@router.post(
    "",
    response_model=RegisterContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_content(
    request: RegisterContentAPIRequest,
    register_content_use_case: FromDishka[RegisterContentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RegisterContentResponse:
    """Register an uploaded artwork or music track.

    The media itself is uploaded to object storage by the client first.
    """
    owner_id = require_account_id(jwt_service, auth_token, "upload content")
    return await register_content_use_case.execute(
        RegisterContentRequest(
            owner_id=owner_id,
            content_type=request.content_type,
            title=request.title,
            media_url=request.media_url,
            genre=request.genre,
            description=request.description,
            tags=request.tags,
        )
    )


@router.post("/likes/states", response_model=GetLikeStatesResponse)
async def get_like_states(
    request: LikeStatesAPIRequest,
    get_like_states_use_case: FromDishka[GetLikeStatesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetLikeStatesResponse:
    """Check which of a page of content items the caller likes."""
    user_id = require_account_id(jwt_service, auth_token, "check likes")
    return await get_like_states_use_case.execute(
        GetLikeStatesRequest(user_id=user_id, content_ids=request.content_ids)
    )


@router.get(
    "/{content_type}/{content_id}/stats", response_model=GetContentStatsResponse
)
async def get_content_stats(
    content_type: ContentType,
    content_id: str,
    get_content_stats_use_case: FromDishka[GetContentStatsUseCase],
) -> GetContentStatsResponse:
    """Get like and comment counts for a content item."""
    return await get_content_stats_use_case.execute(
        GetContentStatsRequest(content_type=content_type, content_id=content_id)
    )


@router.post("/{content_type}/{content_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    content_type: ContentType,
    content_id: str,
    request: ToggleLikeAPIRequest,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like or unlike a content item.

    ``currently_liked`` picks the direction. A like with no credit left
    returns 200 with ``liked: false`` and a message.

    Example:
        POST /content/artwork/0b7c.../like
        {"currently_liked": false}

        Response:
        {
            "content_id": "0b7c...",
            "liked": true,
            "outcome": "liked",
            "like_credit": 4,
            "message": null
        }
    """
    user_id = require_account_id(jwt_service, auth_token, "like")
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(
            content_type=content_type,
            content_id=content_id,
            user_id=user_id,
            currently_liked=request.currently_liked,
        )
    )


@router.post(
    "/{content_type}/{content_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    content_type: ContentType,
    content_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddCommentResponse:
    """Comment on a content item."""
    author_id = require_account_id(jwt_service, auth_token, "comment")
    return await add_comment_use_case.execute(
        AddCommentRequest(
            content_type=content_type,
            content_id=content_id,
            author_id=author_id,
            text=request.text,
        )
    )


@router.get(
    "/{content_type}/{content_id}/comments", response_model=GetCommentsResponse
)
async def get_comments(
    content_type: ContentType,
    content_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    limit: int = Query(100, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> GetCommentsResponse:
    """List comments on a content item, newest first."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            content_type=content_type,
            content_id=content_id,
            limit=limit,
            offset=offset,
        )
    )
