"""Account and follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from atelier.application.usecase.account import (
    CreateAccountRequest,
    CreateAccountResponse,
    CreateAccountUseCase,
    GetAccountRequest,
    GetAccountResponse,
    GetAccountStatsRequest,
    GetAccountStatsResponse,
    GetAccountStatsUseCase,
    GetAccountUseCase,
)
from atelier.application.usecase.follow import (
    ConnectionDirection,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
    ToggleFollowRequest,
    ToggleFollowResponse,
    ToggleFollowUseCase,
)
from atelier.domain.service import JWTService
from atelier.interface.api.auth import require_account_id

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


class CreateAccountAPIRequest(BaseModel):
    """API request for initializing the caller's account."""

    name: str = Field(min_length=1, max_length=100)
    artist_type: str = "artist"
    avatar_url: str | None = None
    bio: str | None = Field(None, max_length=500)
    website: str | None = None


class ToggleFollowAPIRequest(BaseModel):
    """API request for following or unfollowing."""

    currently_following: bool


@router.post(
    "",
    response_model=CreateAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_account(
    request: CreateAccountAPIRequest,
    create_account_use_case: FromDishka[CreateAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAccountResponse:
    """Initialize the authenticated caller's account.

    The account ID comes from the auth token; the like-credit balance
    starts at the configured initial value.
    """
    account_id = require_account_id(jwt_service, auth_token, "create an account")
    return await create_account_use_case.execute(
        CreateAccountRequest(
            account_id=account_id,
            name=request.name,
            artist_type=request.artist_type,
            avatar_url=request.avatar_url,
            bio=request.bio,
            website=request.website,
        )
    )


@router.get("/{account_id}", response_model=GetAccountResponse)
async def get_account(
    account_id: str,
    get_account_use_case: FromDishka[GetAccountUseCase],
) -> GetAccountResponse:
    """Get an account's profile and balances.

    Example:
        GET /accounts/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "account_id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Mira",
            "artist_type": "painter",
            "like_credit": 4,
            "like_points": 12,
            ...
        }
    """
    return await get_account_use_case.execute(GetAccountRequest(account_id=account_id))


@router.get("/{account_id}/stats", response_model=GetAccountStatsResponse)
async def get_account_stats(
    account_id: str,
    get_account_stats_use_case: FromDishka[GetAccountStatsUseCase],
) -> GetAccountStatsResponse:
    """Get total likes received, followers and following counts."""
    return await get_account_stats_use_case.execute(
        GetAccountStatsRequest(account_id=account_id)
    )


@router.get("/{account_id}/followers", response_model=ListConnectionsResponse)
async def list_followers(
    account_id: str,
    list_connections_use_case: FromDishka[ListConnectionsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListConnectionsResponse:
    """List accounts following this account, newest first.

    Authentication is optional; when present each item says whether the
    caller follows that account.
    """
    return await list_connections_use_case.execute(
        ListConnectionsRequest(
            account_id=account_id,
            direction=ConnectionDirection.FOLLOWERS,
            viewer_id=jwt_service.get_account_id_from_token(auth_token),
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{account_id}/following", response_model=ListConnectionsResponse)
async def list_following(
    account_id: str,
    list_connections_use_case: FromDishka[ListConnectionsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListConnectionsResponse:
    """List accounts this account follows, newest first."""
    return await list_connections_use_case.execute(
        ListConnectionsRequest(
            account_id=account_id,
            direction=ConnectionDirection.FOLLOWING,
            viewer_id=jwt_service.get_account_id_from_token(auth_token),
            limit=limit,
            offset=offset,
        )
    )


@router.post("/{account_id}/follow", response_model=ToggleFollowResponse)
async def toggle_follow(
    account_id: str,
    request: ToggleFollowAPIRequest,
    toggle_follow_use_case: FromDishka[ToggleFollowUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleFollowResponse:
    """Follow or unfollow an account.

    Following yourself returns the unchanged state with a message.
    """
    follower_id = require_account_id(jwt_service, auth_token, "follow")
    return await toggle_follow_use_case.execute(
        ToggleFollowRequest(
            follower_id=follower_id,
            followed_id=account_id,
            currently_following=request.currently_following,
        )
    )
