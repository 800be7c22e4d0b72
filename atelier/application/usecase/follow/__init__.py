"""Follow use cases."""

from .list_connections import (
    ConnectionDirection,
    ConnectionItem,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
)
from .toggle_follow import (
    ToggleFollowRequest,
    ToggleFollowResponse,
    ToggleFollowUseCase,
)

__all__ = [
    "ConnectionDirection",
    "ConnectionItem",
    "ListConnectionsRequest",
    "ListConnectionsResponse",
    "ListConnectionsUseCase",
    "ToggleFollowRequest",
    "ToggleFollowResponse",
    "ToggleFollowUseCase",
]
