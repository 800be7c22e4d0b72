"""Like use cases."""

from .get_like_states import (
    GetLikeStatesRequest,
    GetLikeStatesResponse,
    GetLikeStatesUseCase,
)
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "GetLikeStatesRequest",
    "GetLikeStatesResponse",
    "GetLikeStatesUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
