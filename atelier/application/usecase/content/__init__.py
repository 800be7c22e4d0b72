"""Content catalog use cases."""

from .get_content_stats import (
    GetContentStatsRequest,
    GetContentStatsResponse,
    GetContentStatsUseCase,
)
from .register_content import (
    RegisterContentRequest,
    RegisterContentResponse,
    RegisterContentUseCase,
)

__all__ = [
    "GetContentStatsRequest",
    "GetContentStatsResponse",
    "GetContentStatsUseCase",
    "RegisterContentRequest",
    "RegisterContentResponse",
    "RegisterContentUseCase",
]
