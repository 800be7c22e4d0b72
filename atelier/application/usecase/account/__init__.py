"""Account use cases."""

from .create_account import (
    CreateAccountRequest,
    CreateAccountResponse,
    CreateAccountUseCase,
)
from .get_account import GetAccountRequest, GetAccountResponse, GetAccountUseCase
from .get_account_stats import (
    GetAccountStatsRequest,
    GetAccountStatsResponse,
    GetAccountStatsUseCase,
)

__all__ = [
    "CreateAccountRequest",
    "CreateAccountResponse",
    "CreateAccountUseCase",
    "GetAccountRequest",
    "GetAccountResponse",
    "GetAccountUseCase",
    "GetAccountStatsRequest",
    "GetAccountStatsResponse",
    "GetAccountStatsUseCase",
]
