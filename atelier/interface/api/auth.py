"""Authentication helpers for routes."""

from fastapi import HTTPException, status

from atelier.domain.service import JWTService


def require_account_id(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> str:
    """Resolve the caller's account ID from the auth cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller is trying to do, for the error message

    Returns:
        Account ID from the token

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    account_id = jwt_service.get_account_id_from_token(auth_token)
    if not account_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return account_id
