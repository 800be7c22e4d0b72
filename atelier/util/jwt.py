"""Session token encoding with PyJWT.

Tokens carry the account ID in an ``account_id`` claim and always expire.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from atelier.config import AuthSettings

REQUIRED_CLAIMS = ["account_id", "exp", "iat"]


class TokenPayload(BaseModel):
    """Claims read back from a verified token."""

    account_id: str
    exp: datetime
    iat: datetime


class JWTError(Exception):
    """Token is malformed, forged or expired."""


def encode_session_token(account_id: str, settings: AuthSettings) -> str:
    """Sign a token for ``account_id`` valid for ``jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "account_id": account_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If verification fails or a required claim is missing
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e
    return TokenPayload(**claims)
