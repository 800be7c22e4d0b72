"""Session token domain service."""

import logfire

from atelier.config import AuthSettings
from atelier.util.jwt import (
    JWTError,
    TokenPayload,
    decode_session_token,
    encode_session_token,
)


class JWTService:
    """Issues and checks the ``auth_token`` cookie value.

    Sign-in itself belongs to the external auth collaborator; tokens are
    minted here for that collaborator and for tests.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, account_id: str) -> str:
        """Sign a session token for an account."""
        token = encode_session_token(account_id, self.auth_settings)
        logfire.info("Session token issued", account_id=account_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a session token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        return decode_session_token(token, self.auth_settings)

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Return the token's account ID, or None for a missing or bad token."""
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except JWTError as e:
            logfire.debug("Session token rejected, caller is anonymous", error=str(e))
            return None
