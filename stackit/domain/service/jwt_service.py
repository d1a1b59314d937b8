"""Access token domain service."""

import logfire

from stackit.config import AuthSettings
from stackit.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and verifies the access tokens handed out at login."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Issue a token for a user after registration or login."""
        token = create_token(user_id, username, self.auth_settings)
        logfire.info("Access token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token presented by a caller.

        Args:
            token: Encoded JWT from the cookie, bearer header or WebSocket query

        Returns:
            Token claims

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Access token rejected", reason=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Read the user ID from an optional token without raising.

        Endpoints open to guests use this to personalize their output.

        Args:
            token: Encoded JWT, or None for anonymous callers

        Returns:
            The ``sub`` claim, or None if the token is missing, invalid or expired
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Treating caller as guest", reason=str(e))
            return None
