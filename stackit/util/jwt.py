"""Access token helpers.

Tokens are HS256 JWTs whose ``sub`` claim is the user ID. The username is
carried for logging only; authorization always reloads the user.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, Field

from stackit.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenPayload(BaseModel):
    """Claims of a verified access token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="sub")
    username: str
    issued_at: datetime = Field(alias="iat")
    exp: datetime


class JWTError(Exception):
    """Token is malformed, tampered with or expired."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue an access token valid for ``jwt_expiry_days``.

    Args:
        user_id: User ID, stored as the subject
        username: Username at the time of issue
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is invalid, expired or lacks a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValueError) as e:
        raise JWTError("Invalid token") from e
