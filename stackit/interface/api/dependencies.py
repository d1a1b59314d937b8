"""Request parameters shared by the routes."""

from typing import Annotated

from fastapi import Depends, Request

AUTH_COOKIE = "auth_token"


def get_token(request: Request) -> str | None:
    """Read the access token from the auth cookie or a bearer header.

    The cookie wins when both are present.
    """
    token = request.cookies.get(AUTH_COOKIE)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


Token = Annotated[str | None, Depends(get_token)]


def page_limit(limit: int | None, default: int, maximum: int) -> int:
    """Requested page size, defaulted and capped."""
    return min(limit or default, maximum)
