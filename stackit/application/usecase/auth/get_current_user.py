"""Get current user use case."""

from pydantic import BaseModel

from stackit.application.usecase.common import AccountResponse
from stackit.domain.service import AccessService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, access_service: AccessService) -> None:
        """Initialize get current user use case.

        Args:
            access_service: Access control gate
        """
        self.access_service = access_service

    async def execute(self, request: GetCurrentUserRequest) -> AccountResponse:
        """Resolve the token into the caller's account.

        Raises:
            AuthenticationError: If the token is missing or invalid
            NotAuthorizedError: If the account is banned
        """
        user = await self.access_service.authenticate(request.token)
        return AccountResponse.from_user(user)
