"""Login use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import AccountResponse
from stackit.domain.service import AuthService
from stackit.domain.value import EmailAddress

from .register import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailAddress
    password: str = Field(min_length=1)


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials are wrong
            NotAuthorizedError: If the account is banned
        """
        user, token = await self.auth_service.login(request.email, request.password)
        return AuthResponse(
            message="Login successful",
            user=AccountResponse.from_user(user),
            token=token,
        )
