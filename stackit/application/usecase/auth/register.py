"""Register use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import AccountResponse, CamelModel
from stackit.domain.service import AuthService
from stackit.domain.value import EmailAddress, Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: Username
    email: EmailAddress
    password: str = Field(min_length=6)


class AuthResponse(CamelModel):
    """Authenticated session: the account and its access token."""

    message: str
    user: AccountResponse
    token: str


class RegisterUseCase:
    """Use case for creating a member account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration.

        Raises:
            ConflictError: If the username or email is already taken
        """
        user, token = await self.auth_service.register(
            request.username, request.email, request.password
        )
        return AuthResponse(
            message="User registered successfully",
            user=AccountResponse.from_user(user),
            token=token,
        )
