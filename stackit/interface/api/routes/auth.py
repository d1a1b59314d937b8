"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from stackit.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from stackit.application.usecase.common import AccountResponse, MessageResponse
from stackit.config import Settings
from stackit.interface.api.dependencies import AUTH_COOKIE, Token

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str
    email: str
    password: str


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str
    password: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the HTTP-only auth cookie to a response."""
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        path="/",
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create a member account and log it in.

    Args:
        request: Username, email and password
        response: FastAPI response (receives the auth cookie)
        register_use_case: Register use case from DI
        settings: Application settings from DI

    Returns:
        The new account and its token
    """
    result = await register_use_case.execute(
        RegisterRequest(
            username=request.username.strip(),
            email=request.email.strip(),
            password=request.password,
        )
    )
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Log in with email and password.

    Returns 401 on wrong credentials and 403 for banned accounts.
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email.strip(), password=request.password)
    )
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """Log out by clearing the authentication cookie."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=AccountResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: Token,
) -> AccountResponse:
    """Get the authenticated user's account."""
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))
