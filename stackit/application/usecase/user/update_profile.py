"""Update profile use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import AccountResponse, CamelModel
from stackit.domain.service import AccessService, UserService


class UpdateProfileRequest(BaseModel):
    """Update profile request. Omitted fields stay unchanged."""

    token: str | None
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = None


class UpdateProfileResponse(CamelModel):
    message: str
    user: AccountResponse


class UpdateProfileUseCase:
    """Use case for editing the caller's own profile."""

    def __init__(
        self, access_service: AccessService, user_service: UserService
    ) -> None:
        self.access_service = access_service
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        user = await self.access_service.authenticate(request.token)
        updated = await self.user_service.update_profile(
            user, bio=request.bio, avatar_url=request.avatar_url
        )
        return UpdateProfileResponse(
            message="Profile updated successfully",
            user=AccountResponse.from_user(updated),
        )
