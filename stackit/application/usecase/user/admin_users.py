"""Administrative user management use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.usecase.common import (
    AccountResponse,
    CamelModel,
    UserPagination,
    page_offset,
    page_window,
)
from stackit.domain.error import ValidationError
from stackit.domain.service import AccessService, NotificationService, UserService
from stackit.domain.value import UserId, UserRole


class ListUsersRequest(BaseModel):
    """Admin user listing request."""

    token: str | None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    search: str | None = None
    role: UserRole | None = None
    is_banned: bool | None = None


class ListUsersResponse(CamelModel):
    users: list[AccountResponse]
    pagination: UserPagination


class ListUsersUseCase:
    """Use case for the admin user directory."""

    def __init__(
        self, access_service: AccessService, user_service: UserService
    ) -> None:
        self.access_service = access_service
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        await self.access_service.require_admin(request.token)

        users, total = await self.user_service.list_users(
            search=request.search.strip() if request.search else None,
            role=request.role,
            is_banned=request.is_banned,
            limit=request.limit,
            offset=page_offset(request.page, request.limit),
        )
        return ListUsersResponse(
            users=[AccountResponse.from_user(user) for user in users],
            pagination=UserPagination(
                **page_window(request.page, request.limit, total),
                total_users=total,
            ),
        )


class ModerateUserResponse(CamelModel):
    message: str
    user: AccountResponse


class BanUserRequest(BaseModel):
    token: str | None
    user_id: UUID
    reason: str = Field(min_length=1, max_length=500)


class BanUserUseCase:
    """Use case for banning a user and telling them why."""

    def __init__(
        self,
        access_service: AccessService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: BanUserRequest) -> ModerateUserResponse:
        """Execute ban flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin or the target is one
            NotFoundError: If the target does not exist
        """
        admin = await self.access_service.require_admin(request.token)
        target = await self.user_service.ban(
            admin, UserId(request.user_id), request.reason
        )
        await self.notification_service.user_banned(target, admin, request.reason)
        return ModerateUserResponse(
            message="User banned successfully", user=AccountResponse.from_user(target)
        )


class UnbanUserRequest(BaseModel):
    token: str | None
    user_id: UUID


class UnbanUserUseCase:
    """Use case for lifting a ban."""

    def __init__(
        self, access_service: AccessService, user_service: UserService
    ) -> None:
        self.access_service = access_service
        self.user_service = user_service

    async def execute(self, request: UnbanUserRequest) -> ModerateUserResponse:
        await self.access_service.require_admin(request.token)
        target = await self.user_service.unban(UserId(request.user_id))
        return ModerateUserResponse(
            message="User unbanned successfully",
            user=AccountResponse.from_user(target),
        )


class ChangeRoleRequest(BaseModel):
    token: str | None
    user_id: UUID
    role: UserRole


class ChangeRoleUseCase:
    """Use case for promoting or demoting a user."""

    def __init__(
        self, access_service: AccessService, user_service: UserService
    ) -> None:
        self.access_service = access_service
        self.user_service = user_service

    async def execute(self, request: ChangeRoleRequest) -> ModerateUserResponse:
        admin = await self.access_service.require_admin(request.token)
        if request.role == UserRole.GUEST:
            raise ValidationError.for_field("role", "Role must be member or admin")
        target = await self.user_service.change_role(
            admin, UserId(request.user_id), request.role
        )
        return ModerateUserResponse(
            message="User role updated successfully",
            user=AccountResponse.from_user(target),
        )
