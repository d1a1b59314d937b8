"""User profile and administration routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import Field

from stackit.application.usecase.common import CamelModel, UserSummary
from stackit.application.usecase.user import (
    BanUserRequest,
    BanUserUseCase,
    ChangeRoleRequest,
    ChangeRoleUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUserAnswersUseCase,
    ListUserContentRequest,
    ListUserQuestionsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModerateUserResponse,
    SearchUsersRequest,
    SearchUsersUseCase,
    StatsOverviewRequest,
    StatsOverviewResponse,
    StatsOverviewUseCase,
    UnbanUserRequest,
    UnbanUserUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
    UserAnswersResponse,
    UserProfileResponse,
    UserQuestionsResponse,
)
from stackit.config import PaginationSettings
from stackit.domain.value import UserRole
from stackit.interface.api.dependencies import Token, page_limit

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(CamelModel):
    """API request for updating the caller's profile."""

    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=500)


class BanAPIRequest(CamelModel):
    reason: str = Field(min_length=1, max_length=500)


class ChangeRoleAPIRequest(CamelModel):
    role: UserRole


@router.get("/search", response_model=list[UserSummary])
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    q: str = Query(min_length=1),
    limit: int = Query(default=10, ge=1, le=50),
) -> list[UserSummary]:
    """Find active users by username or email."""
    return await search_users_use_case.execute(SearchUsersRequest(q=q, limit=limit))


@router.get("/stats/overview", response_model=StatsOverviewResponse)
async def stats_overview(
    stats_overview_use_case: FromDishka[StatsOverviewUseCase], token: Token
) -> StatsOverviewResponse:
    """Site-wide counters for the admin dashboard."""
    return await stats_overview_use_case.execute(StatsOverviewRequest(token=token))


@router.put("/me", response_model=UpdateProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    token: Token,
) -> UpdateProfileResponse:
    """Update the caller's bio and avatar."""
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            token=token, bio=request.bio, avatar_url=request.avatar_url
        )
    )


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    pagination: FromDishka[PaginationSettings],
    token: Token,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    search: str | None = None,
    role: UserRole | None = None,
    banned: bool | None = None,
) -> ListUsersResponse:
    """Admin user directory with filters."""
    return await list_users_use_case.execute(
        ListUsersRequest(
            token=token,
            page=page,
            limit=page_limit(
                limit, pagination.user_page_size, pagination.max_page_size
            ),
            search=search,
            role=role,
            is_banned=banned,
        )
    )


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileResponse:
    """Public profile of a user with activity counters."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )


@router.get("/{user_id}/questions", response_model=UserQuestionsResponse)
async def list_user_questions(
    user_id: UUID,
    list_user_questions_use_case: FromDishka[ListUserQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
    token: Token,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> UserQuestionsResponse:
    """Questions asked by a user, newest first."""
    return await list_user_questions_use_case.execute(
        ListUserContentRequest(
            user_id=user_id,
            token=token,
            page=page,
            limit=page_limit(
                limit, pagination.question_page_size, pagination.max_page_size
            ),
        )
    )


@router.get("/{user_id}/answers", response_model=UserAnswersResponse)
async def list_user_answers(
    user_id: UUID,
    list_user_answers_use_case: FromDishka[ListUserAnswersUseCase],
    pagination: FromDishka[PaginationSettings],
    token: Token,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> UserAnswersResponse:
    """Answers posted by a user, newest first."""
    return await list_user_answers_use_case.execute(
        ListUserContentRequest(
            user_id=user_id,
            token=token,
            page=page,
            limit=page_limit(
                limit, pagination.question_page_size, pagination.max_page_size
            ),
        )
    )


@router.put("/{user_id}/ban", response_model=ModerateUserResponse)
async def ban_user(
    user_id: UUID,
    request: BanAPIRequest,
    ban_user_use_case: FromDishka[BanUserUseCase],
    token: Token,
) -> ModerateUserResponse:
    """Ban a user (admin only). Admins cannot be banned."""
    return await ban_user_use_case.execute(
        BanUserRequest(token=token, user_id=user_id, reason=request.reason)
    )


@router.put("/{user_id}/unban", response_model=ModerateUserResponse)
async def unban_user(
    user_id: UUID,
    unban_user_use_case: FromDishka[UnbanUserUseCase],
    token: Token,
) -> ModerateUserResponse:
    """Lift a ban (admin only)."""
    return await unban_user_use_case.execute(
        UnbanUserRequest(token=token, user_id=user_id)
    )


@router.put("/{user_id}/role", response_model=ModerateUserResponse)
async def change_role(
    user_id: UUID,
    request: ChangeRoleAPIRequest,
    change_role_use_case: FromDishka[ChangeRoleUseCase],
    token: Token,
) -> ModerateUserResponse:
    """Change a user's role (admin only, not on oneself)."""
    return await change_role_use_case.execute(
        ChangeRoleRequest(token=token, user_id=user_id, role=request.role)
    )
