"""User use cases."""

from .admin_users import (
    BanUserRequest,
    BanUserUseCase,
    ChangeRoleRequest,
    ChangeRoleUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModerateUserResponse,
    UnbanUserRequest,
    UnbanUserUseCase,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .list_user_content import (
    ListUserAnswersUseCase,
    ListUserContentRequest,
    ListUserQuestionsUseCase,
    UserAnswersResponse,
    UserQuestionsResponse,
)
from .search_users import SearchUsersRequest, SearchUsersUseCase
from .stats_overview import (
    StatsOverviewRequest,
    StatsOverviewResponse,
    StatsOverviewUseCase,
)
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "BanUserRequest",
    "BanUserUseCase",
    "ChangeRoleRequest",
    "ChangeRoleUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "ListUserAnswersUseCase",
    "ListUserContentRequest",
    "ListUserQuestionsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "ModerateUserResponse",
    "SearchUsersRequest",
    "SearchUsersUseCase",
    "StatsOverviewRequest",
    "StatsOverviewResponse",
    "StatsOverviewUseCase",
    "UnbanUserRequest",
    "UnbanUserUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
