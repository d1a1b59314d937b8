"""Search users use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import UserSummary
from stackit.domain.service import UserService


class SearchUsersRequest(BaseModel):
    q: str = Field(min_length=1)
    limit: int = Field(default=10, ge=1, le=50)


class SearchUsersUseCase:
    """Use case for username lookup, e.g. for mentions. Banned users are hidden."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SearchUsersRequest) -> list[UserSummary]:
        users, _ = await self.user_service.list_users(
            search=request.q.strip(),
            role=None,
            is_banned=False,
            limit=request.limit,
            offset=0,
        )
        return [UserSummary.from_user(user) for user in users]
