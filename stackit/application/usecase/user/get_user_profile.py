"""Get user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel, UserProfile
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import UserService
from stackit.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    user_id: UUID


class UserStats(CamelModel):
    """Activity counters shown on a profile."""

    questions_asked: int
    answers_given: int
    accepted_answers: int


class UserProfileResponse(CamelModel):
    user: UserProfile
    stats: UserStats


class GetUserProfileUseCase:
    """Use case for a user's public profile with activity counters."""

    def __init__(
        self,
        user_service: UserService,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_repository: Question repository (counters)
            answer_repository: Answer repository (counters)
        """
        self.user_service = user_service
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))

        stats = UserStats(
            questions_asked=await self.question_repository.count(author_id=user.id),
            answers_given=await self.answer_repository.count(author_id=user.id),
            accepted_answers=await self.answer_repository.count(
                author_id=user.id, is_accepted=True
            ),
        )
        return UserProfileResponse(user=UserProfile.from_user(user), stats=stats)
