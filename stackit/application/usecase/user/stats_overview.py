"""Admin statistics overview use case."""

from datetime import datetime, timedelta

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import AccessService
from stackit.domain.value import UserRole


class StatsOverviewRequest(BaseModel):
    token: str | None


class StatsTotals(CamelModel):
    users: int
    banned_users: int
    admins: int
    questions: int
    answered_questions: int
    answers: int
    accepted_answers: int
    answer_rate: float


class RecentActivity(CamelModel):
    """Counts for the last seven days."""

    new_users: int
    new_questions: int
    new_answers: int


class StatsOverviewResponse(CamelModel):
    totals: StatsTotals
    recent_activity: RecentActivity


class StatsOverviewUseCase:
    """Use case for the admin dashboard counters."""

    RECENT_WINDOW = timedelta(days=7)

    def __init__(
        self,
        access_service: AccessService,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        self.access_service = access_service
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def execute(self, request: StatsOverviewRequest) -> StatsOverviewResponse:
        await self.access_service.require_admin(request.token)

        questions = await self.question_repository.count()
        answered = await self.question_repository.count(is_answered=True)
        since = datetime.now() - self.RECENT_WINDOW

        totals = StatsTotals(
            users=await self.user_repository.count(),
            banned_users=await self.user_repository.count(is_banned=True),
            admins=await self.user_repository.count(role=UserRole.ADMIN),
            questions=questions,
            answered_questions=answered,
            answers=await self.answer_repository.count(),
            accepted_answers=await self.answer_repository.count(is_accepted=True),
            # Percentage of questions with an accepted answer
            answer_rate=round(answered / questions * 100, 1) if questions else 0.0,
        )
        recent = RecentActivity(
            new_users=await self.user_repository.count(created_since=since),
            new_questions=await self.question_repository.count(created_since=since),
            new_answers=await self.answer_repository.count(created_since=since),
        )
        return StatsOverviewResponse(totals=totals, recent_activity=recent)
