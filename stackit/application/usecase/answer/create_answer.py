"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import AnswerResponse, CamelModel
from stackit.domain.service import (
    AccessService,
    AnswerService,
    NotificationService,
    QuestionService,
)
from stackit.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    token: str | None
    question_id: UUID
    content: str


class AnswerMutationResponse(CamelModel):
    """Answer returned from a write."""

    message: str
    answer: AnswerResponse


class CreateAnswerUseCase:
    """Use case for answering a question.

    Notifies the question author unless they answered themselves.
    """

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.notification_service = notification_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerMutationResponse:
        """Execute create answer flow.

        Raises:
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the question is missing or deleted
            ConflictError: If the caller already answered the question
        """
        user = await self.access_service.authenticate(request.token)
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )

        answer = await self.answer_service.create_answer(
            question, author_id=user.id, content=request.content
        )
        await self.notification_service.answer_received(question, answer, user)

        return AnswerMutationResponse(
            message="Answer posted successfully",
            answer=AnswerResponse.build(answer, {user.id: user}),
        )
