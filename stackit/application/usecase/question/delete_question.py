"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import MessageResponse
from stackit.domain.service import AccessService, QuestionService
from stackit.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    token: str | None
    question_id: UUID
    reason: str | None = None


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question (owner or admin)."""

    def __init__(
        self, access_service: AccessService, question_service: QuestionService
    ) -> None:
        self.access_service = access_service
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> MessageResponse:
        user = await self.access_service.authenticate(request.token)
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )
        self.access_service.ensure_can_modify(user, question, "question", "delete")

        await self.question_service.delete_question(question, user.id, request.reason)
        return MessageResponse(message="Question deleted successfully")
