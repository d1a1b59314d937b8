"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import MessageResponse
from stackit.domain.service import AcceptanceService, AccessService, AnswerService
from stackit.domain.value import AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    token: str | None
    answer_id: UUID
    reason: str | None = None


class DeleteAnswerUseCase:
    """Use case for soft-deleting an answer (owner or admin).

    Deleting the accepted answer leaves its question unanswered.
    """

    def __init__(
        self,
        access_service: AccessService,
        answer_service: AnswerService,
        acceptance_service: AcceptanceService,
    ) -> None:
        self.access_service = access_service
        self.answer_service = answer_service
        self.acceptance_service = acceptance_service

    async def execute(self, request: DeleteAnswerRequest) -> MessageResponse:
        user = await self.access_service.authenticate(request.token)
        answer = await self.answer_service.get_answer(AnswerId(request.answer_id))
        self.access_service.ensure_can_modify(user, answer, "answer", "delete")

        if answer.is_accepted:
            answer = await self.acceptance_service.release(answer)
        await self.answer_service.delete_answer(answer, user.id, request.reason)

        return MessageResponse(message="Answer deleted successfully")
