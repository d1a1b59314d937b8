"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import AnswerResponse
from stackit.domain.service import (
    AccessService,
    AnswerService,
    UserService,
    VoteService,
)
from stackit.domain.value import AnswerId, VotableType

from .create_answer import AnswerMutationResponse


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    token: str | None
    answer_id: UUID
    content: str
    reason: str | None = None


class UpdateAnswerUseCase:
    """Use case for editing an answer (owner or admin)."""

    def __init__(
        self,
        access_service: AccessService,
        answer_service: AnswerService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.answer_service = answer_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerMutationResponse:
        user = await self.access_service.authenticate(request.token)
        answer = await self.answer_service.get_answer(AnswerId(request.answer_id))
        self.access_service.ensure_can_modify(user, answer, "answer", "edit")

        updated = await self.answer_service.update_answer(
            answer, editor_id=user.id, content=request.content, reason=request.reason
        )

        authors = await self.user_service.get_many({updated.author_id})
        summaries = await self.vote_service.summarize(
            VotableType.ANSWER, [updated.id], user.id
        )
        return AnswerMutationResponse(
            message="Answer updated successfully",
            answer=AnswerResponse.build(updated, authors, summaries.get(updated.id)),
        )
