"""Accept and unaccept answer use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import AnswerResponse, CamelModel
from stackit.domain.service import (
    AcceptanceService,
    AccessService,
    UserService,
    VoteService,
)
from stackit.domain.value import AnswerId, VotableType


class AcceptanceRequest(BaseModel):
    """Accept or unaccept request."""

    token: str | None
    answer_id: UUID


class AcceptanceResponse(CamelModel):
    """Answer and question state after an acceptance transition."""

    message: str
    answer: AnswerResponse
    question_id: str
    is_answered: bool
    accepted_answer_id: str | None


class _AcceptanceUseCase:
    message: str

    def __init__(
        self,
        access_service: AccessService,
        acceptance_service: AcceptanceService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.acceptance_service = acceptance_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def _transition(self, answer_id: AnswerId, requester):
        raise NotImplementedError

    async def execute(self, request: AcceptanceRequest) -> AcceptanceResponse:
        """Execute the transition for the authenticated question owner.

        Raises:
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the caller does not own the question
        """
        user = await self.access_service.authenticate(request.token)
        question, answer = await self._transition(AnswerId(request.answer_id), user)

        authors = await self.user_service.get_many({answer.author_id})
        summaries = await self.vote_service.summarize(
            VotableType.ANSWER, [answer.id], user.id
        )
        return AcceptanceResponse(
            message=self.message,
            answer=AnswerResponse.build(answer, authors, summaries.get(answer.id)),
            question_id=str(question.id),
            is_answered=question.is_answered,
            accepted_answer_id=(
                str(question.accepted_answer_id)
                if question.accepted_answer_id
                else None
            ),
        )


class AcceptAnswerUseCase(_AcceptanceUseCase):
    """Use case for marking an answer as the accepted one."""

    message = "Answer accepted successfully"

    async def _transition(self, answer_id, requester):
        return await self.acceptance_service.accept(answer_id, requester)


class UnacceptAnswerUseCase(_AcceptanceUseCase):
    """Use case for withdrawing the acceptance of an answer.

    Raises InvalidStateError when the answer is not the accepted one.
    """

    message = "Answer unaccepted successfully"

    async def _transition(self, answer_id, requester):
        return await self.acceptance_service.unaccept(answer_id, requester)
