"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import AnswerResponse, QuestionResponse
from stackit.domain.service import (
    AccessService,
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import QuestionId, VotableType


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID
    token: str | None = None


class GetQuestionUseCase:
    """Use case for the question detail view.

    Counts a view and returns the question with its answers, the accepted
    answer first and the rest by vote count.
    """

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> QuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question is missing or deleted
        """
        viewer = await self.access_service.identify(request.token)
        viewer_id = viewer.id if viewer else None

        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )
        await self.question_service.record_view(question.id)
        question = question.model_copy(update={"views": question.views + 1})

        answers = await self.answer_service.list_for_question(question.id)
        authors = await self.user_service.get_many(
            {question.author_id, *(a.author_id for a in answers)}
        )
        question_votes = await self.vote_service.summarize(
            VotableType.QUESTION, [question.id], viewer_id
        )
        answer_votes = await self.vote_service.summarize(
            VotableType.ANSWER, [a.id for a in answers], viewer_id
        )

        answer_responses = [
            AnswerResponse.build(a, authors, answer_votes.get(a.id)) for a in answers
        ]
        # Stable sort: ties keep creation order
        answer_responses.sort(key=lambda a: (not a.is_accepted, -a.vote_count))

        return QuestionResponse.build(
            question,
            authors,
            question_votes.get(question.id),
            answers=answer_responses,
        )
