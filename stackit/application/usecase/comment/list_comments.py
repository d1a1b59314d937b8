"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CommentResponse
from stackit.domain.service import (
    AccessService,
    AnswerService,
    CommentService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import AnswerId, QuestionId, VotableType


class ListCommentsRequest(BaseModel):
    """List comments of a question or of an answer."""

    token: str | None = None
    question_id: UUID | None = None
    answer_id: UUID | None = None


class ListCommentsUseCase:
    """Use case for the comment thread of a question or an answer."""

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> list[CommentResponse]:
        """Execute list comments flow, oldest comment first.

        Raises:
            NotFoundError: If the target is missing or deleted
        """
        viewer = await self.access_service.identify(request.token)

        if request.question_id:
            question = await self.question_service.get_question(
                QuestionId(request.question_id)
            )
            comments = await self.comment_service.list_for_question(question.id)
        else:
            answer = await self.answer_service.get_answer(AnswerId(request.answer_id))
            comments = await self.comment_service.list_for_answer(answer.id)

        authors = await self.user_service.get_many({c.author_id for c in comments})
        summaries = await self.vote_service.summarize(
            VotableType.COMMENT,
            [c.id for c in comments],
            viewer.id if viewer else None,
        )
        return [
            CommentResponse.build(c, authors, summaries.get(c.id)) for c in comments
        ]
