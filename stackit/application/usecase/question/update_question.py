"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import QuestionResponse
from stackit.domain.service import (
    AccessService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import QuestionId, VotableType

from .create_question import QuestionMutationResponse, parse_tags


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields stay unchanged."""

    token: str | None
    question_id: UUID
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    reason: str | None = None


class UpdateQuestionUseCase:
    """Use case for editing a question (owner or admin)."""

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.question_service = question_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionMutationResponse:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question is missing or deleted
            NotAuthorizedError: If the caller is neither owner nor admin
            ConflictError: If nothing changes
        """
        user = await self.access_service.authenticate(request.token)
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )
        self.access_service.ensure_can_modify(user, question, "question", "edit")

        updated = await self.question_service.update_question(
            question,
            editor_id=user.id,
            title=request.title,
            description=request.description,
            tags=parse_tags(request.tags) if request.tags is not None else None,
            reason=request.reason,
        )

        authors = await self.user_service.get_many({updated.author_id})
        summaries = await self.vote_service.summarize(
            VotableType.QUESTION, [updated.id], user.id
        )
        return QuestionMutationResponse(
            message="Question updated successfully",
            question=QuestionResponse.build(
                updated, authors, summaries.get(updated.id)
            ),
        )
