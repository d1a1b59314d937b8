"""Use cases listing a user's questions and answers."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.usecase.common import (
    AnswerPagination,
    AnswerResponse,
    CamelModel,
    QuestionPagination,
    QuestionResponse,
    page_offset,
    page_window,
)
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    QuestionSortOrder,
)
from stackit.domain.service import (
    AccessService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import UserId, VotableType


class ListUserContentRequest(BaseModel):
    """Paginated listing of one user's content."""

    user_id: UUID
    token: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)


class UserQuestionsResponse(CamelModel):
    questions: list[QuestionResponse]
    pagination: QuestionPagination


class ListUserQuestionsUseCase:
    """Use case for the questions a user asked, newest first."""

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

    async def execute(self, request: ListUserContentRequest) -> UserQuestionsResponse:
        """Execute list user questions flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        viewer = await self.access_service.identify(request.token)
        author = await self.user_service.get_by_id(UserId(request.user_id))

        questions, total = await self.question_service.list_questions(
            sort=QuestionSortOrder.NEWEST,
            tag=None,
            search=None,
            limit=request.limit,
            offset=page_offset(request.page, request.limit),
            author_id=author.id,
        )
        summaries = await self.vote_service.summarize(
            VotableType.QUESTION,
            [q.id for q in questions],
            viewer.id if viewer else None,
        )

        return UserQuestionsResponse(
            questions=[
                QuestionResponse.build(q, {author.id: author}, summaries.get(q.id))
                for q in questions
            ],
            pagination=QuestionPagination(
                **page_window(request.page, request.limit, total),
                total_questions=total,
            ),
        )


class QuestionReference(CamelModel):
    id: str
    title: str


class UserAnswerResponse(AnswerResponse):
    """Answer with the title of the question it belongs to."""

    question: QuestionReference | None = None


class UserAnswersResponse(CamelModel):
    answers: list[UserAnswerResponse]
    pagination: AnswerPagination


class ListUserAnswersUseCase:
    """Use case for the answers a user posted, newest first."""

    def __init__(
        self,
        access_service: AccessService,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ListUserContentRequest) -> UserAnswersResponse:
        """Execute list user answers flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        viewer = await self.access_service.identify(request.token)
        author = await self.user_service.get_by_id(UserId(request.user_id))

        answers = await self.answer_repository.find_by_author(
            author.id,
            limit=request.limit,
            offset=page_offset(request.page, request.limit),
        )
        total = await self.answer_repository.count(author_id=author.id)
        summaries = await self.vote_service.summarize(
            VotableType.ANSWER,
            [a.id for a in answers],
            viewer.id if viewer else None,
        )

        titles: dict = {}
        for question_id in {a.question_id for a in answers}:
            question = await self.question_repository.find_by_id(question_id)
            if question and not question.is_deleted:
                titles[question_id] = QuestionReference(
                    id=str(question.id), title=question.title
                )

        return UserAnswersResponse(
            answers=[
                UserAnswerResponse(
                    **AnswerResponse.build(
                        a, {author.id: author}, summaries.get(a.id)
                    ).model_dump(),
                    question=titles.get(a.question_id),
                )
                for a in answers
            ],
            pagination=AnswerPagination(
                **page_window(request.page, request.limit, total),
                total_answers=total,
            ),
        )
