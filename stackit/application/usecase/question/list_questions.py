"""List questions use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import (
    CamelModel,
    QuestionPagination,
    QuestionResponse,
    page_offset,
    page_window,
)
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import (
    AccessService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import TagName, VotableType


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    token: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tag: str | None = None
    search: str | None = None


class ListQuestionsResponse(CamelModel):
    """List questions response."""

    questions: list[QuestionResponse]
    pagination: QuestionPagination


class ListQuestionsUseCase:
    """Use case for the paginated question listing."""

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            access_service: Access control gate (optional viewer)
            question_service: Question domain service
            vote_service: Vote domain service
            user_service: User domain service (author lookup)
        """
        self.access_service = access_service
        self.question_service = question_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Steps:
        1. Identify the viewer, if any, to report their own votes
        2. Fetch the page and the total count
        3. Batch-load authors and vote summaries

        Args:
            request: List questions request

        Returns:
            Questions on the page with pagination info
        """
        viewer = await self.access_service.identify(request.token)
        tag = TagName(request.tag.strip().lower()) if request.tag else None

        questions, total = await self.question_service.list_questions(
            sort=request.sort,
            tag=tag,
            search=request.search.strip() if request.search else None,
            limit=request.limit,
            offset=page_offset(request.page, request.limit),
        )

        authors = await self.user_service.get_many({q.author_id for q in questions})
        summaries = await self.vote_service.summarize(
            VotableType.QUESTION,
            [q.id for q in questions],
            viewer.id if viewer else None,
        )

        return ListQuestionsResponse(
            questions=[
                QuestionResponse.build(q, authors, summaries.get(q.id))
                for q in questions
            ],
            pagination=QuestionPagination(
                **page_window(request.page, request.limit, total),
                total_questions=total,
            ),
        )
