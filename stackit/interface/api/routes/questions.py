"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import Field

from stackit.application.usecase.common import (
    CamelModel,
    MessageResponse,
    QuestionResponse,
)
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PopularTagsRequest,
    PopularTagsUseCase,
    QuestionMutationResponse,
    TagUsageResponse,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from stackit.config import ContentSettings, PaginationSettings
from stackit.domain.repository import QuestionSortOrder
from stackit.interface.api.dependencies import Token, page_limit

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(CamelModel):
    """API request for asking a question."""

    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=20)
    tags: list[str] = Field(min_length=1)


class UpdateQuestionAPIRequest(CamelModel):
    """API request for editing a question. Omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=10, max_length=300)
    description: str | None = Field(default=None, min_length=20)
    tags: list[str] | None = None
    reason: str | None = Field(default=None, max_length=500)


class DeleteAPIRequest(CamelModel):
    """Optional body of a delete request."""

    reason: str | None = Field(default=None, max_length=500)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
    token: Token,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    tag: str | None = None,
    search: str | None = None,
) -> ListQuestionsResponse:
    """List live questions with sorting, tag filter and full text search."""
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            token=token,
            page=page,
            limit=page_limit(
                limit, pagination.question_page_size, pagination.max_page_size
            ),
            sort=sort,
            tag=tag,
            search=search,
        )
    )


@router.get("/tags/popular", response_model=list[TagUsageResponse])
async def popular_tags(
    popular_tags_use_case: FromDishka[PopularTagsUseCase],
    content: FromDishka[ContentSettings],
) -> list[TagUsageResponse]:
    """Most used tags over live questions."""
    return await popular_tags_use_case.execute(
        PopularTagsRequest(limit=content.popular_tag_limit)
    )


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    token: Token,
) -> QuestionResponse:
    """Get a question with its answers and count the view."""
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id, token=token)
    )


@router.post(
    "", response_model=QuestionMutationResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    token: Token,
) -> QuestionMutationResponse:
    """Ask a question. Requires an active account."""
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            token=token,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.put("/{question_id}", response_model=QuestionMutationResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    token: Token,
) -> QuestionMutationResponse:
    """Edit a question. Only the author or an admin may edit."""
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            token=token,
            question_id=question_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
            reason=request.reason,
        )
    )


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    token: Token,
    request: DeleteAPIRequest | None = None,
) -> MessageResponse:
    """Soft-delete a question. Only the author or an admin may delete."""
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(
            token=token,
            question_id=question_id,
            reason=request.reason if request else None,
        )
    )
