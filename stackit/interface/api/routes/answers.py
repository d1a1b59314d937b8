"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import Field

from stackit.application.usecase.answer import (
    AcceptanceRequest,
    AcceptanceResponse,
    AcceptAnswerUseCase,
    AnswerMutationResponse,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UnacceptAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.common import CamelModel, MessageResponse
from stackit.interface.api.dependencies import Token
from stackit.interface.api.routes.questions import DeleteAPIRequest

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(CamelModel):
    """API request for answering a question."""

    question_id: UUID
    content: str = Field(min_length=20)


class UpdateAnswerAPIRequest(CamelModel):
    """API request for editing an answer."""

    content: str = Field(min_length=20)
    reason: str | None = Field(default=None, max_length=500)


@router.post(
    "", response_model=AnswerMutationResponse, status_code=status.HTTP_201_CREATED
)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    token: Token,
) -> AnswerMutationResponse:
    """Answer a question. One live answer per user and question."""
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            token=token, question_id=request.question_id, content=request.content
        )
    )


@router.put("/{answer_id}", response_model=AnswerMutationResponse)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    token: Token,
) -> AnswerMutationResponse:
    """Edit an answer. Only the author or an admin may edit."""
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(
            token=token,
            answer_id=answer_id,
            content=request.content,
            reason=request.reason,
        )
    )


@router.delete("/{answer_id}", response_model=MessageResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    token: Token,
    request: DeleteAPIRequest | None = None,
) -> MessageResponse:
    """Soft-delete an answer. Only the author or an admin may delete."""
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(
            token=token,
            answer_id=answer_id,
            reason=request.reason if request else None,
        )
    )


@router.post("/{answer_id}/accept", response_model=AcceptanceResponse)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    token: Token,
) -> AcceptanceResponse:
    """Accept an answer. Only the question author may accept."""
    return await accept_answer_use_case.execute(
        AcceptanceRequest(token=token, answer_id=answer_id)
    )


@router.post("/{answer_id}/unaccept", response_model=AcceptanceResponse)
async def unaccept_answer(
    answer_id: UUID,
    unaccept_answer_use_case: FromDishka[UnacceptAnswerUseCase],
    token: Token,
) -> AcceptanceResponse:
    """Withdraw the acceptance of the accepted answer."""
    return await unaccept_answer_use_case.execute(
        AcceptanceRequest(token=token, answer_id=answer_id)
    )
