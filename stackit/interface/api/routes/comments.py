"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import Field

from stackit.application.usecase.comment import (
    CommentMutationResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from stackit.application.usecase.common import (
    CamelModel,
    CommentResponse,
    MessageResponse,
)
from stackit.interface.api.dependencies import Token
from stackit.interface.api.routes.questions import DeleteAPIRequest

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for commenting on a question or an answer."""

    content: str = Field(min_length=15, max_length=500)
    question_id: UUID | None = None
    answer_id: UUID | None = None
    parent_comment_id: UUID | None = None


class UpdateCommentAPIRequest(CamelModel):
    """API request for editing a comment."""

    content: str = Field(min_length=15, max_length=500)
    reason: str | None = Field(default=None, max_length=500)


@router.post(
    "/comments",
    response_model=CommentMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    token: Token,
) -> CommentMutationResponse:
    """Comment on a question or an answer, optionally as a reply."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            token=token,
            content=request.content,
            question_id=request.question_id,
            answer_id=request.answer_id,
            parent_comment_id=request.parent_comment_id,
        )
    )


@router.get("/questions/{question_id}/comments", response_model=list[CommentResponse])
async def list_question_comments(
    question_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    token: Token,
) -> list[CommentResponse]:
    """Comments on a question, oldest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(token=token, question_id=question_id)
    )


@router.get("/answers/{answer_id}/comments", response_model=list[CommentResponse])
async def list_answer_comments(
    answer_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    token: Token,
) -> list[CommentResponse]:
    """Comments on an answer, oldest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(token=token, answer_id=answer_id)
    )


@router.put("/comments/{comment_id}", response_model=CommentMutationResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    token: Token,
) -> CommentMutationResponse:
    """Edit a comment. Only the author or an admin may edit."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            token=token,
            comment_id=comment_id,
            content=request.content,
            reason=request.reason,
        )
    )


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    token: Token,
    request: DeleteAPIRequest | None = None,
) -> MessageResponse:
    """Soft-delete a comment. Only the author or an admin may delete."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            token=token,
            comment_id=comment_id,
            reason=request.reason if request else None,
        )
    )
