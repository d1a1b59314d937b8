"""Vote routes for questions, answers and comments."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from stackit.application.usecase.common import CamelModel
from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.value import VotableType, VoteAction
from stackit.interface.api.dependencies import Token

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(CamelModel):
    """API request for casting a vote."""

    vote_type: VoteAction


async def _cast(
    use_case: CastVoteUseCase,
    votable_type: VotableType,
    votable_id: UUID,
    request: VoteAPIRequest,
    token: str | None,
) -> CastVoteResponse:
    return await use_case.execute(
        CastVoteRequest(
            token=token,
            votable_type=votable_type,
            votable_id=votable_id,
            vote_type=request.vote_type,
        )
    )


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    token: Token,
) -> CastVoteResponse:
    """Upvote, downvote or clear a vote on a question."""
    return await _cast(
        cast_vote_use_case, VotableType.QUESTION, question_id, request, token
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    token: Token,
) -> CastVoteResponse:
    """Upvote, downvote or clear a vote on an answer."""
    return await _cast(
        cast_vote_use_case, VotableType.ANSWER, answer_id, request, token
    )


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_comment(
    comment_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    token: Token,
) -> CastVoteResponse:
    """Upvote, downvote or clear a vote on a comment."""
    return await _cast(
        cast_vote_use_case, VotableType.COMMENT, comment_id, request, token
    )
