"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel
from stackit.domain.model.common import ContentRecord
from stackit.domain.service import (
    AccessService,
    AnswerService,
    CommentService,
    QuestionService,
    VoteService,
)
from stackit.domain.value import (
    AnswerId,
    CommentId,
    QuestionId,
    VotableType,
    VoteAction,
)


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    token: str | None
    votable_type: VotableType
    votable_id: UUID
    vote_type: VoteAction


class CastVoteResponse(CamelModel):
    """Ledger state of the item after the vote."""

    message: str
    vote_count: int
    upvotes: int
    downvotes: int
    user_vote: str | None


class CastVoteUseCase:
    """Use case for upvoting, downvoting or clearing a vote.

    The same flow serves questions, answers and comments.
    """

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            access_service: Access control gate
            question_service: Question domain service (target lookup)
            answer_service: Answer domain service (target lookup)
            comment_service: Comment domain service (target lookup)
            vote_service: Vote domain service
        """
        self.access_service = access_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def _load_target(self, votable_type: VotableType, votable_id: UUID):
        if votable_type == VotableType.QUESTION:
            return await self.question_service.get_question(QuestionId(votable_id))
        if votable_type == VotableType.ANSWER:
            return await self.answer_service.get_answer(AnswerId(votable_id))
        return await self.comment_service.get_comment(CommentId(votable_id))

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Authenticate the voter
        2. Load the live target (404 if missing or deleted)
        3. Apply the vote and read back the tally

        Raises:
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the target does not exist
            NotAuthorizedError: If self-voting is disabled for the author
        """
        user = await self.access_service.authenticate(request.token)
        target: ContentRecord = await self._load_target(
            request.votable_type, request.votable_id
        )

        summary = await self.vote_service.cast_vote(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            author_id=target.author_id,
            voter_id=user.id,
            action=request.vote_type,
        )

        return CastVoteResponse(
            message="Vote updated successfully",
            vote_count=summary.vote_count,
            upvotes=summary.upvotes,
            downvotes=summary.downvotes,
            user_vote=summary.user_vote.value if summary.user_vote else None,
        )
