"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CommentResponse
from stackit.domain.service import (
    AccessService,
    CommentService,
    UserService,
    VoteService,
)
from stackit.domain.value import CommentId, VotableType

from .create_comment import CommentMutationResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    token: str | None
    comment_id: UUID
    content: str
    reason: str | None = None


class UpdateCommentUseCase:
    """Use case for editing a comment (owner or admin)."""

    def __init__(
        self,
        access_service: AccessService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.access_service = access_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentMutationResponse:
        user = await self.access_service.authenticate(request.token)
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        self.access_service.ensure_can_modify(user, comment, "comment", "edit")

        updated = await self.comment_service.update_comment(
            comment, editor_id=user.id, content=request.content, reason=request.reason
        )

        authors = await self.user_service.get_many({updated.author_id})
        summaries = await self.vote_service.summarize(
            VotableType.COMMENT, [updated.id], user.id
        )
        return CommentMutationResponse(
            message="Comment updated successfully",
            comment=CommentResponse.build(updated, authors, summaries.get(updated.id)),
        )
