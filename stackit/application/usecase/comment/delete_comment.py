"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import MessageResponse
from stackit.domain.service import AccessService, CommentService
from stackit.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    token: str | None
    comment_id: UUID
    reason: str | None = None


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment (owner or admin)."""

    def __init__(
        self, access_service: AccessService, comment_service: CommentService
    ) -> None:
        self.access_service = access_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        user = await self.access_service.authenticate(request.token)
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        self.access_service.ensure_can_modify(user, comment, "comment", "delete")

        await self.comment_service.delete_comment(comment, user.id, request.reason)
        return MessageResponse(message="Comment deleted successfully")
