"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel, CommentResponse
from stackit.domain.error import ValidationError
from stackit.domain.service import (
    AccessService,
    AnswerService,
    CommentService,
    NotificationService,
    QuestionService,
)
from stackit.domain.value import AnswerId, CommentId, QuestionId


class CreateCommentRequest(BaseModel):
    """Create comment request. Exactly one target must be given."""

    token: str | None
    content: str
    question_id: UUID | None = None
    answer_id: UUID | None = None
    parent_comment_id: UUID | None = None


class CommentMutationResponse(CamelModel):
    """Comment returned from a write."""

    message: str
    comment: CommentResponse


class CreateCommentUseCase:
    """Use case for commenting on a question or an answer.

    The author of the commented content is notified unless they wrote the
    comment themselves.
    """

    def __init__(
        self,
        access_service: AccessService,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            access_service: Access control gate
            question_service: Question domain service (target lookup)
            answer_service: Answer domain service (target lookup)
            comment_service: Comment domain service
            notification_service: Notification fan-out
        """
        self.access_service = access_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CommentMutationResponse:
        """Execute create comment flow.

        Raises:
            AuthenticationError: If the caller is not authenticated
            ValidationError: If the target is ambiguous or the parent is invalid
            NotFoundError: If the target is missing or deleted
        """
        user = await self.access_service.authenticate(request.token)

        if (request.question_id is None) == (request.answer_id is None):
            raise ValidationError.for_field(
                "questionId", "Provide exactly one of questionId or answerId"
            )

        question_id = QuestionId(request.question_id) if request.question_id else None
        answer_id = AnswerId(request.answer_id) if request.answer_id else None
        if question_id:
            target = await self.question_service.get_question(question_id)
        else:
            target = await self.answer_service.get_answer(answer_id)

        comment = await self.comment_service.create_comment(
            author_id=user.id,
            content=request.content,
            question_id=question_id,
            answer_id=answer_id,
            parent_comment_id=(
                CommentId(request.parent_comment_id)
                if request.parent_comment_id
                else None
            ),
        )
        await self.notification_service.comment_received(
            comment, target.author_id, user
        )

        return CommentMutationResponse(
            message="Comment added successfully",
            comment=CommentResponse.build(comment, {user.id: user}),
        )
