"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import AnswerId, CommentId, QuestionId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        author_id: UserId,
        content: str,
        question_id: QuestionId | None = None,
        answer_id: AnswerId | None = None,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Comment on a question or an answer, optionally as a reply.

        Args:
            author_id: Author user ID
            content: Comment text
            question_id: Target question (exclusive with answer_id)
            answer_id: Target answer (exclusive with question_id)
            parent_comment_id: Comment being replied to

        Returns:
            Created comment

        Raises:
            ValidationError: If the parent comment is missing or belongs to
                another target
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            question_id=str(question_id) if question_id else None,
            answer_id=str(answer_id) if answer_id else None,
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent or parent.is_deleted:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                    )
                    raise ValidationError.for_field(
                        "parentCommentId", "Parent comment not found"
                    )
                if (
                    parent.question_id != question_id
                    or parent.answer_id != answer_id
                ):
                    logfire.warn(
                        "Parent comment belongs to another target",
                        parent_comment_id=str(parent_comment_id),
                    )
                    raise ValidationError.for_field(
                        "parentCommentId",
                        "Parent comment does not belong to the same content",
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content=content.strip(),
                question_id=question_id,
                answer_id=answer_id,
                parent_comment_id=parent_comment_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a live comment by ID.

        Raises:
            NotFoundError: If the comment is missing or soft-deleted
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.is_deleted:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_for_question(self, question_id: QuestionId) -> list[Comment]:
        """Get live comments on a question."""
        return await self.comment_repository.find_by_question(question_id)

    async def list_for_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Get live comments on an answer."""
        return await self.comment_repository.find_by_answer(answer_id)

    async def update_comment(
        self,
        comment: Comment,
        editor_id: UserId,
        content: str,
        reason: str | None = None,
    ) -> Comment:
        """Edit a comment and record the previous content.

        Raises:
            ConflictError: If the content does not change
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment.id),
            editor_id=str(editor_id),
        ):
            updated = comment.edited(editor_id, {"content": content.strip()}, reason)
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(comment.id))
            return saved

    async def delete_comment(
        self, comment: Comment, deleted_by: UserId, reason: str | None = None
    ) -> Comment:
        """Soft-delete a comment."""
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment.id),
            deleted_by=str(deleted_by),
        ):
            saved = await self.comment_repository.save(
                comment.soft_deleted(deleted_by, reason)
            )
            logfire.info("Comment deleted", comment_id=str(comment.id))
            return saved
