"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.service import CommentService
from stackit.domain.value import AnswerId, CommentId, QuestionId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CONTENT = "Could you share the CSS you already tried?"


class TestCreateComment:
    """Tests for CommentService.create_comment."""

    @pytest.mark.asyncio
    async def test_comment_on_question(self, unit_env):
        """Comments on a question should be listed for it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        question_id = QuestionId(uuid4())

        # Act
        comment = await comment_service.create_comment(
            UserId(uuid4()), CONTENT, question_id=question_id
        )

        # Assert
        assert comment.question_id == question_id
        assert comment.answer_id is None
        assert await comment_service.list_for_question(question_id) == [comment]

    @pytest.mark.asyncio
    async def test_reply_on_same_target(self, unit_env):
        """Replies should reference their parent comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        answer_id = AnswerId(uuid4())
        parent = await comment_service.create_comment(
            UserId(uuid4()), CONTENT, answer_id=answer_id
        )

        # Act
        reply = await comment_service.create_comment(
            UserId(uuid4()),
            "Sure, it is the snippet from the question body.",
            answer_id=answer_id,
            parent_comment_id=parent.id,
        )

        # Assert
        assert reply.parent_comment_id == parent.id
        assert len(await comment_service.list_for_answer(answer_id)) == 2

    @pytest.mark.asyncio
    async def test_reply_on_other_target_rejected(self, unit_env):
        """Replies must stay on the parent's target."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            UserId(uuid4()), CONTENT, question_id=QuestionId(uuid4())
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                UserId(uuid4()),
                CONTENT,
                question_id=QuestionId(uuid4()),
                parent_comment_id=parent.id,
            )

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_rejected(self, unit_env):
        """Unknown parents should raise ValidationError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                UserId(uuid4()),
                CONTENT,
                question_id=QuestionId(uuid4()),
                parent_comment_id=CommentId(uuid4()),
            )


class TestDeleteComment:
    """Tests for CommentService.delete_comment."""

    @pytest.mark.asyncio
    async def test_deleted_comment_hidden(self, unit_env):
        """Deleted comments should disappear from reads."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        question_id = QuestionId(uuid4())
        author_id = UserId(uuid4())
        comment = await comment_service.create_comment(
            author_id, CONTENT, question_id=question_id
        )

        # Act
        deleted = await comment_service.delete_comment(comment, author_id)

        # Assert
        assert deleted.is_deleted is True
        assert deleted.deletion.reason == "No reason provided"
        assert await comment_service.list_for_question(question_id) == []
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id)
