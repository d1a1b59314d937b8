"""Unit tests for comment use cases."""

from uuid import uuid4

import pytest

from stackit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from stackit.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from stackit.domain.value import NotificationType
from tests.conftest import make_answer, make_question, save_user_with_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CONTENT = "Could you share the CSS you already tried?"


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_on_answer_notifies_answer_author(self, unit_env):
        """Comments should notify the author of the commented item."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, _ = await save_user_with_token(unit_env, "asker")
        answerer, _ = await save_user_with_token(unit_env, "answerer")
        _, token = await save_user_with_token(unit_env, "commenter")
        question = await question_repo.save(make_question(asker.id))
        answer = await answer_repo.save(make_answer(question.id, answerer.id))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(token=token, content=CONTENT, answer_id=answer.id)
        )

        # Assert
        assert response.message == "Comment added successfully"
        assert response.comment.answer_id == str(answer.id)
        notifications = await notification_repo.find_by_recipient(answerer.id)
        assert [n.type for n in notifications] == [NotificationType.COMMENT_RECEIVED]
        assert await notification_repo.count(asker.id) == 0

    @pytest.mark.asyncio
    async def test_needs_exactly_one_target(self, unit_env):
        """Comments without a target or with two targets are invalid."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        _, token = await save_user_with_token(unit_env, "commenter")

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(CreateCommentRequest(token=token, content=CONTENT))
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    token=token,
                    content=CONTENT,
                    question_id=uuid4(),
                    answer_id=uuid4(),
                )
            )

    @pytest.mark.asyncio
    async def test_comment_on_missing_question(self, unit_env):
        """Comments on unknown questions should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        _, token = await save_user_with_token(unit_env, "commenter")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(token=token, content=CONTENT, question_id=uuid4())
            )


class TestCommentLifecycle:
    """Tests for listing, editing and deleting comments."""

    @pytest.mark.asyncio
    async def test_edit_and_delete_own_comment(self, unit_env):
        """Authors should be able to edit and delete their comments."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        asker, token = await save_user_with_token(unit_env, "asker")
        question = await question_repo.save(make_question(asker.id))
        created = await create.execute(
            CreateCommentRequest(token=token, content=CONTENT, question_id=question.id)
        )

        # Act
        updated = await update.execute(
            UpdateCommentRequest(
                token=token,
                comment_id=created.comment.id,
                content="Could you share the HTML you already tried?",
            )
        )
        before = await list_comments.execute(
            ListCommentsRequest(question_id=question.id)
        )
        await delete.execute(
            DeleteCommentRequest(token=token, comment_id=created.comment.id)
        )
        after = await list_comments.execute(
            ListCommentsRequest(question_id=question.id)
        )

        # Assert
        assert updated.comment.is_edited is True
        assert [c.content for c in before] == [
            "Could you share the HTML you already tried?"
        ]
        assert after == []

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Non-authors should be refused."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        asker, token = await save_user_with_token(unit_env, "asker")
        _, stranger_token = await save_user_with_token(unit_env, "stranger")
        question = await question_repo.save(make_question(asker.id))
        created = await create.execute(
            CreateCommentRequest(token=token, content=CONTENT, question_id=question.id)
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteCommentRequest(
                    token=stranger_token, comment_id=created.comment.id
                )
            )
