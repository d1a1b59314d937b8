"""Unit tests for answer use cases."""

from uuid import UUID

import pytest

from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    AcceptanceRequest,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UnacceptAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from stackit.domain.error import ConflictError, NotAuthorizedError
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from stackit.domain.value import AnswerId, NotificationType
from tests.conftest import make_question, save_user_with_token
from tests.di import RecordingConnectionDirectory
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CONTENT = "Use display: flex with justify-content: center."


async def _post_answer(env, question_id, token, content: str = CONTENT):
    use_case = await env.get(CreateAnswerUseCase)
    return await use_case.execute(
        CreateAnswerRequest(token=token, question_id=question_id, content=content)
    )


class TestCreateAnswerUseCase:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_answer_notifies_asker(self, unit_env):
        """Posting an answer should notify and push to the asker."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        directory = await unit_env.get(RecordingConnectionDirectory)
        asker, _ = await save_user_with_token(unit_env, "asker")
        answerer, token = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))

        # Act
        response = await _post_answer(unit_env, question.id, token)

        # Assert
        assert response.message == "Answer posted successfully"
        assert response.answer.author.username == "answerer"
        notifications = await notification_repo.find_by_recipient(asker.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.ANSWER_RECEIVED
        assert notifications[0].sender_id == answerer.id
        assert directory.events_for(asker.id) == ["answer_received"]

    @pytest.mark.asyncio
    async def test_answering_own_question_does_not_notify(self, unit_env):
        """Self-answers should not notify the asker."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, token = await save_user_with_token(unit_env, "asker")
        question = await question_repo.save(make_question(asker.id))

        # Act
        await _post_answer(unit_env, question.id, token)

        # Assert
        assert await notification_repo.count(asker.id) == 0

    @pytest.mark.asyncio
    async def test_second_answer_conflicts(self, unit_env):
        """One live answer per author and question."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        asker, _ = await save_user_with_token(unit_env, "asker")
        _, token = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))
        await _post_answer(unit_env, question.id, token)

        # Act & Assert
        with pytest.raises(ConflictError):
            await _post_answer(unit_env, question.id, token)


class TestUpdateAnswerUseCase:
    """Tests for UpdateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_stranger_cannot_edit(self, unit_env):
        """Only the author or an admin may edit an answer."""
        # Arrange
        use_case = await unit_env.get(UpdateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        asker, asker_token = await save_user_with_token(unit_env, "asker")
        _, token = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))
        posted = await _post_answer(unit_env, question.id, token)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateAnswerRequest(
                    token=asker_token,
                    answer_id=posted.answer.id,
                    content="Rewritten by someone who is not the author.",
                )
            )


class TestAcceptanceUseCases:
    """Tests for accepting and unaccepting through the use cases."""

    @pytest.mark.asyncio
    async def test_accept_then_unaccept(self, unit_env):
        """Acceptance should round-trip the question's answered state."""
        # Arrange
        accept = await unit_env.get(AcceptAnswerUseCase)
        unaccept = await unit_env.get(UnacceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        asker, asker_token = await save_user_with_token(unit_env, "asker")
        _, token = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))
        posted = await _post_answer(unit_env, question.id, token)
        request = AcceptanceRequest(token=asker_token, answer_id=posted.answer.id)

        # Act
        accepted = await accept.execute(request)
        unaccepted = await unaccept.execute(request)

        # Assert
        assert accepted.message == "Answer accepted successfully"
        assert accepted.is_answered is True
        assert accepted.accepted_answer_id == posted.answer.id
        assert accepted.answer.is_accepted is True
        assert unaccepted.message == "Answer unaccepted successfully"
        assert unaccepted.is_answered is False
        assert unaccepted.accepted_answer_id is None

    @pytest.mark.asyncio
    async def test_answerer_cannot_accept(self, unit_env):
        """Only the question author may accept."""
        # Arrange
        accept = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        asker, _ = await save_user_with_token(unit_env, "asker")
        _, token = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))
        posted = await _post_answer(unit_env, question.id, token)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await accept.execute(
                AcceptanceRequest(token=token, answer_id=posted.answer.id)
            )


class TestDeleteAnswerUseCase:
    """Tests for DeleteAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_deleting_accepted_answer_reopens_question(self, unit_env):
        """Deleting the accepted answer should leave the question unanswered."""
        # Arrange
        accept = await unit_env.get(AcceptAnswerUseCase)
        delete = await unit_env.get(DeleteAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, asker_token = await save_user_with_token(unit_env, "asker")
        _, token = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))
        posted = await _post_answer(unit_env, question.id, token)
        await accept.execute(
            AcceptanceRequest(token=asker_token, answer_id=posted.answer.id)
        )

        # Act
        response = await delete.execute(
            DeleteAnswerRequest(token=token, answer_id=posted.answer.id)
        )

        # Assert
        assert response.message == "Answer deleted successfully"
        stored = await question_repo.find_by_id(question.id)
        assert stored.is_answered is False
        assert stored.accepted_answer_id is None
        answer = await answer_repo.find_by_id(AnswerId(UUID(posted.answer.id)))
        assert answer.is_deleted is True
        assert answer.is_accepted is False
        assert answer.accepted_by is None
