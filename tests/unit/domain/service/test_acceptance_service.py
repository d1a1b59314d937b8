"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from stackit.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import AcceptanceService, AnswerService
from stackit.domain.value import AnswerId, NotificationType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(env):
    """Save an asker, two answerers, a question and two answers."""
    user_repo = await env.get(UserRepository)
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)

    asker = await user_repo.save(make_user("asker"))
    first_author = await user_repo.save(make_user("first_author"))
    second_author = await user_repo.save(make_user("second_author"))
    question = await question_repo.save(make_question(asker.id))
    first = await answer_repo.save(make_answer(question.id, first_author.id))
    second = await answer_repo.save(make_answer(question.id, second_author.id))
    return asker, question, first, second


class TestAccept:
    """Tests for AcceptanceService.accept."""

    @pytest.mark.asyncio
    async def test_accept_marks_answer_and_question(self, unit_env):
        """Accepting should set both sides of the acceptance."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        asker, question, first, _ = await _seed(unit_env)

        # Act
        updated_question, accepted = await service.accept(first.id, asker)

        # Assert
        assert accepted.is_accepted is True
        assert accepted.accepted_by == asker.id
        assert accepted.accepted_at is not None
        assert updated_question.is_answered is True
        assert updated_question.accepted_answer_id == first.id

    @pytest.mark.asyncio
    async def test_accept_replaces_previous_answer(self, unit_env):
        """Accepting another answer should clear the previous one."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, first, second = await _seed(unit_env)
        await service.accept(first.id, asker)

        # Act
        updated_question, accepted = await service.accept(second.id, asker)

        # Assert
        previous = await answer_repo.find_by_id(first.id)
        assert previous.is_accepted is False
        assert previous.accepted_at is None
        assert accepted.is_accepted is True
        assert updated_question.accepted_answer_id == second.id

        answers = await answer_repo.find_by_question(question.id)
        assert sum(1 for a in answers if a.is_accepted) == 1

    @pytest.mark.asyncio
    async def test_accept_twice_is_idempotent(self, unit_env):
        """Re-accepting the accepted answer should change nothing."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, _, first, _ = await _seed(unit_env)
        await service.accept(first.id, asker)

        # Act
        updated_question, accepted = await service.accept(first.id, asker)

        # Assert
        assert accepted.is_accepted is True
        assert updated_question.accepted_answer_id == first.id
        count = await notification_repo.count(first.author_id)
        assert count == 1

    @pytest.mark.asyncio
    async def test_accept_by_non_owner_rejected(self, unit_env):
        """Only the question author may accept."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        _, _, first, _ = await _seed(unit_env)
        stranger = await user_repo.save(make_user("stranger"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.accept(first.id, stranger)

    @pytest.mark.asyncio
    async def test_accept_unknown_answer(self, unit_env):
        """Unknown answers should raise NotFoundError."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        asker, _, _, _ = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.accept(AnswerId(uuid4()), asker)

    @pytest.mark.asyncio
    async def test_accept_notifies_answer_author(self, unit_env):
        """The answer author should get an answer_accepted notification."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, _, first, _ = await _seed(unit_env)

        # Act
        await service.accept(first.id, asker)

        # Assert
        notifications = await notification_repo.find_by_recipient(first.author_id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.ANSWER_ACCEPTED
        assert notifications[0].metadata == {"accepted": True}

    @pytest.mark.asyncio
    async def test_self_accept_does_not_notify(self, unit_env):
        """Accepting one's own answer should not notify anyone."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, question, _, _ = await _seed(unit_env)
        own = await answer_repo.save(make_answer(question.id, asker.id))

        # Act
        await service.accept(own.id, asker)

        # Assert
        assert await notification_repo.count(asker.id) == 0


class TestUnaccept:
    """Tests for AcceptanceService.unaccept."""

    @pytest.mark.asyncio
    async def test_unaccept_clears_acceptance(self, unit_env):
        """Unaccepting should clear both sides of the acceptance."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        asker, _, first, _ = await _seed(unit_env)
        await service.accept(first.id, asker)

        # Act
        updated_question, answer = await service.unaccept(first.id, asker)

        # Assert
        assert answer.is_accepted is False
        assert answer.accepted_by is None
        assert updated_question.is_answered is False
        assert updated_question.accepted_answer_id is None

    @pytest.mark.asyncio
    async def test_unaccept_non_accepted_answer(self, unit_env):
        """Unaccepting an answer that is not accepted should fail."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, first, second = await _seed(unit_env)
        await service.accept(first.id, asker)

        # Act
        with pytest.raises(InvalidStateError):
            await service.unaccept(second.id, asker)

        # Assert
        stored_question = await question_repo.find_by_id(question.id)
        stored_first = await answer_repo.find_by_id(first.id)
        assert stored_question.accepted_answer_id == first.id
        assert stored_question.is_answered is True
        assert stored_first.is_accepted is True

    @pytest.mark.asyncio
    async def test_unaccept_notifies_with_withdrawn_flag(self, unit_env):
        """The answer author should learn the acceptance was withdrawn."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, _, first, _ = await _seed(unit_env)
        await service.accept(first.id, asker)

        # Act
        await service.unaccept(first.id, asker)

        # Assert
        notifications = await notification_repo.find_by_recipient(first.author_id)
        assert {n.metadata["accepted"] for n in notifications} == {True, False}


class TestRelease:
    """Tests for AcceptanceService.release."""

    @pytest.mark.asyncio
    async def test_deleting_accepted_answer_reopens_question(self, unit_env):
        """Releasing the accepted answer should mark the question unanswered."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, first, _ = await _seed(unit_env)
        _, accepted = await service.accept(first.id, asker)

        # Act
        released = await service.release(accepted)
        await answer_service.delete_answer(released, asker.id)

        # Assert
        reopened = await question_repo.find_by_id(question.id)
        assert reopened.is_answered is False
        assert reopened.accepted_answer_id is None
        stored = await answer_repo.find_by_id(first.id)
        assert stored.is_deleted is True
        assert stored.is_accepted is False
        assert stored.accepted_at is None
        assert stored.accepted_by is None

    @pytest.mark.asyncio
    async def test_release_of_other_answer_keeps_acceptance(self, unit_env):
        """Releasing an answer that is not accepted should change nothing."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        asker, question, first, second = await _seed(unit_env)
        await service.accept(first.id, asker)

        # Act
        await service.release(second)

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert stored.accepted_answer_id == first.id
