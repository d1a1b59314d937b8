"""Unit tests for user profile use cases."""

from uuid import uuid4

import pytest

from stackit.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUserAnswersUseCase,
    ListUserContentRequest,
    ListUserQuestionsUseCase,
    SearchUsersRequest,
    SearchUsersUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import AcceptanceService
from tests.conftest import make_answer, make_question, save_user_with_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_stats(self, unit_env):
        """Profiles should count questions, answers and accepted answers."""
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        acceptance = await unit_env.get(AcceptanceService)
        asker, _ = await save_user_with_token(unit_env, "asker")
        answerer, _ = await save_user_with_token(unit_env, "answerer")
        first = await question_repo.save(make_question(asker.id))
        second = await question_repo.save(
            make_question(asker.id, title="Second question by asker")
        )
        accepted = await answer_repo.save(make_answer(first.id, answerer.id))
        await answer_repo.save(make_answer(second.id, answerer.id))
        await acceptance.accept(accepted.id, asker)

        # Act
        asker_profile = await use_case.execute(GetUserProfileRequest(user_id=asker.id))
        answerer_profile = await use_case.execute(
            GetUserProfileRequest(user_id=answerer.id)
        )

        # Assert
        assert asker_profile.user.username == "asker"
        assert asker_profile.stats.questions_asked == 2
        assert answerer_profile.stats.answers_given == 2
        assert answerer_profile.stats.accepted_answers == 1

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """Unknown users should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id=uuid4()))


class TestUserContentUseCases:
    """Tests for the per-user question and answer listings."""

    @pytest.mark.asyncio
    async def test_user_answers_reference_their_question(self, unit_env):
        """Answer listings should carry the question title."""
        # Arrange
        questions_use_case = await unit_env.get(ListUserQuestionsUseCase)
        answers_use_case = await unit_env.get(ListUserAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, _ = await save_user_with_token(unit_env, "asker")
        answerer, _ = await save_user_with_token(unit_env, "answerer")
        question = await question_repo.save(make_question(asker.id))
        await answer_repo.save(make_answer(question.id, answerer.id))

        # Act
        questions = await questions_use_case.execute(
            ListUserContentRequest(user_id=asker.id)
        )
        answers = await answers_use_case.execute(
            ListUserContentRequest(user_id=answerer.id)
        )

        # Assert
        assert [q.id for q in questions.questions] == [str(question.id)]
        assert answers.pagination.total_answers == 1
        assert answers.answers[0].question.title == question.title


class TestProfileUpdateAndSearch:
    """Tests for UpdateProfileUseCase and SearchUsersUseCase."""

    @pytest.mark.asyncio
    async def test_update_profile(self, unit_env):
        """Users should be able to edit their bio."""
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        _, token = await save_user_with_token(unit_env, "alice")

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(token=token, bio="Frontend developer")
        )

        # Assert
        assert response.message == "Profile updated successfully"
        assert response.user.bio == "Frontend developer"

    @pytest.mark.asyncio
    async def test_search_excludes_banned(self, unit_env):
        """Search should skip banned accounts."""
        # Arrange
        use_case = await unit_env.get(SearchUsersUseCase)
        user_repo = await unit_env.get(UserRepository)
        await save_user_with_token(unit_env, "alice")
        alina, _ = await save_user_with_token(unit_env, "alina")
        await save_user_with_token(unit_env, "bob")
        await user_repo.save(alina.model_copy(update={"is_banned": True}))

        # Act
        results = await use_case.execute(SearchUsersRequest(q="ali"))

        # Assert
        assert [u.username for u in results] == ["alice"]
