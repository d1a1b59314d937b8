"""Unit tests for CreateQuestionUseCase."""

import pytest

from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from stackit.domain.error import (
    AuthenticationError,
    NotAuthorizedError,
    ValidationError,
)
from stackit.domain.repository import UserRepository
from tests.conftest import save_user_with_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

DESCRIPTION = "I have tried flexbox and grid but nothing works."


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_question_normalizes_tags(self, unit_env):
        """Tags should come back lowercased and de-duplicated."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        user, token = await save_user_with_token(unit_env)

        # Act
        response = await use_case.execute(
            CreateQuestionRequest(
                token=token,
                title="How do I center a div?",
                description=DESCRIPTION,
                tags=["CSS", " html ", "css"],
            )
        )

        # Assert
        assert response.message == "Question created successfully"
        assert response.question.tags == ["css", "html"]
        assert response.question.author.id == str(user.id)
        assert response.question.vote_count == 0
        assert response.question.is_answered is False

    @pytest.mark.asyncio
    async def test_too_many_tags_rejected(self, unit_env):
        """More than five tags should fail validation."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        _, token = await save_user_with_token(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateQuestionRequest(
                    token=token,
                    title="How do I center a div?",
                    description=DESCRIPTION,
                    tags=["aa", "bb", "cc", "dd", "ee", "ff"],
                )
            )
        assert exc_info.value.errors[0].field == "tags"

    @pytest.mark.asyncio
    async def test_malformed_tag_rejected(self, unit_env):
        """Tags with disallowed characters should fail validation."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        _, token = await save_user_with_token(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateQuestionRequest(
                    token=token,
                    title="How do I center a div?",
                    description=DESCRIPTION,
                    tags=["no spaces allowed"],
                )
            )

    @pytest.mark.asyncio
    async def test_guest_cannot_ask(self, unit_env):
        """Guests should be asked to authenticate."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await use_case.execute(
                CreateQuestionRequest(
                    token=None,
                    title="How do I center a div?",
                    description=DESCRIPTION,
                    tags=["css"],
                )
            )

    @pytest.mark.asyncio
    async def test_banned_user_cannot_ask(self, unit_env):
        """Banned users should be refused."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        user, token = await save_user_with_token(unit_env)
        await user_repo.save(user.model_copy(update={"is_banned": True}))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                CreateQuestionRequest(
                    token=token,
                    title="How do I center a div?",
                    description=DESCRIPTION,
                    tags=["css"],
                )
            )
