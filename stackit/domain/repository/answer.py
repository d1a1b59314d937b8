"""Answer repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, including soft-deleted ones.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all live answers to a question, oldest first.

        Args:
            question_id: The question's ID

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find the live answer a user posted on a question.

        Args:
            question_id: The question's ID
            author_id: The author's ID

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Answer]:
        """Find live answers by an author, newest first."""
        pass

    @abstractmethod
    async def count(
        self,
        author_id: Optional[UserId] = None,
        is_accepted: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count live answers matching the given filters."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer

        Raises:
            IntegrityError: If the author already has a live answer on the
                question
        """
        pass
