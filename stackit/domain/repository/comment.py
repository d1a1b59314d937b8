"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.comment import Comment
from stackit.domain.value import AnswerId, CommentId, QuestionId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Comment]:
        """Find live comments attached to a question, oldest first."""
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> List[Comment]:
        """Find live comments attached to an answer, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
