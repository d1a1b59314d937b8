"""Question repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from stackit.domain.model.question import Question
from stackit.domain.value import QuestionId, TagName, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # net vote count DESC
    VIEWS = "views"  # view counter DESC
    UNANSWERED = "unanswered"  # unanswered only, newest first


@dataclass(frozen=True)
class TagUsage:
    """Number of live questions carrying a tag."""

    tag: str
    count: int


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including soft-deleted ones.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID and lock it until the transaction ends.

        Serializes acceptance changes on the same question.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find live questions with filtering and pagination.

        Args:
            sort: Sort order
            tag: Only questions carrying this tag
            search: Full text search over title and description
            author_id: Only questions by this author
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        author_id: Optional[UserId] = None,
        is_answered: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count live questions matching the given filters."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def popular_tags(self, limit: int = 20) -> List[TagUsage]:
        """Most used tags across live questions, most used first.

        Args:
            limit: Maximum number of tags to return

        Returns:
            Tag usage counts
        """
        pass
