"""In-memory answer repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find the live answers of a question, oldest first."""
        answers = [
            a
            for a in self._answers.values()
            if a.question_id == question_id and not a.is_deleted
        ]
        return sorted(answers, key=lambda a: a.created_at)

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find an author's live answer on a question."""
        for answer in self._answers.values():
            if (
                answer.question_id == question_id
                and answer.author_id == author_id
                and not answer.is_deleted
            ):
                return answer
        return None

    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Answer]:
        """Find an author's live answers, newest first."""
        answers = [
            a
            for a in self._answers.values()
            if a.author_id == author_id and not a.is_deleted
        ]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count(
        self,
        author_id: Optional[UserId] = None,
        is_accepted: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count live answers matching the given filters."""
        answers = [a for a in self._answers.values() if not a.is_deleted]
        if author_id is not None:
            answers = [a for a in answers if a.author_id == author_id]
        if is_accepted is not None:
            answers = [a for a in answers if a.is_accepted == is_accepted]
        if created_since is not None:
            answers = [a for a in answers if a.created_at >= created_since]
        return len(answers)

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer.

        Raises:
            IntegrityError: If the author already has another live answer on
                the question
        """
        if not answer.is_deleted:
            existing = await self.find_by_question_and_author(
                answer.question_id, answer.author_id
            )
            if existing and existing.id != answer.id:
                raise IntegrityError("Duplicate answer", None, Exception())

        self._answers[answer.id] = answer
        return answer
