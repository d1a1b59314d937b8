"""In-memory question repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import (
    QuestionRepository,
    QuestionSortOrder,
    TagUsage,
)
from stackit.domain.value import QuestionId, TagName, UserId, VotableType

from .vote import InMemoryVoteRepository


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Sorting by votes reads tallies from the vote repository it was given.
    """

    def __init__(self, votes: Optional[InMemoryVoteRepository] = None) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._votes = votes

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID (no locking needed in memory)."""
        return self._questions.get(question_id)

    def _matching(
        self,
        tag: Optional[TagName],
        search: Optional[str],
        author_id: Optional[UserId],
    ) -> list[Question]:
        questions = [q for q in self._questions.values() if not q.is_deleted]
        if tag is not None:
            questions = [q for q in questions if tag in q.tags]
        if search:
            terms = search.lower().split()
            questions = [
                q
                for q in questions
                if all(
                    term in f"{q.title} {q.description}".lower() for term in terms
                )
            ]
        if author_id is not None:
            questions = [q for q in questions if q.author_id == author_id]
        return questions

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find live questions with filtering and pagination."""
        questions = self._matching(tag, search, author_id)

        # Sort (stable, so secondary key first)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.OLDEST:
            questions.reverse()
        elif sort == QuestionSortOrder.VOTES:
            questions.sort(key=self._net_votes, reverse=True)
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: q.views, reverse=True)
        elif sort == QuestionSortOrder.UNANSWERED:
            questions = [q for q in questions if not q.is_answered]

        # Paginate
        return questions[offset : offset + limit]

    def _net_votes(self, question: Question) -> int:
        if self._votes is None:
            return 0
        return self._votes.net(VotableType.QUESTION, question.id)

    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        author_id: Optional[UserId] = None,
        is_answered: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count live questions matching the given filters."""
        questions = self._matching(tag, search, author_id)
        if is_answered is not None:
            questions = [q for q in questions if q.is_answered == is_answered]
        if created_since is not None:
            questions = [q for q in questions if q.created_at >= created_since]
        return len(questions)

    async def save(self, question: Question) -> Question:
        """Save or update a question.

        The stored view counter wins over the one on the saved model.
        """
        existing = self._questions.get(question.id)
        if existing is not None:
            question = question.model_copy(update={"views": existing.views})
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment the view counter by 1."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def popular_tags(self, limit: int = 20) -> list[TagUsage]:
        """Most used tags across live questions."""
        counts: Counter[str] = Counter()
        for question in self._questions.values():
            if not question.is_deleted:
                counts.update(tag.root for tag in question.tags)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [TagUsage(tag=tag, count=count) for tag, count in ranked[:limit]]
