"""Question domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository, QuestionSortOrder, TagUsage
from stackit.domain.value import QuestionId, TagName, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: list[TagName],
    ) -> Question:
        """Create a new question.

        Args:
            author_id: Author user ID
            title: Question title
            description: Question body
            tags: Normalized tags (1-5)

        Returns:
            Created question
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            tags=[t.root for t in tags],
        ):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                author_id=author_id,
                title=title.strip(),
                description=description.strip(),
                tags=tags,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a live question by ID.

        Args:
            question_id: Question ID

        Returns:
            The question

        Raises:
            NotFoundError: If the question is missing or soft-deleted
        """
        with logfire.span(
            "question_service.get_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question or question.is_deleted:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        sort: QuestionSortOrder,
        tag: TagName | None,
        search: str | None,
        limit: int,
        offset: int,
        author_id: UserId | None = None,
    ) -> tuple[list[Question], int]:
        """List live questions with a total count for pagination.

        Returns:
            Tuple of (questions on the page, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                sort=sort,
                tag=tag,
                search=search,
                author_id=author_id,
                limit=limit,
                offset=offset,
            )
            total = await self.question_repository.count(
                tag=tag,
                search=search,
                author_id=author_id,
                is_answered=False if sort == QuestionSortOrder.UNANSWERED else None,
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def record_view(self, question_id: QuestionId) -> None:
        """Atomically bump the view counter."""
        await self.question_repository.increment_views(question_id)

    async def update_question(
        self,
        question: Question,
        editor_id: UserId,
        title: str | None = None,
        description: str | None = None,
        tags: list[TagName] | None = None,
        reason: str | None = None,
    ) -> Question:
        """Edit a question and record the previous content.

        Raises:
            ConflictError: If nothing changes
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question.id),
            editor_id=str(editor_id),
        ):
            updated = question.edited(
                editor_id,
                {
                    "title": title.strip() if title else None,
                    "description": description.strip() if description else None,
                    "tags": tags,
                },
                reason,
            )
            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question.id))
            return saved

    async def delete_question(
        self, question: Question, deleted_by: UserId, reason: str | None = None
    ) -> Question:
        """Soft-delete a question."""
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question.id),
            deleted_by=str(deleted_by),
        ):
            saved = await self.question_repository.save(
                question.soft_deleted(deleted_by, reason)
            )
            logfire.info("Question deleted", question_id=str(question.id))
            return saved

    async def popular_tags(self, limit: int) -> list[TagUsage]:
        """Most used tags across live questions."""
        with logfire.span("question_service.popular_tags", limit=limit):
            return await self.question_repository.popular_tags(limit)
