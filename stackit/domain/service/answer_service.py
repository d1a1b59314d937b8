"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.domain.error import ConflictError, NotFoundError
from stackit.domain.model import Answer, Question
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self, question: Question, author_id: UserId, content: str
    ) -> Answer:
        """Post an answer to a question.

        A user holds at most one live answer per question.

        Args:
            question: Live question being answered
            author_id: Author user ID
            content: Answer body

        Returns:
            Created answer

        Raises:
            ConflictError: If the author already answered the question
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question.id),
            author_id=str(author_id),
        ):
            existing = await self.answer_repository.find_by_question_and_author(
                question.id, author_id
            )
            if existing:
                logfire.warn(
                    "Duplicate answer attempt",
                    question_id=str(question.id),
                    author_id=str(author_id),
                )
                raise ConflictError("You have already answered this question")

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                author_id=author_id,
                content=content.strip(),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.answer_repository.save(answer)
            except IntegrityError:
                logfire.warn(
                    "Duplicate answer rejected by store",
                    question_id=str(question.id),
                    author_id=str(author_id),
                )
                raise ConflictError("You have already answered this question")

            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question.id)
            )
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get a live answer by ID.

        Raises:
            NotFoundError: If the answer is missing or soft-deleted
        """
        with logfire.span("answer_service.get_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or answer.is_deleted:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def list_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get all live answers to a question."""
        with logfire.span(
            "answer_service.list_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers retrieved", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def update_answer(
        self,
        answer: Answer,
        editor_id: UserId,
        content: str,
        reason: str | None = None,
    ) -> Answer:
        """Edit an answer and record the previous content.

        Raises:
            ConflictError: If the content does not change
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer.id),
            editor_id=str(editor_id),
        ):
            updated = answer.edited(editor_id, {"content": content.strip()}, reason)
            saved = await self.answer_repository.save(updated)
            logfire.info("Answer updated", answer_id=str(answer.id))
            return saved

    async def delete_answer(
        self, answer: Answer, deleted_by: UserId, reason: str | None = None
    ) -> Answer:
        """Soft-delete an answer."""
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer.id),
            deleted_by=str(deleted_by),
        ):
            saved = await self.answer_repository.save(
                answer.soft_deleted(deleted_by, reason)
            )
            logfire.info("Answer deleted", answer_id=str(answer.id))
            return saved
