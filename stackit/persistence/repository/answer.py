"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, including soft-deleted ones."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find the live answers of a question, oldest first."""
        with logfire.span(
            "answer_repository.find_by_question", question_id=str(question_id)
        ):
            stmt = (
                select(answers_table)
                .where(
                    answers_table.c.question_id == question_id,
                    answers_table.c.is_deleted.is_(False),
                )
                .order_by(asc(answers_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            answers = [row_to_answer(row._asdict()) for row in result.fetchall()]
            logfire.info("Found answers", count=len(answers))
            return answers

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find an author's live answer on a question."""
        stmt = select(answers_table).where(
            answers_table.c.question_id == question_id,
            answers_table.c.author_id == author_id,
            answers_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Answer]:
        """Find an author's live answers, newest first."""
        stmt = (
            select(answers_table)
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.is_deleted.is_(False),
            )
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        author_id: Optional[UserId] = None,
        is_accepted: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count live answers matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.is_deleted.is_(False))
        )
        if author_id is not None:
            stmt = stmt.where(answers_table.c.author_id == author_id)
        if is_accepted is not None:
            stmt = stmt.where(answers_table.c.is_accepted.is_(is_accepted))
        if created_since is not None:
            stmt = stmt.where(answers_table.c.created_at >= created_since)

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Raises:
            IntegrityError: If the author already has a live answer on the
                question (partial unique index)
        """
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            answer_dict = answer_to_dict(answer)
            stmt = pg_insert(answers_table).values(**answer_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[answers_table.c.id],
                set_={k: v for k, v in answer_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return answer
