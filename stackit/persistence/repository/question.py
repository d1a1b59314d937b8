"""PostgreSQL implementation of Question repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Select, asc, case, desc, func, literal_column, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository, QuestionSortOrder, TagUsage
from stackit.domain.value import QuestionId, TagName, UserId, VotableType
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import (
    question_search_vector,
    questions_table,
    votes_table,
)


def _net_votes():
    """Correlated subquery: net vote count of the outer question row."""
    return (
        select(
            func.coalesce(
                func.sum(case((votes_table.c.direction == "up", 1), else_=-1)), 0
            )
        )
        .where(
            votes_table.c.votable_type == VotableType.QUESTION.value,
            votes_table.c.votable_id == questions_table.c.id,
        )
        .scalar_subquery()
    )


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including soft-deleted ones."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            return row_to_question(row._asdict())

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID and lock its row (SELECT ... FOR UPDATE)."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    @staticmethod
    def _filtered(
        stmt: Select,
        tag: Optional[TagName],
        search: Optional[str],
        author_id: Optional[UserId],
    ) -> Select:
        stmt = stmt.where(questions_table.c.is_deleted.is_(False))
        if tag is not None:
            stmt = stmt.where(questions_table.c.tags.contains([tag.root]))
        if search:
            stmt = stmt.where(
                question_search_vector().op("@@")(
                    func.plainto_tsquery(literal_column("'english'"), search)
                )
            )
        if author_id is not None:
            stmt = stmt.where(questions_table.c.author_id == author_id)
        return stmt

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find live questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(questions_table), tag, search, author_id)

            # Sort order
            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(asc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(_net_votes()), desc(questions_table.c.created_at)
                )
            elif sort == QuestionSortOrder.VIEWS:
                stmt = stmt.order_by(
                    desc(questions_table.c.views), desc(questions_table.c.created_at)
                )
            elif sort == QuestionSortOrder.UNANSWERED:
                stmt = stmt.where(questions_table.c.is_answered.is_(False)).order_by(
                    desc(questions_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        author_id: Optional[UserId] = None,
        is_answered: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count live questions matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(questions_table), tag, search, author_id
        )
        if is_answered is not None:
            stmt = stmt.where(questions_table.c.is_answered.is_(is_answered))
        if created_since is not None:
            stmt = stmt.where(questions_table.c.created_at >= created_since)

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            question_dict = question_to_dict(question)
            # The counter is only ever changed by increment_views
            update_values = {
                k: v for k, v in question_dict.items() if k not in ("id", "views")
            }
            stmt = pg_insert(questions_table).values(**question_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[questions_table.c.id], set_=update_values
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def popular_tags(self, limit: int = 20) -> List[TagUsage]:
        """Most used tags across live questions, most used first."""
        with logfire.span("question_repository.popular_tags", limit=limit):
            tags = (
                select(func.unnest(questions_table.c.tags).label("tag"))
                .where(questions_table.c.is_deleted.is_(False))
                .subquery()
            )
            usage = func.count().label("count")
            stmt = (
                select(tags.c.tag, usage)
                .group_by(tags.c.tag)
                .order_by(desc(usage), asc(tags.c.tag))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [TagUsage(tag=tag, count=count) for tag, count in result.fetchall()]
