"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import AnswerId, CommentId, QuestionId
from stackit.persistence.mappers import comment_to_dict, row_to_comment
from stackit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Comment]:
        """Find the live comments on a question, oldest first."""
        with logfire.span(
            "comment_repository.find_by_question", question_id=str(question_id)
        ):
            stmt = (
                select(comments_table)
                .where(
                    comments_table.c.question_id == question_id,
                    comments_table.c.is_deleted.is_(False),
                )
                .order_by(asc(comments_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_answer(self, answer_id: AnswerId) -> List[Comment]:
        """Find the live comments on an answer, oldest first."""
        with logfire.span(
            "comment_repository.find_by_answer", answer_id=str(answer_id)
        ):
            stmt = (
                select(comments_table)
                .where(
                    comments_table.c.answer_id == answer_id,
                    comments_table.c.is_deleted.is_(False),
                )
                .order_by(asc(comments_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            comment_dict = comment_to_dict(comment)
            stmt = pg_insert(comments_table).values(**comment_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[comments_table.c.id],
                set_={k: v for k, v in comment_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return comment
