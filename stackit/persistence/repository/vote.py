"""PostgreSQL implementation of Vote repository."""

from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy import and_, case, delete, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteTally
from stackit.persistence.mappers import row_to_vote
from stackit.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Set and clear are single statements against the (user, votable) unique
    key, so concurrent votes on the same item never overwrite each other.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> List[Vote]:
        """Find all votes on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def set_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: VoteDirection,
    ) -> Vote:
        """Upsert a user's vote (INSERT ... ON CONFLICT DO UPDATE)."""
        with logfire.span(
            "vote_repository.set_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            direction=direction.value,
        ):
            stmt = pg_insert(votes_table).values(
                id=uuid4(),
                user_id=user_id,
                votable_type=votable_type.value,
                votable_id=votable_id,
                direction=direction.value,
                created_at=datetime.now(),
            )
            # Same direction keeps the original timestamp
            stmt = stmt.on_conflict_do_update(
                constraint="uq_votes_user_votable",
                set_={
                    "direction": stmt.excluded.direction,
                    "created_at": case(
                        (
                            votes_table.c.direction == stmt.excluded.direction,
                            votes_table.c.created_at,
                        ),
                        else_=stmt.excluded.created_at,
                    ),
                },
            ).returning(votes_table)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_vote(row._asdict())

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote by user and votable."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count up and down votes on an item."""
        tallies = await self.tallies(votable_type, [votable_id])
        return tallies[votable_id]

    async def tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteTally]:
        """Count votes on multiple items (batch query)."""
        if not votable_ids:
            return {}

        stmt = (
            select(
                votes_table.c.votable_id,
                votes_table.c.direction,
                func.count().label("votes"),
            )
            .where(
                and_(
                    votes_table.c.votable_type == votable_type.value,
                    votes_table.c.votable_id.in_(votable_ids),
                )
            )
            .group_by(votes_table.c.votable_id, votes_table.c.direction)
        )
        result = await self.session.execute(stmt)

        counts: dict[UUID, dict[str, int]] = defaultdict(dict)
        for votable_id, direction, votes in result.fetchall():
            counts[votable_id][direction] = votes

        return {
            votable_id: VoteTally(
                upvotes=counts[votable_id].get(VoteDirection.UP.value, 0),
                downvotes=counts[votable_id].get(VoteDirection.DOWN.value, 0),
            )
            for votable_id in votable_ids
        }

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_vote(row._asdict()) for row in rows]
