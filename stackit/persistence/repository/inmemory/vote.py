"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteId, VoteTally

_Key = tuple[UserId, VotableType, UUID]


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (voter, votable type, votable ID), mirroring the
    database unique constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[_Key, Vote] = {}

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        return self._votes.get((user_id, votable_type, votable_id))

    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> list[Vote]:
        """Find all votes for a votable item."""
        return [
            v
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_id
        ]

    async def set_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: VoteDirection,
    ) -> Vote:
        """Set a user's vote, replacing any previous one."""
        key = (user_id, votable_type, votable_id)
        existing = self._votes.get(key)
        if existing and existing.direction == direction:
            return existing

        vote = Vote(
            id=existing.id if existing else VoteId(uuid4()),
            user_id=user_id,
            votable_type=votable_type,
            votable_id=votable_id,
            direction=direction,
            created_at=datetime.now(),
        )
        self._votes[key] = vote
        return vote

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote by user and votable item."""
        return self._votes.pop((user_id, votable_type, votable_id), None) is not None

    def _tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        votes = [
            v
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_id
        ]
        return VoteTally(
            upvotes=sum(1 for v in votes if v.direction == VoteDirection.UP),
            downvotes=sum(1 for v in votes if v.direction == VoteDirection.DOWN),
        )

    def net(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Net score of an item (used for in-memory sorting)."""
        return self._tally(votable_type, votable_id).vote_count

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count up and down votes on an item."""
        return self._tally(votable_type, votable_id)

    async def tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Count votes on multiple items."""
        return {vid: self._tally(votable_type, vid) for vid in votable_ids}

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]
