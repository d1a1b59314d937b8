"""Vote domain service."""

from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

import logfire

from stackit.config import ContentSettings
from stackit.domain.error import NotAuthorizedError
from stackit.domain.repository import VoteRepository
from stackit.domain.value import (
    UserId,
    VotableType,
    VoteAction,
    VoteDirection,
    VoteTally,
)

from .base import Service


@dataclass(frozen=True)
class VoteSummary:
    """Ledger state of one item as seen by one viewer."""

    upvotes: int
    downvotes: int
    user_vote: VoteDirection | None = None

    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return self.upvotes - self.downvotes

    @classmethod
    def from_tally(
        cls, tally: VoteTally, user_vote: VoteDirection | None = None
    ) -> "VoteSummary":
        """Build a summary from an aggregated tally."""
        return cls(
            upvotes=tally.upvotes, downvotes=tally.downvotes, user_vote=user_vote
        )


class VoteService(Service):
    """Domain service for the vote ledger.

    Every item has one ledger entry per voter, either up or down. Writes go
    through single atomic repository operations so that concurrent voters
    on the same item never overwrite each other.
    """

    def __init__(
        self, vote_repository: VoteRepository, content_settings: ContentSettings
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            content_settings: Content rules (self-voting policy)
        """
        self.vote_repository = vote_repository
        self.content_settings = content_settings

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        author_id: UserId,
        voter_id: UserId,
        action: VoteAction,
    ) -> VoteSummary:
        """Set, switch or clear a user's vote on an item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item (must exist and be live)
            author_id: Author of the item
            voter_id: User voting
            action: upvote, downvote or remove

        Returns:
            The item's ledger state after the vote, from the voter's view

        Raises:
            NotAuthorizedError: If self-voting is disabled and the voter
                authored the item
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            voter_id=str(voter_id),
            action=action.value,
        ):
            if (
                action != VoteAction.REMOVE
                and voter_id == author_id
                and not self.content_settings.allow_self_vote
            ):
                logfire.warn(
                    "Self vote rejected",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                )
                raise NotAuthorizedError("You cannot vote on your own content")

            direction = action.direction
            if direction is None:
                removed = await self.vote_repository.delete_by_user_and_votable(
                    voter_id, votable_type, votable_id
                )
                logfire.info("Vote cleared", removed=removed)
            else:
                await self.vote_repository.set_vote(
                    voter_id, votable_type, votable_id, direction
                )
                logfire.info("Vote set", direction=direction.value)

            tally = await self.vote_repository.tally(votable_type, votable_id)
            return VoteSummary.from_tally(tally, direction)

    async def vote_of(
        self, votable_type: VotableType, votable_id: UUID, voter_id: UserId
    ) -> VoteDirection | None:
        """Direction of a user's vote on an item, or None."""
        vote = await self.vote_repository.find_by_user_and_votable(
            voter_id, votable_type, votable_id
        )
        return vote.direction if vote else None

    async def summarize(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
        viewer_id: UserId | None = None,
    ) -> dict[UUID, VoteSummary]:
        """Ledger state of many items for one viewer.

        Args:
            votable_type: Type of the items
            votable_ids: IDs of the items
            viewer_id: Viewer whose own votes are reported (None for guests)

        Returns:
            Mapping of item ID to its summary
        """
        if not votable_ids:
            return {}

        tallies = await self.vote_repository.tallies(votable_type, votable_ids)

        user_votes: dict[UUID, VoteDirection] = {}
        if viewer_id:
            # Batch query to fetch all of the viewer's votes at once (avoid N+1)
            votes = await self.vote_repository.find_by_user_and_votables(
                viewer_id, votable_type, votable_ids
            )
            user_votes = {vote.votable_id: vote.direction for vote in votes}

        return {
            votable_id: VoteSummary.from_tally(
                tallies.get(votable_id, VoteTally()), user_votes.get(votable_id)
            )
            for votable_id in votable_ids
        }
