"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from stackit.domain.model.vote import Vote
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteTally


class VoteRepository(ABC):
    """Repository for the vote ledger.

    The ledger maps (voter, votable) to a direction. Implementations must
    make set and clear single atomic writes so that concurrent voters on
    the same item never lose updates.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (question, answer or comment)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> List[Vote]:
        """Find all votes on a specific item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            List of votes on the item
        """
        pass

    @abstractmethod
    async def set_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: VoteDirection,
    ) -> Vote:
        """Record a user's vote, replacing any previous vote on the item.

        Setting the same direction twice is a no-op. Switching direction
        replaces the entry in a single write.

        Args:
            user_id: The voter's ID
            votable_type: Type of item
            votable_id: ID of the item
            direction: Up or down

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a user's vote on an item.

        Args:
            user_id: The voter's ID
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count up and down votes on an item."""
        pass

    @abstractmethod
    async def tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteTally]:
        """Count votes on multiple items (batch query).

        Items without votes map to an empty tally.

        Args:
            votable_type: Type of items
            votable_ids: IDs of the items

        Returns:
            Mapping of item ID to its tally
        """
        pass

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            votable_type: Type of items
            votable_ids: List of item IDs to check

        Returns:
            List of votes by the user on the specified items
        """
        pass
