"""Integration tests for PostgresVoteRepository.

These tests need a migrated PostgreSQL database (see tests/harness.py).
"""

import os
from uuid import uuid4

import pytest

from stackit.domain.repository import UserRepository, VoteRepository
from stackit.domain.value import VotableType, VoteDirection
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="DATABASE__URL is not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _save_voter(env):
    user_repo = await env.get(UserRepository)
    return await user_repo.save(make_user(username=f"voter_{uuid4().hex[:12]}"))


class TestVoteRepositoryIntegration:
    """Integration tests for the vote ledger upserts."""

    @pytest.mark.asyncio
    async def test_switch_direction_keeps_single_entry(self, integration_env):
        """Switching direction should replace the voter's entry."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        voter = await _save_voter(integration_env)
        votable_id = uuid4()

        # Act
        await vote_repo.set_vote(
            voter.id, VotableType.QUESTION, votable_id, VoteDirection.UP
        )
        await vote_repo.set_vote(
            voter.id, VotableType.QUESTION, votable_id, VoteDirection.DOWN
        )

        # Assert
        votes = await vote_repo.find_by_votable(VotableType.QUESTION, votable_id)
        assert len(votes) == 1
        assert votes[0].direction == VoteDirection.DOWN
        tally = await vote_repo.tally(VotableType.QUESTION, votable_id)
        assert (tally.upvotes, tally.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_delete_vote(self, integration_env):
        """Deleting should report whether an entry existed."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        voter = await _save_voter(integration_env)
        votable_id = uuid4()
        await vote_repo.set_vote(
            voter.id, VotableType.ANSWER, votable_id, VoteDirection.UP
        )

        # Act
        first = await vote_repo.delete_by_user_and_votable(
            voter.id, VotableType.ANSWER, votable_id
        )
        second = await vote_repo.delete_by_user_and_votable(
            voter.id, VotableType.ANSWER, votable_id
        )

        # Assert
        assert first is True
        assert second is False
        assert (
            await vote_repo.find_by_user_and_votable(
                voter.id, VotableType.ANSWER, votable_id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_batch_tallies(self, integration_env):
        """Batch tallies should include items without votes."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        first_voter = await _save_voter(integration_env)
        second_voter = await _save_voter(integration_env)
        voted, unvoted = uuid4(), uuid4()
        await vote_repo.set_vote(
            first_voter.id, VotableType.COMMENT, voted, VoteDirection.UP
        )
        await vote_repo.set_vote(
            second_voter.id, VotableType.COMMENT, voted, VoteDirection.UP
        )

        # Act
        tallies = await vote_repo.tallies(VotableType.COMMENT, [voted, unvoted])

        # Assert
        assert tallies[voted].vote_count == 2
        assert tallies[unvoted].vote_count == 0
