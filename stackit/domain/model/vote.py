"""Vote entity.

Votes live in a ledger keyed by (voter, votable). Each voter holds at most
one vote per item, pointing either up or down.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Switching direction replaces the existing vote in place
    - Polymorphic reference to votable (question, answer or comment)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # QuestionId, AnswerId or CommentId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
