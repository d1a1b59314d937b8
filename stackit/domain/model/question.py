"""Question aggregate root."""

from typing import Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import ContentRecord
from stackit.domain.value import AnswerId, Bounty, QuestionId, QuestionStatus, TagName


class Question(ContentRecord):
    """Question aggregate root.

    A question is answered exactly when it references an accepted answer.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=20)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    views: int = Field(default=0, ge=0)
    is_answered: bool = False
    accepted_answer_id: Optional[AnswerId] = None
    status: QuestionStatus = QuestionStatus.OPEN
    bounty: Optional[Bounty] = None

    @model_validator(mode="after")
    def validate_acceptance(self) -> "Question":
        """Validate that the answered flag matches the accepted answer."""
        if self.is_answered != (self.accepted_answer_id is not None):
            raise ValueError(
                "is_answered must be set exactly when an answer is accepted"
            )
        return self
