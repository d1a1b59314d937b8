"""Comment entity.

Comments attach to either a question or an answer and may reply to
another comment on the same target.
"""

from typing import Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import ContentRecord
from stackit.domain.value import AnswerId, CommentId, QuestionId


class Comment(ContentRecord):
    """Comment entity."""

    id: CommentId
    content: str = Field(min_length=15, max_length=500)
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    parent_comment_id: Optional[CommentId] = None

    @model_validator(mode="after")
    def validate_target(self) -> "Comment":
        """Validate that exactly one of question or answer is referenced."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("A comment must reference either a question or an answer")
        return self
