"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import ContentRecord
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(ContentRecord):
    """Answer to a question.

    The owning question never changes. Acceptance fields are managed by the
    acceptance service only.
    """

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=20)
    is_accepted: bool = False
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None
