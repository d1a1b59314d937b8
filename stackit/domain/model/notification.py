"""Notification entity."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Notification delivered to a single recipient.

    Only the read state changes after creation.
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: Optional[UserId] = None
    type: NotificationType
    title: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1, max_length=500)
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    comment_id: Optional[CommentId] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
