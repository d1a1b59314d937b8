"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.comment import Comment
from stackit.domain.model.common import ContentRecord, DomainModel
from stackit.domain.model.notification import Notification
from stackit.domain.model.question import Question
from stackit.domain.model.user import User
from stackit.domain.model.vote import Vote

__all__ = [
    "DomainModel",
    "ContentRecord",
    "User",
    "Question",
    "Answer",
    "Comment",
    "Vote",
    "Notification",
]
