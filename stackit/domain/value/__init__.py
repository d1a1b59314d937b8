"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    Bounty,
    EditRecord,
    EmailAddress,
    NotificationType,
    QuestionStatus,
    SoftDeletion,
    TagName,
    UserRole,
    Username,
    VotableType,
    VoteAction,
    VoteDirection,
    VoteTally,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    "NotificationId",
    # Types
    "Username",
    "EmailAddress",
    "TagName",
    "UserRole",
    "VoteAction",
    "VoteDirection",
    "VotableType",
    "VoteTally",
    "QuestionStatus",
    "NotificationType",
    "EditRecord",
    "SoftDeletion",
    "Bounty",
]
