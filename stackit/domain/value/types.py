"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from stackit.domain.value.common import RootValueObject, ValueObject
from stackit.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Role of a registered participant."""

    GUEST = "guest"
    MEMBER = "member"
    ADMIN = "admin"


class VoteDirection(str, Enum):
    """Direction of a single vote."""

    UP = "up"
    DOWN = "down"


class VoteAction(str, Enum):
    """Vote request issued by a user."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    REMOVE = "remove"

    @property
    def direction(self) -> "VoteDirection | None":
        """Ledger direction to set, or None to clear the vote."""
        if self == VoteAction.UPVOTE:
            return VoteDirection.UP
        if self == VoteAction.DOWNVOTE:
            return VoteDirection.DOWN
        return None


class VotableType(str, Enum):
    """Type of content that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"
    COMMENT = "comment"


class QuestionStatus(str, Enum):
    """Moderation status of a question."""

    OPEN = "open"
    CLOSED = "closed"
    DUPLICATE = "duplicate"
    OFF_TOPIC = "off-topic"


class NotificationType(str, Enum):
    """Closed set of notification kinds."""

    ANSWER_RECEIVED = "answer_received"
    COMMENT_RECEIVED = "comment_received"
    MENTION = "mention"
    VOTE_RECEIVED = "vote_received"
    ANSWER_ACCEPTED = "answer_accepted"
    BOUNTY_OFFERED = "bounty_offered"
    BOUNTY_AWARDED = "bounty_awarded"
    QUESTION_EDITED = "question_edited"
    ANSWER_EDITED = "answer_edited"
    ADMIN_MESSAGE = "admin_message"
    USER_BANNED = "user_banned"
    CONTENT_DELETED = "content_deleted"


class Username(RootValueObject[str]):
    """Unique public handle of a user.

    3-30 characters: letters, digits and underscores.
    Examples: 'alice', 'bob_42'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters and contain only letters, "
                "numbers and underscores"
            )
        return v


class EmailAddress(RootValueObject[str]):
    """Contact address of a user, stored lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate and normalize email address."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Please enter a valid email")
        return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Must be lowercase, 2-20 characters. Letters, digits and the characters
    '-', '+', '#' and '.' are allowed.
    Examples: 'css', 'html', 'c++', 'node.js'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9][a-z0-9+#.-]{1,19}$", v):
            raise ValueError(
                "Each tag must be 2-20 lowercase characters "
                "(letters, numbers, '-', '+', '#', '.')"
            )
        return v

    @classmethod
    def normalize_all(cls, raw: list[str]) -> list["TagName"]:
        """Trim, lowercase and de-duplicate raw tags, preserving order."""
        seen: list[str] = []
        for tag in raw:
            cleaned = tag.strip().lower()
            if cleaned and cleaned not in seen:
                seen.append(cleaned)
        return [cls(tag) for tag in seen]


class EditRecord(ValueObject):
    """One entry in a content record's edit history."""

    editor_id: UserId
    edited_at: datetime
    previous_content: dict[str, Any]
    reason: str | None = None


class SoftDeletion(ValueObject):
    """Marks a content record hidden while keeping it for audit."""

    deleted_by: UserId
    deleted_at: datetime
    reason: str = "No reason provided"


class Bounty(ValueObject):
    """Reputation offered on a question."""

    amount: int = Field(ge=0)
    expires_at: datetime | None = None
    offered_by: UserId | None = None


class VoteTally(ValueObject):
    """Aggregated ledger counts for one content record."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return self.upvotes - self.downvotes
