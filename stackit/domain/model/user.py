"""User aggregate root.

Users register with a username, email and password and take part as
members or administrators.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import EmailAddress, UserId, UserRole, Username


class User(DomainModel):
    """User aggregate root.

    Users are never hard-deleted. Profile edits, bans and role changes
    produce updated copies of the record.
    """

    id: UserId
    username: Username
    email: EmailAddress
    password_hash: str
    role: UserRole = UserRole.MEMBER
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    reputation: int = 0  # Reserved for reputation-affecting events
    is_banned: bool = False
    ban_reason: Optional[str] = None
    last_seen: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user holds the admin role."""
        return self.role == UserRole.ADMIN
