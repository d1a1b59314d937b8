"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from stackit.domain.model.user import User
from stackit.domain.repository.user import UserRepository
from stackit.domain.value import EmailAddress, UserId, UserRole, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        for user in self._users.values():
            if user.username.root.lower() == username.root.lower():
                return user
        return None

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def _matching(
        self,
        search: Optional[str],
        role: Optional[UserRole],
        is_banned: Optional[bool],
    ) -> list[User]:
        users = list(self._users.values())
        if search:
            needle = search.lower()
            users = [
                u
                for u in users
                if needle in u.username.root.lower() or needle in u.email.root
            ]
        if role is not None:
            users = [u for u in users if u.role == role]
        if is_banned is not None:
            users = [u for u in users if u.is_banned == is_banned]
        return users

    async def find_all(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_banned: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Find users with filtering and pagination, newest first."""
        users = self._matching(search, role, is_banned)
        users.sort(key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_banned: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count users matching the given filters."""
        users = self._matching(search, role, is_banned)
        if created_since is not None:
            users = [u for u in users if u.created_at >= created_since]
        return len(users)

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user holds the username or email
        """
        for other in self._users.values():
            if other.id == user.id:
                continue
            if (
                other.username.root.lower() == user.username.root.lower()
                or other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())
        self._users[user.id] = user
        return user
