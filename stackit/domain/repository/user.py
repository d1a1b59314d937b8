"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from stackit.domain.model.user import User
from stackit.domain.value import EmailAddress, UserId, UserRole, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users by ID in one query."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username (case-insensitive).

        Args:
            username: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by email address.

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_banned: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find users with filtering and pagination, newest first.

        Args:
            search: Case-insensitive substring of username or email
            role: Only users with this role
            is_banned: Only banned (True) or active (False) users
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def count(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_banned: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count users matching the given filters."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username or email is already taken
        """
        pass
