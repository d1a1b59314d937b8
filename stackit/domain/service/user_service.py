"""User domain service."""

from datetime import datetime

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user profiles and moderation."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_many(self, user_ids: set[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID.

        Unknown IDs are left out of the result.
        """
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(user_ids))
        return {user.id: user for user in users}

    async def update_profile(
        self,
        user: User,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Update the editable profile fields of a user.

        Fields passed as None are left unchanged.
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            updates: dict = {"updated_at": datetime.now()}
            if bio is not None:
                updates["bio"] = bio
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url

            saved = await self.user_repository.save(
                User.model_validate({**dict(user), **updates})
            )
            logfire.info("Profile updated", user_id=str(user.id))
            return saved

    async def list_users(
        self,
        search: str | None,
        role: UserRole | None,
        is_banned: bool | None,
        limit: int,
        offset: int,
    ) -> tuple[list[User], int]:
        """List users with a total count for pagination."""
        with logfire.span(
            "user_service.list_users", search=search, limit=limit, offset=offset
        ):
            users = await self.user_repository.find_all(
                search=search,
                role=role,
                is_banned=is_banned,
                limit=limit,
                offset=offset,
            )
            total = await self.user_repository.count(
                search=search, role=role, is_banned=is_banned
            )
            return users, total

    async def ban(self, admin: User, target_id: UserId, reason: str) -> User:
        """Ban a user.

        Args:
            admin: Acting administrator
            target_id: User to ban
            reason: Reason shown to the banned user

        Returns:
            The banned user

        Raises:
            NotFoundError: If the target does not exist
            NotAuthorizedError: If the target is an administrator
        """
        with logfire.span(
            "user_service.ban", admin_id=str(admin.id), target_id=str(target_id)
        ):
            target = await self.get_by_id(target_id)
            if target.is_admin:
                logfire.warn("Attempt to ban admin", target_id=str(target_id))
                raise NotAuthorizedError("Cannot ban admin users")

            banned = await self.user_repository.save(
                target.model_copy(
                    update={
                        "is_banned": True,
                        "ban_reason": reason,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("User banned", target_id=str(target_id), reason=reason)
            return banned

    async def unban(self, target_id: UserId) -> User:
        """Lift a ban.

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span("user_service.unban", target_id=str(target_id)):
            target = await self.get_by_id(target_id)
            unbanned = await self.user_repository.save(
                target.model_copy(
                    update={
                        "is_banned": False,
                        "ban_reason": None,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("User unbanned", target_id=str(target_id))
            return unbanned

    async def change_role(self, admin: User, target_id: UserId, role: UserRole) -> User:
        """Change the role of a user.

        Raises:
            NotFoundError: If the target does not exist
            NotAuthorizedError: If an admin targets their own account
        """
        with logfire.span(
            "user_service.change_role",
            admin_id=str(admin.id),
            target_id=str(target_id),
            role=role.value,
        ):
            if admin.id == target_id:
                raise NotAuthorizedError("Cannot change your own role")

            target = await self.get_by_id(target_id)
            updated = await self.user_repository.save(
                target.model_copy(update={"role": role, "updated_at": datetime.now()})
            )
            logfire.info("User role changed", target_id=str(target_id))
            return updated
