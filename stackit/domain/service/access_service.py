"""Access control gate.

Classifies callers into guests, authenticated members and administrators,
and checks ownership of content records.
"""

from uuid import UUID

import logfire

from stackit.domain.error import AuthenticationError, NotAuthorizedError
from stackit.domain.model import ContentRecord, User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId
from stackit.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService


class AccessService(Service):
    """Domain service resolving tokens into users and enforcing roles."""

    def __init__(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> None:
        """Initialize access service.

        Args:
            jwt_service: JWT service for token verification
            user_repository: User repository
        """
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def identify(self, token: str | None) -> User | None:
        """Resolve an optional token into a user.

        Used by endpoints open to guests that personalize their output.

        Args:
            token: JWT token (optional)

        Returns:
            The user, or None for guests and unusable tokens
        """
        subject = self.jwt_service.get_user_id_from_token(token)
        if not subject:
            return None

        try:
            user_id = UserId(UUID(subject))
        except ValueError:
            logfire.debug("Token subject is not a user ID", subject=subject)
            return None
        return await self.user_repository.find_by_id(user_id)

    async def authenticate(self, token: str | None) -> User:
        """Resolve a token into an active user.

        Args:
            token: JWT token

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or the user no longer exists
            NotAuthorizedError: If the account is banned
        """
        with logfire.span("access_service.authenticate"):
            if not token:
                raise AuthenticationError("Access denied. No token provided.")

            try:
                payload = self.jwt_service.verify_token(token)
                user_id = UserId(UUID(payload.user_id))
            except (JWTError, ValueError):
                raise AuthenticationError("Invalid token")

            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("Token for unknown user", user_id=str(user_id))
                raise AuthenticationError("Invalid token")

            if user.is_banned:
                logfire.warn("Banned user request rejected", user_id=str(user.id))
                raise NotAuthorizedError(
                    f"Account is banned: {user.ban_reason or 'No reason provided'}"
                )

            return user

    async def require_admin(self, token: str | None) -> User:
        """Resolve a token into an active administrator.

        Raises:
            AuthenticationError: If the caller is not authenticated
            NotAuthorizedError: If the caller is banned or not an admin
        """
        user = await self.authenticate(token)
        if not user.is_admin:
            logfire.warn("Admin access denied", user_id=str(user.id))
            raise NotAuthorizedError("Admin access required")
        return user

    def ensure_can_modify(
        self, user: User, record: ContentRecord, resource: str, action: str
    ) -> None:
        """Check that the user owns the record or is an admin.

        Args:
            user: Acting user
            record: Question, answer or comment being changed
            resource: Resource name for the error message
            action: Action name for the error message

        Raises:
            NotAuthorizedError: If the user may not change the record
        """
        if record.is_owned_by(user.id) or user.is_admin:
            return

        logfire.warn(
            "Ownership check failed",
            resource=resource,
            action=action,
            user_id=str(user.id),
        )
        raise NotAuthorizedError(
            f"Not authorized to {action} this {resource}", resource=resource
        )
