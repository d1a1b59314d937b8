"""Registration and login domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.config import AuthSettings
from stackit.domain.error import AuthenticationError, ConflictError, NotAuthorizedError
from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import EmailAddress, UserId, UserRole, Username
from stackit.util.password import hash_password, verify_password

from .base import Service
from .jwt_service import JWTService


class AuthService(Service):
    """Domain service for account registration and credential login."""

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            jwt_service: JWT service for issuing tokens
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def register(
        self, username: Username, email: EmailAddress, password: str
    ) -> tuple[User, str]:
        """Register a new member account.

        Args:
            username: Requested username
            email: Contact address
            password: Plain-text password

        Returns:
            Tuple of (created user, access token)

        Raises:
            ConflictError: If the username or email is already taken
        """
        with logfire.span("auth_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise ConflictError("Username is already taken")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", username=username.root)
                raise ConflictError("Email is already registered")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
                role=UserRole.MEMBER,
                last_seen=now,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration", username=username.root)
                raise ConflictError("Username or email is already taken")

            token = self.jwt_service.create_token(str(saved.id), saved.username.root)
            logfire.info("User registered", user_id=str(saved.id))
            return saved, token

    async def login(self, email: EmailAddress, password: str) -> tuple[User, str]:
        """Authenticate with email and password.

        Args:
            email: Contact address
            password: Plain-text password

        Returns:
            Tuple of (user, access token)

        Raises:
            AuthenticationError: If the credentials are wrong
            NotAuthorizedError: If the account is banned
        """
        with logfire.span("auth_service.login"):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Invalid login attempt")
                raise AuthenticationError("Invalid credentials")

            if user.is_banned:
                logfire.warn("Banned user login attempt", user_id=str(user.id))
                raise NotAuthorizedError(
                    f"Account is banned: {user.ban_reason or 'No reason provided'}"
                )

            user = await self.user_repository.save(
                user.model_copy(update={"last_seen": datetime.now()})
            )
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            logfire.info("User logged in", user_id=str(user.id))
            return user, token
