"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import logfire

# Settings are read from the environment when the container first resolves them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "stackit-test-secret-0123456789abcdef")

logfire.configure(send_to_logfire=False, console=False)

from stackit.domain.model import Answer, Question, User  # noqa: E402
from stackit.domain.repository import UserRepository  # noqa: E402
from stackit.domain.service import JWTService  # noqa: E402
from stackit.domain.value import (  # noqa: E402
    AnswerId,
    EmailAddress,
    QuestionId,
    TagName,
    UserId,
    UserRole,
    Username,
)


def make_user(
    username: str = "alice",
    role: UserRole = UserRole.MEMBER,
    is_banned: bool = False,
) -> User:
    """Helper to build a user without going through registration.

    Args:
        username: Username (also used for the email local part)
        role: Role of the user
        is_banned: Whether the account is banned

    Returns:
        User domain model with an unusable password hash
    """
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=EmailAddress(f"{username}@example.com"),
        password_hash="not-a-real-hash",
        role=role,
        is_banned=is_banned,
        ban_reason="Spam" if is_banned else None,
    )


def make_question(
    author_id: UserId,
    title: str = "How do I center a div?",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
) -> Question:
    """Helper to build a live question."""
    now = created_at or datetime.now()
    return Question(
        id=QuestionId(uuid4()),
        author_id=author_id,
        title=title,
        description="I have tried flexbox and grid but nothing works.",
        tags=[TagName(tag) for tag in tags or ["css"]],
        created_at=now,
        updated_at=now,
    )


def make_answer(question_id: QuestionId, author_id: UserId) -> Answer:
    """Helper to build a live answer."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content="Use display: flex with justify-content: center.",
    )


async def save_user_with_token(
    env, username: str = "alice", role: UserRole = UserRole.MEMBER
) -> tuple[User, str]:
    """Helper to store a user and issue an access token for it.

    Args:
        env: Request-scoped test container
        username: Username of the new user
        role: Role of the new user

    Returns:
        Tuple of (stored user, JWT token)
    """
    user_repo = await env.get(UserRepository)
    jwt_service = await env.get(JWTService)
    user = await user_repo.save(make_user(username, role=role))
    return user, jwt_service.create_token(str(user.id), user.username.root)
