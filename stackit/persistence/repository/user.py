"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Select, desc, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import EmailAddress, UserId, UserRole, Username
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users by ID in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.root.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by normalized email address."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @staticmethod
    def _filtered(
        stmt: Select,
        search: Optional[str],
        role: Optional[UserRole],
        is_banned: Optional[bool],
    ) -> Select:
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    users_table.c.username.ilike(pattern),
                    users_table.c.email.ilike(pattern),
                )
            )
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        if is_banned is not None:
            stmt = stmt.where(users_table.c.is_banned.is_(is_banned))
        return stmt

    async def find_all(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_banned: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find users with filtering and pagination, newest first."""
        with logfire.span(
            "user_repository.find_all",
            search=search,
            role=role.value if role else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(users_table), search, role, is_banned)
            stmt = (
                stmt.order_by(desc(users_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_banned: Optional[bool] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count users matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(users_table), search, role, is_banned
        )
        if created_since is not None:
            stmt = stmt.where(users_table.c.created_at >= created_since)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If the username or email is already taken
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)
            stmt = pg_insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in user_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user
