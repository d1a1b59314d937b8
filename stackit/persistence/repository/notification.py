"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, NotificationType, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    @staticmethod
    def _filtered(
        stmt: Select,
        recipient_id: UserId,
        unread_only: bool,
        type: Optional[NotificationType],
    ) -> Select:
        stmt = stmt.where(notifications_table.c.recipient_id == recipient_id)
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        if type is not None:
            stmt = stmt.where(notifications_table.c.type == type.value)
        return stmt

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        with logfire.span(
            "notification_repository.find_by_recipient",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(
                select(notifications_table), recipient_id, unread_only, type
            )
            stmt = (
                stmt.order_by(desc(notifications_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> int:
        """Count a recipient's notifications matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(notifications_table),
            recipient_id,
            unread_only,
            type,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update read state)."""
        notification_dict = notification_to_dict(notification)
        stmt = pg_insert(notifications_table).values(**notification_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[notifications_table.c.id],
            set_={
                "is_read": notification_dict["is_read"],
                "read_at": notification_dict["read_at"],
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True, read_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all notifications of a recipient."""
        stmt = delete(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
