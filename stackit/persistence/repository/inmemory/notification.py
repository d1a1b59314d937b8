"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, NotificationType, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    def _matching(
        self,
        recipient_id: UserId,
        unread_only: bool,
        type: Optional[NotificationType],
    ) -> list[Notification]:
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        if unread_only:
            notifications = [n for n in notifications if not n.is_read]
        if type is not None:
            notifications = [n for n in notifications if n.type == type]
        return notifications

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = self._matching(recipient_id, unread_only, type)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> int:
        """Count a recipient's notifications matching the given filters."""
        return len(self._matching(recipient_id, unread_only, type))

    async def save(self, notification: Notification) -> Notification:
        """Save or update a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read."""
        unread = self._matching(recipient_id, unread_only=True, type=None)
        now = datetime.now()
        for notification in unread:
            self._notifications[notification.id] = notification.model_copy(
                update={"is_read": True, "read_at": now}
            )
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        return self._notifications.pop(notification_id, None) is not None

    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all notifications of a recipient."""
        owned = self._matching(recipient_id, unread_only=False, type=None)
        for notification in owned:
            del self._notifications[notification.id]
        return len(owned)
