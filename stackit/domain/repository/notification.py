"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, NotificationType, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Defines the contract for notification persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient's ID
            unread_only: Only unread notifications
            type: Only notifications of this type
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> int:
        """Count a recipient's notifications matching the given filters."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update).

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read.

        Args:
            recipient_id: The recipient's ID

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Returns:
            True if a notification was deleted
        """
        pass

    @abstractmethod
    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all notifications of a recipient.

        Returns:
            Number of notifications deleted
        """
        pass
