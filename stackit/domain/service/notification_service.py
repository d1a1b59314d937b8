"""Notification domain service.

Notifications are persisted first and then pushed, best effort, to the
recipient's live connections. The stored record is the source of truth:
a failed or impossible push is logged and otherwise ignored.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Protocol
from uuid import uuid4

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Answer, Comment, Notification, Question, User
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service


class Connection(Protocol):
    """A live client connection able to receive JSON messages."""

    async def send_json(self, data: Any) -> None: ...


class ConnectionDirectory(ABC):
    """Maps user IDs to their live connections.

    Implementations may be process-local or backed by a shared broker.
    """

    @abstractmethod
    async def register(self, user_id: UserId, connection: Connection) -> None:
        """Attach a live connection to a user."""
        pass

    @abstractmethod
    async def unregister(self, user_id: UserId, connection: Connection) -> None:
        """Detach a connection from a user."""
        pass

    @abstractmethod
    async def push(self, user_id: UserId, event: str, data: dict[str, Any]) -> int:
        """Send an event to every live connection of a user.

        Args:
            user_id: Recipient
            event: Event name
            data: Event payload

        Returns:
            Number of connections the event was delivered to
        """
        pass


class NotificationService(Service):
    """Domain service for notification fan-out and read state."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        connection_directory: ConnectionDirectory,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            connection_directory: Live connection lookup for push delivery
        """
        self.notification_repository = notification_repository
        self.connection_directory = connection_directory

    async def notify(
        self,
        recipient_id: UserId,
        actor_id: UserId | None,
        type: NotificationType,
        title: str,
        message: str,
        question_id: QuestionId | None = None,
        answer_id: AnswerId | None = None,
        comment_id: CommentId | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Notification | None:
        """Persist a notification and push it to the recipient.

        Nothing is emitted when the actor is the recipient.

        Returns:
            The stored notification, or None when skipped
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            if actor_id == recipient_id:
                logfire.info("Notification skipped for own action", type=type.value)
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                sender_id=actor_id,
                type=type,
                title=title,
                message=message[:500],
                question_id=question_id,
                answer_id=answer_id,
                comment_id=comment_id,
                metadata=metadata or {},
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info("Notification stored", notification_id=str(saved.id))

            await self._push(saved)
            return saved

    async def _push(self, notification: Notification) -> None:
        """Deliver a stored notification to live connections, best effort."""
        try:
            delivered = await self.connection_directory.push(
                notification.recipient_id,
                notification.type.value,
                {
                    "id": str(notification.id),
                    "type": notification.type.value,
                    "title": notification.title,
                    "message": notification.message,
                },
            )
            logfire.info(
                "Notification pushed",
                notification_id=str(notification.id),
                delivered=delivered,
            )
        except Exception as e:
            logfire.warn(
                "Notification push failed",
                notification_id=str(notification.id),
                error=str(e),
            )

    # Fan-out rules

    async def answer_received(
        self, question: Question, answer: Answer, actor: User
    ) -> Notification | None:
        """Tell a question's author about a new answer."""
        return await self.notify(
            recipient_id=question.author_id,
            actor_id=actor.id,
            type=NotificationType.ANSWER_RECEIVED,
            title="New answer received",
            message=f'{actor.username} answered your question "{question.title}"',
            question_id=question.id,
            answer_id=answer.id,
        )

    async def answer_accepted(
        self, question: Question, answer: Answer, actor: User
    ) -> Notification | None:
        """Tell an answer's author that their answer was accepted."""
        return await self.notify(
            recipient_id=answer.author_id,
            actor_id=actor.id,
            type=NotificationType.ANSWER_ACCEPTED,
            title="Answer accepted",
            message=f'Your answer to "{question.title}" was accepted',
            question_id=question.id,
            answer_id=answer.id,
            metadata={"accepted": True},
        )

    async def answer_unaccepted(
        self, question: Question, answer: Answer, actor: User
    ) -> Notification | None:
        """Tell an answer's author that the acceptance was withdrawn."""
        return await self.notify(
            recipient_id=answer.author_id,
            actor_id=actor.id,
            type=NotificationType.ANSWER_ACCEPTED,
            title="Answer unaccepted",
            message=f'Your answer to "{question.title}" is no longer accepted',
            question_id=question.id,
            answer_id=answer.id,
            metadata={"accepted": False},
        )

    async def comment_received(
        self, comment: Comment, target_author_id: UserId, actor: User
    ) -> Notification | None:
        """Tell a question's or answer's author about a new comment."""
        target = "question" if comment.question_id else "answer"
        return await self.notify(
            recipient_id=target_author_id,
            actor_id=actor.id,
            type=NotificationType.COMMENT_RECEIVED,
            title="New comment",
            message=f"{actor.username} commented on your {target}",
            question_id=comment.question_id,
            answer_id=comment.answer_id,
            comment_id=comment.id,
        )

    async def user_banned(
        self, target: User, admin: User, reason: str
    ) -> Notification | None:
        """Tell a user that their account was banned."""
        return await self.notify(
            recipient_id=target.id,
            actor_id=admin.id,
            type=NotificationType.USER_BANNED,
            title="Account banned",
            message=f"Your account has been banned: {reason}",
            metadata={"reason": reason},
        )

    # Read state

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool,
        type: NotificationType | None,
        limit: int,
        offset: int,
    ) -> tuple[list[Notification], int]:
        """List a recipient's notifications with a total count."""
        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id,
                unread_only=unread_only,
                type=type,
                limit=limit,
                offset=offset,
            )
            total = await self.notification_repository.count(
                recipient_id, unread_only=unread_only, type=type
            )
            return notifications, total

    async def unread_count(self, recipient_id: UserId) -> int:
        """Number of unread notifications of a recipient."""
        return await self.notification_repository.count(recipient_id, unread_only=True)

    async def _get_owned(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Load a notification and check the caller is its recipient.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If the caller is not the recipient
        """
        notification = await self.notification_repository.find_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification", str(notification_id))
        if notification.recipient_id != user_id:
            logfire.warn(
                "Notification access denied",
                notification_id=str(notification_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("Not authorized to access this notification")
        return notification

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark one of the caller's notifications as read."""
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, user_id)
            if notification.is_read:
                return notification
            return await self.notification_repository.save(
                notification.model_copy(
                    update={"is_read": True, "read_at": datetime.now()}
                )
            )

    async def mark_unread(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark one of the caller's notifications as unread."""
        with logfire.span(
            "notification_service.mark_unread", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, user_id)
            if not notification.is_read:
                return notification
            return await self.notification_repository.save(
                notification.model_copy(update={"is_read": False, "read_at": None})
            )

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every notification of the caller as read."""
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            updated = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", count=updated)
            return updated

    async def delete(self, notification_id: NotificationId, user_id: UserId) -> None:
        """Delete one of the caller's notifications."""
        with logfire.span(
            "notification_service.delete", notification_id=str(notification_id)
        ):
            await self._get_owned(notification_id, user_id)
            await self.notification_repository.delete(notification_id)

    async def clear_all(self, user_id: UserId) -> int:
        """Delete every notification of the caller."""
        with logfire.span("notification_service.clear_all", user_id=str(user_id)):
            deleted = await self.notification_repository.delete_by_recipient(user_id)
            logfire.info("Notifications cleared", count=deleted)
            return deleted
