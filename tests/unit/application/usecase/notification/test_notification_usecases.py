"""Unit tests for notification use cases."""

import pytest

from stackit.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadUseCase,
    MarkNotificationRequest,
    MarkNotificationUseCase,
    UnreadCountRequest,
    UnreadCountUseCase,
)
from stackit.domain.error import NotAuthorizedError
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType
from tests.conftest import save_user_with_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(env, recipient, sender, count: int = 3):
    service = await env.get(NotificationService)
    created = []
    for i in range(count):
        created.append(
            await service.notify(
                recipient_id=recipient.id,
                actor_id=sender.id,
                type=NotificationType.ANSWER_RECEIVED,
                title="New answer received",
                message=f"{sender.username} answered question {i}",
            )
        )
    return created


class TestListNotificationsUseCase:
    """Tests for ListNotificationsUseCase."""

    @pytest.mark.asyncio
    async def test_list_includes_sender_and_unread_count(self, unit_env):
        """Listings should embed the sender and the unread count."""
        # Arrange
        use_case = await unit_env.get(ListNotificationsUseCase)
        recipient, token = await save_user_with_token(unit_env, "recipient")
        sender, _ = await save_user_with_token(unit_env, "sender")
        await _seed(unit_env, recipient, sender)

        # Act
        response = await use_case.execute(
            ListNotificationsRequest(token=token, limit=2)
        )

        # Assert
        assert len(response.notifications) == 2
        assert response.notifications[0].sender.username == "sender"
        assert response.unread_count == 3
        assert response.pagination.total_notifications == 3
        assert response.pagination.has_next_page is True

    @pytest.mark.asyncio
    async def test_unread_only_filter(self, unit_env):
        """unread_only should hide read notifications."""
        # Arrange
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark = await unit_env.get(MarkNotificationUseCase)
        recipient, token = await save_user_with_token(unit_env, "recipient")
        sender, _ = await save_user_with_token(unit_env, "sender")
        first, _, _ = await _seed(unit_env, recipient, sender)
        await mark.execute(
            MarkNotificationRequest(token=token, notification_id=first.id)
        )

        # Act
        response = await list_use_case.execute(
            ListNotificationsRequest(token=token, unread_only=True)
        )

        # Assert
        assert len(response.notifications) == 2
        assert str(first.id) not in {n.id for n in response.notifications}
        assert response.unread_count == 2


class TestReadStateUseCases:
    """Tests for marking and clearing notifications."""

    @pytest.mark.asyncio
    async def test_mark_read_and_unread(self, unit_env):
        """Marking should flip the read flag in both directions."""
        # Arrange
        mark = await unit_env.get(MarkNotificationUseCase)
        unread_count = await unit_env.get(UnreadCountUseCase)
        recipient, token = await save_user_with_token(unit_env, "recipient")
        sender, _ = await save_user_with_token(unit_env, "sender")
        (notification,) = await _seed(unit_env, recipient, sender, count=1)

        # Act
        read = await mark.execute(
            MarkNotificationRequest(token=token, notification_id=notification.id)
        )
        count_after_read = await unread_count.execute(UnreadCountRequest(token=token))
        unread = await mark.execute(
            MarkNotificationRequest(
                token=token, notification_id=notification.id, read=False
            )
        )

        # Assert
        assert read.notification.is_read is True
        assert count_after_read.unread_count == 0
        assert unread.notification.is_read is False

    @pytest.mark.asyncio
    async def test_cannot_mark_foreign_notification(self, unit_env):
        """Users should not touch other users' notifications."""
        # Arrange
        mark = await unit_env.get(MarkNotificationUseCase)
        recipient, _ = await save_user_with_token(unit_env, "recipient")
        sender, sender_token = await save_user_with_token(unit_env, "sender")
        (notification,) = await _seed(unit_env, recipient, sender, count=1)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await mark.execute(
                MarkNotificationRequest(
                    token=sender_token, notification_id=notification.id
                )
            )

    @pytest.mark.asyncio
    async def test_mark_all_and_clear_all(self, unit_env):
        """Bulk operations should report how many rows they touched."""
        # Arrange
        mark_all = await unit_env.get(MarkAllReadUseCase)
        clear_all = await unit_env.get(ClearNotificationsUseCase)
        recipient, token = await save_user_with_token(unit_env, "recipient")
        sender, _ = await save_user_with_token(unit_env, "sender")
        await _seed(unit_env, recipient, sender, count=4)

        # Act
        marked = await mark_all.execute(MarkAllReadRequest(token=token))
        cleared = await clear_all.execute(ClearNotificationsRequest(token=token))

        # Assert
        assert marked.updated_count == 4
        assert cleared.deleted_count == 4
