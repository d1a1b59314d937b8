"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, NotificationType, UserId
from tests.di import RecordingConnectionDirectory
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FakeConnection:
    """Connection collecting the frames sent to it."""

    def __init__(self) -> None:
        self.frames: list[dict] = []

    async def send_json(self, data) -> None:
        self.frames.append(data)


async def _notify(service: NotificationService, recipient_id, actor_id=None):
    return await service.notify(
        recipient_id=recipient_id,
        actor_id=actor_id or UserId(uuid4()),
        type=NotificationType.ANSWER_RECEIVED,
        title="New answer received",
        message="bob answered your question",
    )


class TestNotify:
    """Tests for NotificationService.notify."""

    @pytest.mark.asyncio
    async def test_notify_stores_unread_notification(self, unit_env):
        """A new notification should be stored unread."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient_id = UserId(uuid4())

        # Act
        notification = await _notify(service, recipient_id)

        # Assert
        assert notification is not None
        assert notification.is_read is False
        assert await service.unread_count(recipient_id) == 1

    @pytest.mark.asyncio
    async def test_notify_skips_own_actions(self, unit_env):
        """Acting on one's own content should not notify."""
        # Arrange
        service = await unit_env.get(NotificationService)
        user_id = UserId(uuid4())

        # Act
        notification = await _notify(service, user_id, actor_id=user_id)

        # Assert
        assert notification is None
        assert await service.unread_count(user_id) == 0

    @pytest.mark.asyncio
    async def test_notify_pushes_to_live_connections(self, unit_env):
        """Stored notifications should reach the recipient's open sockets."""
        # Arrange
        service = await unit_env.get(NotificationService)
        directory = await unit_env.get(RecordingConnectionDirectory)
        recipient_id = UserId(uuid4())
        connection = FakeConnection()
        await directory.register(recipient_id, connection)

        # Act
        notification = await _notify(service, recipient_id)

        # Assert
        assert len(connection.frames) == 1
        frame = connection.frames[0]
        assert frame["event"] == "answer_received"
        assert frame["data"]["id"] == str(notification.id)
        assert frame["data"]["title"] == "New answer received"

    @pytest.mark.asyncio
    async def test_notify_survives_push_failure(self, unit_env):
        """A failing push should not lose the stored notification."""

        class BrokenDirectory(RecordingConnectionDirectory):
            async def push(self, user_id, event, data):
                raise RuntimeError("broker down")

        # Arrange
        stored = await unit_env.get(NotificationService)
        service = NotificationService(
            notification_repository=stored.notification_repository,
            connection_directory=BrokenDirectory(),
        )
        recipient_id = UserId(uuid4())

        # Act
        notification = await _notify(service, recipient_id)

        # Assert
        assert notification is not None
        assert await service.unread_count(recipient_id) == 1


class TestReadState:
    """Tests for read state transitions."""

    @pytest.mark.asyncio
    async def test_mark_read_and_unread(self, unit_env):
        """Marking should toggle the read flag and timestamp."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient_id = UserId(uuid4())
        notification = await _notify(service, recipient_id)

        # Act
        read = await service.mark_read(notification.id, recipient_id)
        unread = await service.mark_unread(notification.id, recipient_id)

        # Assert
        assert read.is_read is True
        assert read.read_at is not None
        assert unread.is_read is False
        assert unread.read_at is None

    @pytest.mark.asyncio
    async def test_mark_read_by_other_user_rejected(self, unit_env):
        """Only the recipient may change a notification."""
        # Arrange
        service = await unit_env.get(NotificationService)
        notification = await _notify(service, UserId(uuid4()))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.mark_read(notification.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_mark_read_unknown_notification(self, unit_env):
        """Unknown notifications should raise NotFoundError."""
        # Arrange
        service = await unit_env.get(NotificationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.mark_read(NotificationId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_own(self, unit_env):
        """Mark-all should update only the caller's unread notifications."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient_id = UserId(uuid4())
        other_id = UserId(uuid4())
        for _ in range(3):
            await _notify(service, recipient_id)
        await _notify(service, other_id)

        # Act
        updated = await service.mark_all_read(recipient_id)

        # Assert
        assert updated == 3
        assert await service.unread_count(recipient_id) == 0
        assert await service.unread_count(other_id) == 1

    @pytest.mark.asyncio
    async def test_delete_and_clear_all(self, unit_env):
        """Deleting should remove one notification, clearing the rest."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient_id = UserId(uuid4())
        first = await _notify(service, recipient_id)
        await _notify(service, recipient_id)
        await _notify(service, recipient_id)

        # Act
        await service.delete(first.id, recipient_id)
        cleared = await service.clear_all(recipient_id)

        # Assert
        assert cleared == 2
        notifications, total = await service.list_for_recipient(
            recipient_id, unread_only=False, type=None, limit=20, offset=0
        )
        assert notifications == []
        assert total == 0

    @pytest.mark.asyncio
    async def test_list_filters_by_type(self, unit_env):
        """Listing by type should exclude other kinds."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient_id = UserId(uuid4())
        await _notify(service, recipient_id)
        await service.notify(
            recipient_id=recipient_id,
            actor_id=UserId(uuid4()),
            type=NotificationType.COMMENT_RECEIVED,
            title="New comment",
            message="carol commented on your answer",
        )

        # Act
        notifications, total = await service.list_for_recipient(
            recipient_id,
            unread_only=False,
            type=NotificationType.COMMENT_RECEIVED,
            limit=20,
            offset=0,
        )

        # Assert
        assert total == 1
        assert notifications[0].type == NotificationType.COMMENT_RECEIVED
