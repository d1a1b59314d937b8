"""Mock realtime providers for testing."""

from typing import Any

from dishka import Scope, provide

from stackit.adapter.realtime import LocalConnectionDirectory
from stackit.domain.service import ConnectionDirectory
from stackit.domain.value import UserId
from stackit.util.di.infrastructure.realtime import RealtimeProvider


class RecordingConnectionDirectory(LocalConnectionDirectory):
    """Connection directory that also records every push it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.pushed: list[tuple[UserId, str, dict[str, Any]]] = []

    async def push(self, user_id: UserId, event: str, data: dict[str, Any]) -> int:
        self.pushed.append((user_id, event, data))
        return await super().push(user_id, event, data)

    def events_for(self, user_id: UserId) -> list[str]:
        """Event names pushed to one user, oldest first."""
        return [event for recipient, event, _ in self.pushed if recipient == user_id]


class MockRealtimeProvider(RealtimeProvider):
    """Mock realtime provider recording pushes in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_directory(self) -> RecordingConnectionDirectory:
        """Provide the recording directory."""
        return RecordingConnectionDirectory()

    @provide(scope=Scope.APP)
    def get_connection_directory(
        self, directory: RecordingConnectionDirectory
    ) -> ConnectionDirectory:
        """Provide the recording directory as the connection directory."""
        return directory
