"""Process-local connection directory.

Keeps the live WebSocket connections of each user in memory. Suitable for
a single API process; a multi-process deployment needs a broker-backed
directory instead.
"""

import asyncio
from collections import defaultdict
from typing import Any

import logfire

from stackit.domain.service import Connection, ConnectionDirectory
from stackit.domain.value import UserId


class LocalConnectionDirectory(ConnectionDirectory):
    """In-memory map from user ID to open connections."""

    def __init__(self) -> None:
        self._connections: dict[UserId, list[Connection]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def register(self, user_id: UserId, connection: Connection) -> None:
        async with self._lock:
            self._connections[user_id].append(connection)
        logfire.info("Realtime connection registered", user_id=str(user_id))

    async def unregister(self, user_id: UserId, connection: Connection) -> None:
        async with self._lock:
            connections = self._connections.get(user_id, [])
            if connection in connections:
                connections.remove(connection)
            if not connections:
                self._connections.pop(user_id, None)
        logfire.info("Realtime connection unregistered", user_id=str(user_id))

    def connection_count(self, user_id: UserId) -> int:
        """Number of open connections of a user."""
        return len(self._connections.get(user_id, []))

    async def push(self, user_id: UserId, event: str, data: dict[str, Any]) -> int:
        """Send an event to every open connection of a user.

        Connections that fail to receive are dropped from the directory.
        """
        async with self._lock:
            connections = list(self._connections.get(user_id, []))

        delivered = 0
        for connection in connections:
            try:
                await connection.send_json({"event": event, "data": data})
                delivered += 1
            except Exception as e:
                logfire.warn(
                    "Dropping dead realtime connection",
                    user_id=str(user_id),
                    error=str(e),
                )
                await self.unregister(user_id, connection)
        return delivered
