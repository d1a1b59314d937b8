"""Realtime notification channel."""

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from stackit.domain.error import DomainError
from stackit.domain.service import AccessService, ConnectionDirectory

router = APIRouter(tags=["realtime"])


@router.websocket("/ws/notifications")
async def notifications_socket(websocket: WebSocket, token: str | None = None) -> None:
    """Push the caller's new notifications as they are stored.

    The token is passed as a query parameter since browsers cannot set
    headers on WebSocket requests. Client messages are read and ignored.
    """
    container: AsyncContainer = websocket.app.state.dishka_container

    async with container() as request_container:
        access_service = await request_container.get(AccessService)
        try:
            user = await access_service.authenticate(token)
        except DomainError as e:
            logfire.info("Realtime connection rejected", reason=e.message)
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return

    directory = await container.get(ConnectionDirectory)
    await websocket.accept()
    await directory.register(user.id, websocket)
    try:
        await websocket.send_json(
            {"event": "connected", "data": {"userId": str(user.id)}}
        )
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        await directory.unregister(user.id, websocket)
