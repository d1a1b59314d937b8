"""Unread notification count use case."""

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel
from stackit.domain.service import AccessService, NotificationService


class UnreadCountRequest(BaseModel):
    token: str | None


class UnreadCountResponse(CamelModel):
    unread_count: int


class UnreadCountUseCase:
    """Use case for the caller's unread notification badge."""

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.notification_service = notification_service

    async def execute(self, request: UnreadCountRequest) -> UnreadCountResponse:
        user = await self.access_service.authenticate(request.token)
        count = await self.notification_service.unread_count(user.id)
        return UnreadCountResponse(unread_count=count)
