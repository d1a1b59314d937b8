"""Notification removal use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel, MessageResponse
from stackit.domain.service import AccessService, NotificationService
from stackit.domain.value import NotificationId


class DeleteNotificationRequest(BaseModel):
    token: str | None
    notification_id: UUID


class DeleteNotificationUseCase:
    """Use case for deleting one of the caller's notifications."""

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.notification_service = notification_service

    async def execute(self, request: DeleteNotificationRequest) -> MessageResponse:
        user = await self.access_service.authenticate(request.token)
        await self.notification_service.delete(
            NotificationId(request.notification_id), user.id
        )
        return MessageResponse(message="Notification deleted successfully")


class ClearNotificationsRequest(BaseModel):
    token: str | None


class ClearNotificationsResponse(CamelModel):
    message: str
    deleted_count: int


class ClearNotificationsUseCase:
    """Use case for deleting every notification of the caller."""

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.notification_service = notification_service

    async def execute(
        self, request: ClearNotificationsRequest
    ) -> ClearNotificationsResponse:
        user = await self.access_service.authenticate(request.token)
        deleted = await self.notification_service.clear_all(user.id)
        return ClearNotificationsResponse(
            message="All notifications cleared", deleted_count=deleted
        )
