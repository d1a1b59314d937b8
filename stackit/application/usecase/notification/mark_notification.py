"""Notification read state use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel, NotificationResponse
from stackit.domain.service import AccessService, NotificationService
from stackit.domain.value import NotificationId


class MarkNotificationRequest(BaseModel):
    """Mark one notification as read or unread."""

    token: str | None
    notification_id: UUID
    read: bool = True


class MarkNotificationResponse(CamelModel):
    message: str
    notification: NotificationResponse


class MarkNotificationUseCase:
    """Use case for flipping the read flag of one of the caller's notifications."""

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationRequest
    ) -> MarkNotificationResponse:
        """Execute mark notification flow.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        user = await self.access_service.authenticate(request.token)
        notification_id = NotificationId(request.notification_id)

        if request.read:
            notification = await self.notification_service.mark_read(
                notification_id, user.id
            )
            message = "Notification marked as read"
        else:
            notification = await self.notification_service.mark_unread(
                notification_id, user.id
            )
            message = "Notification marked as unread"

        return MarkNotificationResponse(
            message=message, notification=NotificationResponse.build(notification)
        )


class MarkAllReadRequest(BaseModel):
    token: str | None


class MarkAllReadResponse(CamelModel):
    message: str
    updated_count: int


class MarkAllReadUseCase:
    """Use case for clearing the caller's unread badge."""

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        user = await self.access_service.authenticate(request.token)
        updated = await self.notification_service.mark_all_read(user.id)
        return MarkAllReadResponse(
            message="All notifications marked as read", updated_count=updated
        )
