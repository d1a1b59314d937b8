"""List notifications use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import (
    CamelModel,
    NotificationPagination,
    NotificationResponse,
    page_offset,
    page_window,
)
from stackit.domain.service import AccessService, NotificationService, UserService
from stackit.domain.value import NotificationType


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    token: str | None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    unread_only: bool = False
    type: NotificationType | None = None


class ListNotificationsResponse(CamelModel):
    """A page of the caller's notifications."""

    notifications: list[NotificationResponse]
    pagination: NotificationPagination
    unread_count: int


class ListNotificationsUseCase:
    """Use case for the caller's notification inbox, newest first."""

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
        user_service: UserService,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            access_service: Access control gate
            notification_service: Notification domain service
            user_service: User domain service (sender lookup)
        """
        self.access_service = access_service
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user = await self.access_service.authenticate(request.token)

        notifications, total = await self.notification_service.list_for_recipient(
            user.id,
            unread_only=request.unread_only,
            type=request.type,
            limit=request.limit,
            offset=page_offset(request.page, request.limit),
        )
        unread = await self.notification_service.unread_count(user.id)
        senders = await self.user_service.get_many(
            {n.sender_id for n in notifications if n.sender_id}
        )

        return ListNotificationsResponse(
            notifications=[
                NotificationResponse.build(n, senders) for n in notifications
            ],
            pagination=NotificationPagination(
                **page_window(request.page, request.limit, total),
                total_notifications=total,
            ),
            unread_count=unread,
        )
