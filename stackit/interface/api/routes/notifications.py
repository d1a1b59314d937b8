"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from stackit.application.usecase.common import MessageResponse
from stackit.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkNotificationRequest,
    MarkNotificationResponse,
    MarkNotificationUseCase,
    UnreadCountRequest,
    UnreadCountResponse,
    UnreadCountUseCase,
)
from stackit.config import PaginationSettings
from stackit.domain.value import NotificationType
from stackit.interface.api.dependencies import Token, page_limit

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    pagination: FromDishka[PaginationSettings],
    token: Token,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
) -> ListNotificationsResponse:
    """The caller's notifications, newest first, with the unread count."""
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            token=token,
            page=page,
            limit=page_limit(
                limit, pagination.notification_page_size, pagination.max_page_size
            ),
            unread_only=unread_only,
        )
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    unread_count_use_case: FromDishka[UnreadCountUseCase], token: Token
) -> UnreadCountResponse:
    """Number of unread notifications of the caller."""
    return await unread_count_use_case.execute(UnreadCountRequest(token=token))


@router.get("/types", response_model=list[str])
async def notification_types() -> list[str]:
    """Every notification type the system can emit."""
    return [t.value for t in NotificationType]


@router.get("/by-type/{type}", response_model=ListNotificationsResponse)
async def list_notifications_by_type(
    type: NotificationType,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    pagination: FromDishka[PaginationSettings],
    token: Token,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListNotificationsResponse:
    """The caller's notifications of one type."""
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            token=token,
            page=page,
            limit=page_limit(
                limit, pagination.notification_page_size, pagination.max_page_size
            ),
            type=type,
        )
    )


@router.put("/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase], token: Token
) -> MarkAllReadResponse:
    """Mark every notification of the caller as read."""
    return await mark_all_read_use_case.execute(MarkAllReadRequest(token=token))


@router.delete("/clear-all", response_model=ClearNotificationsResponse)
async def clear_all(
    clear_notifications_use_case: FromDishka[ClearNotificationsUseCase], token: Token
) -> ClearNotificationsResponse:
    """Delete every notification of the caller."""
    return await clear_notifications_use_case.execute(
        ClearNotificationsRequest(token=token)
    )


@router.put("/{notification_id}/read", response_model=MarkNotificationResponse)
async def mark_read(
    notification_id: UUID,
    mark_notification_use_case: FromDishka[MarkNotificationUseCase],
    token: Token,
) -> MarkNotificationResponse:
    """Mark one of the caller's notifications as read."""
    return await mark_notification_use_case.execute(
        MarkNotificationRequest(token=token, notification_id=notification_id)
    )


@router.put("/{notification_id}/unread", response_model=MarkNotificationResponse)
async def mark_unread(
    notification_id: UUID,
    mark_notification_use_case: FromDishka[MarkNotificationUseCase],
    token: Token,
) -> MarkNotificationResponse:
    """Mark one of the caller's notifications as unread."""
    return await mark_notification_use_case.execute(
        MarkNotificationRequest(
            token=token, notification_id=notification_id, read=False
        )
    )


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    token: Token,
) -> MessageResponse:
    """Delete one of the caller's notifications."""
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(token=token, notification_id=notification_id)
    )
