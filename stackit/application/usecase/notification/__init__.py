"""Notification use cases."""

from .delete_notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_notification import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkNotificationRequest,
    MarkNotificationResponse,
    MarkNotificationUseCase,
)
from .unread_count import UnreadCountRequest, UnreadCountResponse, UnreadCountUseCase

__all__ = [
    "ClearNotificationsRequest",
    "ClearNotificationsResponse",
    "ClearNotificationsUseCase",
    "DeleteNotificationRequest",
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkAllReadUseCase",
    "MarkNotificationRequest",
    "MarkNotificationResponse",
    "MarkNotificationUseCase",
    "UnreadCountRequest",
    "UnreadCountResponse",
    "UnreadCountUseCase",
]
