"""Notifications module."""

from .dispatcher import (
    DispatchResult,
    INotificationDispatcher,
    NotificationDispatcher,
    build_payload,
    select_sink,
)

__all__ = [
    "DispatchResult",
    "INotificationDispatcher",
    "NotificationDispatcher",
    "build_payload",
    "select_sink",
]
