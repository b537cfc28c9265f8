"""Notification event data models."""

from dataclasses import dataclass, field
from enum import Enum


class Color(int, Enum):
    """Embed colors used by operator notifications."""

    DEFAULT = 3447003
    COMPLAINT = 16711680
    HANDOFF = 11111901
    RATING_LOW = 16776960
    RATING_OK = 65280


class Sink(str, Enum):
    """Named notification endpoints."""

    ALERTS = "alerts"
    METRICS = "metrics"


@dataclass(frozen=True)
class NotificationField:
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class NotificationEvent:
    """A structured operator alert. Ephemeral, never persisted."""

    title: str
    fields: tuple[NotificationField, ...] = field(default_factory=tuple)
    color: int = Color.DEFAULT
