"""Core data models for Aurora."""

from .effects import Dispatch, Effect, SendDocument, SendText, Transition
from .messages import CallEvent, Contact, InboundMessage, Outbound
from .notifications import Color, NotificationEvent, NotificationField, Sink
from .session import (
    AwaitingHandoff,
    CompanyAddress,
    CompanyName,
    CompanyReason,
    ComplaintTypeSelect,
    LotAddress,
    LotPhotoAsk,
    LotReceivingPhotos,
    SatisfactionSurvey,
    Session,
    SessionState,
    TrackProtocolInput,
    UnknownAttempts,
    state_name,
)
from .tracing import TraceEvent

__all__ = [
    # Messages
    "InboundMessage",
    "CallEvent",
    "Contact",
    "Outbound",
    # Session
    "Session",
    "SessionState",
    "AwaitingHandoff",
    "UnknownAttempts",
    "ComplaintTypeSelect",
    "LotAddress",
    "LotPhotoAsk",
    "LotReceivingPhotos",
    "CompanyAddress",
    "CompanyName",
    "CompanyReason",
    "TrackProtocolInput",
    "SatisfactionSurvey",
    "state_name",
    # Notifications
    "Color",
    "Sink",
    "NotificationField",
    "NotificationEvent",
    # Effects
    "SendText",
    "SendDocument",
    "Dispatch",
    "Effect",
    "Transition",
    # Tracing
    "TraceEvent",
]
