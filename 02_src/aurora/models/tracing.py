"""Tracing and audit data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TraceEvent:
    """A single audit event for operators."""

    id: str
    event_type: str  # e.g. "message_handled", "protocol_issued"
    actor: str  # component that created this event
    data: dict  # self-contained, never message bodies
    timestamp: datetime
