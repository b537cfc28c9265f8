"""Effects returned by the dialogue engine for the output router to perform."""

from dataclasses import dataclass, field
from typing import Union

from .notifications import NotificationEvent
from .session import Session


@dataclass(frozen=True)
class SendText:
    text: str


@dataclass(frozen=True)
class SendDocument:
    """Send a local file; reply sent_text on success, fallback_text if it is unavailable."""

    path: str
    caption: str
    sent_text: str
    fallback_text: str


@dataclass(frozen=True)
class Dispatch:
    event: NotificationEvent


Effect = Union[SendText, SendDocument, Dispatch]


@dataclass
class Transition:
    """Result of one engine step: the replacement session and what to do."""

    session: Session
    effects: list[Effect] = field(default_factory=list)
    protocol: str | None = None

    @property
    def replies(self) -> list[str]:
        return [e.text for e in self.effects if isinstance(e, SendText)]

    @property
    def dispatches(self) -> list[NotificationEvent]:
        return [e.event for e in self.effects if isinstance(e, Dispatch)]
